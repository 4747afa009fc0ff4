"""2D and 3D affine transforms of point sets."""

from .transform_points import (
    apply_affine,
    transform_all,
    transform_point_2d,
    transform_point_3d,
)

__all__ = [
    "apply_affine",
    "transform_all",
    "transform_point_2d",
    "transform_point_3d",
]
