"""Affine transformations of 2D and 3D point sets for interactive teaching."""

from importlib.metadata import PackageNotFoundError, version

from .affine import transform_all, transform_point_2d, transform_point_3d
from .points import Point2D, Point3D, TransformParams2D, TransformParams3D
from .session import TransformSession2D, TransformSession3D

__all__ = [
    "Point2D",
    "Point3D",
    "TransformParams2D",
    "TransformParams3D",
    "TransformSession2D",
    "TransformSession3D",
    "transform_all",
    "transform_point_2d",
    "transform_point_3d",
]

try:
    __version__ = version("affinevis")
except PackageNotFoundError:
    __version__ = "uninstalled"
