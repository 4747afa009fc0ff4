"""2D and 3D affine transforms of point sets."""

from typing import Sequence, Tuple

import einops
import torch

from affinevis.config import DTYPE
from affinevis.points import (
    Point,
    Point2D,
    Point3D,
    TransformParams,
    TransformParams2D,
    TransformParams3D,
)
from affinevis.transformations import affine_matrix_2d, affine_matrix_3d
from affinevis.utils import homogenise_coordinates


def apply_affine(
    coordinates: torch.Tensor,  # shape: 'n d'
    affine_matrix: torch.Tensor,  # shape: '(1) d+1 d+1'
) -> torch.Tensor:
    """Apply one homogeneous affine matrix to a batch of coordinates.

    Results that overflow the double range come back as `inf`, the
    point constructors of the callers reject those.
    """
    coordinates = torch.as_tensor(coordinates, dtype=DTYPE)
    d = coordinates.shape[-1]
    if affine_matrix.shape[-2:] != (d + 1, d + 1):
        raise ValueError(
            f"A {d}D point set needs a {d + 1}x{d + 1} matrix, "
            f"got {tuple(affine_matrix.shape[-2:])}."
        )
    if affine_matrix.numel() != (d + 1) ** 2:
        raise ValueError(
            "Provide a single affine matrix, "
            f"got a batch of shape {tuple(affine_matrix.shape)}."
        )
    M = affine_matrix.reshape(d + 1, d + 1)
    coords = einops.rearrange(
        homogenise_coordinates(coordinates), "n coords -> n coords 1"
    )
    transformed = einops.rearrange(M @ coords, "n coords 1 -> n coords")
    return transformed[:, :d]


def _transform_2d(
    points: Sequence[Point2D], params: TransformParams2D
) -> Tuple[Point2D, ...]:
    if len(points) == 0:
        return ()
    coordinates = torch.tensor([p.as_tuple() for p in points], dtype=DTYPE)
    transformed = apply_affine(coordinates, affine_matrix_2d(params))
    return tuple(Point2D(x, y) for x, y in transformed.tolist())


def _transform_3d(
    points: Sequence[Point3D], params: TransformParams3D
) -> Tuple[Point3D, ...]:
    if len(points) == 0:
        return ()
    coordinates = torch.tensor([p.as_tuple() for p in points], dtype=DTYPE)
    transformed = apply_affine(coordinates, affine_matrix_3d(params))
    return tuple(Point3D(x, y, z) for x, y, z in transformed.tolist())


def transform_point_2d(point: Point2D, params: TransformParams2D) -> Point2D:
    """Rotate counter-clockwise about the origin, scale, then translate a point."""
    [transformed] = _transform_2d([point], params)
    return transformed


def transform_point_3d(point: Point3D, params: TransformParams3D) -> Point3D:
    """Scale, rotate (X, then Y, then Z composition) and translate a point."""
    [transformed] = _transform_3d([point], params)
    return transformed


def transform_all(
    points: Sequence[Point], params: TransformParams
) -> Tuple[Point, ...]:
    """Transform every point of a point set independently.

    The output has the same length and order as the input, `output[i]` only
    depends on `points[i]`. The parameter type decides between 2D and 3D.
    Raises `ValueError` when a result overflows to infinity.
    """
    if isinstance(params, TransformParams2D):
        expected, transform = Point2D, _transform_2d
    elif isinstance(params, TransformParams3D):
        expected, transform = Point3D, _transform_3d
    else:
        raise TypeError(f"Unsupported transform parameters: {params!r}")
    for point in points:
        if not isinstance(point, expected):
            raise TypeError(
                f"{type(params).__name__} can only transform {expected.__name__}, "
                f"got {type(point).__name__}."
            )
    return transform(points, params)
