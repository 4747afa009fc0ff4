"""Points and transform parameters.

All values are immutable. A transformed point is always a new point and a
parameter edit always produces a new complete parameter value.
"""

import dataclasses
import math
from typing import Tuple, Union

from .config import POINT_LABEL_PREFIX


def _check_finite(value) -> None:
    for field in dataclasses.fields(value):
        number = getattr(value, field.name)
        if not math.isfinite(number):
            raise ValueError(
                f"{type(value).__name__}.{field.name} must be finite, got {number}"
            )


@dataclasses.dataclass(frozen=True)
class Point2D:
    x: float
    y: float

    def __post_init__(self) -> None:
        _check_finite(self)

    def lift(self) -> "Point3D":
        """The same point on the `z = 0` plane of the 3D view."""
        return Point3D(self.x, self.y, 0.0)

    def as_tuple(self) -> Tuple[float, float]:
        return (self.x, self.y)


@dataclasses.dataclass(frozen=True)
class Point3D:
    x: float
    y: float
    z: float

    def __post_init__(self) -> None:
        _check_finite(self)

    def as_tuple(self) -> Tuple[float, float, float]:
        return (self.x, self.y, self.z)


@dataclasses.dataclass(frozen=True)
class TransformParams2D:
    """Translation, counter-clockwise rotation about the origin and uniform scale.

    Scale may be zero (all points collapse onto the translation) or negative
    (mirror through the origin).
    """

    tx: float = 0.0
    ty: float = 0.0
    rotation_degrees: float = 0.0
    scale: float = 1.0

    def __post_init__(self) -> None:
        _check_finite(self)


@dataclasses.dataclass(frozen=True)
class TransformParams3D:
    """Translation, rotations about X, Y and Z (applied in that order) and scale."""

    tx: float = 0.0
    ty: float = 0.0
    tz: float = 0.0
    rotation_x_degrees: float = 0.0
    rotation_y_degrees: float = 0.0
    rotation_z_degrees: float = 0.0
    scale: float = 1.0

    def __post_init__(self) -> None:
        _check_finite(self)


Point = Union[Point2D, Point3D]
TransformParams = Union[TransformParams2D, TransformParams3D]


def point_labels(n_points: int) -> Tuple[str, ...]:
    """Display labels `P1, P2, ...` derived from insertion order."""
    return tuple(f"{POINT_LABEL_PREFIX}{i + 1}" for i in range(n_points))
