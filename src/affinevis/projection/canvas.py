"""Mapping between 2D canvas pixels and model coordinates."""

from typing import Tuple

from affinevis.config import CANVAS_HEIGHT, CANVAS_WIDTH
from affinevis.points import Point2D


def canvas_origin(
    width: int = CANVAS_WIDTH, height: int = CANVAS_HEIGHT
) -> Tuple[float, float]:
    """Pixel position of the model origin, the centre of the canvas."""
    return (width / 2, height / 2)


def canvas_to_model(
    px: float, py: float, origin: Tuple[float, float] | None = None
) -> Point2D:
    """Convert a canvas click to a model point.

    The canvas Y-axis points down, the model Y-axis points up.
    """
    ox, oy = canvas_origin() if origin is None else origin
    return Point2D(px - ox, oy - py)


def model_to_canvas(
    point: Point2D, origin: Tuple[float, float] | None = None
) -> Tuple[float, float]:
    """Pixel position at which a model point is drawn."""
    ox, oy = canvas_origin() if origin is None else origin
    return (point.x + ox, oy - point.y)
