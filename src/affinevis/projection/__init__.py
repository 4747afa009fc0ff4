"""Mapping of canvas and scene clicks to model points."""

from .camera import (
    PerspectiveCamera,
    cast_ray,
    click_to_ndc,
    click_to_point_3d,
    intersect_ground_plane,
)
from .canvas import canvas_origin, canvas_to_model, model_to_canvas

__all__ = [
    "PerspectiveCamera",
    "canvas_origin",
    "canvas_to_model",
    "cast_ray",
    "click_to_ndc",
    "click_to_point_3d",
    "intersect_ground_plane",
    "model_to_canvas",
]
