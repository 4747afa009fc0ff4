"""Utility functions for affinevis."""

import math

import torch
import torch.nn.functional as F


def homogenise_coordinates(coords: torch.Tensor) -> torch.Tensor:
    """2D or 3D coordinates to homogeneous coordinates with ones in the last column.

    Parameters
    ----------
    coords: torch.Tensor
        `(..., d)` array of d-dimensional coordinates

    Returns
    -------
    output: torch.Tensor
        `(..., d + 1)` array of homogeneous coordinates
    """
    return F.pad(torch.as_tensor(coords), pad=(0, 1), mode="constant", value=1)


def dehomogenise_coordinates(coords: torch.Tensor) -> torch.Tensor:
    """Drop the homogeneous coordinate after dividing by it.

    For affine matrices the last coordinate stays 1 and the division is exact,
    projective matrices (camera unprojection) need it.
    """
    coords = torch.as_tensor(coords)
    return coords[..., :-1] / coords[..., -1:]


def clamp(value: float, limit: float) -> float:
    """Clamp a value to `[-limit, limit]`."""
    return max(-limit, min(limit, value))


def parse_field(text: str) -> float:
    """Read a numeric input field.

    An empty field reads as 0, anything else has to be a finite number.
    """
    text = text.strip()
    if text == "":
        return 0.0
    try:
        value = float(text)
    except ValueError:
        raise ValueError(f"not a number: {text!r}") from None
    if not math.isfinite(value):
        raise ValueError(f"value must be finite, got {text!r}")
    return value
