"""Homogeneous matrices for rotations, translations and scaling.

Functions in this module generate matrices which left-multiply column vectors
containing `xyw` (2D) or `xyzw` (3D) homogeneous coordinates. All rotations are
right-handed and counter-clockwise for positive angles.
"""

import einops
import torch

from .config import DTYPE
from .points import TransformParams2D, TransformParams3D


def _rotation_matrices(
    angles_degrees: torch.Tensor, size: int, axes: tuple[int, int]
) -> torch.Tensor:
    # rotation in the plane spanned by `axes`, rotating axes[0] towards axes[1]
    angles_degrees = torch.atleast_1d(torch.as_tensor(angles_degrees, dtype=DTYPE))
    angles_packed, ps = einops.pack([angles_degrees], pattern="*")  # to 1d
    n = angles_packed.shape[0]
    angles_radians = torch.deg2rad(angles_packed)
    c = torch.cos(angles_radians)
    s = torch.sin(angles_radians)
    i, j = axes
    matrices = einops.repeat(torch.eye(size, dtype=DTYPE), "i j -> n i j", n=n).clone()
    matrices[:, i, i] = c
    matrices[:, i, j] = -s
    matrices[:, j, i] = s
    matrices[:, j, j] = c
    [matrices] = einops.unpack(matrices, packed_shapes=ps, pattern="* i j")
    return matrices


def Rx(angles_degrees: torch.Tensor) -> torch.Tensor:
    """4x4 matrices for a rotation of homogeneous coordinates around the X-axis.

    Rotates the Y-axis towards the Z-axis.

    Parameters
    ----------
    angles_degrees: torch.Tensor
        `(..., )` array of angles

    Returns
    -------
    matrices: `(..., 4, 4)` array of 4x4 rotation matrices.
    """
    return _rotation_matrices(angles_degrees, size=4, axes=(1, 2))


def Ry(angles_degrees: torch.Tensor) -> torch.Tensor:
    """4x4 matrices for a rotation of homogeneous coordinates around the Y-axis.

    Rotates the Z-axis towards the X-axis.

    Parameters
    ----------
    angles_degrees: torch.Tensor
        `(..., )` array of angles

    Returns
    -------
    matrices: `(..., 4, 4)` array of 4x4 rotation matrices.
    """
    return _rotation_matrices(angles_degrees, size=4, axes=(2, 0))


def Rz(angles_degrees: torch.Tensor) -> torch.Tensor:
    """4x4 matrices for a rotation of homogeneous coordinates around the Z-axis.

    Rotates the X-axis towards the Y-axis.

    Parameters
    ----------
    angles_degrees: torch.Tensor
        `(..., )` array of angles

    Returns
    -------
    matrices: `(..., 4, 4)` array of 4x4 rotation matrices.
    """
    return _rotation_matrices(angles_degrees, size=4, axes=(0, 1))


def S(scale_factors: torch.Tensor) -> torch.Tensor:
    """4x4 matrices for scaling.

    Parameters
    ----------
    scale_factors: torch.Tensor
        `(..., 3)` array of scale factors.

    Returns
    -------
    matrices: torch.Tensor
        `(..., 4, 4)` array of 4x4 scale matrices.
    """
    scale_factors = torch.atleast_1d(torch.as_tensor(scale_factors, dtype=DTYPE))
    scale_factors, ps = einops.pack([scale_factors], pattern="* coords")  # to 2d
    n = scale_factors.shape[0]
    matrices = einops.repeat(torch.eye(4, dtype=DTYPE), "i j -> n i j", n=n).clone()
    matrices[:, [0, 1, 2], [0, 1, 2]] = scale_factors
    [matrices] = einops.unpack(matrices, packed_shapes=ps, pattern="* i j")
    return matrices


# Matrices for 2D transformations


def R_2d(angles_degrees: torch.Tensor) -> torch.Tensor:
    """3x3 matrices for a counter-clockwise rotation about the origin.

    Parameters
    ----------
    angles_degrees: torch.Tensor
        `(..., )` array of angles

    Returns
    -------
    matrices: `(..., 3, 3)` array of 3x3 rotation matrices.
    """
    return _rotation_matrices(angles_degrees, size=3, axes=(0, 1))


def T_2d(shifts: torch.Tensor) -> torch.Tensor:
    """3x3 matrices for translations.

    Parameters
    ----------
    shifts: torch.Tensor
        `(..., 2)` array of shifts.

    Returns
    -------
    matrices: torch.Tensor
        `(..., 3, 3)` array of 3x3 shift matrices.
    """
    shifts = torch.atleast_1d(torch.as_tensor(shifts, dtype=DTYPE))
    shifts, ps = einops.pack([shifts], pattern="* coords")  # to 2d
    n = shifts.shape[0]
    matrices = einops.repeat(torch.eye(3, dtype=DTYPE), "i j -> n i j", n=n).clone()
    matrices[:, :2, 2] = shifts
    [matrices] = einops.unpack(matrices, packed_shapes=ps, pattern="* i j")
    return matrices


def S_2d(scale_factors: torch.Tensor) -> torch.Tensor:
    """3x3 matrices for scaling.

    Parameters
    ----------
    scale_factors: torch.Tensor
        `(..., 2)` array of scale factors.

    Returns
    -------
    matrices: torch.Tensor
        `(..., 3, 3)` array of 3x3 scale matrices.
    """
    scale_factors = torch.atleast_1d(torch.as_tensor(scale_factors, dtype=DTYPE))
    scale_factors, ps = einops.pack([scale_factors], pattern="* coords")  # to 2d
    n = scale_factors.shape[0]
    matrices = einops.repeat(torch.eye(3, dtype=DTYPE), "i j -> n i j", n=n).clone()
    matrices[:, [0, 1], [0, 1]] = scale_factors
    [matrices] = einops.unpack(matrices, packed_shapes=ps, pattern="* i j")
    return matrices


def affine_matrix_2d(params: TransformParams2D) -> torch.Tensor:
    """3x3 matrix that rotates, then scales, then translates."""
    t = T_2d([params.tx, params.ty])
    s = S_2d([params.scale] * 2)
    r = R_2d(params.rotation_degrees)
    return t @ s @ r


def affine_matrix_3d(params: TransformParams3D) -> torch.Tensor:
    """4x4 matrix for scale, X, Y and Z rotations plus translation.

    The linear part is composed as `S @ Rx @ Ry @ Rz`, so a column vector is
    rotated about Z first and scaled last. The order is not commutative.
    The translation is written directly into the translation column.
    """
    m = S([params.scale] * 3)
    m = m @ Rx(params.rotation_x_degrees)
    m = m @ Ry(params.rotation_y_degrees)
    m = m @ Rz(params.rotation_z_degrees)
    m[..., :3, 3] = torch.tensor([params.tx, params.ty, params.tz], dtype=DTYPE)
    return m
