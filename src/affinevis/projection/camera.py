"""Perspective camera and click picking on the `z = 0` plane of the 3D view.

The camera follows the OpenGL conventions: it looks down its local -Z axis,
normalized device coordinates span `[-1, 1]` with +Y pointing up, and the
projection matrix maps the view frustum onto that cube.
"""

import dataclasses
import logging
import math
from typing import Tuple

import torch
import torch.nn.functional as F

from affinevis.config import (
    CAMERA_FAR,
    CAMERA_FOV_DEGREES,
    CAMERA_NEAR,
    CAMERA_POSITION,
    CAMERA_TARGET,
    CAMERA_UP,
    CLAMP_VALUE,
    DTYPE,
    SCENE_HEIGHT,
    SCENE_WIDTH,
)
from affinevis.points import Point3D
from affinevis.utils import clamp, dehomogenise_coordinates, homogenise_coordinates

log = logging.getLogger(__name__)


@dataclasses.dataclass(frozen=True)
class PerspectiveCamera:
    position: Tuple[float, float, float] = CAMERA_POSITION
    target: Tuple[float, float, float] = CAMERA_TARGET
    up: Tuple[float, float, float] = CAMERA_UP
    fov_degrees: float = CAMERA_FOV_DEGREES  # vertical
    aspect: float = SCENE_WIDTH / SCENE_HEIGHT
    near: float = CAMERA_NEAR
    far: float = CAMERA_FAR

    def view_matrix(self) -> torch.Tensor:
        """4x4 camera-to-world matrix of a camera looking at its target."""
        position = torch.tensor(self.position, dtype=DTYPE)
        z_axis = F.normalize(position - torch.tensor(self.target, dtype=DTYPE), dim=0)
        x_axis = torch.linalg.cross(torch.tensor(self.up, dtype=DTYPE), z_axis)
        if torch.linalg.norm(x_axis) == 0:
            raise ValueError("Camera up vector is parallel to the viewing direction.")
        x_axis = F.normalize(x_axis, dim=0)
        y_axis = torch.linalg.cross(z_axis, x_axis)
        matrix = torch.eye(4, dtype=DTYPE)
        matrix[:3, 0] = x_axis
        matrix[:3, 1] = y_axis
        matrix[:3, 2] = z_axis
        matrix[:3, 3] = position
        return matrix

    def projection_matrix(self) -> torch.Tensor:
        """4x4 perspective projection matrix."""
        top = self.near * math.tan(math.radians(self.fov_degrees) / 2)
        right = top * self.aspect
        depth = self.far - self.near
        matrix = torch.zeros((4, 4), dtype=DTYPE)
        matrix[0, 0] = self.near / right
        matrix[1, 1] = self.near / top
        matrix[2, 2] = -(self.far + self.near) / depth
        matrix[2, 3] = -2 * self.far * self.near / depth
        matrix[3, 2] = -1
        return matrix


def click_to_ndc(
    px: float, py: float, width: int = SCENE_WIDTH, height: int = SCENE_HEIGHT
) -> Tuple[float, float]:
    """Pixel position in the viewport to normalized device coordinates."""
    return (px / width * 2 - 1, -(py / height) * 2 + 1)


def cast_ray(
    camera: PerspectiveCamera, ndc: Tuple[float, float]
) -> Tuple[torch.Tensor, torch.Tensor]:
    """Ray from the camera through a point in normalized device coordinates.

    Returns
    -------
    origin, direction: torch.Tensor
        `(3, )` ray origin and unit direction in world coordinates.
    """
    # unproject a point halfway into the depth range
    ndc_point = homogenise_coordinates(torch.tensor([*ndc, 0.5], dtype=DTYPE))
    unproject = camera.view_matrix() @ torch.linalg.inv(camera.projection_matrix())
    world_point = dehomogenise_coordinates(unproject @ ndc_point)
    origin = torch.tensor(camera.position, dtype=DTYPE)
    direction = F.normalize(world_point - origin, dim=0)
    return origin, direction


def intersect_ground_plane(
    origin: torch.Tensor, direction: torch.Tensor
) -> torch.Tensor | None:
    """Intersection of a ray with the `z = 0` plane, `None` if it misses."""
    if direction[2] == 0:
        # parallel, only hits when travelling inside the plane
        return origin.clone() if origin[2] == 0 else None
    distance = -origin[2] / direction[2]
    if distance < 0:
        return None
    return origin + distance * direction


def click_to_point_3d(
    px: float,
    py: float,
    camera: PerspectiveCamera | None = None,
    width: int = SCENE_WIDTH,
    height: int = SCENE_HEIGHT,
    clamp_value: float = CLAMP_VALUE,
) -> Point3D:
    """Pick the point under a click on the `z = 0` plane.

    X and Y are clamped to `[-clamp_value, clamp_value]` instead of rejecting
    far away clicks. A ray that misses the plane picks the origin.
    """
    if camera is None:
        camera = PerspectiveCamera(aspect=width / height)
    origin, direction = cast_ray(camera, click_to_ndc(px, py, width, height))
    intersection = intersect_ground_plane(origin, direction)
    if intersection is None:
        log.warning("Click at (%s, %s) does not hit the z = 0 plane", px, py)
        return Point3D(0.0, 0.0, 0.0)
    x, y, _ = intersection.tolist()
    return Point3D(clamp(x, clamp_value), clamp(y, clamp_value), 0.0)
