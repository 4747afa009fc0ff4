"""Default sizes, camera and input limits for affinevis."""

import torch

# all matrices and point batches are computed in double precision
DTYPE = torch.float64

# 2D canvas in pixels, the model origin sits in its centre
CANVAS_WIDTH = 400
CANVAS_HEIGHT = 400

# 3D scene viewport in pixels
SCENE_WIDTH = 400
SCENE_HEIGHT = 400

# points added in the 3D view are clamped to [-CLAMP_VALUE, CLAMP_VALUE]
CLAMP_VALUE = 5.0

# default perspective camera of the 3D view
CAMERA_POSITION = (15.0, 15.0, 15.0)
CAMERA_TARGET = (0.0, 0.0, 0.0)
CAMERA_UP = (0.0, 1.0, 0.0)
CAMERA_FOV_DEGREES = 45.0
CAMERA_NEAR = 0.1
CAMERA_FAR = 1000.0

POINT_LABEL_PREFIX = "P"
