"""Example of affinevis sessions driven the way a rendering surface would."""

from rich.console import Console

from affinevis import (
    Point2D,
    TransformParams2D,
    TransformParams3D,
    TransformSession2D,
    TransformSession3D,
)
from affinevis.projection import model_to_canvas

# canvas clicks in pixels, the origin is at (200, 200)
CANVAS_CLICKS = [(210, 190), (300, 200), (200, 100)]
PARAMS_2D = TransformParams2D(tx=5.0, ty=0.0, rotation_degrees=90.0, scale=1.0)
# scene clicks in pixels on a 400 x 400 viewport
SCENE_CLICKS = [(200, 200), (260, 180), (0, 0)]
PARAMS_3D = TransformParams3D(rotation_x_degrees=90.0, rotation_y_degrees=90.0)

console = Console()


def draw(session: TransformSession2D) -> None:
    """Stand-in for a canvas redraw."""
    for label, point in zip(session.labels(), session.transformed_points):
        console.print(f"{label} drawn at pixel {model_to_canvas(point)}")


session_2d = TransformSession2D()
for px, py in CANVAS_CLICKS:
    session_2d.add_click(px, py)
session_2d.add_point(Point2D(10.0, 0.0))
session_2d.set_params(PARAMS_2D)
session_2d.subscribe(draw)
session_2d.transform()

for notification in session_2d.notifications:
    console.print(notification.message)

# switch the same point sets into the 3D view
session_3d = TransformSession3D.from_2d(session_2d)
console.print(session_3d.points)
console.print(session_3d.transformed_points)

session_3d = TransformSession3D(params=PARAMS_3D)
for px, py in SCENE_CLICKS:
    session_3d.add_click(px, py)
session_3d.transform()
for label, original, transformed in zip(
    session_3d.labels(), session_3d.points, session_3d.transformed_points
):
    console.print(f"{label}: {original.as_tuple()} -> {transformed.as_tuple()}")
