import pytest

from affinevis.points import Point2D, Point3D, TransformParams2D, TransformParams3D
from affinevis.projection import PerspectiveCamera
from affinevis.session import (
    Notification,
    Severity,
    TransformSession,
    TransformSession2D,
    TransformSession3D,
)


def test_new_session_is_empty():
    session = TransformSession2D()
    assert session.points == ()
    assert session.transformed_points == ()
    assert session.params == TransformParams2D()
    assert session.notifications == []
    assert TransformSession3D().params == TransformParams3D()


def test_add_point_appends():
    session = TransformSession2D()
    session.add_point(Point2D(10.0, 10.0))
    session.add_point(Point2D(-3.0, 4.5))
    assert session.points == (Point2D(10.0, 10.0), Point2D(-3.0, 4.5))
    assert session.labels() == ("P1", "P2")
    assert session.notifications[0] == Notification(
        "Point added at (10.00, 10.00)", Severity.INFO
    )
    with pytest.raises(TypeError):
        session.add_point(Point3D(1.0, 2.0, 3.0))


def test_add_click_2d():
    session = TransformSession2D()
    assert session.add_click(210, 190) == Point2D(10, 10)
    assert session.points == (Point2D(10, 10),)
    session = TransformSession2D(canvas_size=(640, 480))
    assert session.add_click(330, 230) == Point2D(10, 10)


def test_transform_empty_point_set_is_blocked():
    session = TransformSession2D()
    notification = session.transform()
    assert notification.severity is Severity.ERROR
    assert notification.message == "Please add at least one point before transforming"
    assert session.transformed_points == ()


def test_transform():
    session = TransformSession2D()
    session.add_point(Point2D(10.0, 0.0))
    session.set_params(TransformParams2D(tx=5.0, rotation_degrees=90.0))
    notification = session.transform()
    assert notification == Notification(
        "1 point transformed successfully", Severity.SUCCESS
    )
    [result] = session.transformed_points
    assert result.as_tuple() == pytest.approx((5.0, 10.0), abs=1e-9)

    session.add_point(Point2D(0.0, 1.0))
    assert len(session.transformed_points) == 1  # only recomputed on request
    notification = session.transform()
    assert notification.message == "2 points transformed successfully"
    assert len(session.transformed_points) == len(session.points)


def test_params_are_replaced_wholesale():
    session = TransformSession2D()
    first = session.params
    second = session.update_params(tx=5.0)
    assert first == TransformParams2D()
    assert second == TransformParams2D(tx=5.0)
    assert session.params is second
    third = session.update_params(scale=2.0)
    assert third == TransformParams2D(tx=5.0, scale=2.0)
    with pytest.raises(ValueError):
        session.update_params(scale=float("nan"))
    assert session.params is third
    with pytest.raises(TypeError):
        session.set_params(TransformParams3D())


def test_clear():
    session = TransformSession3D()
    session.add_point(Point3D(1.0, 2.0, 0.0))
    session.update_params(rotation_x_degrees=45.0)
    session.transform()
    notification = session.clear()
    assert notification == Notification("All points cleared", Severity.INFO)
    assert session.points == ()
    assert session.transformed_points == ()
    assert session.params == TransformParams3D()


def test_observers_see_completed_state():
    session = TransformSession2D()
    seen = []

    def observer(s):
        seen.append((len(s.points), len(s.transformed_points)))

    session.subscribe(observer)
    session.add_point(Point2D(1.0, 1.0))
    session.add_point(Point2D(2.0, 2.0))
    session.transform()
    assert seen == [(1, 0), (2, 0), (2, 2)]

    session.unsubscribe(observer)
    session.clear()
    assert len(seen) == 3


def test_blocked_transform_does_not_notify_observers():
    session = TransformSession2D()
    seen = []
    session.subscribe(seen.append)
    session.transform()
    assert seen == []


def test_3d_click_lands_on_ground_plane():
    session = TransformSession3D()
    point = session.add_click(200, 200)
    assert point.as_tuple() == pytest.approx((0.0, 0.0, 0.0), abs=1e-9)
    assert session.points == (point,)
    point = session.add_click(0, 400)
    assert point.z == 0.0
    assert -5.0 <= point.x <= 5.0
    assert -5.0 <= point.y <= 5.0


def test_3d_transform():
    session = TransformSession3D()
    session.add_point(Point3D(1.0, 0.0, 0.0))
    session.set_params(TransformParams3D(rotation_z_degrees=90.0))
    session.transform()
    [result] = session.transformed_points
    assert result.as_tuple() == pytest.approx((0.0, 1.0, 0.0), abs=1e-9)


def test_from_2d_lifts_points():
    session_2d = TransformSession2D()
    session_2d.add_point(Point2D(10.0, 0.0))
    session_2d.update_params(tx=5.0)
    session_2d.transform()
    session_3d = TransformSession3D.from_2d(session_2d)
    assert session_3d.points == (Point3D(10.0, 0.0, 0.0),)
    assert session_3d.transformed_points == (Point3D(15.0, 0.0, 0.0),)
    assert session_3d.params == TransformParams3D()
    assert not session_3d.point_addition_enabled
    assert session_3d.add_click(200, 200) is None
    assert len(session_3d.points) == 1
    # the 3D view still transforms the lifted points
    session_3d.update_params(tz=2.0)
    session_3d.transform()
    assert session_3d.transformed_points == (Point3D(10.0, 0.0, 2.0),)


def test_overflowing_transform_is_reported():
    session = TransformSession2D()
    session.add_point(Point2D(1.0, 2.0))
    session.transform()
    previous = session.transformed_points
    seen = []
    session.subscribe(seen.append)

    session.add_point(Point2D(1e308, 1e308))
    session.update_params(scale=10.0)
    seen.clear()
    notification = session.transform()
    assert notification.severity is Severity.ERROR
    assert "out of range" in notification.message
    assert session.transformed_points == previous
    assert seen == []


def test_3d_point_added_message():
    camera = PerspectiveCamera(position=(0.0, 0.0, 100.0))
    session = TransformSession3D(camera=camera)
    session.add_click(400, 0)
    session.add_point(Point3D(1.5, -2.0, 0.0))
    session.add_point(Point3D(1.0, 2.0, 3.0))
    messages = [n.message for n in session.notifications]
    assert messages == [
        "Point added at (5.00, 5.00, 0)",
        "Point added at (1.50, -2.00, 0)",
        "Point added at (1.00, 2.00, 3.00)",
    ]


def test_base_session_cannot_be_built():
    with pytest.raises(TypeError):
        TransformSession()
