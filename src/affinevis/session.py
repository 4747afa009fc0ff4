"""Point and parameter stores of the 2D and 3D views.

A session holds the input points, the transformed points and the current
transform parameters. Every operation runs to completion before observers
(a rendering surface) are told about the new state.
"""

import abc
import dataclasses
import enum
import logging
from typing import Callable, Iterable, List, Tuple

from .affine import transform_all
from .config import CANVAS_HEIGHT, CANVAS_WIDTH, SCENE_HEIGHT, SCENE_WIDTH
from .points import (
    Point,
    Point2D,
    Point3D,
    TransformParams,
    TransformParams2D,
    TransformParams3D,
    point_labels,
)
from .projection import (
    PerspectiveCamera,
    canvas_origin,
    canvas_to_model,
    click_to_point_3d,
)

log = logging.getLogger(__name__)


class Severity(str, enum.Enum):
    SUCCESS = "success"
    ERROR = "error"
    INFO = "info"


@dataclasses.dataclass(frozen=True)
class Notification:
    """Message shown to the user after an operation."""

    message: str
    severity: Severity


class TransformSession(abc.ABC):
    """Shared behaviour of the 2D and 3D sessions."""

    point_type: type
    params_type: type

    def __init__(
        self,
        points: Iterable[Point] = (),
        transformed_points: Iterable[Point] = (),
        params: TransformParams | None = None,
        point_addition_enabled: bool = True,
    ):
        self._points = tuple(self._check_point(p) for p in points)
        self._transformed_points = tuple(
            self._check_point(p) for p in transformed_points
        )
        self._params = self.params_type() if params is None else params
        self._check_params(self._params)
        self.point_addition_enabled = point_addition_enabled
        self.notifications: List[Notification] = []
        self._observers: List[Callable[["TransformSession"], None]] = []

    @property
    def points(self) -> Tuple[Point, ...]:
        return self._points

    @property
    def transformed_points(self) -> Tuple[Point, ...]:
        return self._transformed_points

    @property
    def params(self) -> TransformParams:
        return self._params

    def labels(self) -> Tuple[str, ...]:
        return point_labels(len(self._points))

    def subscribe(self, observer: Callable[["TransformSession"], None]) -> None:
        """Call `observer(session)` after every completed state change."""
        self._observers.append(observer)

    def unsubscribe(self, observer: Callable[["TransformSession"], None]) -> None:
        self._observers.remove(observer)

    def add_point(self, point: Point) -> Point:
        """Append a point to the input point set."""
        self._points = self._points + (self._check_point(point),)
        log.debug("added %s as %s", point, self.labels()[-1])
        self._notify(
            f"Point added at {self._format_point(point)}", Severity.INFO, changed=True
        )
        return point

    def add_click(self, px: float, py: float) -> Point | None:
        """Add the point under a click, `None` if point addition is disabled."""
        if not self.point_addition_enabled:
            log.debug("ignoring click at (%s, %s), point addition disabled", px, py)
            return None
        return self.add_point(self._click_to_point(px, py))

    def set_params(self, params: TransformParams) -> None:
        """Replace the transform parameters."""
        self._params = self._check_params(params)
        log.debug("parameters set to %s", params)
        self._changed()

    def update_params(self, **changes: float) -> TransformParams:
        """Replace the parameters by a copy of the current ones with `changes`."""
        params = dataclasses.replace(self._params, **changes)
        self.set_params(params)
        return params

    def transform(self) -> Notification:
        """Recompute all transformed points from the input points."""
        if len(self._points) == 0:
            return self._notify(
                "Please add at least one point before transforming", Severity.ERROR
            )
        try:
            transformed_points = transform_all(self._points, self._params)
        except ValueError as e:
            log.warning("transform with %s failed: %s", self._params, e)
            return self._notify(
                "Transformed points are out of range, try a smaller scale or "
                "translation",
                Severity.ERROR,
            )
        self._transformed_points = transformed_points
        n = len(self._points)
        log.debug("transformed %d points with %s", n, self._params)
        return self._notify(
            f"{n} point{'s' if n > 1 else ''} transformed successfully",
            Severity.SUCCESS,
            changed=True,
        )

    def clear(self) -> Notification:
        """Remove all points and reset the parameters to identity."""
        self._points = ()
        self._transformed_points = ()
        self._params = self.params_type()
        log.debug("cleared session")
        return self._notify("All points cleared", Severity.INFO, changed=True)

    @abc.abstractmethod
    def _click_to_point(self, px: float, py: float) -> Point:
        """Model point under a click on the rendering surface."""

    def _format_point(self, point: Point) -> str:
        return "(" + ", ".join(f"{c:.2f}" for c in point.as_tuple()) + ")"

    def _check_point(self, point: Point) -> Point:
        if not isinstance(point, self.point_type):
            raise TypeError(
                f"{type(self).__name__} stores {self.point_type.__name__}, "
                f"got {type(point).__name__}."
            )
        return point

    def _check_params(self, params: TransformParams) -> TransformParams:
        if not isinstance(params, self.params_type):
            raise TypeError(
                f"{type(self).__name__} needs {self.params_type.__name__}, "
                f"got {type(params).__name__}."
            )
        return params

    def _notify(
        self, message: str, severity: Severity, changed: bool = False
    ) -> Notification:
        notification = Notification(message, severity)
        self.notifications.append(notification)
        if changed:
            self._changed()
        return notification

    def _changed(self) -> None:
        for observer in list(self._observers):
            observer(self)


class TransformSession2D(TransformSession):
    """Points placed on a flat canvas with the origin in its centre."""

    point_type = Point2D
    params_type = TransformParams2D

    def __init__(
        self,
        points: Iterable[Point2D] = (),
        transformed_points: Iterable[Point2D] = (),
        params: TransformParams2D | None = None,
        point_addition_enabled: bool = True,
        canvas_size: Tuple[int, int] = (CANVAS_WIDTH, CANVAS_HEIGHT),
    ):
        super().__init__(points, transformed_points, params, point_addition_enabled)
        self.origin = canvas_origin(*canvas_size)

    def _click_to_point(self, px: float, py: float) -> Point2D:
        return canvas_to_model(px, py, self.origin)


class TransformSession3D(TransformSession):
    """Points placed on the `z = 0` plane of a perspective scene."""

    point_type = Point3D
    params_type = TransformParams3D

    def __init__(
        self,
        points: Iterable[Point3D] = (),
        transformed_points: Iterable[Point3D] = (),
        params: TransformParams3D | None = None,
        point_addition_enabled: bool = True,
        camera: PerspectiveCamera | None = None,
        scene_size: Tuple[int, int] = (SCENE_WIDTH, SCENE_HEIGHT),
    ):
        super().__init__(points, transformed_points, params, point_addition_enabled)
        width, height = scene_size
        self.scene_size = scene_size
        if camera is None:
            camera = PerspectiveCamera(aspect=width / height)
        self.camera = camera

    @classmethod
    def from_2d(cls, session: TransformSession2D, **kwargs) -> "TransformSession3D":
        """Show the points of a 2D session in the 3D view.

        Both point sets are lifted onto the `z = 0` plane, the parameters start
        at identity and no points can be added in the 3D view.
        """
        kwargs.setdefault("point_addition_enabled", False)
        return cls(
            points=[p.lift() for p in session.points],
            transformed_points=[p.lift() for p in session.transformed_points],
            **kwargs,
        )

    def _format_point(self, point: Point3D) -> str:
        if point.z == 0:
            # points on the ground plane, the only ones a click can add
            return f"({point.x:.2f}, {point.y:.2f}, 0)"
        return super()._format_point(point)

    def _click_to_point(self, px: float, py: float) -> Point3D:
        width, height = self.scene_size
        return click_to_point_3d(px, py, self.camera, width, height)
