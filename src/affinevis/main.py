"""Command line front end printing original and transformed point sets."""

import argparse
import logging
import sys
from typing import Sequence, Tuple

from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from .points import Point2D, Point3D, TransformParams2D, TransformParams3D
from .session import (
    Severity,
    TransformSession,
    TransformSession2D,
    TransformSession3D,
)
from .utils import parse_field

log = logging.getLogger(__name__)

console = Console()

SEVERITY_STYLES = {
    Severity.SUCCESS: "bold green",
    Severity.ERROR: "bold red",
    Severity.INFO: "blue",
}


def _parse_coordinates(text: str, n: int) -> Tuple[float, ...]:
    values = text.split(",")
    if len(values) != n:
        raise ValueError(f"expected {n} comma separated values, got {text!r}")
    return tuple(parse_field(v) for v in values)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="affinevis",
        description="Apply translation, rotation and uniform scale to a point set.",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    views = parser.add_subparsers(dest="view", required=True)

    view_2d = views.add_parser("2d", help="Points on a flat canvas")
    view_2d.add_argument("--point", action="append", default=[], help="X,Y")
    view_2d.add_argument(
        "--click", action="append", default=[], help="Canvas pixel PX,PY"
    )
    view_2d.add_argument("--tx", default="0")
    view_2d.add_argument("--ty", default="0")
    view_2d.add_argument("--rotation", default="0", help="Degrees, counter-clockwise")
    view_2d.add_argument("--scale", default="1")
    view_2d.add_argument(
        "--lift", action="store_true", help="Show the result in the 3D view"
    )

    view_3d = views.add_parser("3d", help="Points in a perspective scene")
    view_3d.add_argument("--point", action="append", default=[], help="X,Y,Z")
    view_3d.add_argument(
        "--click", action="append", default=[], help="Scene pixel PX,PY"
    )
    view_3d.add_argument("--tx", default="0")
    view_3d.add_argument("--ty", default="0")
    view_3d.add_argument("--tz", default="0")
    view_3d.add_argument("--rx", default="0", help="Degrees about X")
    view_3d.add_argument("--ry", default="0", help="Degrees about Y")
    view_3d.add_argument("--rz", default="0", help="Degrees about Z")
    view_3d.add_argument("--scale", default="1")
    return parser


def _session_from_args(args: argparse.Namespace) -> TransformSession:
    if args.view == "2d":
        session = TransformSession2D(
            params=TransformParams2D(
                tx=parse_field(args.tx),
                ty=parse_field(args.ty),
                rotation_degrees=parse_field(args.rotation),
                scale=parse_field(args.scale),
            )
        )
        points = [Point2D(*_parse_coordinates(p, 2)) for p in args.point]
    else:
        session = TransformSession3D(
            params=TransformParams3D(
                tx=parse_field(args.tx),
                ty=parse_field(args.ty),
                tz=parse_field(args.tz),
                rotation_x_degrees=parse_field(args.rx),
                rotation_y_degrees=parse_field(args.ry),
                rotation_z_degrees=parse_field(args.rz),
                scale=parse_field(args.scale),
            )
        )
        points = [Point3D(*_parse_coordinates(p, 3)) for p in args.point]
    for point in points:
        session.add_point(point)
    for click in args.click:
        session.add_click(*_parse_coordinates(click, 2))
    return session


def _format(point) -> str:
    return ", ".join(f"{c:.3f}" for c in point.as_tuple())


def print_session(session: TransformSession, title: str) -> None:
    """Print labels, original and transformed points as a table."""
    table = Table(title=title)
    table.add_column("Point")
    table.add_column("Original", justify="right", style="blue")
    table.add_column("Transformed", justify="right", style="magenta")
    transformed = session.transformed_points
    for i, (label, point) in enumerate(zip(session.labels(), session.points)):
        table.add_row(
            label, _format(point), _format(transformed[i]) if transformed else ""
        )
    console.print(table)


def print_notifications(session: TransformSession) -> None:
    for notification in session.notifications:
        console.print(
            notification.message, style=SEVERITY_STYLES[notification.severity]
        )


def main(argv: Sequence[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=console)],
    )
    log.debug("arguments: %s", args)
    try:
        session = _session_from_args(args)
    except ValueError as e:
        console.print(f"Invalid input: {e}", style="bold red")
        return 1

    notification = session.transform()
    print_session(session, title=f"{args.view.upper()} transformation")
    print_notifications(session)
    if notification.severity is Severity.ERROR:
        return 1

    if args.view == "2d" and args.lift:
        print_session(TransformSession3D.from_2d(session), title="3D view")
    return 0


if __name__ == "__main__":
    sys.exit(main())
