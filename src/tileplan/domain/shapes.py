"""Room shape resolver — shape selector plus extents to a closed boundary.

Each shape is a small strategy registered in :data:`SHAPE_RESOLVERS`.
Boundaries are ordered vertex tuples with an implicit closing edge, never
open paths. A custom room with fewer than three points resolves to an
empty tuple, which callers treat as "no preview available".

KNOWN LIMITATION: the L-shape is a fixed proportional approximation.
The notch always spans the outer 40% of the length and the top 60% of
the width; it is not parametrized. Its floor area is the shoelace area
of that outline, 0.76 x length x width, so quantities for an L-shaped room
run 1% of length x width above a flat 0.75 x length x width estimate.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence

from tileplan.domain.geometry import polygon_area
from tileplan.domain.models import Frame, Point, RoomSpec
from tileplan.domain.types import RoomShape
from tileplan.domain.units import to_canonical

logger = logging.getLogger(__name__)

L_SHAPE_NOTCH_RATIO = 0.6

Boundary = tuple[Point, ...]
ShapeResolver = Callable[[float, float, Frame, Sequence[Point]], Boundary]


def _rectangle(length: float, width: float, frame: Frame, _points: Sequence[Point]) -> Boundary:
    return (
        frame.point(0, 0),
        frame.point(length, 0),
        frame.point(length, width),
        frame.point(0, width),
    )


def _l_shape(length: float, width: float, frame: Frame, _points: Sequence[Point]) -> Boundary:
    inner_x = length * L_SHAPE_NOTCH_RATIO
    inner_y = width * L_SHAPE_NOTCH_RATIO
    return (
        frame.point(0, 0),
        frame.point(inner_x, 0),
        frame.point(inner_x, inner_y),
        frame.point(length, inner_y),
        frame.point(length, width),
        frame.point(0, width),
    )


def _custom(_length: float, _width: float, frame: Frame, points: Sequence[Point]) -> Boundary:
    if len(points) < 3:
        logger.debug("Custom boundary has %d points; no outline", len(points))
        return ()
    return tuple(frame.point(p.x, p.y) for p in points)


SHAPE_RESOLVERS: dict[RoomShape, ShapeResolver] = {
    RoomShape.RECTANGLE: _rectangle,
    RoomShape.SQUARE: _rectangle,
    RoomShape.L_SHAPE: _l_shape,
    RoomShape.CUSTOM: _custom,
}


def resolve_boundary(
    shape: RoomShape,
    length: float,
    width: float,
    frame: Frame | None = None,
    custom_points: Sequence[Point] | None = None,
) -> Boundary:
    """Build the closed boundary for *shape* in *frame*.

    Args:
        shape: Room outline selector.
        length: Canonical extent along x.
        width: Canonical extent along y.
        frame: Offset and scale applied to every vertex (identity if None).
        custom_points: Canonical vertices, used only for custom rooms.
    """
    resolver = SHAPE_RESOLVERS[RoomShape(shape)]
    return resolver(length, width, frame or Frame(), custom_points or ())


def canonical_custom_points(room: RoomSpec) -> tuple[Point, ...]:
    """Custom boundary points converted from the room's length unit to mm."""
    if not room.custom_boundary:
        return ()
    unit = room.length.unit
    return tuple(
        Point(x=to_canonical(p.x, unit), y=to_canonical(p.y, unit)) for p in room.custom_boundary
    )


def room_boundary(room: RoomSpec, frame: Frame | None = None) -> Boundary:
    """Resolve *room* into a boundary in *frame*."""
    return resolve_boundary(
        room.shape,
        room.length_mm,
        room.width_mm,
        frame,
        canonical_custom_points(room),
    )


def room_area(room: RoomSpec) -> float:
    """Floor area in mm² enclosed by the resolved boundary (0 if degenerate)."""
    return polygon_area(room_boundary(room))
