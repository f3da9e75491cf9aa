"""Geometry primitives on canonical-unit numbers.

All functions are total: degenerate input (non-positive, NaN, infinite)
falls back to a documented value instead of raising, so the shape
resolver, tiling, and projection can compose them without re-checking.
"""

from __future__ import annotations

import math
from collections.abc import Sequence

from tileplan.domain.models import BoundingBox, LabelPositions, Point, RectFit

LABEL_OFFSET = 15.0
DUPLICATE_POINT_TOLERANCE_MM = 0.1


def _positive(value: float) -> bool:
    return math.isfinite(value) and value > 0


def area(length: float, width: float) -> float:
    """Rectangle area, or 0 for any non-positive input."""
    if not (_positive(length) and _positive(width)):
        return 0.0
    return length * width


def perimeter(length: float, width: float) -> float:
    """Rectangle perimeter, or 0 for any non-positive input."""
    if not (_positive(length) and _positive(width)):
        return 0.0
    return 2 * (length + width)


def aspect_ratio(length: float, width: float) -> float:
    """``length / width``; 0 for any non-positive input, including ``width == 0``."""
    if not (_positive(length) and _positive(width)):
        return 0.0
    return length / width


def are_valid_dimensions(length: float, width: float) -> bool:
    return _positive(length) and _positive(width)


def proportional_fit(
    length: float,
    width: float,
    bounds_width: float = 600.0,
    bounds_height: float = 400.0,
    *,
    max_width: float = 300.0,
    max_height: float = 200.0,
) -> RectFit:
    """Scale a ``length x width`` rectangle into a box and center it.

    The rectangle is fitted into ``max_width x max_height`` (never larger
    than the bounds) preserving its aspect ratio, then centered in the
    ``bounds_width x bounds_height`` canvas. Label anchors sit
    :data:`LABEL_OFFSET` above the top edge and left of the left edge.

    Degenerate rectangles collapse to a zero-size rectangle at the
    canvas center; the label anchors stay well defined.
    """
    fit_w = min(max_width, bounds_width)
    fit_h = min(max_height, bounds_height)

    if not are_valid_dimensions(length, width) or not are_valid_dimensions(fit_w, fit_h):
        cx = bounds_width / 2 if math.isfinite(bounds_width) else 0.0
        cy = bounds_height / 2 if math.isfinite(bounds_height) else 0.0
        return RectFit(
            width=0.0,
            height=0.0,
            x=cx,
            y=cy,
            labels=LabelPositions(
                top=Point(x=cx, y=cy - LABEL_OFFSET),
                left=Point(x=cx - LABEL_OFFSET, y=cy),
            ),
        )

    ratio = length / width
    if ratio > fit_w / fit_h:
        # Width is the limiting factor
        rect_w = fit_w
        rect_h = fit_w / ratio
    else:
        rect_h = fit_h
        rect_w = fit_h * ratio

    x = (bounds_width - rect_w) / 2
    y = (bounds_height - rect_h) / 2
    return RectFit(
        width=rect_w,
        height=rect_h,
        x=x,
        y=y,
        labels=LabelPositions(
            top=Point(x=x + rect_w / 2, y=y - LABEL_OFFSET),
            left=Point(x=x - LABEL_OFFSET, y=y + rect_h / 2),
        ),
    )


def round_to_decimals(value: float, decimals: int = 2) -> float:
    return round(value, decimals)


def clamp(value: float, low: float, high: float) -> float:
    return min(max(value, low), high)


def format_dimension(value: float, decimals: int = 2) -> str:
    """Fixed-point text with trailing zeros removed (``2.50`` -> ``2.5``)."""
    if value == 0:
        return "0"
    text = f"{value:.{decimals}f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


# --- Polygons ---


def distance(a: Point, b: Point) -> float:
    return math.hypot(b.x - a.x, b.y - a.y)


def polygon_area(points: Sequence[Point]) -> float:
    """Shoelace area of a closed polygon; 0 for fewer than 3 points."""
    n = len(points)
    if n < 3:
        return 0.0
    total = 0.0
    for i in range(n):
        j = (i + 1) % n
        total += points[i].x * points[j].y - points[j].x * points[i].y
    return abs(total) / 2


def polygon_perimeter(points: Sequence[Point], *, closed: bool = True) -> float:
    """Sum of edge lengths; the closing edge only counts for 3+ points."""
    n = len(points)
    if n < 2:
        return 0.0
    close = closed and n >= 3
    edges = n if close else n - 1
    return sum(distance(points[i], points[(i + 1) % n]) for i in range(edges))


def polygon_centroid(points: Sequence[Point]) -> Point:
    """Vertex mean. Empty input maps to the origin."""
    if not points:
        return Point(x=0.0, y=0.0)
    n = len(points)
    return Point(x=sum(p.x for p in points) / n, y=sum(p.y for p in points) / n)


def bounding_box(points: Sequence[Point]) -> BoundingBox:
    if not points:
        return BoundingBox(min_x=0.0, min_y=0.0, max_x=0.0, max_y=0.0)
    xs = [p.x for p in points]
    ys = [p.y for p in points]
    return BoundingBox(min_x=min(xs), min_y=min(ys), max_x=max(xs), max_y=max(ys))


def is_valid_polygon(points: Sequence[Point]) -> bool:
    """At least three vertices and no two closer than 0.1 mm.

    Self-intersection is not checked.
    """
    if len(points) < 3:
        return False
    for i, a in enumerate(points):
        for b in points[i + 1 :]:
            if distance(a, b) < DUPLICATE_POINT_TOLERANCE_MM:
                return False
    return True
