"""Public entry points: compute a layout, then summarize it.

Data flows one way::

    RoomSpec/TileSpec -> canonical mm -> boundary + tiling -> LayoutResult
    LayoutResult -> QuantitySummary          (numbers)
    LayoutResult -> ProjectedLayout          (see projection.project_layout)

Nothing is cached; callers recompute on every input change.
"""

from __future__ import annotations

from tileplan.domain.geometry import area
from tileplan.domain.models import LayoutResult, QuantitySummary, RoomSpec, TileSpec, Viewport
from tileplan.domain.patterns import tile_room
from tileplan.domain.projection import compute_projection
from tileplan.domain.quantities import summarize
from tileplan.domain.shapes import room_area, room_boundary
from tileplan.domain.types import Pattern


def compute_layout(
    room: RoomSpec,
    tile: TileSpec,
    pattern: Pattern | str,
    viewport: Viewport | None = None,
) -> LayoutResult:
    """Tile *room* with *tile* in *pattern*.

    Boundary and placements are in canonical millimeters with the room's
    bounding rectangle anchored at the origin. The viewport only decides
    the attached :class:`Projection`.
    """
    view = viewport or Viewport()
    length = room.length_mm
    width = room.width_mm
    placements = tile_room(
        length,
        width,
        tile.length_mm,
        tile.width_mm,
        tile.grout_mm,
        pattern,
    )
    return LayoutResult(
        pattern=Pattern(pattern),
        room_length_canonical=length,
        room_width_canonical=width,
        boundary_path=room_boundary(room),
        placements=placements,
        grout_width_canonical=tile.grout_mm,
        projection=compute_projection(length, width, view.width, view.height, view.margin),
    )


def compute_summary(
    layout: LayoutResult,
    room: RoomSpec,
    tile: TileSpec,
    pattern: Pattern | str,
) -> QuantitySummary:
    """Quantities for *layout*; recomputed from scratch on every call."""
    nominal = area(tile.length_mm, tile.width_mm)
    return summarize(layout.placements, nominal, room_area(room), pattern)
