"""Pattern tiling — enumerate full and cut tile rectangles for a room.

The algorithm tiles the room's bounding rectangle:

1. ``tiles_per_row = floor((room_length + grout) / (tile_length + grout))``
   and likewise for columns. Edge remainders never add a row or column.
2. Cells are visited in row-major order.
3. Each cell starts at ``offset + index * (tile + grout)``.
4. A pattern strategy adjusts the cell (offset or orientation).
5. Tiles crossing ``room edge - EDGE_EPSILON`` are flagged cut and clamped.
6. Slivers at or below ``EDGE_EPSILON`` in either direction are dropped.

Tiles are not clipped against non-rectangular outlines (L-shape, custom);
cut flags only reflect the bounding rectangle.

Strategies are approximations with a stable interface so an exact
geometry can replace one pattern without touching the enumeration loop:

- grid: no adjustment.
- brick: odd rows shift right by half a tile length (running bond).
- herringbone: cells with odd ``row + col`` swap width and height. There is
  no 45 degree rotation or interlock.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, replace
from typing import Protocol

from tileplan.domain.models import Frame, TilePlacement
from tileplan.domain.types import Pattern

logger = logging.getLogger(__name__)

EDGE_EPSILON = 2.0  # frame units; absorbs float error at the room edge


@dataclass(frozen=True)
class Cell:
    """A tile candidate before cut detection."""

    row: int
    col: int
    x: float
    y: float
    width: float
    height: float


class PatternStrategy(Protocol):
    """Per-cell placement rule for one pattern."""

    pattern: Pattern

    def adjust(self, cell: Cell) -> Cell: ...


class GridStrategy:
    pattern = Pattern.GRID

    def adjust(self, cell: Cell) -> Cell:
        return cell


class BrickStrategy:
    pattern = Pattern.BRICK

    def adjust(self, cell: Cell) -> Cell:
        if cell.row % 2 == 1:
            return replace(cell, x=cell.x + cell.width / 2)
        return cell


class HerringboneStrategy:
    pattern = Pattern.HERRINGBONE

    def adjust(self, cell: Cell) -> Cell:
        if (cell.row + cell.col) % 2 == 1:
            return replace(cell, width=cell.height, height=cell.width)
        return cell


PATTERN_STRATEGIES: dict[Pattern, PatternStrategy] = {
    Pattern.GRID: GridStrategy(),
    Pattern.BRICK: BrickStrategy(),
    Pattern.HERRINGBONE: HerringboneStrategy(),
}


def _count(extent: float, tile: float, grout: float) -> int:
    step = tile + grout
    if not (math.isfinite(extent) and math.isfinite(step)) or extent <= 0 or step <= 0:
        return 0
    return max(0, math.floor((extent + grout) / step))


def grid_counts(
    room_length: float,
    room_width: float,
    tile_length: float,
    tile_width: float,
    grout: float,
) -> tuple[int, int]:
    """Return ``(tiles_per_row, tiles_per_column)``; 0 on degenerate input."""
    return _count(room_length, tile_length, grout), _count(room_width, tile_width, grout)


def _cut(cell: Cell, right: float, bottom: float) -> TilePlacement | None:
    """Flag and clamp a cell against the room edges; None for slivers."""
    width = cell.width
    height = cell.height
    is_cut = cell.x + width > right - EDGE_EPSILON or cell.y + height > bottom - EDGE_EPSILON
    if is_cut:
        width = min(width, right - cell.x - EDGE_EPSILON)
        height = min(height, bottom - cell.y - EDGE_EPSILON)
    if width <= EDGE_EPSILON or height <= EDGE_EPSILON:
        return None
    return TilePlacement(
        x=cell.x,
        y=cell.y,
        width=width,
        height=height,
        is_cut=is_cut,
        row=cell.row,
        col=cell.col,
    )


def tile_room(
    room_length: float,
    room_width: float,
    tile_length: float,
    tile_width: float,
    grout: float,
    pattern: Pattern | str,
    frame: Frame | None = None,
) -> tuple[TilePlacement, ...]:
    """Enumerate tile placements for a room's bounding rectangle.

    All lengths are canonical; *frame* scales and offsets them so the
    tiles line up with a boundary resolved in the same frame.

    Returns:
        Placements in row-major order. Empty when the room or the tile is
        degenerate; never raises for geometric reasons.
    """
    frame = frame or Frame()
    strategy = PATTERN_STRATEGIES[Pattern(pattern)]
    scale = frame.scale

    length = room_length * scale
    width = room_width * scale
    tl = tile_length * scale
    tw = tile_width * scale
    gap = grout * scale

    per_row, per_column = grid_counts(length, width, tl, tw, gap)
    # Clamping only shrinks tiles, so a tile at or below the sliver size
    # can never survive the filter.
    if per_row == 0 or per_column == 0 or min(tl, tw) <= EDGE_EPSILON:
        logger.debug(
            "Degenerate tiling: %dx%d cells, tile %.3fx%.3f",
            per_row,
            per_column,
            tl,
            tw,
        )
        return ()

    right = frame.offset_x + length
    bottom = frame.offset_y + width
    step_x = tl + gap
    step_y = tw + gap

    def place(row: int, col: int) -> TilePlacement | None:
        base = Cell(
            row=row,
            col=col,
            x=frame.offset_x + col * step_x,
            y=frame.offset_y + row * step_y,
            width=tl,
            height=tw,
        )
        return _cut(strategy.adjust(base), right, bottom)

    candidates = (place(row, col) for row in range(per_column) for col in range(per_row))
    placements = tuple(p for p in candidates if p is not None)
    logger.debug(
        "Tiled %s: %d cells, %d placements",
        strategy.pattern,
        per_row * per_column,
        len(placements),
    )
    return placements
