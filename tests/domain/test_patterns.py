"""Tests for pattern tiling and cut detection."""

from __future__ import annotations

import pytest

from tileplan.domain.models import Frame
from tileplan.domain.patterns import (
    EDGE_EPSILON,
    PATTERN_STRATEGIES,
    BrickStrategy,
    Cell,
    HerringboneStrategy,
    grid_counts,
    tile_room,
)
from tileplan.domain.types import Pattern


class TestGridCounts:
    def test_reference_room(self) -> None:
        assert grid_counts(3000, 2000, 300, 300, 2) == (9, 6)

    def test_grout_on_last_tile_not_required(self) -> None:
        # 3 tiles of 100 with 2 gaps of 5 fill exactly 310
        assert grid_counts(310, 310, 100, 100, 5) == (3, 3)

    def test_remainder_does_not_add_a_column(self) -> None:
        assert grid_counts(350, 100, 100, 100, 0) == (3, 1)

    @pytest.mark.parametrize(
        "args",
        [(0, 100, 10, 10, 0), (100, 100, 0, 0, 0), (-5, 100, 10, 10, 0), (100, 100, 200, 10, 0)],
    )
    def test_degenerate(self, args: tuple[float, ...]) -> None:
        assert 0 in grid_counts(*args)


class TestStrategies:
    def test_every_pattern_registered(self) -> None:
        assert set(PATTERN_STRATEGIES) == set(Pattern)

    def test_brick_shifts_odd_rows(self) -> None:
        cell = Cell(row=1, col=0, x=0, y=0, width=300, height=100)
        assert BrickStrategy().adjust(cell).x == 150
        even = Cell(row=2, col=0, x=0, y=0, width=300, height=100)
        assert BrickStrategy().adjust(even) == even

    def test_herringbone_swaps_on_odd_parity(self) -> None:
        cell = Cell(row=0, col=1, x=0, y=0, width=300, height=600)
        swapped = HerringboneStrategy().adjust(cell)
        assert (swapped.width, swapped.height) == (600, 300)
        same = Cell(row=1, col=1, x=0, y=0, width=300, height=600)
        assert HerringboneStrategy().adjust(same) == same


class TestTileRoomGrid:
    def test_reference_room_all_full(self) -> None:
        placements = tile_room(3000, 2000, 300, 300, 2, Pattern.GRID)
        assert len(placements) == 54
        assert not any(p.is_cut for p in placements)

    def test_row_major_order(self) -> None:
        placements = tile_room(3000, 2000, 300, 300, 2, "grid")
        keys = [(p.row, p.col) for p in placements]
        assert keys == sorted(keys)
        assert placements[0].x == 0
        assert placements[1].x == 302
        assert placements[9].y == 302

    def test_tiles_ending_at_edge_are_cut(self) -> None:
        placements = tile_room(900, 900, 300, 300, 0, "grid")
        assert len(placements) == 9
        cut = [p for p in placements if p.is_cut]
        assert len(cut) == 5
        corner = placements[-1]
        assert corner.is_cut
        assert corner.width == 900 - 600 - EDGE_EPSILON
        assert corner.height == 900 - 600 - EDGE_EPSILON

    def test_deterministic(self) -> None:
        first = tile_room(3000, 2000, 300, 600, 3, "herringbone")
        second = tile_room(3000, 2000, 300, 600, 3, "herringbone")
        assert first == second


class TestTileRoomBrick:
    def test_reference_room(self) -> None:
        placements = tile_room(3000, 2000, 300, 300, 2, "brick")
        assert len(placements) == 54
        odd_row_start = next(p for p in placements if p.row == 1 and p.col == 0)
        assert odd_row_start.x == 150

    def test_shifted_tiles_clamped_at_edge(self) -> None:
        placements = tile_room(900, 900, 300, 300, 0, "brick")
        last_in_odd_row = next(p for p in placements if p.row == 1 and p.col == 2)
        assert last_in_odd_row.is_cut
        assert last_in_odd_row.width == 900 - 750 - EDGE_EPSILON


class TestTileRoomHerringbone:
    def test_alternating_orientation(self) -> None:
        placements = tile_room(3000, 2000, 300, 600, 2, "herringbone")
        assert len(placements) == 27
        by_cell = {(p.row, p.col): p for p in placements}
        assert (by_cell[0, 0].width, by_cell[0, 0].height) == (300, 600)
        assert (by_cell[0, 1].width, by_cell[0, 1].height) == (600, 300)

    def test_rotated_tile_past_edge_is_cut(self) -> None:
        placements = tile_room(3000, 2000, 300, 600, 2, "herringbone")
        cut = [p for p in placements if p.is_cut]
        assert [(p.row, p.col) for p in cut] == [(1, 8)]
        assert cut[0].width == 3000 - 2416 - EDGE_EPSILON


class TestTileRoomDegenerate:
    @pytest.mark.parametrize(
        "args",
        [
            (0, 2000, 300, 300, 2),
            (3000, 0, 300, 300, 2),
            (3000, 2000, 0, 300, 2),
            (200, 200, 300, 300, 2),
            (3000, 2000, 1, 1, 0),
        ],
    )
    def test_returns_empty(self, args: tuple[float, ...]) -> None:
        assert tile_room(*args, "grid") == ()

    def test_unknown_pattern_raises(self) -> None:
        with pytest.raises(ValueError):
            tile_room(3000, 2000, 300, 300, 2, "zigzag")


class TestTileRoomInvariants:
    @pytest.mark.parametrize("pattern", list(Pattern))
    def test_placements_stay_inside_room(self, pattern: Pattern) -> None:
        for p in tile_room(2750, 1830, 300, 450, 3, pattern):
            assert p.x >= 0
            assert p.y >= 0
            assert p.x + p.width <= 2750
            assert p.y + p.height <= 1830
            assert p.width > EDGE_EPSILON
            assert p.height > EDGE_EPSILON

    def test_frame_scales_geometry(self) -> None:
        frame = Frame(offset_x=20, offset_y=30, scale=0.5)
        placements = tile_room(3000, 2000, 300, 300, 2, "grid", frame)
        assert len(placements) == 54
        assert (placements[0].x, placements[0].y) == (20, 30)
        assert placements[0].width == 150
        assert placements[1].x == 20 + 151
