"""Tests for viewport projection."""

from __future__ import annotations

import pytest

from tileplan.domain.models import LayoutResult, Length, Point, RoomSpec, TileSpec, Viewport
from tileplan.domain.planner import compute_layout
from tileplan.domain.projection import (
    MIN_GROUT_PIXELS,
    compute_projection,
    project_layout,
    project_point,
)


def _reference_layout(viewport: Viewport | None = None) -> LayoutResult:
    room = RoomSpec(length=Length(value=3, unit="m"), width=Length(value=2, unit="m"))
    tile = TileSpec(
        length=Length(value=300),
        width=Length(value=300),
        grout_width=Length(value=2),
    )
    return compute_layout(room, tile, "grid", viewport)


class TestComputeProjection:
    def test_fits_and_centers(self) -> None:
        projection = compute_projection(3000, 2000, 400, 300, 20)
        assert projection.scale == pytest.approx(0.12)
        assert projection.offset_x == pytest.approx(20)
        assert projection.offset_y == pytest.approx(30)

    def test_limited_by_height(self) -> None:
        projection = compute_projection(1000, 1000, 400, 300, 0)
        assert projection.scale == pytest.approx(0.3)
        assert projection.offset_x == pytest.approx(50)
        assert projection.offset_y == pytest.approx(0)

    @pytest.mark.parametrize(
        "args",
        [(0, 2000, 400, 300, 20), (3000, 2000, 40, 300, 20), (3000, -1, 400, 300, 20)],
    )
    def test_degenerate_scale_zero(self, args: tuple[float, ...]) -> None:
        projection = compute_projection(*args)
        assert projection.scale == 0.0
        assert projection.offset_x == args[2] / 2
        assert projection.offset_y == args[3] / 2


class TestProjectLayout:
    def test_single_scale_for_everything(self) -> None:
        projected = project_layout(_reference_layout())
        assert projected.scale == pytest.approx(0.12)
        assert projected.boundary_path[0].x == pytest.approx(20)
        assert projected.boundary_path[0].y == pytest.approx(30)
        assert projected.boundary_path[2].x == pytest.approx(380)
        assert projected.boundary_path[2].y == pytest.approx(270)
        first = projected.placements[0]
        assert (first.x, first.y) == (pytest.approx(20), pytest.approx(30))
        assert first.width == pytest.approx(36)
        second = projected.placements[1]
        assert second.x == pytest.approx(20 + 302 * 0.12)

    def test_keeps_cell_indices_and_flags(self) -> None:
        layout = _reference_layout()
        projected = project_layout(layout)
        assert [(p.row, p.col, p.is_cut) for p in projected.placements] == [
            (p.row, p.col, p.is_cut) for p in layout.placements
        ]

    def test_grout_has_minimum_width(self) -> None:
        projected = project_layout(_reference_layout())
        assert projected.grout_width == MIN_GROUT_PIXELS

    def test_explicit_projection_overrides_attached(self) -> None:
        layout = _reference_layout()
        big = compute_projection(3000, 2000, 4000, 3000, 0)
        projected = project_layout(layout, big)
        assert projected.scale == pytest.approx(4 / 3)
        assert projected.grout_width == pytest.approx(2 * 4 / 3)
        assert projected.viewport_width == 4000

    def test_project_point(self) -> None:
        projection = compute_projection(3000, 2000, 400, 300, 20)
        point = project_point(Point(x=1500, y=1000), projection)
        assert point.x == pytest.approx(200)
        assert point.y == pytest.approx(150)
