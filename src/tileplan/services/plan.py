"""PlanService — layout, quantity, and conversion operations.

Pipeline for ``plan`` and ``layout``: RESOLVE → TILE → SUMMARIZE → RESPOND.
RESOLVE turns raw numbers and unit tags into domain value objects and is
the only stage that can fail; degenerate geometry still succeeds, with a
"no preview" warning and empty or zero results. SUMMARIZE also grades
the cutting work and builds the shopping list.
"""

from __future__ import annotations

import logging
from typing import Any

from pydantic import BaseModel

from tileplan.domain.geometry import format_dimension
from tileplan.domain.models import (
    LayoutResult,
    Length,
    Point,
    QuantitySummary,
    RoomSpec,
    TileSpec,
    Viewport,
)
from tileplan.domain.planner import compute_layout, compute_summary
from tileplan.domain.projection import project_layout
from tileplan.domain.quantities import (
    WASTE_PERCENTAGES,
    cut_ratio,
    cutting_complexity,
    estimate_cost,
    shopping_list,
)
from tileplan.domain.types import Pattern, RoomShape
from tileplan.domain.units import (
    InvalidUnitError,
    area_to_square_meters,
    coerce_unit,
    convert_area,
    convert_length,
    format_with_unit,
    unit_precision,
)
from tileplan.services.base import BaseService
from tileplan.services.contracts import (
    ConvertResultData,
    LayoutResultData,
    PatternsResultData,
    PlanResultData,
    dump_validated,
)
from tileplan.services.result import ErrorCode, ServiceResult
from tileplan.services.telemetry import trace_span, traced

logger = logging.getLogger(__name__)

PATTERN_DESCRIPTIONS: dict[Pattern, str] = {
    Pattern.GRID: "Straight lay, tiles aligned in rows and columns",
    Pattern.BRICK: "Running bond, odd rows offset by half a tile",
    Pattern.HERRINGBONE: "Alternating orientation (simplified, no interlock)",
}

NO_OUTLINE_WARNING = "No preview available: custom boundary needs at least 3 points"
NO_TILES_WARNING = "No preview available: no tile fits the room at these dimensions"
BOUNDING_BOX_WARNING = "Cut tiles are detected against the bounding rectangle, not the outline"
HIGH_CUT_WARNING = "High number of cut tiles: double-check measurements"

# Share of cut tiles above which a plan carries HIGH_CUT_WARNING.
HIGH_CUT_RATIO = 0.5


class PlanRequest(BaseModel):
    """Raw planning input. Unset units, grout, and pattern use settings."""

    model_config = {"frozen": True}

    room_length: float
    room_width: float
    tile_length: float
    tile_width: float
    grout: float | None = None
    room_unit: str | None = None
    tile_unit: str | None = None
    shape: str = RoomShape.RECTANGLE.value
    pattern: str | None = None
    points: tuple[tuple[float, float], ...] | None = None
    tile_price: float | None = None


class PlanService(BaseService):
    """Computes tile layouts, quantity summaries, and unit conversions."""

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    @traced
    def plan(self, request: PlanRequest) -> ServiceResult:
        """Quantity summary (and cost, when a tile price is known)."""
        op = "plan"
        try:
            with trace_span("resolve"):
                room, tile, pattern = self._resolve(request)
        except InvalidUnitError as exc:
            return self._failure(op, ErrorCode.INVALID_UNIT, str(exc), unit=str(exc.unit))
        except ValueError as exc:
            return self._failure(op, ErrorCode.INVALID_INPUT, str(exc))

        with trace_span("tile") as span:
            layout = compute_layout(room, tile, pattern)
            if span:
                span.annotate("placements", len(layout.placements))
        with trace_span("summarize"):
            summary = compute_summary(layout, room, tile, pattern)
            materials = shopping_list(summary, tile)

        data: dict[str, Any] = {
            "room": {
                "shape": room.shape.value,
                "length": room.length.value,
                "width": room.width.value,
                "unit": room.length.unit.value,
                "area_m2": _m2(summary.total_area_canonical),
            },
            "tile": {
                "length": tile.length.value,
                "width": tile.width.value,
                "grout": tile.grout_width.value,
                "unit": tile.length.unit.value,
            },
            "pattern": pattern.value,
            "total_area_m2": _m2(summary.total_area_canonical),
            "tile_area_m2": round(area_to_square_meters(summary.tile_area_canonical), 6),
            "total_tiles": summary.total_tiles,
            "full_tiles": summary.full_tiles,
            "cut_tiles": summary.cut_tiles,
            "waste_percentage": summary.waste_percentage,
            "purchase_tiles": summary.purchase_tiles,
            "grout_area_m2": _m2(summary.grout_area),
            "coverage": round(summary.coverage, 4),
            "cutting_complexity": cutting_complexity(summary).value,
            "shopping_list": materials.model_dump(),
            "cost": self._cost(summary, request.tile_price),
        }
        logger.debug(
            "plan %s: %d tiles (%d cut)", pattern, summary.total_tiles, summary.cut_tiles
        )
        return ServiceResult(
            ok=True,
            op=op,
            data=dump_validated(PlanResultData, data),
            warnings=_preview_warnings(room, layout) + _quantity_warnings(summary),
        )

    @traced
    def layout(
        self,
        request: PlanRequest,
        *,
        viewport: Viewport | None = None,
        projected: bool = False,
    ) -> ServiceResult:
        """Tile placements and room outline, in millimeters or viewport units."""
        op = "layout"
        try:
            with trace_span("resolve"):
                room, tile, pattern = self._resolve(request)
        except InvalidUnitError as exc:
            return self._failure(op, ErrorCode.INVALID_UNIT, str(exc), unit=str(exc.unit))
        except ValueError as exc:
            return self._failure(op, ErrorCode.INVALID_INPUT, str(exc))

        view = viewport or self._settings.viewport.to_viewport()
        with trace_span("tile") as span:
            layout = compute_layout(room, tile, pattern, view)
            if span:
                span.annotate("placements", len(layout.placements))

        if projected:
            with trace_span("project"):
                drawn = project_layout(layout)
            boundary, placements = drawn.boundary_path, drawn.placements
            scale, grout, space = drawn.scale, drawn.grout_width, "viewport"
        else:
            boundary, placements = layout.boundary_path, layout.placements
            scale, grout, space = 1.0, layout.grout_width_canonical, "canonical"

        data = {
            "pattern": pattern.value,
            "space": space,
            "scale": scale,
            "grout_width": grout,
            "count": len(placements),
            "cut_count": sum(1 for p in placements if p.is_cut),
            "boundary": [p.model_dump() for p in boundary],
            "placements": [p.model_dump() for p in placements],
        }
        return ServiceResult(
            ok=True,
            op=op,
            data=dump_validated(LayoutResultData, data),
            warnings=_preview_warnings(room, layout),
        )

    @traced
    def convert(
        self,
        value: float,
        from_unit: str,
        to_unit: str,
        *,
        area: bool = False,
    ) -> ServiceResult:
        """Convert a length (or, with *area*, a squared-unit area)."""
        op = "convert"
        try:
            source = coerce_unit(from_unit)
            target = coerce_unit(to_unit)
        except InvalidUnitError as exc:
            return self._failure(op, ErrorCode.INVALID_UNIT, str(exc), unit=str(exc.unit))

        if area:
            result = convert_area(value, source, target)
            formatted = f"{format_dimension(result, unit_precision(target) + 2)} {target.value}²"
        else:
            result = convert_length(value, source, target)
            formatted = format_with_unit(result, target, unit_precision(target) + 2)

        data = {
            "kind": "area" if area else "length",
            "value": value,
            "from_unit": source.value,
            "to_unit": target.value,
            "result": result,
            "formatted": formatted,
        }
        return ServiceResult(ok=True, op=op, data=dump_validated(ConvertResultData, data))

    def patterns(self) -> ServiceResult:
        """List the supported patterns with their waste allowance."""
        items = [
            {
                "pattern": pattern.value,
                "waste_percentage": waste,
                "description": PATTERN_DESCRIPTIONS[pattern],
            }
            for pattern, waste in WASTE_PERCENTAGES.items()
        ]
        return ServiceResult(
            ok=True,
            op="patterns",
            data=dump_validated(PatternsResultData, {"count": len(items), "items": items}),
        )

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _resolve(self, request: PlanRequest) -> tuple[RoomSpec, TileSpec, Pattern]:
        """Build domain value objects from *request* and the settings defaults.

        Raises:
            InvalidUnitError: A unit tag is outside the supported set.
            ValueError: Any other malformed input (pydantic errors included).
        """
        room_unit = coerce_unit(request.room_unit or self._settings.units.room)
        tile_unit = coerce_unit(request.tile_unit or self._settings.units.tile)
        grout = self._settings.layout.grout if request.grout is None else request.grout
        pattern = Pattern(request.pattern or self._settings.layout.pattern)

        boundary = None
        if request.points is not None:
            boundary = tuple(Point(x=x, y=y) for x, y in request.points)

        room = RoomSpec(
            shape=RoomShape(request.shape),
            length=Length(value=request.room_length, unit=room_unit),
            width=Length(value=request.room_width, unit=room_unit),
            custom_boundary=boundary,
        )
        tile = TileSpec(
            length=Length(value=request.tile_length, unit=tile_unit),
            width=Length(value=request.tile_width, unit=tile_unit),
            grout_width=Length(value=grout, unit=tile_unit),
        )
        return room, tile, pattern

    def _cost(self, summary: QuantitySummary, tile_price: float | None) -> dict[str, Any] | None:
        cfg = self._settings.cost
        price = cfg.tile_price if tile_price is None else tile_price
        if price <= 0:
            return None
        estimate = estimate_cost(summary, price, cfg.grout_price_per_sqm)
        return {"currency": cfg.currency, "tile_price": price, **estimate.model_dump()}


def _m2(value_mm2: float) -> float:
    return round(area_to_square_meters(value_mm2), 4)


def _preview_warnings(room: RoomSpec, layout: LayoutResult) -> list[str]:
    if not layout.boundary_path:
        return [NO_OUTLINE_WARNING]
    if not layout.placements:
        return [NO_TILES_WARNING]
    if room.shape in (RoomShape.L_SHAPE, RoomShape.CUSTOM):
        return [BOUNDING_BOX_WARNING]
    return []


def _quantity_warnings(summary: QuantitySummary) -> list[str]:
    if cut_ratio(summary) > HIGH_CUT_RATIO:
        return [HIGH_CUT_WARNING]
    return []
