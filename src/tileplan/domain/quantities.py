"""Quantity aggregation — tile counts, areas, waste, cost, and shopping list.

The waste percentage is a BUSINESS RULE, not a geometric result. It is a
recommended purchase buffer looked up per pattern in
:data:`WASTE_PERCENTAGES` and is independent of how many cut tiles the
tiling produced for a given room. Changing it to a cut-ratio would change
user-facing order quantities and needs a product decision first.
"""

from __future__ import annotations

import math
from collections.abc import Sequence

from tileplan.domain.geometry import area, clamp, format_dimension
from tileplan.domain.models import (
    CostEstimate,
    QuantitySummary,
    ShoppingItem,
    ShoppingList,
    TilePlacement,
    TileSpec,
)
from tileplan.domain.types import CuttingComplexity, Pattern
from tileplan.domain.units import area_to_square_meters

# Recommended extra material to order, in percent, per pattern.
WASTE_PERCENTAGES: dict[Pattern, float] = {
    Pattern.GRID: 10.0,
    Pattern.BRICK: 15.0,
    Pattern.HERRINGBONE: 20.0,
}

DEFAULT_GROUT_PRICE_PER_SQM = 10.0

# Cut-ratio thresholds for the cutting grade, exclusive lower bounds.
MODERATE_CUT_RATIO = 0.2
COMPLEX_CUT_RATIO = 0.4

# Shopping list coverage rules of thumb.
TILES_PER_SPACER_PACK = 100
ADHESIVE_SQM_PER_BAG = 5.0
SEALER_SQM_PER_LITER = 20.0
CUTS_PER_DISC = 50
GROUT_DEPTH_MM = 3.0
GROUT_KG_PER_LITER = 1.0


def waste_percentage(pattern: Pattern | str) -> float:
    return WASTE_PERCENTAGES[Pattern(pattern)]


def purchase_quantity(total_tiles: int, waste: float) -> int:
    """Tiles to order: the laid count plus the waste buffer, rounded up."""
    if total_tiles <= 0:
        return 0
    # 100 * 1.1 == 110.00000000000001; round first so it stays 110
    return math.ceil(round(total_tiles * (1 + waste / 100), 9))


def summarize(
    placements: Sequence[TilePlacement],
    tile_area_nominal: float,
    room_area: float,
    pattern: Pattern | str,
) -> QuantitySummary:
    """Aggregate a placement list into a :class:`QuantitySummary`.

    Args:
        placements: Output of the tiling step, fully materialized.
        tile_area_nominal: Uncut tile area in mm², grout excluded. Used
            for grout area so the numbers reflect material consumed.
        room_area: Floor area in mm².
        pattern: Selects the waste constant.
    """
    total = len(placements)
    cut = sum(1 for p in placements if p.is_cut)
    waste = waste_percentage(pattern)
    nominal = max(tile_area_nominal, 0.0)

    if room_area > 0:
        covered = sum(area(p.width, p.height) for p in placements)
        coverage = clamp(covered / room_area, 0.0, 1.0)
        grout_area = max(0.0, room_area - total * nominal)
    else:
        coverage = 0.0
        grout_area = 0.0

    return QuantitySummary(
        pattern=Pattern(pattern),
        total_area_canonical=max(room_area, 0.0),
        tile_area_canonical=nominal,
        total_tiles=total,
        full_tiles=total - cut,
        cut_tiles=cut,
        waste_percentage=waste,
        purchase_tiles=purchase_quantity(total, waste),
        grout_area=grout_area,
        coverage=coverage,
    )


def estimate_cost(
    summary: QuantitySummary,
    tile_price: float,
    grout_price_per_sqm: float = DEFAULT_GROUT_PRICE_PER_SQM,
) -> CostEstimate:
    """Price the order: purchased tiles plus grout by square meter."""
    tile_cost = summary.purchase_tiles * tile_price
    grout_cost = area_to_square_meters(summary.grout_area) * grout_price_per_sqm
    return CostEstimate(
        tile_cost=round(tile_cost, 2),
        grout_cost=round(grout_cost, 2),
        total_cost=round(tile_cost + grout_cost, 2),
    )


def cut_ratio(summary: QuantitySummary) -> float:
    """Share of laid tiles that need a cut; 0 when nothing was laid."""
    if summary.total_tiles <= 0:
        return 0.0
    return summary.cut_tiles / summary.total_tiles


def cutting_complexity(summary: QuantitySummary) -> CuttingComplexity:
    ratio = cut_ratio(summary)
    if ratio > COMPLEX_CUT_RATIO:
        return CuttingComplexity.COMPLEX
    if ratio > MODERATE_CUT_RATIO:
        return CuttingComplexity.MODERATE
    return CuttingComplexity.SIMPLE


def grout_ratio(tile_length: float, tile_width: float, grout: float) -> float:
    """Fraction of a laid surface taken by joints, for one tile plus its gap."""
    tile_area = area(tile_length, tile_width)
    if tile_area <= 0 or grout <= 0:
        return 0.0
    joint_area = (tile_length + tile_width + 2 * grout) * grout
    return joint_area / (tile_area + joint_area)


def _ceil(value: float) -> int:
    # 0.1 + 0.2 style noise must not push an exact count up by one
    return max(0, math.ceil(round(value, 9)))


def shopping_list(summary: QuantitySummary, tile: TileSpec) -> ShoppingList:
    """Materials to buy for one layout.

    Tiles are the purchase quantity (waste included). Grout is the joint
    volume at :data:`GROUT_DEPTH_MM` over the room area, in kilograms.
    Spacers, adhesive, and sealer scale with tile count or floor area;
    cutting discs are only listed for layouts graded complex.
    """
    area_m2 = area_to_square_meters(summary.total_area_canonical)
    joints_mm2 = summary.total_area_canonical * grout_ratio(
        tile.length_mm, tile.width_mm, tile.grout_mm
    )
    grout_liters = joints_mm2 * GROUT_DEPTH_MM / 1_000_000

    size = f"{format_dimension(tile.length.value)}×{format_dimension(tile.width.value)}"
    accessories = [
        ShoppingItem(
            item="Tile spacers",
            quantity=_ceil(summary.purchase_tiles / TILES_PER_SPACER_PACK),
            unit="pack",
        ),
        ShoppingItem(
            item="Tile adhesive",
            quantity=_ceil(area_m2 / ADHESIVE_SQM_PER_BAG),
            unit="bag",
        ),
        ShoppingItem(
            item="Grout sealer",
            quantity=_ceil(area_m2 / SEALER_SQM_PER_LITER),
            unit="liter",
        ),
    ]
    if cutting_complexity(summary) is CuttingComplexity.COMPLEX:
        accessories.append(
            ShoppingItem(
                item="Tile cutting discs",
                quantity=_ceil(summary.cut_tiles / CUTS_PER_DISC),
                unit="piece",
            )
        )

    return ShoppingList(
        tiles=ShoppingItem(
            item="Tiles",
            quantity=summary.purchase_tiles,
            unit="piece",
            description=f"{size}{tile.length.unit.value} tiles",
        ),
        grout=ShoppingItem(
            item="Grout",
            quantity=_ceil(grout_liters * GROUT_KG_PER_LITER),
            unit="kg",
            description="Tile grout",
        ),
        accessories=tuple(accessories),
    )
