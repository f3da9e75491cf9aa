"""Typed payload contracts for service results.

These models validate payload shapes before they leave the service layer
so renderer-facing keys cannot drift silently.
"""

from __future__ import annotations

from typing import Any, Literal, TypeVar

from pydantic import BaseModel, ConfigDict

T = TypeVar("T", bound=BaseModel)


def dump_validated(model_cls: type[T], data: dict[str, Any]) -> dict[str, Any]:
    """Validate *data* against *model_cls* and return a normalized payload dict."""
    return model_cls.model_validate(data).model_dump(mode="json")


class RoomData(BaseModel):
    shape: str
    length: float
    width: float
    unit: str
    area_m2: float


class TileData(BaseModel):
    length: float
    width: float
    grout: float
    unit: str


class CostData(BaseModel):
    currency: str
    tile_price: float
    tile_cost: float
    grout_cost: float
    total_cost: float


class ShoppingItemData(BaseModel):
    item: str
    quantity: int
    unit: str
    description: str = ""


class ShoppingListData(BaseModel):
    tiles: ShoppingItemData
    grout: ShoppingItemData
    accessories: list[ShoppingItemData]


class PlanResultData(BaseModel):
    """Payload contract for ``PlanService.plan``."""

    room: RoomData
    tile: TileData
    pattern: str
    total_area_m2: float
    tile_area_m2: float
    total_tiles: int
    full_tiles: int
    cut_tiles: int
    waste_percentage: float
    purchase_tiles: int
    grout_area_m2: float
    coverage: float
    cutting_complexity: Literal["simple", "moderate", "complex"]
    shopping_list: ShoppingListData
    cost: CostData | None = None


class PointData(BaseModel):
    x: float
    y: float


class PlacementData(BaseModel):
    model_config = ConfigDict(extra="forbid")

    row: int
    col: int
    x: float
    y: float
    width: float
    height: float
    is_cut: bool


class LayoutResultData(BaseModel):
    """Payload contract for ``PlanService.layout``."""

    pattern: str
    space: Literal["canonical", "viewport"]
    scale: float
    grout_width: float
    count: int
    cut_count: int
    boundary: list[PointData]
    placements: list[PlacementData]


class ConvertResultData(BaseModel):
    """Payload contract for ``PlanService.convert``."""

    kind: Literal["length", "area"]
    value: float
    from_unit: str
    to_unit: str
    result: float
    formatted: str


class PatternRow(BaseModel):
    pattern: str
    waste_percentage: float
    description: str


class PatternsResultData(BaseModel):
    """Payload contract for ``PlanService.patterns``."""

    count: int
    items: list[PatternRow]
