"""Value objects for room, tile, layout, and quantity data.

All models are frozen. They are request-scoped: built fresh from validated
input for each computation and discarded once the caller has the result.
Geometry fields are canonical millimeters unless the model says otherwise.
"""

from __future__ import annotations

from typing import Annotated

from pydantic import BaseModel, Field, model_validator

from tileplan.domain.types import Pattern, RoomShape, Unit
from tileplan.domain.units import from_canonical, to_canonical

NonNegative = Annotated[float, Field(ge=0, allow_inf_nan=False)]


class Point(BaseModel):
    """A 2D point."""

    model_config = {"frozen": True}

    x: float
    y: float


class BoundingBox(BaseModel):
    model_config = {"frozen": True}

    min_x: float
    min_y: float
    max_x: float
    max_y: float

    @property
    def width(self) -> float:
        return self.max_x - self.min_x

    @property
    def height(self) -> float:
        return self.max_y - self.min_y


class LabelPositions(BaseModel):
    """Anchor points for the length (top) and width (left) labels."""

    model_config = {"frozen": True}

    top: Point
    left: Point


class RectFit(BaseModel):
    """A rectangle fitted and centered inside a canvas."""

    model_config = {"frozen": True}

    width: float
    height: float
    x: float
    y: float
    labels: LabelPositions


class Length(BaseModel):
    """A non-negative value tagged with its unit.

    Compare lengths only after :meth:`to_canonical`.
    """

    model_config = {"frozen": True}

    value: NonNegative
    unit: Unit = Unit.MILLIMETER

    def to_canonical(self) -> float:
        return to_canonical(self.value, self.unit)

    def in_unit(self, unit: Unit | str) -> float:
        return from_canonical(self.to_canonical(), unit)


class RoomSpec(BaseModel):
    """Room outline selector and bounding dimensions.

    ``custom_boundary`` is required for custom rooms and forbidden for the
    others. Its points are in the unit of ``length``. Fewer than three
    points is accepted and treated as "no preview available".
    """

    model_config = {"frozen": True}

    shape: RoomShape = RoomShape.RECTANGLE
    length: Length
    width: Length
    custom_boundary: tuple[Point, ...] | None = None

    @model_validator(mode="after")
    def _boundary_matches_shape(self) -> RoomSpec:
        is_custom = self.shape == RoomShape.CUSTOM
        if is_custom and self.custom_boundary is None:
            raise ValueError("custom rooms require custom_boundary")
        if not is_custom and self.custom_boundary is not None:
            raise ValueError(f"custom_boundary is only allowed for custom rooms, not {self.shape}")
        return self

    @property
    def length_mm(self) -> float:
        return self.length.to_canonical()

    @property
    def width_mm(self) -> float:
        return self.width.to_canonical()


class TileSpec(BaseModel):
    """Tile size and the grout gap reserved around each tile."""

    model_config = {"frozen": True}

    length: Length
    width: Length
    grout_width: Length = Field(default_factory=lambda: Length(value=0))

    @property
    def length_mm(self) -> float:
        return self.length.to_canonical()

    @property
    def width_mm(self) -> float:
        return self.width.to_canonical()

    @property
    def grout_mm(self) -> float:
        return self.grout_width.to_canonical()


class Frame(BaseModel):
    """Offset and uniform scale shared by the boundary and the tiles."""

    model_config = {"frozen": True}

    offset_x: float = 0.0
    offset_y: float = 0.0
    scale: float = 1.0

    def point(self, x: float, y: float) -> Point:
        """Map a canonical point into this frame."""
        return Point(x=self.offset_x + x * self.scale, y=self.offset_y + y * self.scale)


class Viewport(BaseModel):
    """Target drawing area, in the renderer's own units (usually pixels)."""

    model_config = {"frozen": True}

    width: float = 400.0
    height: float = 300.0
    margin: float = 20.0


class Projection(BaseModel):
    """Uniform scale and centering offset for one viewport render pass."""

    model_config = {"frozen": True}

    scale: float
    offset_x: float
    offset_y: float
    viewport_width: float
    viewport_height: float
    margin: float

    @property
    def frame(self) -> Frame:
        return Frame(offset_x=self.offset_x, offset_y=self.offset_y, scale=self.scale)


class TilePlacement(BaseModel):
    """One emitted tile rectangle. ``row``/``col`` give its grid cell."""

    model_config = {"frozen": True}

    x: float
    y: float
    width: float
    height: float
    is_cut: bool
    row: int
    col: int


class LayoutResult(BaseModel):
    """Sole handoff from tiling to the aggregator and the projector.

    ``boundary_path`` is implicitly closed; it is empty when the room has
    no drawable outline (a custom room with fewer than three points).
    """

    model_config = {"frozen": True}

    pattern: Pattern
    room_length_canonical: float
    room_width_canonical: float
    boundary_path: tuple[Point, ...]
    placements: tuple[TilePlacement, ...]
    grout_width_canonical: float
    projection: Projection

    @property
    def has_preview(self) -> bool:
        return bool(self.boundary_path) and bool(self.placements)


class ProjectedLayout(BaseModel):
    """A layout mapped into viewport coordinates with a single scale."""

    model_config = {"frozen": True}

    boundary_path: tuple[Point, ...]
    placements: tuple[TilePlacement, ...]
    grout_width: float
    scale: float
    viewport_width: float
    viewport_height: float


class QuantitySummary(BaseModel):
    """Material quantities derived from one layout. Areas are mm²."""

    model_config = {"frozen": True}

    pattern: Pattern
    total_area_canonical: float
    tile_area_canonical: float
    total_tiles: int
    full_tiles: int
    cut_tiles: int
    waste_percentage: float
    purchase_tiles: int
    grout_area: float
    coverage: float


class CostEstimate(BaseModel):
    model_config = {"frozen": True}

    tile_cost: float
    grout_cost: float
    total_cost: float


class ShoppingItem(BaseModel):
    """One line of the material shopping list."""

    model_config = {"frozen": True}

    item: str
    quantity: int
    unit: str
    description: str = ""


class ShoppingList(BaseModel):
    """Materials to buy: tiles, grout, then accessories in display order."""

    model_config = {"frozen": True}

    tiles: ShoppingItem
    grout: ShoppingItem
    accessories: tuple[ShoppingItem, ...] = ()
