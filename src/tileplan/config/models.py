"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults live here, ``tileplan.toml`` only holds
overrides. An empty file (or no file) is a valid configuration.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from tileplan.domain.models import Viewport
from tileplan.domain.quantities import DEFAULT_GROUT_PRICE_PER_SQM
from tileplan.domain.types import Pattern, Unit


class UnitsConfig(BaseModel):
    """[units] section."""

    model_config = {"frozen": True}

    room: Unit = Unit.METER
    tile: Unit = Unit.MILLIMETER


class LayoutConfig(BaseModel):
    """[layout] section. ``grout`` is in the tile unit."""

    model_config = {"frozen": True}

    pattern: Pattern = Pattern.GRID
    grout: float = Field(default=2.0, ge=0)


class ViewportConfig(BaseModel):
    """[viewport] section."""

    model_config = {"frozen": True}

    width: float = Field(default=400.0, gt=0)
    height: float = Field(default=300.0, gt=0)
    margin: float = Field(default=20.0, ge=0)

    def to_viewport(self) -> Viewport:
        return Viewport(width=self.width, height=self.height, margin=self.margin)


class CostConfig(BaseModel):
    """[cost] section."""

    model_config = {"frozen": True}

    tile_price: float = Field(default=0.0, ge=0)
    grout_price_per_sqm: float = Field(default=DEFAULT_GROUT_PRICE_PER_SQM, ge=0)
    currency: str = "USD"


class TilePlanConfig(BaseModel):
    """Root configuration composing all sections."""

    model_config = {"frozen": True}

    units: UnitsConfig = Field(default_factory=UnitsConfig)
    layout: LayoutConfig = Field(default_factory=LayoutConfig)
    viewport: ViewportConfig = Field(default_factory=ViewportConfig)
    cost: CostConfig = Field(default_factory=CostConfig)
