"""Tests for configuration section models."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from tileplan.config.models import (
    CostConfig,
    LayoutConfig,
    TilePlanConfig,
    UnitsConfig,
    ViewportConfig,
)
from tileplan.domain.models import Viewport
from tileplan.domain.types import Pattern, Unit


class TestDefaults:
    def test_root_defaults(self) -> None:
        cfg = TilePlanConfig()
        assert cfg.units.room is Unit.METER
        assert cfg.units.tile is Unit.MILLIMETER
        assert cfg.layout.pattern is Pattern.GRID
        assert cfg.layout.grout == 2.0
        assert cfg.viewport == ViewportConfig(width=400, height=300, margin=20)
        assert cfg.cost.tile_price == 0.0
        assert cfg.cost.grout_price_per_sqm == 10.0
        assert cfg.cost.currency == "USD"

    def test_sparse_override(self) -> None:
        cfg = TilePlanConfig.model_validate({"layout": {"pattern": "brick"}})
        assert cfg.layout.pattern is Pattern.BRICK
        assert cfg.layout.grout == 2.0
        assert cfg.units == UnitsConfig()


class TestValidation:
    def test_unknown_unit_rejected(self) -> None:
        with pytest.raises(ValidationError):
            UnitsConfig(room="yd")

    def test_negative_grout_rejected(self) -> None:
        with pytest.raises(ValidationError):
            LayoutConfig(grout=-1)

    def test_zero_viewport_rejected(self) -> None:
        with pytest.raises(ValidationError):
            ViewportConfig(width=0)

    def test_negative_price_rejected(self) -> None:
        with pytest.raises(ValidationError):
            CostConfig(tile_price=-0.5)


class TestViewportConfig:
    def test_to_viewport(self) -> None:
        assert ViewportConfig(width=800, height=600, margin=10).to_viewport() == Viewport(
            width=800, height=600, margin=10
        )
