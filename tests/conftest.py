"""Shared pytest fixtures and test helpers for tileplan tests."""

from __future__ import annotations

import logging
import os
from collections.abc import Generator
from pathlib import Path

import pytest
from click.testing import CliRunner

from tileplan.config.settings import TilePlanSettings
from tileplan.services.plan import PlanRequest, PlanService
from tileplan.services.telemetry import disable_telemetry


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Drop any TILEPLAN_* variables from the developer's shell."""
    for key in list(os.environ):
        if key.startswith("TILEPLAN_"):
            monkeypatch.delenv(key, raising=False)


@pytest.fixture(autouse=True)
def _restore_global_state() -> Generator[None]:
    """Undo logging setup and telemetry left behind by CLI invocations."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    pkg = logging.getLogger("tileplan")
    pkg_level = pkg.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    pkg.setLevel(pkg_level)
    disable_telemetry()


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def _isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run from an empty temp directory so no tileplan.toml is discovered.

    Use via ``@pytest.mark.usefixtures("_isolated_cwd")`` on command test
    classes. Tests that write a config can request ``tmp_path`` directly.
    """
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def settings(tmp_path: Path) -> TilePlanSettings:
    """Default settings (m rooms, mm tiles, 2 mm grout, grid)."""
    return TilePlanSettings.from_cli(start=tmp_path)


@pytest.fixture
def service(settings: TilePlanSettings) -> PlanService:
    return PlanService(settings)


# ---------------------------------------------------------------------------
# Shared test helpers
# ---------------------------------------------------------------------------


def reference_request(**overrides: object) -> PlanRequest:
    """3 m x 2 m room, 300 mm square tiles, default grout and pattern."""
    fields: dict[str, object] = {
        "room_length": 3,
        "room_width": 2,
        "tile_length": 300,
        "tile_width": 300,
    }
    fields.update(overrides)
    return PlanRequest(**fields)
