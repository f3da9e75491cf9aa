"""Unified settings — CLI flags, env vars, and TOML config in one object.

Priority chain (highest to lowest):
  1. Init kwargs  — CLI flags passed by Click
  2. Env vars     — ``TILEPLAN_*`` prefix, ``__`` for nested sections
  3. TOML file    — ``tileplan.toml`` discovered via walk-up
  4. Code defaults — baked into the section models
"""

from __future__ import annotations

import threading
import tomllib
from pathlib import Path
from typing import Any

import click
from pydantic import Field
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from tileplan.config.discovery import ConfigSource, locate_config
from tileplan.config.models import CostConfig, LayoutConfig, UnitsConfig, ViewportConfig


class TomlSettingsSource(PydanticBaseSettingsSource):
    """Read settings from a discovered ``tileplan.toml``."""

    def __init__(self, settings_cls: type[BaseSettings], toml_path: Path | None) -> None:
        super().__init__(settings_cls)
        self._data: dict[str, Any] = {}
        if toml_path and toml_path.is_file():
            try:
                self._data = tomllib.loads(toml_path.read_text(encoding="utf-8"))
            except tomllib.TOMLDecodeError as exc:
                raise click.ClickException(f"Invalid TOML in {toml_path}: {exc}") from exc

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        return self._data.get(field_name), field_name, field_name in self._data

    def __call__(self) -> dict[str, Any]:
        return self._data


# Carries the discovered TOML path into settings_customise_sources.
_tls = threading.local()


class TilePlanSettings(BaseSettings):
    """Frozen settings for one CLI invocation, stored on the Click context."""

    model_config = {
        "frozen": True,
        "env_prefix": "TILEPLAN_",
        "env_nested_delimiter": "__",
    }

    config_path: Path | None = None
    config_source: ConfigSource | None = None

    # --- CLI flags ---
    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    log_json: bool = False

    # --- TOML sections ---
    units: UnitsConfig = Field(default_factory=UnitsConfig)
    layout: LayoutConfig = Field(default_factory=LayoutConfig)
    viewport: ViewportConfig = Field(default_factory=ViewportConfig)
    cost: CostConfig = Field(default_factory=CostConfig)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Insert the TOML source between env vars and defaults."""
        return (
            init_settings,
            env_settings,
            TomlSettingsSource(settings_cls, getattr(_tls, "toml_path", None)),
        )

    @classmethod
    def from_cli(
        cls,
        *,
        config_path: str | None = None,
        start: Path | None = None,
        **cli_flags: Any,
    ) -> TilePlanSettings:
        """Build settings for a CLI run.

        Uses *config_path* when given, then ``TILEPLAN_CONFIG``, then walks
        up from *start* (default: cwd) looking for ``tileplan.toml``. The
        winning path and its source are kept on the settings.
        """
        location = locate_config(config_path, start)
        toml_path = location.path if location else None

        _tls.toml_path = toml_path
        try:
            return cls(
                config_path=toml_path,
                config_source=location.source if location else None,
                **cli_flags,
            )
        finally:
            _tls.toml_path = None
