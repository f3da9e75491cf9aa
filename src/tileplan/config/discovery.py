"""Config file discovery and loading.

A ``tileplan.toml`` is looked up in this order, first hit wins:

1. ``--config PATH`` on the command line
2. ``TILEPLAN_CONFIG`` in the environment
3. walk-up from the working directory toward the filesystem root

An explicit path (1 or 2) that names a missing file disables the walk-up
so a typo never silently picks up an unrelated project's config.
"""

from __future__ import annotations

import logging
import os
import tomllib
from enum import StrEnum
from pathlib import Path
from typing import Any, NamedTuple

from tileplan.config.models import TilePlanConfig

logger = logging.getLogger(__name__)

CONFIG_FILENAME = "tileplan.toml"
CONFIG_ENV_VAR = "TILEPLAN_CONFIG"


class ConfigSource(StrEnum):
    """Where the active config file came from."""

    FLAG = "flag"
    ENV = "env"
    WALK_UP = "walk-up"


class ConfigLocation(NamedTuple):
    path: Path
    source: ConfigSource


def locate_config(
    explicit: str | Path | None = None,
    start: Path | None = None,
) -> ConfigLocation | None:
    """Find the config file for a run, or None when there is none to read."""
    if explicit:
        p = Path(explicit)
        if not p.is_file():
            logger.debug("--config %s does not exist; using defaults", p)
            return None
        return ConfigLocation(p, ConfigSource.FLAG)

    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        p = Path(env_path)
        if not p.is_file():
            logger.debug("%s=%s does not exist; using defaults", CONFIG_ENV_VAR, p)
            return None
        return ConfigLocation(p, ConfigSource.ENV)

    current = (start or Path.cwd()).resolve()
    for directory in (current, *current.parents):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return ConfigLocation(candidate, ConfigSource.WALK_UP)
    return None


def find_config(start: Path | None = None) -> Path | None:
    """Return the nearest tileplan.toml at or above *start* (default: cwd).

    A set ``TILEPLAN_CONFIG`` wins; if it names a missing file the result
    is None rather than falling back to the walk-up.
    """
    location = locate_config(start=start)
    return location.path if location else None


def load_config(path: Path | None = None, cwd: Path | None = None) -> TilePlanConfig:
    """Load and validate config, or return defaults when no file exists."""
    location = locate_config(path, cwd)
    if location is None:
        return TilePlanConfig()

    data: dict[str, Any] = tomllib.loads(location.path.read_text(encoding="utf-8"))
    return TilePlanConfig.model_validate(data)
