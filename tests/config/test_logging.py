"""Tests for structlog configuration."""

from __future__ import annotations

import json
import logging

import pytest
import structlog

from tileplan.config.logging import configure_logging


class TestConfigureLogging:
    def test_verbose_enables_debug(self) -> None:
        configure_logging(verbose=True, log_json=False)
        assert logging.getLogger("tileplan").level == logging.DEBUG
        assert logging.getLogger().level == logging.WARNING

    def test_non_verbose_sets_warning(self) -> None:
        configure_logging(verbose=False, log_json=False)
        assert logging.getLogger("tileplan").level == logging.WARNING

    def test_single_root_handler(self) -> None:
        configure_logging()
        configure_logging()
        assert len(logging.getLogger().handlers) == 1

    def test_json_mode_output(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(verbose=True, log_json=True)
        log = structlog.get_logger("tileplan.test")
        log.warning("json test", answer=42)
        parsed = json.loads(capfd.readouterr().err.strip())
        assert parsed["event"] == "json test"
        assert parsed["answer"] == 42
        assert parsed["level"] == "warning"
        assert parsed["logger"] == "tileplan.test"
        assert "timestamp" in parsed

    def test_stdlib_logger_goes_through_structlog(
        self, capfd: pytest.CaptureFixture[str]
    ) -> None:
        configure_logging(verbose=True, log_json=True)
        logging.getLogger("tileplan.domain.patterns").debug("tiled %d cells", 54)
        parsed = json.loads(capfd.readouterr().err.strip())
        assert parsed["event"] == "tiled 54 cells"
        assert parsed["level"] == "debug"
        assert parsed["logger"] == "tileplan.domain.patterns"
