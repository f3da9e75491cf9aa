"""Tests for the convert command."""

from __future__ import annotations

import json

import pytest
from click.testing import CliRunner

from tileplan.cli import cli


@pytest.mark.usefixtures("_isolated_cwd")
class TestConvertCommand:
    def test_length(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["convert", "10", "ft", "m"])
        assert result.exit_code == 0
        assert "10 ft = 3.048 m" in result.output

    def test_area(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "convert", "1", "ft", "in", "--area"])
        data = json.loads(result.output)["data"]
        assert data["kind"] == "area"
        assert data["result"] == pytest.approx(144)

    def test_quiet(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["-q", "convert", "1", "in", "mm"])
        assert result.output.strip() == "25.4 mm"

    def test_invalid_unit(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["convert", "1", "yd", "m"])
        assert result.exit_code == 1
        assert "Unsupported unit" in result.output

    def test_non_numeric_value(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["convert", "ten", "ft", "m"])
        assert result.exit_code == 2
