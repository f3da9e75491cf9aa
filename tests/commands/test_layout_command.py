"""Tests for the layout command."""

from __future__ import annotations

import json

import pytest
from click.testing import CliRunner

from tileplan.cli import cli


@pytest.mark.usefixtures("_isolated_cwd")
class TestLayoutCommand:
    def test_human_output(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["layout", "3", "2", "--tile", "300"])
        assert result.exit_code == 0, result.output
        assert "count: 54" in result.output

    def test_canonical_json(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "layout", "3", "2", "--tile", "300"])
        data = json.loads(result.output)["data"]
        assert data["space"] == "canonical"
        assert len(data["placements"]) == 54

    def test_projected(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(
            cli, ["--json", "layout", "3", "2", "--tile", "300", "--projected"]
        )
        data = json.loads(result.output)["data"]
        assert data["space"] == "viewport"
        assert data["scale"] == pytest.approx(0.12)

    def test_viewport_and_margin(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(
            cli,
            [
                "--json", "layout", "3", "2", "--tile", "300", "--projected",
                "--viewport", "800x600", "--margin", "0",
            ],
        )
        data = json.loads(result.output)["data"]
        assert data["scale"] == pytest.approx(800 / 3000)

    def test_margin_only_keeps_config_viewport(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(
            cli, ["--json", "layout", "3", "2", "--tile", "300", "--projected", "--margin", "0"]
        )
        data = json.loads(result.output)["data"]
        assert data["scale"] == pytest.approx(400 / 3000)

    def test_quiet_prints_count(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["-q", "layout", "3", "2", "--tile", "300"])
        assert result.output.strip() == "54"

    def test_no_tiles_warning(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["layout", "0.1", "0.1", "--tile", "300"])
        assert result.exit_code == 0
        assert "WARNING: No preview available" in result.output

    def test_json_keeps_warnings_in_payload(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "layout", "0.1", "0.1", "--tile", "300"])
        payload = json.loads(result.output)
        assert payload["warnings"][0].startswith("No preview available")
