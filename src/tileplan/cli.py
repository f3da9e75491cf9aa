"""Root CLI group for tileplan with global flags and command registration."""

from __future__ import annotations

import click

from tileplan import __version__
from tileplan.commands import register_commands
from tileplan.commands._base import TileGroup
from tileplan.commands._context import AppContext
from tileplan.config.settings import TilePlanSettings


@click.group(
    cls=TileGroup,
    invoke_without_command=True,
    examples="""\
  tileplan plan 3 2 --tile 300x300
  tileplan layout 3 2 --tile 300 --projected
  tileplan convert 10 ft m
  tileplan patterns""",
)
@click.version_option(version=__version__, prog_name="tileplan")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-q", "--quiet", is_flag=True, help="Minimal output.")
@click.option("-v", "--verbose", is_flag=True, help="Detailed output with debug info.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option("-c", "--config", "config_path", default=None, help="Override config file path.")
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    quiet: bool,
    verbose: bool,
    log_json: bool,
    config_path: str | None,
) -> None:
    """tileplan — tile layout and quantity planner."""
    settings = TilePlanSettings.from_cli(
        config_path=config_path,
        json_output=json_output,
        quiet=quiet,
        verbose=verbose,
        log_json=log_json,
    )
    ctx.obj = AppContext(settings)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
