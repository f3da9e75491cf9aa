"""Command: unit conversion."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from tileplan.commands._base import TileCommand

if TYPE_CHECKING:
    from tileplan.commands._context import AppContext


@click.command(
    cls=TileCommand,
    examples="""\
  tileplan convert 10 ft m
  tileplan convert 300 mm in
  tileplan convert 12 m ft --area
  tileplan -q convert 1 in mm""",
)
@click.argument("value", type=float)
@click.argument("from_unit")
@click.argument("to_unit")
@click.option("--area", is_flag=True, help="Treat VALUE as an area in squared units.")
@click.pass_obj
def convert(app: AppContext, value: float, from_unit: str, to_unit: str, area: bool) -> None:
    """Convert VALUE from one unit (mm, cm, m, in, ft) to another."""
    app.emit(app.service.convert(value, from_unit, to_unit, area=area))
