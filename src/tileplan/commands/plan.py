"""Command: quantity summary and cost estimate for one room."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from tileplan.commands._base import TileCommand
from tileplan.commands._options import build_request, room_tile_options

if TYPE_CHECKING:
    from tileplan.commands._context import AppContext


@click.command(
    cls=TileCommand,
    examples="""\
  tileplan plan 3 2 --tile 300x300
  tileplan plan 3 2 --tile 300x600 --pattern brick --grout 3
  tileplan plan 12 10 --room-unit ft --tile 12x12 --tile-unit in
  tileplan plan 5 4 --tile 600 --shape l-shape --tile-price 4.5
  tileplan plan 4 3 --shape custom --point 0,0 --point 4,0 --point 4,3 --tile 300
  tileplan --json plan 3 2 --tile 300x300""",
)
@room_tile_options
@click.option("--tile-price", type=float, default=None, help="Price per tile (enables cost).")
@click.pass_obj
def plan(
    app: AppContext,
    length: float,
    width: float,
    tile: tuple[float, float],
    grout: float | None,
    pattern: str | None,
    shape: str,
    room_unit: str | None,
    tile_unit: str | None,
    points: tuple[tuple[float, float], ...],
    tile_price: float | None,
) -> None:
    """Tile counts, waste allowance, and purchase quantity for a room."""
    request = build_request(
        length, width, tile, grout, pattern, shape, room_unit, tile_unit, points, tile_price
    )
    app.emit(app.service.plan(request))
