"""Command: tile placements for one room."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from tileplan.commands._base import TileCommand
from tileplan.commands._options import DIMENSIONS, build_request, room_tile_options

if TYPE_CHECKING:
    from tileplan.commands._context import AppContext


@click.command(
    cls=TileCommand,
    examples="""\
  tileplan layout 3 2 --tile 300x300
  tileplan layout 3 2 --tile 300x600 --pattern herringbone --projected
  tileplan layout 3 2 --tile 300 --projected --viewport 800x600 --margin 10
  tileplan -v layout 3 2 --tile 300  # list every placement""",
)
@room_tile_options
@click.option("--viewport", type=DIMENSIONS, default=None, help="Drawing area WxH.")
@click.option("--margin", type=float, default=None, help="Viewport margin.")
@click.option("--projected", is_flag=True, help="Report coordinates in viewport space.")
@click.pass_obj
def layout(
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
    viewport: tuple[float, float] | None,
    margin: float | None,
    projected: bool,
) -> None:
    """Compute tile placements (millimeters, or viewport units with --projected)."""
    from tileplan.domain.models import Viewport

    view = None
    if viewport is not None or margin is not None:
        cfg = app.settings.viewport
        width_px, height_px = viewport if viewport is not None else (cfg.width, cfg.height)
        view = Viewport(
            width=width_px,
            height=height_px,
            margin=cfg.margin if margin is None else margin,
        )

    request = build_request(
        length, width, tile, grout, pattern, shape, room_unit, tile_unit, points
    )
    app.emit(app.service.layout(request, viewport=view, projected=projected))
