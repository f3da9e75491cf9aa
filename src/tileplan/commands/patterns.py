"""Command: list laying patterns."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from tileplan.commands._base import TileCommand

if TYPE_CHECKING:
    from tileplan.commands._context import AppContext


@click.command(
    cls=TileCommand,
    examples="""\
  tileplan patterns
  tileplan --json patterns""",
)
@click.pass_obj
def patterns(app: AppContext) -> None:
    """List supported patterns and their waste allowance."""
    app.emit(app.service.patterns())
