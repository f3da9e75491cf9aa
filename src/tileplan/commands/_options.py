"""Shared Click parameter types and the room/tile option set.

``plan`` and ``layout`` take the same room and tile description; the
options are declared once here and applied with :func:`room_tile_options`.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any, TypeVar

import click

from tileplan.domain.types import Pattern, RoomShape, Unit

if TYPE_CHECKING:
    from tileplan.services.plan import PlanRequest

_UNIT_CHOICES = [u.value for u in Unit]


class DimensionsType(click.ParamType):
    """``LxW`` (e.g. ``300x600``); a single number means a square."""

    name = "LxW"

    def convert(
        self, value: Any, param: click.Parameter | None, ctx: click.Context | None
    ) -> tuple[float, float]:
        if isinstance(value, tuple):
            return value
        parts = str(value).lower().replace("×", "x").split("x")
        try:
            numbers = [float(p) for p in parts]
        except ValueError:
            self.fail(f"{value!r} is not of the form LxW", param, ctx)
        if len(numbers) == 1:
            return numbers[0], numbers[0]
        if len(numbers) != 2:
            self.fail(f"{value!r} is not of the form LxW", param, ctx)
        return numbers[0], numbers[1]


class PointType(click.ParamType):
    """``X,Y`` coordinate pair."""

    name = "X,Y"

    def convert(
        self, value: Any, param: click.Parameter | None, ctx: click.Context | None
    ) -> tuple[float, float]:
        if isinstance(value, tuple):
            return value
        parts = str(value).split(",")
        if len(parts) != 2:
            self.fail(f"{value!r} is not of the form X,Y", param, ctx)
        try:
            return float(parts[0]), float(parts[1])
        except ValueError:
            self.fail(f"{value!r} is not of the form X,Y", param, ctx)


DIMENSIONS = DimensionsType()
POINT = PointType()

F = TypeVar("F", bound=Callable[..., Any])


def room_tile_options(func: F) -> F:
    """Apply the LENGTH/WIDTH arguments and the tile/room options."""
    decorators = [
        click.argument("length", type=float),
        click.argument("width", type=float),
        click.option("--tile", "tile", type=DIMENSIONS, required=True, help="Tile size LxW."),
        click.option("--grout", type=float, default=None, help="Grout width (tile unit)."),
        click.option(
            "--pattern",
            type=click.Choice([p.value for p in Pattern]),
            default=None,
            help="Laying pattern (default from config).",
        ),
        click.option(
            "--shape",
            type=click.Choice([s.value for s in RoomShape]),
            default=RoomShape.RECTANGLE.value,
            show_default=True,
            help="Room outline.",
        ),
        click.option("--room-unit", default=None, help=f"One of {', '.join(_UNIT_CHOICES)}."),
        click.option("--tile-unit", default=None, help="Unit for tile size and grout."),
        click.option(
            "--point",
            "points",
            type=POINT,
            multiple=True,
            help="Custom outline vertex X,Y in the room unit (repeatable).",
        ),
    ]
    for decorator in reversed(decorators):
        func = decorator(func)
    return func


def build_request(
    length: float,
    width: float,
    tile: tuple[float, float],
    grout: float | None,
    pattern: str | None,
    shape: str,
    room_unit: str | None,
    tile_unit: str | None,
    points: tuple[tuple[float, float], ...],
    tile_price: float | None = None,
) -> PlanRequest:
    """Assemble a PlanRequest from parsed CLI values."""
    from tileplan.services.plan import PlanRequest

    return PlanRequest(
        room_length=length,
        room_width=width,
        tile_length=tile[0],
        tile_width=tile[1],
        grout=grout,
        room_unit=room_unit,
        tile_unit=tile_unit,
        shape=shape,
        pattern=pattern,
        points=tuple(points) if shape == RoomShape.CUSTOM.value else (points or None),
        tile_price=tile_price,
    )
