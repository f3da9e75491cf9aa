"""Subcommand modules for tileplan.

Provides register_commands() which uses deferred imports to keep
``tileplan --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register the standalone commands on the root CLI group."""
    from tileplan.commands.convert import convert
    from tileplan.commands.layout import layout
    from tileplan.commands.patterns import patterns
    from tileplan.commands.plan import plan

    cli.add_command(plan)
    cli.add_command(layout)
    cli.add_command(convert)
    cli.add_command(patterns)
