"""Custom Click base classes with --examples support.

TileCommand and TileGroup accept an ``examples`` string. Passing
``--examples`` prints it and exits, which keeps ``--help`` short; the help
epilog points at the flag so the examples stay discoverable.
"""

from __future__ import annotations

from typing import Any

import click


def _add_examples_option(cmd: click.Command, examples: str) -> None:
    """Attach an eager ``--examples`` flag to *cmd*."""

    def show_examples(ctx: click.Context, _param: click.Parameter, value: bool) -> None:
        if not value:
            return
        click.echo(f"Examples for '{ctx.command_path}':\n")
        click.echo(examples)
        ctx.exit(0)

    cmd.params.append(
        click.Option(
            ["--examples"],
            is_flag=True,
            expose_value=False,
            is_eager=True,
            callback=show_examples,
            help="Show usage examples.",
        )
    )


class _ExamplesMixin(click.Command):
    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.examples = examples
        if examples:
            _add_examples_option(self, examples)

    def format_epilog(self, ctx: click.Context, formatter: click.HelpFormatter) -> None:
        super().format_epilog(ctx, formatter)
        if self.examples:
            formatter.write_paragraph()
            formatter.write_text(f"Run '{ctx.command_path} --examples' for usage examples.")


class TileCommand(_ExamplesMixin):
    """Click Command that supports an ``--examples`` flag."""


class TileGroup(_ExamplesMixin, click.Group):
    """Click Group that supports ``--examples``; subcommands default to TileCommand."""

    command_class = TileCommand
