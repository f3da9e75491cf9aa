"""AppContext — shared Click context for all commands.

Created once by the root CLI group and handed to subcommands via
``@click.pass_obj``. Owns the settings, the service, and result emission
(stdout/stderr routing and exit codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from tileplan.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from tileplan.config.settings import TilePlanSettings
    from tileplan.services.plan import PlanService
    from tileplan.services.result import ServiceResult


class AppContext:
    """Shared context flowing through Click's command hierarchy."""

    def __init__(self, settings: TilePlanSettings) -> None:
        self.settings = settings
        self._service: PlanService | None = None

        from tileplan.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

        if settings.verbose:
            from tileplan.services.telemetry import enable_telemetry

            enable_telemetry()

    @property
    def service(self) -> PlanService:
        """The planning service (created on first access)."""
        if self._service is None:
            from tileplan.services.plan import PlanService

            self._service = PlanService(self.settings)
        return self._service

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success: stdout, normal return. Warnings go to stderr so piped
          output stays clean.
        * Failure: stderr, exit code 1.
        """
        settings = OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
        )
        output = format_result(result, settings=settings)
        if result.ok:
            click.echo(output)
            # JSON output already carries the warnings.
            if not settings.json_output:
                for warning in result.warnings:
                    click.echo(f"WARNING: {warning}", err=True)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)
