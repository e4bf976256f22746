"""AppContext — shared Click context for all commands.

Created once by the root CLI group and handed to subcommands via
``@click.pass_obj``. The contract host is built lazily so ``--help`` and
``--version`` never load plugins.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from tfctl.config.logging import configure_logging
from tfctl.output.formatters import OutputSettings, format_result
from tfctl.services.telemetry import enable_telemetry

if TYPE_CHECKING:
    from tfctl.config.settings import TfSettings
    from tfctl.infrastructure.host import ContractHost
    from tfctl.services.result import ServiceResult


class AppContext:
    def __init__(self, settings: TfSettings) -> None:
        self.settings = settings
        self._host: ContractHost | None = None

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)
        if settings.verbose:
            enable_telemetry()

    @property
    def host(self) -> ContractHost:
        """The contract host (created on first access)."""
        if self._host is None:
            from tfctl.infrastructure.host import ContractHost

            self._host = ContractHost(self.settings)
        return self._host

    def emit(self, result: ServiceResult) -> None:
        """Print *result*; exit 1 on failure.

        Success goes to stdout with warnings on stderr (JSON mode keeps them
        in the payload). Failure goes to stderr.
        """
        settings = OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
        )
        output = format_result(result, settings=settings)
        if result.ok:
            click.echo(output)
            if not settings.json_output:
                for warning in result.warnings:
                    click.echo(f"WARNING: {warning}", err=True)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)
