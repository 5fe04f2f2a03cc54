"""AppContext: shared Click context for all commands.

Created once by the root CLI group and handed to subcommands via
``@click.pass_obj``. Owns logging setup and result emission.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from tangle.config.logging import configure_logging
from tangle.output.formatters import format_result, format_warnings

if TYPE_CHECKING:
    from tangle.config.settings import TangleSettings
    from tangle.services.result import ServiceResult


class AppContext:
    """Settings plus output routing for subcommands."""

    def __init__(self, settings: TangleSettings) -> None:
        self.settings = settings
        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success: writes to stdout; warnings go to stderr.
        * Failure: writes to stderr, exits with code 1.
        """
        output = format_result(result, json_output=self.settings.json_output)
        if result.ok:
            click.echo(output)
            if result.warnings and not self.settings.json_output:
                click.echo(format_warnings(result), err=True)
            return
        click.echo(output, err=True)
        raise SystemExit(1)
