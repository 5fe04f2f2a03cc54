"""Root CLI group for tangle with global flags and command registration."""

from __future__ import annotations

import click
from pydantic import ValidationError

from tangle import __version__
from tangle.commands import register_commands
from tangle.commands._context import AppContext
from tangle.config.settings import ConfigFileError, TangleSettings


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="tangle")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-v", "--verbose", is_flag=True, help="Debug logging to stderr.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option("-c", "--config", "config_path", default=None, help="Override config file path.")
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    verbose: bool,
    log_json: bool,
    config_path: str | None,
) -> None:
    """tangle: build and inspect cards made of typed fields."""
    try:
        settings = TangleSettings.from_cli(
            config_path=config_path,
            json_output=json_output,
            verbose=verbose,
            log_json=log_json,
        )
    except (ConfigFileError, ValidationError) as exc:
        raise click.ClickException(str(exc)) from exc
    ctx.obj = AppContext(settings)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
