"""Root CLI group for envshape with global flags and command registration."""

from __future__ import annotations

import click

from envshape import __version__
from envshape.commands import register_commands
from envshape.commands._context import AppContext
from envshape.config.settings import EnvshapeSettings


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="envshape")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-v", "--verbose", is_flag=True, help="Debug logging for each field.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.pass_context
def cli(ctx: click.Context, json_output: bool, verbose: bool, log_json: bool) -> None:
    """envshape — typed configuration from environment variables."""
    settings = EnvshapeSettings.from_cli(
        json_output=json_output,
        verbose=verbose,
        log_json=log_json,
    )
    ctx.obj = AppContext(settings)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
