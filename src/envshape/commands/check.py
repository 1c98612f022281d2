"""Command: build and validate configuration from the environment."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from envshape.commands._base import EnvshapeCommand, mapping_options

if TYPE_CHECKING:
    from envshape.commands._context import AppContext


@click.command(
    cls=EnvshapeCommand,
    examples="""\
  envshape check myapp.settings:AppConfig --map port=APP_PORT --map debug=DEBUG
  envshape check myapp.settings:AppConfig --prefix APP_
  envshape --json check myapp.settings:AppConfig --prefix APP_ -m api_key=API_KEY""",
)
@mapping_options
@click.pass_obj
def check(app: AppContext, target: str, mapping: dict[str, str], prefix: str | None) -> None:
    """Build TARGET (module:attribute) from environment variables and validate it."""
    from envshape.services.load import LoadService

    app.emit(LoadService().check(target, mapping, prefix=prefix))
