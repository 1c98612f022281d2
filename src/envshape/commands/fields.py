"""Command: show how each schema field is sourced from the environment."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from envshape.commands._base import EnvshapeCommand, mapping_options

if TYPE_CHECKING:
    from envshape.commands._context import AppContext


@click.command(
    cls=EnvshapeCommand,
    examples="""\
  envshape fields myapp.settings:AppConfig --prefix APP_
  envshape --json fields myapp.settings:AppConfig -m port=APP_PORT""",
)
@mapping_options
@click.pass_obj
def fields(app: AppContext, target: str, mapping: dict[str, str], prefix: str | None) -> None:
    """List TARGET's fields with their variable, coercion kind, and whether it is set."""
    from envshape.services.load import LoadService

    app.emit(LoadService().fields(target, mapping, prefix=prefix))
