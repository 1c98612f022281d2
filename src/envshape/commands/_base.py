"""Custom Click base class and shared options.

EnvshapeCommand accepts an ``examples`` parameter.  When ``--examples``
is passed, the command prints usage examples and exits.
"""

from __future__ import annotations

import sys
from collections.abc import Callable
from pathlib import Path
from typing import Any, TypeVar

import click

F = TypeVar("F", bound=Callable[..., Any])


def _add_examples_option(cmd: click.Command, examples: str) -> None:
    """Attach an eager ``--examples`` flag to a Click command."""

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


class EnvshapeCommand(click.Command):
    """Click Command subclass that supports an ``--examples`` flag."""

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.examples = examples
        if examples:
            _add_examples_option(self, examples)


def _parse_map(
    _ctx: click.Context,
    _param: click.Parameter,
    value: tuple[str, ...],
) -> dict[str, str]:
    """Turn repeated ``FIELD=VAR`` options into a mapping."""
    mapping: dict[str, str] = {}
    for item in value:
        field_name, sep, env_var = item.partition("=")
        field_name, env_var = field_name.strip(), env_var.strip()
        if not sep or not field_name or not env_var:
            raise click.BadParameter(f"{item!r} is not of the form FIELD=VAR")
        mapping[field_name] = env_var
    return mapping


def _add_app_dir(_ctx: click.Context, _param: click.Parameter, value: str) -> str:
    """Make modules under *value* importable for ``module:attribute`` targets."""
    path = str(Path(value).resolve())
    if path not in sys.path:
        sys.path.insert(0, path)
    return value


def mapping_options(func: F) -> F:
    """Add the ``TARGET`` argument plus ``--map``, ``--prefix`` and ``--app-dir``."""
    func = click.option(
        "--app-dir",
        default=".",
        show_default=True,
        expose_value=False,
        is_eager=True,
        callback=_add_app_dir,
        help="Directory added to sys.path before importing TARGET.",
    )(func)
    func = click.option(
        "--prefix",
        default=None,
        help="Map every field to PREFIX + FIELD_NAME (upper-cased).",
    )(func)
    func = click.option(
        "-m",
        "--map",
        "mapping",
        multiple=True,
        callback=_parse_map,
        help="Field to variable mapping, FIELD=VAR (repeatable, overrides --prefix).",
    )(func)
    return click.argument("target")(func)
