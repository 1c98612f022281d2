"""Subcommand modules for envshape.

Provides register_commands() which uses deferred imports to keep
``envshape --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all standalone commands on the root CLI group."""
    from envshape.commands.check import check
    from envshape.commands.fields import fields

    cli.add_command(check)
    cli.add_command(fields)
