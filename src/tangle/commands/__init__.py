"""Subcommand modules for tangle.

Provides register_commands() which defers imports until registration.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all commands on the root CLI group."""
    from tangle.commands.card import card

    cli.add_command(card)
