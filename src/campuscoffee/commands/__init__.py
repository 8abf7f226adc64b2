"""Subcommand modules for campuscoffee.

Provides register_commands() which uses deferred imports to keep
``campuscoffee --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all command groups on the root CLI group."""
    from campuscoffee.commands.pos import pos

    cli.add_command(pos)
