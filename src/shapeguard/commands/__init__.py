"""Subcommand modules for shapeguard.

Provides register_commands() which uses deferred imports to keep
``shapeguard --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all standalone commands on the root CLI group."""
    from shapeguard.commands.check import check
    from shapeguard.commands.guards_cmd import guards_cmd

    cli.add_command(check)
    cli.add_command(guards_cmd)
