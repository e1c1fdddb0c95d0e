"""Command: list the guards configured in shapeguard.toml."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from shapeguard.commands._base import GuardCommand

if TYPE_CHECKING:
    from shapeguard.commands._context import AppContext


@click.command(
    "guards",
    cls=GuardCommand,
    examples="""\
  shapeguard guards
  shapeguard --json guards
  shapeguard -c ./ci/shapeguard.toml guards""",
)
@click.pass_obj
def guards_cmd(app: AppContext) -> None:
    """Show the default guard and configured aliases."""
    from shapeguard.services.check import CheckService

    app.emit(CheckService(app.settings).list_guards())
