"""Command: validate and normalize a JSON document with a guard."""

from __future__ import annotations

from typing import TYPE_CHECKING, TextIO

import click

from shapeguard.commands._base import GuardCommand

if TYPE_CHECKING:
    from shapeguard.commands._context import AppContext


@click.command(
    cls=GuardCommand,
    examples="""\
  shapeguard check -g myapp.shapes:Segment segment.json
  cat point.json | shapeguard check -g myapp.shapes:Point
  shapeguard check -g point point.json        # alias from [guards.aliases]
  shapeguard check settings.json              # uses [guards] default
  shapeguard check -g myapp.shapes:Config < /dev/null   # defaults only
  shapeguard --json check -g myapp.shapes:Point point.json""",
)
@click.argument("input_file", type=click.File("r", encoding="utf-8"), default="-")
@click.option(
    "-g",
    "--guard",
    "reference",
    default=None,
    help="Guard reference 'package.module:name' or a configured alias.",
)
@click.option("--name", default=None, help="Name hint reported in error messages.")
@click.pass_obj
def check(
    app: AppContext,
    input_file: TextIO,
    reference: str | None,
    name: str | None,
) -> None:
    """Validate INPUT_FILE (JSON, default stdin) and print the normalized value."""
    from shapeguard.services.check import CheckService

    document = input_file.read()
    app.emit(CheckService(app.settings).check(document, reference=reference, name=name))
