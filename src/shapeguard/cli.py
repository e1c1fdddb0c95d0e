"""Root CLI group for shapeguard with global flags and command registration."""

from __future__ import annotations

import click

from shapeguard import __version__
from shapeguard.commands import register_commands
from shapeguard.commands._base import GuardGroup
from shapeguard.commands._context import AppContext
from shapeguard.config.settings import ShapeguardSettings


@click.group(
    cls=GuardGroup,
    invoke_without_command=True,
    examples="""\
  shapeguard check -g myapp.shapes:Point point.json
  shapeguard guards
  shapeguard --json -c ci/shapeguard.toml check payload.json""",
)
@click.version_option(version=__version__, prog_name="shapeguard")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-q", "--quiet", is_flag=True, help="Minimal output.")
@click.option("-v", "--verbose", is_flag=True, help="Detailed output with debug info.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option("-c", "--config", "config_path", default=None, help="Override config file path.")
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    quiet: bool,
    verbose: bool,
    log_json: bool,
    config_path: str | None,
) -> None:
    """shapeguard: validate and normalize JSON data with Python guards."""
    ctx.ensure_object(dict)
    settings = ShapeguardSettings.from_cli(
        config_path=config_path,
        json_output=json_output,
        quiet=quiet,
        verbose=verbose,
        log_json=log_json,
    )
    ctx.obj = AppContext(settings)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
