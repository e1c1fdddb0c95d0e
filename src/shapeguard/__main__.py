"""Allow ``python -m shapeguard``."""

from shapeguard.cli import cli

cli()
