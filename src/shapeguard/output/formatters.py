"""Rich/JSON output dispatch.

The CLI renders ServiceResult for humans (Rich output) or machines
(``--json``). ``--quiet`` reduces human output to a single status line,
except for ``check``, whose normalized value is the output.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from shapeguard.output.renderers import render_quiet, render_result

if TYPE_CHECKING:
    from shapeguard.services.result import ServiceResult


@dataclass(frozen=True)
class OutputSettings:
    """How a ServiceResult should be presented."""

    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    indent: int = 2
    width: int = 120


def format_result(
    result: ServiceResult,
    *,
    settings: OutputSettings | None = None,
    json_output: bool = False,
) -> str:
    """Format a ServiceResult for display.

    Args:
        result: The service result to format.
        settings: Output mode. When given, *json_output* is ignored.
        json_output: Shorthand for ``OutputSettings(json_output=True)``.
    """
    if settings is None:
        settings = OutputSettings(json_output=json_output)

    if settings.json_output:
        return result.model_dump_json(indent=settings.indent or None)
    if settings.quiet and not (result.ok and result.op == "check"):
        return render_quiet(result)
    return render_result(
        result,
        verbose=settings.verbose,
        indent=settings.indent,
        width=settings.width,
    )
