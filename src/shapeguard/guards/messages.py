"""Error-message templating.

Templates use ``{{value}}``, ``{{type}}``, ``{{name}}`` and ``{{key}}``
placeholders. Substitution happens in a single pass, so text produced by one
substitution is never rescanned for further placeholders.

Examples:
    >>> render_message("Number expected instead of {{type}} `{{value}}`", value="7")
    'Number expected instead of str `7`'
    >>> render_message("{{key}} must be set", value=ABSENT, name="title")
    'title must be set'
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from typing import Any

from shapeguard.guards.absent import ABSENT

PLACEHOLDER_RE = re.compile(r"\{\{(\w+)\}\}")

Name = str | int | None


def type_tag(value: Any) -> str:
    """Runtime type tag used for ``{{type}}``: the value's class name."""
    if value is ABSENT:
        return "absent"
    return type(value).__name__


def render_value(value: Any) -> str:
    """String rendering of a raw value used for ``{{value}}``."""
    return str(value)


def render_name(name: Name) -> str:
    return "" if name is None else str(name)


def substitute(template: str, replacements: Mapping[str, str]) -> str:
    """Replace every known ``{{placeholder}}`` in *template*.

    Unknown placeholders are left as written.
    """

    def _replace(match: re.Match[str]) -> str:
        return replacements.get(match.group(1), match.group(0))

    return PLACEHOLDER_RE.sub(_replace, template)


def placeholders(*, value: Any, name: Name = None) -> dict[str, str]:
    """Substitution table for a failing *value* under the *name* hint.

    Built as a dict: a placeholder listed twice keeps the last value.
    """
    rendered_name = render_name(name)
    return {
        "value": render_value(value),
        "type": type_tag(value),
        "name": rendered_name,
        "key": rendered_name,
    }


def render_message(template: str, *, value: Any, name: Name = None) -> str:
    return substitute(template, placeholders(value=value, name=name))
