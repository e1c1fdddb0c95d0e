"""Primitive guards built from a predicate, a default and a message template.

Usage::

    user = String("Anonymous")
    user("Jack")    # "Jack"
    user()          # "Anonymous"
    user(7)         # ValidationError: String expected instead of int `7`

    hi = String("Hi", "string expected not a {{type}}")
    hi(len)         # ValidationError: string expected not a builtin_function_or_method
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, replace
from typing import Any

from shapeguard.guards.absent import ABSENT
from shapeguard.guards.contract import INVALID_GUARD_MESSAGE, GuardBase, fail
from shapeguard.guards.errors import ErrorKind
from shapeguard.guards.messages import Name
from shapeguard.guards.predicates import (
    is_boolean,
    is_function,
    is_null,
    is_number,
    is_string,
)

GENERIC_MESSAGE = "Unexpected {{type}} `{{value}}`"
STRING_MESSAGE = "String expected instead of {{type}} `{{value}}`"
NUMBER_MESSAGE = "Number expected instead of {{type}} `{{value}}`"
BOOLEAN_MESSAGE = "Boolean expected instead of {{type}} `{{value}}`"
NULL_MESSAGE = "Null expected instead of {{type}} `{{value}}`"
FUNCTION_MESSAGE = "Function expected instead of {{type}} `{{value}}`"


@dataclass(frozen=True, eq=False)
class PrimitiveGuard(GuardBase):
    """Guard that accepts values satisfying *predicate*, returned unchanged.

    Attributes:
        predicate: ``(value) -> bool`` type test.
        default: Returned as-is, without validation, when the value is
            absent. ``ABSENT`` means the guard declares no default.
        message: Error template; see :mod:`shapeguard.guards.messages`.
    """

    predicate: Callable[[Any], bool]
    default: Any = ABSENT
    message: str = GENERIC_MESSAGE

    def apply(self, value: Any, name: Name) -> Any:
        if value is ABSENT and self.default is not ABSENT:
            return self.default
        if not callable(self.predicate):
            fail(
                INVALID_GUARD_MESSAGE,
                kind=ErrorKind.INVALID_GUARD,
                value=self.predicate,
                name=name,
            )
        if not self.predicate(value):
            fail(
                self.message or GENERIC_MESSAGE,
                kind=ErrorKind.TYPE_MISMATCH,
                value=value,
                name=name,
            )
        return value

    def derive(self, **changes: Any) -> PrimitiveGuard:
        """Return a copy with *changes* (``default``, ``message``) applied.

        >>> Number(0).derive(default=1)()
        1
        """
        return replace(self, **changes)


def Guard(  # noqa: N802
    predicate: Callable[[Any], bool],
    default: Any = ABSENT,
    message: str | None = None,
) -> PrimitiveGuard:
    """Build a primitive guard from any ``(value) -> bool`` predicate."""
    return PrimitiveGuard(predicate, default, message or GENERIC_MESSAGE)


def String(default: Any = ABSENT, message: str | None = None) -> PrimitiveGuard:  # noqa: N802
    return PrimitiveGuard(is_string, default, message or STRING_MESSAGE)


def Number(default: Any = ABSENT, message: str | None = None) -> PrimitiveGuard:  # noqa: N802
    return PrimitiveGuard(is_number, default, message or NUMBER_MESSAGE)


def Boolean(default: Any = ABSENT, message: str | None = None) -> PrimitiveGuard:  # noqa: N802
    return PrimitiveGuard(is_boolean, default, message or BOOLEAN_MESSAGE)


def Null(default: Any = ABSENT, message: str | None = None) -> PrimitiveGuard:  # noqa: N802
    return PrimitiveGuard(is_null, default, message or NULL_MESSAGE)


def Function(default: Any = ABSENT, message: str | None = None) -> PrimitiveGuard:  # noqa: N802
    return PrimitiveGuard(is_function, default, message or FUNCTION_MESSAGE)
