"""The guard contract shared by every guard kind.

A guard is any callable ``guard(value=ABSENT, name=None) -> normalized``
that raises on mismatch. Built-in guards derive from :class:`GuardBase`;
plain functions with the same signature are accepted wherever a guard is.

INVARIANT: Guards are immutable after construction. Construction never
raises; a malformed descriptor surfaces as ``INVALID_GUARD`` on invocation.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, NoReturn, Protocol

from shapeguard.guards.absent import ABSENT
from shapeguard.guards.errors import ErrorKind, ValidationError
from shapeguard.guards.messages import Name, render_message

INVALID_GUARD_MESSAGE = "Guard expected for `{{name}}` instead of {{type}} `{{value}}`"

# Exception types that count as "this guard rejected the value".
# ValidationError is a TypeError; custom validators commonly raise ValueError.
GUARD_FAILURES: tuple[type[Exception], ...] = (TypeError, ValueError)


class Guard(Protocol):
    """Structural type of anything usable as a guard."""

    def __call__(self, value: Any = ABSENT, name: Name = None, /) -> Any: ...


def fail(template: str, *, kind: ErrorKind, value: Any, name: Name = None) -> NoReturn:
    """Raise a :class:`ValidationError` rendered from *template*."""
    raise ValidationError(
        render_message(template, value=value, name=name),
        kind=kind,
        value=value,
        name=name,
    )


def invoke(child: Any, value: Any, name: Name) -> Any:
    """Invoke a child guard, rejecting children that are not callable."""
    if not callable(child):
        fail(INVALID_GUARD_MESSAGE, kind=ErrorKind.INVALID_GUARD, value=child, name=name)
    return child(value, name)


class GuardBase(ABC):
    """Base for the built-in guard kinds.

    Subclasses hold their descriptor as frozen dataclass fields and implement
    :meth:`apply`.
    """

    def __call__(self, value: Any = ABSENT, name: Name = None) -> Any:
        return self.apply(value, name)

    @abstractmethod
    def apply(self, value: Any, name: Name) -> Any:
        """Validate and normalize *value*; raise on mismatch."""
        ...
