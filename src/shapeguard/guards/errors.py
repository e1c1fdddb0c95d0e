"""ValidationError: the single error type raised by guards.

INVARIANT: Guards fail fast. The layer that detects a mismatch raises, and
every enclosing layer other than AnyOf re-raises the same error unchanged.
"""

from __future__ import annotations

from enum import StrEnum
from functools import partial
from typing import Any

from shapeguard.guards.messages import Name, type_tag


class ErrorKind(StrEnum):
    """Which layer detected the failure."""

    TYPE_MISMATCH = "type_mismatch"
    STRUCTURE_MISMATCH = "structure_mismatch"
    UNION_EXHAUSTED = "union_exhausted"
    INVALID_GUARD = "invalid_guard"


class ValidationError(TypeError):
    """A value does not have the shape a guard expects.

    Attributes:
        message: The rendered message template.
        kind: Discriminant for the failing layer.
        value: The raw value that was rejected.
        name: Field name or index hint the guard was invoked with.
        causes: Per-alternative errors kept by ``AnyOf(collect_errors=True)``.
            Empty otherwise.
    """

    def __init__(
        self,
        message: str,
        *,
        kind: ErrorKind,
        value: Any,
        name: Name = None,
        causes: tuple[Exception, ...] = (),
    ) -> None:
        super().__init__(message)
        self.message = message
        self.kind = kind
        self.value = value
        self.name = name
        self.causes = causes

    def __reduce__(self) -> tuple[Any, tuple[()]]:
        # Keyword-only state is not in self.args; rebuild through the constructor.
        rebuild = partial(
            ValidationError,
            self.message,
            kind=self.kind,
            value=self.value,
            name=self.name,
            causes=self.causes,
        )
        return rebuild, ()

    @property
    def type_tag(self) -> str:
        return type_tag(self.value)

    def __str__(self) -> str:
        return self.message

    def __repr__(self) -> str:
        return f"ValidationError({self.message!r}, kind={self.kind.value!r})"
