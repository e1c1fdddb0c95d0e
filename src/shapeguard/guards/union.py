"""AnyOf: union guards that try alternatives in order.

The first alternative that accepts the value decides the result; there is no
search for a "best" match, so alternative order is part of the guard's
meaning. When no alternative accepts, a generic error reporting only the raw
value is raised and the per-alternative reasons are dropped (they are logged
at DEBUG, and kept on ``ValidationError.causes`` with ``collect_errors=True``).

Usage::

    Point = AnyOf(
        Schema({"x": Number(0), "y": Number(0)}),
        Tuple([Number(0), Number(0)]),
    )
    Point([1])          # [1, 0]
    Point({"y": 15})    # {"x": 0, "y": 15}
    Point(1)            # ValidationError: Value `1` is invalid for all alternatives
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any

from shapeguard.guards.contract import (
    GUARD_FAILURES,
    INVALID_GUARD_MESSAGE,
    GuardBase,
    fail,
)
from shapeguard.guards.errors import ErrorKind, ValidationError
from shapeguard.guards.messages import Name, render_message

logger = logging.getLogger(__name__)

ANY_OF_MESSAGE = "Value `{{value}}` is invalid for all alternatives"


@dataclass(frozen=True, eq=False)
class AnyOfGuard(GuardBase):
    """Guard accepting whatever the first matching alternative accepts."""

    alternatives: Sequence[Any]
    message: str = ANY_OF_MESSAGE
    collect_errors: bool = False

    def apply(self, value: Any, name: Name) -> Any:
        if not isinstance(self.alternatives, Sequence):
            fail(
                INVALID_GUARD_MESSAGE,
                kind=ErrorKind.INVALID_GUARD,
                value=self.alternatives,
                name=name,
            )

        causes: list[Exception] = []
        for index, alternative in enumerate(self.alternatives):
            if not callable(alternative):
                fail(
                    INVALID_GUARD_MESSAGE,
                    kind=ErrorKind.INVALID_GUARD,
                    value=alternative,
                    name=index,
                )
            try:
                return alternative(value, name)
            except GUARD_FAILURES as exc:
                if isinstance(exc, ValidationError) and exc.kind is ErrorKind.INVALID_GUARD:
                    raise
                logger.debug("AnyOf alternative %d rejected %r: %s", index, value, exc)
                if self.collect_errors:
                    causes.append(exc)

        raise ValidationError(
            render_message(self.message or ANY_OF_MESSAGE, value=value, name=name),
            kind=ErrorKind.UNION_EXHAUSTED,
            value=value,
            name=name,
            causes=tuple(causes),
        )


def AnyOf(  # noqa: N802
    *alternatives: Any,
    message: str | None = None,
    collect_errors: bool = False,
) -> AnyOfGuard:
    """Build a union guard over *alternatives*, tried in the given order.

    A single list or tuple argument is taken as the alternatives sequence.
    """
    options = alternatives
    if len(alternatives) == 1 and isinstance(alternatives[0], (list, tuple)):
        options = tuple(alternatives[0])
    return AnyOfGuard(options, message or ANY_OF_MESSAGE, collect_errors)
