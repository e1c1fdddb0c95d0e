"""Tuple and Array guards for array-like values.

``Tuple`` guards a fixed number of positions, each with its own guard; the
result always has exactly as many elements as there are guards. ``Array``
applies one guard to every element and keeps the input's length.

Usage::

    Words = Array(String(""))
    Words(["foo", "bar"])        # ["foo", "bar"]
    Words(["foo", 9])            # ValidationError: String expected instead of int `9`

    Graph = Array(Array(Point))
    Graph([[{"x": 17}], []])     # [[{"x": 17, "y": 0}], []]

    Pointer = Tuple([Point, Segment])
    Pointer([{"foo": "bar"}, {"baz": "bla"}, "foo"])
    # [{"x": 0, "y": 0}, {"start": ..., "end": ..., "opacity": 1}]
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass, replace
from typing import Any

from shapeguard.guards.absent import ABSENT
from shapeguard.guards.contract import INVALID_GUARD_MESSAGE, GuardBase, fail, invoke
from shapeguard.guards.errors import ErrorKind
from shapeguard.guards.messages import Name
from shapeguard.guards.predicates import is_array

ARRAY_MESSAGE = "Array expected instead of {{type}} `{{value}}`"


def _require_array(value: Any, template: str, name: Name) -> Sequence[Any]:
    if value is ABSENT:
        return []
    if not is_array(value):
        fail(
            template or ARRAY_MESSAGE,
            kind=ErrorKind.STRUCTURE_MISMATCH,
            value=value,
            name=name,
        )
    return value


@dataclass(frozen=True, eq=False)
class TupleGuard(GuardBase):
    """Guard for fixed-length, positionally typed sequences."""

    guards: Sequence[Any]
    message: str = ARRAY_MESSAGE

    def apply(self, value: Any, name: Name) -> list[Any]:
        items = _require_array(value, self.message, name)
        if not isinstance(self.guards, Sequence):
            fail(
                INVALID_GUARD_MESSAGE,
                kind=ErrorKind.INVALID_GUARD,
                value=self.guards,
                name=name,
            )
        size = len(items)
        return [
            invoke(guard, items[index] if index < size else ABSENT, index)
            for index, guard in enumerate(self.guards)
        ]

    def derive(self, **changes: Any) -> TupleGuard:
        return replace(self, **changes)


@dataclass(frozen=True, eq=False)
class ArrayGuard(GuardBase):
    """Guard for variable-length sequences of one element shape."""

    element: Any
    message: str = ARRAY_MESSAGE

    def apply(self, value: Any, name: Name) -> list[Any]:
        items = _require_array(value, self.message, name)
        return [invoke(self.element, item, index) for index, item in enumerate(items)]

    def derive(self, **changes: Any) -> ArrayGuard:
        return replace(self, **changes)


def Tuple(guards: Iterable[Any], message: str | None = None) -> TupleGuard:  # noqa: N802
    """Build a guard for sequences with one guard per position."""
    if isinstance(guards, Iterable) and not isinstance(guards, (str, bytes)):
        guards = tuple(guards)
    return TupleGuard(guards, message or ARRAY_MESSAGE)


def Array(element: Any, message: str | None = None) -> ArrayGuard:  # noqa: N802
    """Build a guard applying *element* to every item of a sequence."""
    return ArrayGuard(element, message or ARRAY_MESSAGE)
