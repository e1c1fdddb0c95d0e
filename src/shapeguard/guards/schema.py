"""Schema guards for keyed-field objects.

A Schema maps field names to child guards. The normalized result holds
exactly the declared fields: undeclared input keys are dropped and missing
ones fall through to the child guard's default (or failure).

Usage::

    Point = Schema({"x": Number(0), "y": Number(0)})
    Point()                      # {"x": 0, "y": 0}
    Point({"x": 17, "z": 50})    # {"x": 17, "y": 0}
    Point("{ y: 6 }")            # ValidationError: Object expected instead of str `{ y: 6 }`

    Segment = Schema({"start": Point, "end": Point, "opacity": Number(1)})
    Segment({"end": {"x": 17}, "opacity": 0.5})
    # {"start": {"x": 0, "y": 0}, "end": {"x": 17, "y": 0}, "opacity": 0.5}
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, replace
from typing import Any

from shapeguard.guards.absent import ABSENT
from shapeguard.guards.contract import INVALID_GUARD_MESSAGE, GuardBase, fail, invoke
from shapeguard.guards.errors import ErrorKind
from shapeguard.guards.messages import Name
from shapeguard.guards.predicates import is_array, is_object

OBJECT_MESSAGE = "Object expected instead of {{type}} `{{value}}`"


@dataclass(frozen=True, eq=False)
class SchemaGuard(GuardBase):
    """Guard for objects whose fields are each guarded by a child guard."""

    fields: Mapping[str, Any]
    message: str = OBJECT_MESSAGE

    def apply(self, value: Any, name: Name) -> dict[str, Any]:
        if value is ABSENT:
            value = {}
        # Array-likes are rejected explicitly, whatever else they implement.
        if not is_object(value) or is_array(value):
            fail(
                self.message or OBJECT_MESSAGE,
                kind=ErrorKind.STRUCTURE_MISMATCH,
                value=value,
                name=name,
            )
        if not isinstance(self.fields, Mapping):
            fail(
                INVALID_GUARD_MESSAGE,
                kind=ErrorKind.INVALID_GUARD,
                value=self.fields,
                name=name,
            )

        data: dict[str, Any] = {}
        for key, guard in self.fields.items():
            data[key] = invoke(guard, value.get(key, ABSENT), key)
        return data

    def derive(self, **changes: Any) -> SchemaGuard:
        return replace(self, **changes)


def Schema(fields: Mapping[str, Any], message: str | None = None) -> SchemaGuard:  # noqa: N802
    """Build a guard for objects shaped by *fields* (name -> guard).

    Fields are validated in declaration order, so when several are invalid
    the first declared one decides the error.
    """
    if isinstance(fields, Mapping):
        fields = dict(fields)
    return SchemaGuard(fields, message or OBJECT_MESSAGE)
