"""Type-test predicates used by primitive and structural guards.

All predicates are pure ``(value) -> bool`` functions. They classify the
already-deserialized value as-is and never coerce.
"""

from __future__ import annotations

import numbers
from collections.abc import Mapping, Sequence
from typing import Any

from shapeguard.guards.absent import ABSENT

# Sequences that are text, not array-likes.
_TEXT_TYPES: tuple[type, ...] = (str, bytes, bytearray)


def is_string(value: Any) -> bool:
    """Accept ``str`` values only.

    Wrapper objects such as :class:`collections.UserString` are rejected.
    """
    return isinstance(value, str)


def is_number(value: Any) -> bool:
    """Accept real numbers. ``bool`` is excluded even though it subclasses int."""
    return isinstance(value, numbers.Real) and not isinstance(value, bool)


def is_boolean(value: Any) -> bool:
    return isinstance(value, bool)


def is_null(value: Any) -> bool:
    return value is None


def is_function(value: Any) -> bool:
    return callable(value)


def is_object(value: Any) -> bool:
    """Accept keyed-field objects (any :class:`~collections.abc.Mapping`)."""
    return isinstance(value, Mapping)


def is_array(value: Any) -> bool:
    """Accept array-likes: sequences that are not text."""
    return isinstance(value, Sequence) and not isinstance(value, _TEXT_TYPES)


def is_absent(value: Any) -> bool:
    return value is ABSENT
