"""Guard layer: composable validators/normalizers for value shapes.

This layer depends only on the stdlib. It must never import from services,
commands, output, or config.
"""

from shapeguard.guards.absent import ABSENT
from shapeguard.guards.contract import Guard as GuardProtocol
from shapeguard.guards.contract import GuardBase
from shapeguard.guards.errors import ErrorKind, ValidationError
from shapeguard.guards.primitive import (
    Boolean,
    Function,
    Guard,
    Null,
    Number,
    PrimitiveGuard,
    String,
)
from shapeguard.guards.schema import Schema, SchemaGuard
from shapeguard.guards.sequences import Array, ArrayGuard, Tuple, TupleGuard
from shapeguard.guards.union import AnyOf, AnyOfGuard

__all__ = [
    "ABSENT",
    "AnyOf",
    "AnyOfGuard",
    "Array",
    "ArrayGuard",
    "Boolean",
    "ErrorKind",
    "Function",
    "Guard",
    "GuardBase",
    "GuardProtocol",
    "Null",
    "Number",
    "PrimitiveGuard",
    "Schema",
    "SchemaGuard",
    "String",
    "Tuple",
    "TupleGuard",
    "ValidationError",
]
