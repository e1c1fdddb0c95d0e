"""shapeguard: composable runtime shape guards for plain Python data."""

from shapeguard.guards import (
    ABSENT,
    AnyOf,
    Array,
    Boolean,
    ErrorKind,
    Function,
    Guard,
    Null,
    Number,
    Schema,
    String,
    Tuple,
    ValidationError,
)

__version__ = "0.3.0"

__all__ = [
    "ABSENT",
    "AnyOf",
    "Array",
    "Boolean",
    "ErrorKind",
    "Function",
    "Guard",
    "Null",
    "Number",
    "Schema",
    "String",
    "Tuple",
    "ValidationError",
    "__version__",
]
