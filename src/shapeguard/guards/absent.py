"""The absent marker: "no value was supplied".

``ABSENT`` is distinct from every real value, ``None`` included. Guards
receive it when called without a value, for Schema keys missing from the
input, and for Tuple positions past the end of the input.
"""

from __future__ import annotations

from enum import Enum
from typing import Final, Literal


class _Absent(Enum):
    # Single-member enum: a picklable singleton that type checkers can narrow.
    ABSENT = "absent"

    def __repr__(self) -> str:
        return "ABSENT"

    def __str__(self) -> str:
        return "absent"

    def __bool__(self) -> Literal[False]:
        return False


ABSENT: Final = _Absent.ABSENT

Absent = Literal[_Absent.ABSENT]
