"""Identifier kinds accepted by repositories.

Python has a single arbitrary-precision ``int``, so the fixed-width integer
kinds a database column may hold are enumerated explicitly here together with
their value ranges.  ``str`` is the only non-integer identifier kind.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, TypeVar

ID = TypeVar("ID", int, str)


class IdKind(str, Enum):
    INT = "int"
    INT8 = "int8"
    INT16 = "int16"
    INT32 = "int32"
    INT64 = "int64"
    UINT = "uint"
    UINT8 = "uint8"
    UINT16 = "uint16"
    UINT32 = "uint32"
    UINT64 = "uint64"
    STRING = "string"

    @property
    def bounds(self) -> tuple[int, int] | None:
        """Inclusive (min, max) for integer kinds; None for STRING."""
        return {
            IdKind.INT: (-(2**63), 2**63 - 1),
            IdKind.INT8: (-(2**7), 2**7 - 1),
            IdKind.INT16: (-(2**15), 2**15 - 1),
            IdKind.INT32: (-(2**31), 2**31 - 1),
            IdKind.INT64: (-(2**63), 2**63 - 1),
            IdKind.UINT: (0, 2**64 - 1),
            IdKind.UINT8: (0, 2**8 - 1),
            IdKind.UINT16: (0, 2**16 - 1),
            IdKind.UINT32: (0, 2**32 - 1),
            IdKind.UINT64: (0, 2**64 - 1),
            IdKind.STRING: None,
        }[self]

    def contains(self, value: Any) -> bool:
        """True when value is an identifier of this kind."""
        if self is IdKind.STRING:
            return isinstance(value, str)
        if not is_identifier(value) or isinstance(value, str):
            return False
        low, high = self.bounds  # type: ignore[misc]
        return low <= value <= high


def is_identifier(value: Any) -> bool:
    """True for int (but not bool) and str values."""
    if isinstance(value, bool):
        return False
    return isinstance(value, (int, str))
