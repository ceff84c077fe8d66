"""Partial-update payloads.

An UpdateMap maps attribute names to new column values.  Only the closed set
of kinds in UPDATE_VALUE_KINDS may appear as values, and a map is applied
either whole or not at all: validation runs over every entry before any
statement is built.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from gord.domain.exceptions import InvalidUpdateValueError

from .datatypes import JSON, Date, JSONSlice, JSONType, Time

UPDATE_VALUE_KINDS: tuple[type, ...] = (int, str, JSON, Date, Time, JSONSlice, JSONType)


def is_update_value(value: Any) -> bool:
    """True when value belongs to one of UPDATE_VALUE_KINDS.

    bool is a subclass of int but is not an allowed kind.
    """
    if isinstance(value, bool):
        return False
    return isinstance(value, UPDATE_VALUE_KINDS)


class UpdateMap(dict[str, Any]):
    @classmethod
    def of(cls, values: Mapping[str, Any]) -> UpdateMap:
        return values if isinstance(values, cls) else cls(values)

    def validate(self) -> None:
        """Raise InvalidUpdateValueError for the first disallowed value."""
        for key, value in self.items():
            if not is_update_value(value):
                raise InvalidUpdateValueError(key, value)

    valid = validate

    def is_valid(self) -> bool:
        try:
            self.validate()
        except InvalidUpdateValueError:
            return False
        return True
