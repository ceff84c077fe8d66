"""Errors raised by gord itself.

Database errors are not listed here: they come from SQLAlchemy and reach the
caller unchanged.
"""

from __future__ import annotations

from typing import Any


class InvalidUpdateValueError(ValueError):
    """An update map holds a value whose kind is not allowed."""

    def __init__(self, key: str, value: Any) -> None:
        self.key = key
        self.value = value
        self.type_name = type(value).__name__
        super().__init__(
            f"invalid type for key '{key}': {value} (type: {self.type_name})"
        )
