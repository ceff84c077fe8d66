"""Date, time and JSON wrapper value kinds.

These are pure value types with no ORM concerns; the matching SQLAlchemy
column types live in gord.infrastructure.persistence.types.  Each wrapper is
a distinct kind for update-map validation: a plain ``list`` or ``dict`` is not
accepted where a JSONSlice or JSONType is.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from datetime import date, datetime, time, timedelta
from typing import Any, Generic, TypeVar

E = TypeVar("E")
D = TypeVar("D")


class JSON(str):
    """A raw JSON document kept as its text encoding."""

    @classmethod
    def dumps(cls, obj: Any) -> JSON:
        return cls(json.dumps(obj))

    def data(self) -> Any:
        """Decode the document."""
        return json.loads(self)


class Date(date):
    """A calendar date without a time component."""

    @classmethod
    def of(cls, value: date) -> Date:
        """Build from a date or datetime, dropping any time of day."""
        return cls(value.year, value.month, value.day)


class Time(time):
    """A time of day."""

    @classmethod
    def of(cls, value: time | datetime) -> Time:
        if isinstance(value, datetime):
            value = value.time()
        return cls(value.hour, value.minute, value.second, value.microsecond)

    @classmethod
    def from_seconds(cls, seconds: float) -> Time:
        """Build from an offset since midnight; must be under 24 hours."""
        delta = timedelta(seconds=seconds)
        if delta < timedelta(0) or delta >= timedelta(days=1):
            raise ValueError(f"time offset out of range: {seconds}s")
        return cls.of(datetime.min + delta)

    def to_seconds(self) -> float:
        return self.hour * 3600 + self.minute * 60 + self.second + self.microsecond / 1e6


class JSONSlice(list, Generic[E]):
    """A list persisted as a JSON array."""


@dataclass(frozen=True)
class JSONType(Generic[D]):
    """An arbitrary value persisted as a JSON document."""

    data: D

    def dumps(self) -> str:
        return json.dumps(self.data)
