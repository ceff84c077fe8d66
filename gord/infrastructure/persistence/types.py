"""SQLAlchemy column types for the wrapper value kinds.

Each type stores its kind in a portable column (TEXT for the JSON kinds) and
hands the wrapper kind back on load, so a row read through a repository can be
fed straight into an UpdateMap.
"""

from __future__ import annotations

import json
from typing import Any

from sqlalchemy import Date as SaDate
from sqlalchemy import Text
from sqlalchemy import Time as SaTime
from sqlalchemy.types import TypeDecorator

from gord.domain.models.datatypes import JSON, Date, JSONSlice, JSONType, Time


class JSONColumn(TypeDecorator):
    """Raw JSON document; loads as JSON."""

    impl = Text
    cache_ok = True

    def process_bind_param(self, value: Any, dialect: Any) -> str | None:
        if value is None:
            return None
        if isinstance(value, str):
            return str(value)
        return json.dumps(value)

    def process_result_value(self, value: Any, dialect: Any) -> JSON | None:
        return None if value is None else JSON(value)


class DateColumn(TypeDecorator):
    """Calendar date; loads as Date."""

    impl = SaDate
    cache_ok = True

    def process_bind_param(self, value: Any, dialect: Any) -> Date | None:
        return None if value is None else Date.of(value)

    def process_result_value(self, value: Any, dialect: Any) -> Date | None:
        return None if value is None else Date.of(value)


class TimeColumn(TypeDecorator):
    """Time of day; loads as Time."""

    impl = SaTime
    cache_ok = True

    def process_bind_param(self, value: Any, dialect: Any) -> Time | None:
        return None if value is None else Time.of(value)

    def process_result_value(self, value: Any, dialect: Any) -> Time | None:
        return None if value is None else Time.of(value)


class JSONSliceColumn(TypeDecorator):
    """List stored as a JSON array; loads as JSONSlice."""

    impl = Text
    cache_ok = True

    def process_bind_param(self, value: Any, dialect: Any) -> str | None:
        return None if value is None else json.dumps(list(value))

    def process_result_value(self, value: Any, dialect: Any) -> JSONSlice | None:
        return None if value is None else JSONSlice(json.loads(value))


class JSONTypeColumn(TypeDecorator):
    """Arbitrary value stored as a JSON document; loads as JSONType."""

    impl = Text
    cache_ok = True

    def process_bind_param(self, value: Any, dialect: Any) -> str | None:
        if value is None:
            return None
        if isinstance(value, JSONType):
            return value.dumps()
        return json.dumps(value)

    def process_result_value(self, value: Any, dialect: Any) -> JSONType | None:
        return None if value is None else JSONType(json.loads(value))
