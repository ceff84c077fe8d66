"""Persistence package.

Exports the repository implementation, its factory, and the column types for
the wrapper value kinds.
"""

from gord.infrastructure.persistence.repositories import SqlRepository, get_repository
from gord.infrastructure.persistence.types import (
    DateColumn,
    JSONColumn,
    JSONSliceColumn,
    JSONTypeColumn,
    TimeColumn,
)

__all__ = [
    "SqlRepository",
    "get_repository",
    "JSONColumn",
    "DateColumn",
    "TimeColumn",
    "JSONSliceColumn",
    "JSONTypeColumn",
]
