"""Generic CRUD repositories over SQLAlchemy sessions.

Import from this package rather than individual modules to avoid coupling
callers to module paths.  gord.infrastructure.database is not imported here:
it builds an engine from the environment on import.
"""

from gord.domain.exceptions import InvalidUpdateValueError
from gord.domain.models import (
    ID,
    JSON,
    UPDATE_VALUE_KINDS,
    Date,
    IdKind,
    JSONSlice,
    JSONType,
    Time,
    UpdateMap,
)
from gord.domain.repositories import CRUDRepository, Repository
from gord.infrastructure.persistence import (
    DateColumn,
    JSONColumn,
    JSONSliceColumn,
    JSONTypeColumn,
    SqlRepository,
    TimeColumn,
    get_repository,
)

__all__ = [
    "ID",
    "IdKind",
    "JSON",
    "Date",
    "Time",
    "JSONSlice",
    "JSONType",
    "UPDATE_VALUE_KINDS",
    "UpdateMap",
    "InvalidUpdateValueError",
    "CRUDRepository",
    "Repository",
    "SqlRepository",
    "get_repository",
    "JSONColumn",
    "DateColumn",
    "TimeColumn",
    "JSONSliceColumn",
    "JSONTypeColumn",
]
