"""Domain model package.

Identifier kinds, update-value wrapper kinds and the UpdateMap payload.  No
ORM or infrastructure dependencies.
"""

from .datatypes import JSON, Date, JSONSlice, JSONType, Time
from .kinds import ID, IdKind, is_identifier
from .update_map import UPDATE_VALUE_KINDS, UpdateMap, is_update_value

__all__ = [
    "ID",
    "IdKind",
    "is_identifier",
    "JSON",
    "Date",
    "Time",
    "JSONSlice",
    "JSONType",
    "UPDATE_VALUE_KINDS",
    "UpdateMap",
    "is_update_value",
]
