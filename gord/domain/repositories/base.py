"""Generic repository base interface.

CRUDRepository[T, ID] is the root abstraction for data access over any
mapped entity type.  The SQLAlchemy implementation lives in
gord/infrastructure/persistence/ and is bound to a caller-supplied session.

Design notes:
  - All methods are synchronous; each is a single delegation to the session.
  - T is the mapped entity type; ID is one of the identifier kinds (int, str).
  - Commit and rollback belong to the caller.  Errors raised by the session
    reach the caller unchanged.
  - find_by_id() returns a zero-valued entity (a freshly constructed, empty
    instance) when no row matches.  get_by_id() is the variant returning None.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable, Mapping
from typing import Any, Generic, TypeVar

from gord.domain.models.kinds import ID

T = TypeVar("T")


class CRUDRepository(ABC, Generic[T, ID]):
    """Abstract CRUD interface for a mapped entity type."""

    @abstractmethod
    def count(self) -> int:
        """Return the total number of rows of T."""

    @abstractmethod
    def delete(self, entity: T) -> int:
        """Delete the row matching the entity's identifier."""

    @abstractmethod
    def delete_all(self) -> int:
        """Delete every row of T."""

    @abstractmethod
    def delete_many(self, entities: Iterable[T]) -> int:
        """Delete the rows matching the given entities' identifiers."""

    @abstractmethod
    def delete_many_by_id(self, ids: Iterable[ID]) -> int:
        """Delete the rows whose identifier is in ids."""

    @abstractmethod
    def delete_by_id(self, id: ID) -> int:
        """Delete the row with the given identifier."""

    @abstractmethod
    def exists_by_id(self, id: ID) -> bool:
        """True when a row with the given identifier exists."""

    @abstractmethod
    def find_all(self) -> list[T]:
        """Return every row of T; an empty list when there are none."""

    @abstractmethod
    def find_all_by_id(self, ids: Iterable[ID]) -> list[T]:
        """Return the rows whose identifier is in ids."""

    @abstractmethod
    def find_by_id(self, id: ID) -> T:
        """Return the matching row, or a zero-valued T when absent."""

    @abstractmethod
    def get_by_id(self, id: ID) -> T | None:
        """Return the matching row, or None."""

    @abstractmethod
    def save(self, entity: T) -> T:
        """Insert or update the entity depending on its identifier."""

    @abstractmethod
    def save_all(self, entities: Iterable[T]) -> list[T]:
        """Insert or update every entity."""

    @abstractmethod
    def updates(self, entity: T, update_map: Mapping[str, Any]) -> int:
        """Validate update_map, then update those columns of the entity's row."""

    @abstractmethod
    def create(self, entity: T) -> T:
        """Insert the entity."""


class Repository(CRUDRepository[T, ID]):
    """Full repository interface.  Currently the CRUD surface only."""
