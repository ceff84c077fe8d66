"""SQLAlchemy implementation of the generic CRUD repository."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from typing import Any

from sqlalchemy import ColumnElement, delete, func, inspect, select, text, update
from sqlalchemy.exc import InvalidRequestError
from sqlalchemy.orm import Session

from gord.domain.exceptions import InvalidUpdateValueError
from gord.domain.models.kinds import ID, IdKind, is_identifier
from gord.domain.models.update_map import UpdateMap
from gord.domain.repositories.base import Repository, T

logger = logging.getLogger(__name__)


class SqlRepository(Repository[T, ID]):
    """Repository over one mapped class, bound to a caller-owned Session.

    The model is passed to the constructor or declared on a subclass:

        class WidgetRepository(SqlRepository[Widget, int]):
            model = Widget

    The mapped class must have a single-column primary key; it is the
    identifier column for every *_by_id operation.  Set id_kind to narrow the
    accepted identifiers further (e.g. IdKind.UINT32).

    Write operations flush so that database errors surface from the call that
    caused them.  Nothing here commits.
    """

    model: type[T] | None = None
    id_kind: IdKind | None = None

    def __init__(self, session: Session, model: type[T] | None = None) -> None:
        model = model if model is not None else type(self).model
        if model is None:
            raise TypeError(f"{type(self).__name__} has no mapped model class")
        mapper = inspect(model)
        if len(mapper.primary_key) != 1:
            raise TypeError(f"{model.__name__} must have a single-column primary key")

        self._session = session
        self.model = model
        self._id_key = mapper.get_property_by_column(mapper.primary_key[0]).key
        self._id = getattr(model, self._id_key)

    # --- helpers ---

    def _check_id(self, id: Any) -> None:
        if self.id_kind is not None:
            if not self.id_kind.contains(id):
                raise TypeError(f"{id!r} is not a valid {self.id_kind.value} identifier")
        elif not is_identifier(id):
            raise TypeError(f"{id!r} is not a valid identifier (int or str)")

    def _identity(self, entity: T) -> Any:
        id = getattr(entity, self._id_key)
        if id is None:
            raise InvalidRequestError(
                f"{self.model.__name__} instance has no {self._id_key}; "
                "refusing to issue an unscoped statement"
            )
        return id

    def _delete_where(self, clause: ColumnElement[bool]) -> int:
        result = self._session.execute(delete(self.model).where(clause))
        return result.rowcount

    # --- reads ---

    def count(self) -> int:
        return self._session.scalar(select(func.count()).select_from(self.model))

    def exists_by_id(self, id: ID) -> bool:
        self._check_id(id)
        stmt = select(func.count()).select_from(self.model).where(self._id == id)
        return self._session.scalar(stmt) > 0

    def find_all(self) -> list[T]:
        return list(self._session.scalars(select(self.model)))

    def find_all_by_id(self, ids: Iterable[ID]) -> list[T]:
        ids = list(ids)
        for id in ids:
            self._check_id(id)
        stmt = select(self.model).where(self._id.in_(ids))
        return list(self._session.scalars(stmt))

    def get_by_id(self, id: ID) -> T | None:
        self._check_id(id)
        stmt = select(self.model).where(self._id == id)
        return self._session.scalars(stmt).first()

    def find_by_id(self, id: ID) -> T:
        """Return the matching row, or an empty, unsaved instance of the model.

        An absent row is not an error here; use get_by_id() to tell the two
        cases apart.
        """
        row = self.get_by_id(id)
        return row if row is not None else self.model()

    # --- writes ---

    def create(self, entity: T) -> T:
        self._session.add(entity)
        self._session.flush()
        return entity

    def save(self, entity: T) -> T:
        """Insert or update; returns the session-bound instance."""
        merged = self._session.merge(entity)
        self._session.flush()
        return merged

    def save_all(self, entities: Iterable[T]) -> list[T]:
        merged = [self._session.merge(entity) for entity in entities]
        self._session.flush()
        return merged

    def updates(self, entity: T, update_map: Mapping[str, Any]) -> int:
        """Update only the columns named in update_map for the entity's row.

        Every value is checked before any SQL is issued; one disallowed value
        rejects the whole map with InvalidUpdateValueError.  Returns the number
        of rows updated.
        """
        update_map = UpdateMap.of(update_map)
        try:
            update_map.validate()
        except InvalidUpdateValueError as exc:
            logger.warning("Rejected update of %s: %s", self.model.__name__, exc)
            raise

        id = self._identity(entity)
        if not update_map:
            return 0
        logger.debug(
            "Updating %s %s=%r columns %s",
            self.model.__name__,
            self._id_key,
            id,
            sorted(update_map),
        )
        stmt = update(self.model).where(self._id == id).values(update_map)
        return self._session.execute(stmt).rowcount

    # --- deletes ---

    def delete(self, entity: T) -> int:
        return self._delete_where(self._id == self._identity(entity))

    def delete_all(self) -> int:
        logger.debug("Deleting all %s rows", self.model.__name__)
        return self._delete_where(text("1 = 1"))

    def delete_many(self, entities: Iterable[T]) -> int:
        ids = [self._identity(entity) for entity in entities]
        if not ids:
            return 0
        return self._delete_where(self._id.in_(ids))

    def delete_many_by_id(self, ids: Iterable[ID]) -> int:
        ids = list(ids)
        if not ids:
            return 0
        for id in ids:
            self._check_id(id)
        return self._delete_where(self._id.in_(ids))

    def delete_by_id(self, id: ID) -> int:
        self._check_id(id)
        return self._delete_where(self._id == id)
