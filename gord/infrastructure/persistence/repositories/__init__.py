"""Concrete SQLAlchemy repository implementation.

Exports SqlRepository and the get_repository() factory for wiring at the
application boundary.
"""

from __future__ import annotations

from sqlalchemy.orm import Session

from gord.domain.models.kinds import ID
from gord.domain.repositories.base import T

from .base import SqlRepository


def get_repository(session: Session, model: type[T]) -> SqlRepository[T, ID]:
    """Construct a repository for model bound to the given session.

    Intended for use alongside gord.infrastructure.database.get_session():

        for session in get_session():
            widgets = get_repository(session, Widget)
            widget = widgets.find_by_id(widget_id)
    """
    return SqlRepository(session, model)


__all__ = [
    "SqlRepository",
    "get_repository",
]
