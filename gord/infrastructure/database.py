"""SQLAlchemy engine, session factory, and session dependency.

Optional host-side wiring: nothing else in gord imports this module.  An
application may pair get_session() with get_repository(), or hand repositories
a Session of its own.
"""

from collections.abc import Generator

from pydantic_settings import BaseSettings, SettingsConfigDict
from sqlalchemy import create_engine
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    database_url: str = "sqlite:///./gord.db"
    database_echo: bool = False


settings = Settings()

engine = create_engine(
    settings.database_url,
    echo=settings.database_echo,
    pool_pre_ping=True,
)

SessionLocal = sessionmaker(
    bind=engine,
    class_=Session,
    expire_on_commit=False,
)


class Base(DeclarativeBase):
    """Shared declarative base for mapped entities."""


def get_session() -> Generator[Session, None, None]:
    """Dependency that yields a transactional session.

    The transaction commits when the consumer finishes without error and
    rolls back otherwise; repositories never commit on their own.
    """
    with SessionLocal() as session:
        with session.begin():
            yield session
