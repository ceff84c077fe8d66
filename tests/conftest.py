"""Shared fixtures.

Repository behaviour is exercised against in-memory SQLite; each test module
declares its own mapped classes on its own DeclarativeBase.
"""

import pytest
from sqlalchemy import create_engine


@pytest.fixture
def sqlite_engine():
    engine = create_engine("sqlite://")
    yield engine
    engine.dispose()
