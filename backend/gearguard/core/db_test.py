"""Test database configuration and utilities."""

from sqlmodel import Session, SQLModel

from gearguard.core.db import build_engine
from gearguard.infrastructure.database import models  # noqa: F401

# In-memory SQLite shared through a static pool
test_engine = build_engine("sqlite://")


def create_test_db() -> None:
    """Create all tables in test database."""
    SQLModel.metadata.create_all(test_engine)


def drop_test_db() -> None:
    """Drop all tables in test database."""
    SQLModel.metadata.drop_all(test_engine)


def get_test_session() -> Session:
    """Get a test database session."""
    return Session(test_engine)
