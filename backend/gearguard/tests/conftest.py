import os

# Settings are read at import time; point them at in-memory SQLite first
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["ENVIRONMENT"] = "local"
os.environ["SECRET_KEY"] = "gearguard-test-secret-key-0123456789abcdef"
os.environ["LOG_FORMAT"] = "console"

from collections.abc import Generator  # noqa: E402

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlmodel import Session, SQLModel  # noqa: E402

from gearguard.core.db_test import (  # noqa: E402
    create_test_db,
    drop_test_db,
    get_test_session,
)
from gearguard.infrastructure.database.dependencies import get_db  # noqa: E402
from gearguard.infrastructure.database.models import User  # noqa: E402
from gearguard.main import app  # noqa: E402
from gearguard.tests.utils.factories import create_user, token_headers  # noqa: E402


def get_test_db() -> Generator[Session, None, None]:
    with get_test_session() as session:
        yield session


@pytest.fixture(scope="session", autouse=True)
def test_database() -> Generator[None, None, None]:
    """Create test database tables and route the app at them."""
    create_test_db()
    app.dependency_overrides[get_db] = get_test_db
    yield
    app.dependency_overrides.clear()
    drop_test_db()


@pytest.fixture
def db() -> Generator[Session, None, None]:
    """Provide a session on an empty database."""
    with get_test_session() as session:
        for table in reversed(SQLModel.metadata.sorted_tables):
            session.execute(table.delete())
        session.commit()
        yield session


@pytest.fixture(scope="module")
def client() -> Generator[TestClient, None, None]:
    with TestClient(app) as c:
        yield c


@pytest.fixture
def current_user(db: Session) -> User:
    return create_user(db, full_name="Riley Operator")


@pytest.fixture
def user_token_headers(current_user: User) -> dict[str, str]:
    return token_headers(current_user)
