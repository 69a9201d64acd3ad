from typing import Any

from sqlalchemy import event
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, SQLModel, create_engine, select

from gearguard.core.config import settings
from gearguard.core.observability import get_logger
from gearguard.core.security import get_password_hash
from gearguard.domain.maintenance.enums import UserRole
# importing the models module registers every table on SQLModel.metadata
from gearguard.infrastructure.database.models import User

logger = get_logger(__name__)


def build_engine(url: str):
    """Create an engine with pool settings suited to the backend in use."""
    engine_kwargs: dict[str, Any] = {}

    if url.startswith("sqlite"):
        # Single shared connection so in-memory databases survive across sessions
        engine_kwargs["connect_args"] = {"check_same_thread": False}
        engine_kwargs["poolclass"] = StaticPool
    else:
        engine_kwargs.update(
            {
                "pool_pre_ping": True,  # Verify connections before use
                "pool_recycle": 3600,  # Recycle connections every hour
                "pool_size": 10,
                "max_overflow": 20,
            }
        )
        if settings.ENVIRONMENT != "local":
            engine_kwargs["connect_args"] = {
                "connect_timeout": 10,
                "application_name": settings.PROJECT_NAME,
            }

    engine = create_engine(url, **engine_kwargs)
    if url.startswith("sqlite"):
        event.listen(engine, "connect", _enable_sqlite_foreign_keys)
    return engine


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record) -> None:
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


engine = build_engine(settings.SQLALCHEMY_DATABASE_URI)


def create_tables(bind=None) -> None:
    SQLModel.metadata.create_all(bind or engine)


def init_db(session: Session) -> None:
    """Create the bootstrap admin account if one is configured."""
    if not settings.FIRST_SUPERUSER or not settings.FIRST_SUPERUSER_PASSWORD:
        return

    user = session.exec(
        select(User).where(User.email == settings.FIRST_SUPERUSER)
    ).first()
    if not user:
        user = User(
            full_name="Administrator",
            email=settings.FIRST_SUPERUSER,
            hashed_password=get_password_hash(settings.FIRST_SUPERUSER_PASSWORD),
            role=UserRole.ADMIN,
        )
        session.add(user)
        session.commit()
        logger.info("Bootstrap admin created", email=settings.FIRST_SUPERUSER)
