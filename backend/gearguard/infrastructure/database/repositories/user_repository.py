from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import select

from gearguard.domain.shared.exceptions import DatabaseError
from gearguard.infrastructure.database.models import User

from .base import BaseRepository


class UserRepository(BaseRepository[User]):
    """Repository implementation for login accounts."""

    @property
    def entity_class(self):
        return User

    def find_by_email(self, email: str) -> User | None:
        try:
            statement = select(User).where(User.email == email.strip().lower())
            return self.session.exec(statement).first()
        except SQLAlchemyError as e:
            raise DatabaseError(f"Error finding user by email: {str(e)}") from e
