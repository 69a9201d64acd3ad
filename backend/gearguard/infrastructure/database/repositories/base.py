"""
Generic repository over one SQLModel table.

Concrete repositories name their ``entity_class`` and add their own queries.
Each write commits on its own; a failed write is rolled back and surfaces as
a domain error (``EntityAlreadyExistsError`` for constraint violations,
``DatabaseError`` for anything else the driver reports).
"""

from abc import ABC, abstractmethod
from collections.abc import Iterator, Mapping
from contextlib import contextmanager
from typing import Any, Generic, TypeVar

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlmodel import Session, SQLModel, select

from gearguard.domain.shared.exceptions import (
    DatabaseError,
    EntityAlreadyExistsError,
    EntityNotFoundError,
)

EntityType = TypeVar("EntityType", bound=SQLModel)


class BaseRepository(Generic[EntityType], ABC):
    def __init__(self, session: Session):
        self.session = session

    @property
    @abstractmethod
    def entity_class(self) -> type[EntityType]:
        """The SQLModel table class this repository manages."""

    @property
    def entity_name(self) -> str:
        return self.entity_class.__name__

    @contextmanager
    def _writing(self, action: str, conflict: str) -> Iterator[None]:
        try:
            yield
        except IntegrityError as e:
            self.session.rollback()
            raise EntityAlreadyExistsError(
                conflict, {"entity_type": self.entity_name}
            ) from e
        except SQLAlchemyError as e:
            self.session.rollback()
            raise DatabaseError(
                f"Could not {action} {self.entity_name}: {str(e)}"
            ) from e

    # Reads

    def get_by_id(self, entity_id: int) -> EntityType | None:
        try:
            return self.session.get(self.entity_class, entity_id)
        except SQLAlchemyError as e:
            raise DatabaseError(f"Could not load {self.entity_name}: {str(e)}") from e

    def get_by_id_required(self, entity_id: int) -> EntityType:
        """Raises EntityNotFoundError when no row has ``entity_id``."""
        entity = self.get_by_id(entity_id)
        if entity is None:
            raise EntityNotFoundError(self.entity_name, entity_id)
        return entity

    def exists(self, entity_id: int) -> bool:
        return self.get_by_id(entity_id) is not None

    def get_all(self) -> list[EntityType]:
        """Every row, ordered by id."""
        try:
            statement = select(self.entity_class).order_by(self.entity_class.id)
            return list(self.session.exec(statement).all())
        except SQLAlchemyError as e:
            raise DatabaseError(f"Could not list {self.entity_name}: {str(e)}") from e

    # Writes

    def save(self, entity: EntityType) -> EntityType:
        with self._writing("save", f"{self.entity_name} conflicts with an existing record"):
            self.session.add(entity)
            self.session.commit()
            self.session.refresh(entity)
        return entity

    def create(self, values: Mapping[str, Any] | EntityType) -> EntityType:
        """Insert a row from a mapping of column values (or a ready entity)."""
        if isinstance(values, self.entity_class):
            entity = values
        else:
            entity = self.entity_class(**dict(values))
        return self.save(entity)

    def update(self, entity_id: int, values: Mapping[str, Any]) -> EntityType:
        """
        Overwrite the given columns of an existing row.

        Keys that are not columns of the table are ignored.

        Raises:
            EntityNotFoundError: If no row has ``entity_id``
        """
        entity = self.get_by_id_required(entity_id)
        for column, value in values.items():
            if hasattr(entity, column):
                setattr(entity, column, value)
        return self.save(entity)

    def delete(self, entity_id: int) -> bool:
        """
        Delete a row.

        Returns:
            False if there was nothing to delete

        Raises:
            EntityAlreadyExistsError: If other rows still point at it
        """
        entity = self.get_by_id(entity_id)
        if entity is None:
            return False
        with self._writing(
            "delete", f"{self.entity_name} {entity_id} is still referenced"
        ):
            self.session.delete(entity)
            self.session.commit()
        return True
