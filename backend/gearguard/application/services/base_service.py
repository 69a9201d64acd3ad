"""
Base application service providing common functionality.

Shared validation helpers and the structured logger used by every
application service.
"""

from abc import ABC

from gearguard.core.observability import get_logger
from gearguard.domain.shared.exceptions import (
    EntityNotFoundError,
    ValidationError,
)
from gearguard.infrastructure.database.repositories.base import BaseRepository


class ApplicationServiceBase(ABC):
    """
    Base class for application services.

    Provides common functionality for validation and error handling across
    all application services.
    """

    def __init__(self) -> None:
        self.logger = get_logger(type(self).__module__)

    def validate_non_empty_string(self, value: str | None, field_name: str) -> str:
        """
        Validate that a string field is not empty.

        Returns:
            The stripped value

        Raises:
            ValidationError: If string is None or blank
        """
        if value is None or not value.strip():
            raise ValidationError(field_name, value, f"{field_name} cannot be empty")
        return value.strip()

    def require_reference(
        self, repository: BaseRepository, entity_id: int | None, field_name: str
    ) -> None:
        """
        Check that an optional foreign key points at an existing row.

        Raises:
            ValidationError: If the id is set but nothing has it
        """
        if entity_id is None:
            return
        if not repository.exists(entity_id):
            raise ValidationError(
                field_name,
                entity_id,
                f"{repository.entity_name} {entity_id} does not exist",
                "UNKNOWN_REFERENCE",
            )

    def entity_not_found_error(
        self, entity_type: str, entity_id: int
    ) -> EntityNotFoundError:
        return EntityNotFoundError(entity_type, entity_id)
