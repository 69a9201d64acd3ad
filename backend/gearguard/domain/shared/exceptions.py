"""
Domain errors.

Every error carries an ``ErrorType`` so the API layer maps it to a status
code without looking at messages, and renders itself with ``to_dict``.
"""

from enum import Enum

Detail = str | int | bool | None


class ErrorType(str, Enum):
    VALIDATION = "validation"
    NOT_FOUND = "not_found"
    CONFLICT = "conflict"
    AUTH = "auth"
    REPOSITORY = "repository"


class DomainError(Exception):
    error_type: ErrorType

    def __init__(self, message: str, details: dict[str, Detail] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def to_dict(self) -> dict:
        return {
            "type": self.error_type.value,
            "message": self.message,
            "details": self.details,
        }


class ValidationError(DomainError):
    """A required value is missing, or a value is malformed or unknown.

    ``field_name`` uses the camelCase name the client sent, so a form can
    highlight the offending input.
    """

    error_type = ErrorType.VALIDATION

    def __init__(
        self,
        field_name: str,
        value: str | int | float | bool | None,
        message: str,
        error_code: str | None = None,
    ) -> None:
        self.field_name = field_name
        self.value = value
        self.error_code = error_code or "VALIDATION_ERROR"
        super().__init__(f"Validation failed for field '{field_name}': {message}")

    def to_dict(self) -> dict:
        return {
            "type": self.error_type.value,
            "field": self.field_name,
            "value": None if self.value is None else str(self.value),
            "message": self.message,
            "error_code": self.error_code,
        }


class EntityNotFoundError(DomainError):
    error_type = ErrorType.NOT_FOUND

    def __init__(self, entity_type: str, entity_id: int | str) -> None:
        self.entity_type = entity_type
        self.entity_id = entity_id
        super().__init__(
            f"{entity_type} with ID {entity_id} not found",
            {"entity_type": entity_type, "entity_id": str(entity_id)},
        )


class EntityAlreadyExistsError(DomainError):
    """A write collides with existing data: a duplicate, or a row still in use."""

    error_type = ErrorType.CONFLICT


class AuthError(DomainError):
    """Missing, malformed, expired or rejected credentials.

    All causes are answered identically by the API.
    """

    error_type = ErrorType.AUTH

    def __init__(self, message: str = "Not authenticated") -> None:
        super().__init__(message)


class DatabaseError(DomainError):
    error_type = ErrorType.REPOSITORY
