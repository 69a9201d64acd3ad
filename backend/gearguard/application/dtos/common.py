from typing import Any

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel
from sqlmodel import SQLModel


class ApiModel(BaseModel):
    """Base DTO: snake_case attributes, camelCase JSON."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    @classmethod
    def from_entity(cls, entity: SQLModel, **extra: Any):
        return cls.model_validate({**entity.model_dump(), **extra})


class IdName(ApiModel):
    id: int
    name: str


class Message(ApiModel):
    success: bool = True
    message: str | None = None
