"""Shared schema helpers and generic API payloads."""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base schema exposing camelCase keys while accepting snake_case too."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class MessageResponse(BaseModel):
    message: str


class CreatedResponse(MessageResponse):
    id: int


__all__ = ["CamelModel", "CreatedResponse", "MessageResponse"]
