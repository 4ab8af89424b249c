from __future__ import annotations

from datetime import datetime

from pydantic import Field, field_validator

from senderos.models.annotation import MAX_CONTENT_LENGTH
from senderos.schemas.common import CamelModel


class AnnotationCreate(CamelModel):
    reservation_id: int = Field(..., ge=1)
    content: str = Field(..., min_length=1, max_length=MAX_CONTENT_LENGTH)

    @field_validator("content", mode="before")
    @classmethod
    def _strip_content(cls, value: str) -> str:
        if value is None:
            raise ValueError("Value must not be null")
        if isinstance(value, str):
            return value.strip()
        return value


class AnnotationResponse(CamelModel):
    id: int
    reservation_id: int
    content: str
    created_at: datetime


__all__ = ["AnnotationCreate", "AnnotationResponse"]
