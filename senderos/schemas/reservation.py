"""Pydantic schemas for reservation resources."""

from __future__ import annotations

from datetime import datetime, timezone
from decimal import Decimal
from typing import List, Optional

from pydantic import Field, field_validator, model_validator

from senderos.models.reservation import DEFAULT_COMMISSION_STATUS
from senderos.schemas.annotation import AnnotationResponse
from senderos.schemas.common import CamelModel

_MONEY = {"ge": 0, "max_digits": 10, "decimal_places": 2}

# Columns that are NOT NULL in the database and therefore cannot be cleared.
_NON_NULLABLE_FIELDS = (
    "name",
    "party_size",
    "total",
    "deposit",
    "commission_amount",
    "commission_status",
    "start_date",
    "end_date",
)


def _to_naive_utc(value: Optional[datetime]) -> Optional[datetime]:
    # Dates are stored as naive UTC timestamps
    if value is not None and value.tzinfo is not None:
        return value.astimezone(timezone.utc).replace(tzinfo=None)
    return value


def _strip_required(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    if not isinstance(value, str):
        return value
    stripped = value.strip()
    if not stripped:
        raise ValueError("Value must not be empty")
    return stripped


class ReservationCreate(CamelModel):
    """Schema used when creating a new reservation."""

    name: str = Field(..., max_length=255)
    room_id: Optional[int] = None
    party_size: int = Field(..., gt=0)
    state_id: Optional[int] = None
    total: Decimal = Field(..., **_MONEY)
    deposit: Decimal = Field(Decimal("0.00"), **_MONEY)
    commission_amount: Decimal = Field(Decimal("0.00"), **_MONEY)
    commission_status: str = Field(DEFAULT_COMMISSION_STATUS, max_length=50)
    start_date: datetime
    end_date: datetime

    @field_validator("name", "commission_status", mode="before")
    @classmethod
    def _strip_and_validate_required(cls, value: str) -> str:
        if value is None:
            raise ValueError("Value must not be null")
        return _strip_required(value)

    @field_validator("start_date", "end_date")
    @classmethod
    def _normalize_dates(cls, value: datetime) -> datetime:
        return _to_naive_utc(value)


class ReservationUpdate(CamelModel):
    """Schema used for partial updates; only the keys sent are applied."""

    name: Optional[str] = Field(None, max_length=255)
    room_id: Optional[int] = None
    party_size: Optional[int] = Field(None, gt=0)
    state_id: Optional[int] = None
    total: Optional[Decimal] = Field(None, **_MONEY)
    deposit: Optional[Decimal] = Field(None, **_MONEY)
    commission_amount: Optional[Decimal] = Field(None, **_MONEY)
    commission_status: Optional[str] = Field(None, max_length=50)
    start_date: Optional[datetime] = None
    end_date: Optional[datetime] = None

    @field_validator("name", "commission_status", mode="before")
    @classmethod
    def _strip_non_empty(cls, value: Optional[str]) -> Optional[str]:
        return _strip_required(value)

    @field_validator("start_date", "end_date")
    @classmethod
    def _normalize_dates(cls, value: Optional[datetime]) -> Optional[datetime]:
        return _to_naive_utc(value)

    @model_validator(mode="after")
    def _reject_null_required(self) -> "ReservationUpdate":
        cleared = [
            field_name
            for field_name in _NON_NULLABLE_FIELDS
            if field_name in self.model_fields_set and getattr(self, field_name) is None
        ]
        if cleared:
            raise ValueError(f"Fields cannot be null: {', '.join(cleared)}")
        return self


class ReservationView(CamelModel):
    """Reservation data returned to API clients, with names and annotations resolved."""

    id: int
    name: str
    room_id: Optional[int] = None
    party_size: int
    state_id: Optional[int] = None
    total: Decimal
    deposit: Decimal
    commission_amount: Decimal
    commission_status: str
    start_date: datetime
    end_date: datetime
    room: Optional[str] = None
    state: Optional[str] = None
    annotations: List[AnnotationResponse] = Field(default_factory=list)


__all__ = ["ReservationCreate", "ReservationUpdate", "ReservationView"]
