from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import Optional

from sqlalchemy import DateTime, ForeignKey, Integer, Numeric, String, text
from sqlalchemy.orm import Mapped, mapped_column

from senderos.core.database import Base

DEFAULT_COMMISSION_STATUS = "pendiente"


class Reservation(Base):
    """A booking of a room for a party between two dates."""

    __tablename__ = "reservas"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column("nombre", String(255), nullable=False)
    room_id: Mapped[Optional[int]] = mapped_column(
        "casa_id", Integer, ForeignKey("casas.id"), nullable=True
    )
    party_size: Mapped[int] = mapped_column("cant_personas", Integer, nullable=False)
    state_id: Mapped[Optional[int]] = mapped_column(
        "estado_id", Integer, ForeignKey("estado.id"), nullable=True
    )
    total: Mapped[Decimal] = mapped_column(Numeric(10, 2), nullable=False)
    deposit: Mapped[Decimal] = mapped_column(
        "abono",
        Numeric(10, 2),
        nullable=False,
        default=Decimal("0.00"),
        server_default=text("0.00"),
    )
    commission_amount: Mapped[Decimal] = mapped_column(
        "comision",
        Numeric(10, 2),
        nullable=False,
        default=Decimal("0.00"),
        server_default=text("0.00"),
    )
    commission_status: Mapped[str] = mapped_column(
        "estado_comision",
        String(50),
        nullable=False,
        default=DEFAULT_COMMISSION_STATUS,
        server_default=DEFAULT_COMMISSION_STATUS,
    )
    start_date: Mapped[datetime] = mapped_column("fecha_inicio", DateTime, nullable=False)
    end_date: Mapped[datetime] = mapped_column("fecha_fin", DateTime, nullable=False)

    def __repr__(self) -> str:  # pragma: no cover - debugging helper
        return (
            f"<Reservation(id={self.id}, name={self.name!r}, "
            f"start_date={self.start_date}, end_date={self.end_date})>"
        )
