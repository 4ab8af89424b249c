from __future__ import annotations

from datetime import datetime

from sqlalchemy import DateTime, Integer, String, func
from sqlalchemy.orm import Mapped, mapped_column

from senderos.core.database import Base

MAX_CONTENT_LENGTH = 1000


class Annotation(Base):
    """Free-text note attached to a reservation.

    ``reservation_id`` is not a database-level foreign key: deleting the parent
    reservation leaves its annotations in place as orphans.
    """

    __tablename__ = "anotaciones"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    reservation_id: Mapped[int] = mapped_column(
        "reserva_id", Integer, nullable=False, index=True
    )
    content: Mapped[str] = mapped_column(
        "contenido", String(MAX_CONTENT_LENGTH), nullable=False
    )
    created_at: Mapped[datetime] = mapped_column(
        "fecha_creacion", DateTime, nullable=False, server_default=func.now()
    )

    def __repr__(self) -> str:  # pragma: no cover - debugging helper
        return f"<Annotation(id={self.id}, reservation_id={self.reservation_id})>"
