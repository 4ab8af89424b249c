from __future__ import annotations

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from senderos.core.database import Base


class State(Base):
    """Payment/lifecycle status of a reservation, e.g. "por cobrar" or "pagado"."""

    __tablename__ = "estado"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column("nombre", String(255), nullable=False)

    def __repr__(self) -> str:  # pragma: no cover - debugging helper
        return f"<State(id={self.id}, name={self.name!r})>"
