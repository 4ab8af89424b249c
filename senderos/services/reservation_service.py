from __future__ import annotations

import logging
from datetime import datetime
from typing import Any, Dict, List, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from senderos.core.errors import (
    NotFoundError,
    ReservationsError,
    StoreError,
    ValidationError,
)
from senderos.repository import (
    annotation_repository,
    catalog_repository,
    reservation_repository,
)
from senderos.schemas import (
    AnnotationResponse,
    ReservationCreate,
    ReservationUpdate,
    ReservationView,
)

logger = logging.getLogger(__name__)


class ReservationService:
    def __init__(self, db: Session):
        self.db = db

    def list_reservation_views(self) -> List[ReservationView]:
        """Build the full view of every reservation.

        Reservations are read first with their room and state names, then the
        annotations of all of them are fetched in a single query and grouped by
        reservation id.
        """
        rows = reservation_repository.list_reservation_rows(self.db)
        if not rows:
            return []

        annotations_by_reservation = annotation_repository.list_annotations_by_reservation_ids(
            self.db, {row.reservation.id for row in rows}
        )

        views: List[ReservationView] = []
        for row in rows:
            reservation = row.reservation
            view = ReservationView.model_validate(reservation)
            view.room = row.room_name
            view.state = row.state_name
            view.annotations = [
                AnnotationResponse.model_validate(annotation)
                for annotation in annotations_by_reservation.get(reservation.id, [])
            ]
            views.append(view)
        return views

    def _ensure_references_exist(
        self, *, room_id: Optional[int], state_id: Optional[int]
    ) -> None:
        if room_id is not None and catalog_repository.get_room(self.db, room_id) is None:
            raise ValidationError(f"La casa {room_id} no existe")
        if state_id is not None and catalog_repository.get_state(self.db, state_id) is None:
            raise ValidationError(f"El estado {state_id} no existe")

    @staticmethod
    def _ensure_date_order(start_date: datetime, end_date: datetime) -> None:
        if end_date < start_date:
            raise ValidationError(
                "La fecha de fin debe ser igual o posterior a la fecha de inicio"
            )

    def create_reservation(self, payload: ReservationCreate) -> int:
        self._ensure_references_exist(room_id=payload.room_id, state_id=payload.state_id)
        self._ensure_date_order(payload.start_date, payload.end_date)

        try:
            reservation = reservation_repository.create_reservation(
                self.db, payload.model_dump()
            )
            reservation_id = reservation.id
            self.db.commit()
        except ReservationsError:
            self.db.rollback()
            raise
        except SQLAlchemyError as exc:
            self.db.rollback()
            raise StoreError("Error al crear reserva") from exc

        logger.info("Reservation %s created for %r", reservation_id, payload.name)
        return reservation_id

    def update_reservation(self, reservation_id: int, payload: ReservationUpdate) -> None:
        changes: Dict[str, Any] = payload.model_dump(exclude_unset=True)

        current = reservation_repository.get_reservation(self.db, reservation_id)
        if current is None:
            raise NotFoundError(f"Reserva {reservation_id} no encontrada")

        if "start_date" in changes or "end_date" in changes:
            self._ensure_date_order(
                changes.get("start_date", current.start_date),
                changes.get("end_date", current.end_date),
            )

        self._ensure_references_exist(
            room_id=changes.get("room_id"), state_id=changes.get("state_id")
        )

        try:
            affected = reservation_repository.update_reservation(
                self.db, reservation_id, changes
            )
            if affected == 0:
                raise NotFoundError(f"Reserva {reservation_id} no encontrada")
            self.db.commit()
        except ReservationsError:
            self.db.rollback()
            raise
        except SQLAlchemyError as exc:
            self.db.rollback()
            raise StoreError("Error al actualizar reserva") from exc

        logger.info(
            "Reservation %s updated (%s)", reservation_id, ", ".join(sorted(changes)) or "no changes"
        )

    def delete_reservation(self, reservation_id: int) -> None:
        """Delete a reservation. Its annotations are left in place."""
        try:
            affected = reservation_repository.delete_reservation(self.db, reservation_id)
            if affected == 0:
                raise NotFoundError(f"Reserva {reservation_id} no encontrada")
            self.db.commit()
        except ReservationsError:
            self.db.rollback()
            raise
        except SQLAlchemyError as exc:
            self.db.rollback()
            raise StoreError("Error al eliminar reserva") from exc

        logger.info("Reservation %s deleted", reservation_id)
