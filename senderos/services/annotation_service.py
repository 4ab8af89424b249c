from __future__ import annotations

import logging

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from senderos.core.errors import NotFoundError, ReservationsError, StoreError
from senderos.repository import annotation_repository, reservation_repository
from senderos.schemas import AnnotationCreate

logger = logging.getLogger(__name__)


class AnnotationService:
    def __init__(self, db: Session) -> None:
        self._db = db

    def create_annotation(self, payload: AnnotationCreate) -> int:
        reservation = reservation_repository.get_reservation(self._db, payload.reservation_id)
        if reservation is None:
            raise NotFoundError(f"Reserva {payload.reservation_id} no encontrada")

        try:
            annotation = annotation_repository.create_annotation(
                self._db, payload.reservation_id, payload.content
            )
            annotation_id = annotation.id
            self._db.commit()
        except ReservationsError:
            self._db.rollback()
            raise
        except SQLAlchemyError as exc:
            self._db.rollback()
            raise StoreError("Error al crear anotación") from exc

        logger.info(
            "Annotation %s added to reservation %s", annotation_id, payload.reservation_id
        )
        return annotation_id

    def delete_annotation(self, annotation_id: int) -> None:
        try:
            affected = annotation_repository.delete_annotation(self._db, annotation_id)
            if affected == 0:
                raise NotFoundError(f"Anotación {annotation_id} no encontrada")
            self._db.commit()
        except ReservationsError:
            self._db.rollback()
            raise
        except SQLAlchemyError as exc:
            self._db.rollback()
            raise StoreError("Error al eliminar anotación") from exc

        logger.info("Annotation %s deleted", annotation_id)
