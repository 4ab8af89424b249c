from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from sqlalchemy import delete, select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from senderos.core.errors import StoreError
from senderos.models import Reservation, Room, State


@dataclass(frozen=True)
class ReservationRow:
    """A reservation together with the names of its room and state, if any."""

    reservation: Reservation
    room_name: Optional[str]
    state_name: Optional[str]


def list_reservation_rows(db: Session) -> List[ReservationRow]:
    """Return every reservation with its room and state names resolved.

    Outer joins keep reservations whose room or state is null or dangling.
    No ordering is applied; rows come back in the store's natural order.
    """
    query = (
        select(Reservation, Room.name, State.name)
        .outerjoin(Room, Reservation.room_id == Room.id)
        .outerjoin(State, Reservation.state_id == State.id)
    )
    try:
        rows = db.execute(query).all()
    except SQLAlchemyError as exc:
        raise StoreError("Error al obtener reservas") from exc
    return [
        ReservationRow(reservation=reservation, room_name=room_name, state_name=state_name)
        for reservation, room_name, state_name in rows
    ]


def get_reservation(db: Session, reservation_id: int) -> Optional[Reservation]:
    try:
        return db.get(Reservation, reservation_id)
    except SQLAlchemyError as exc:
        raise StoreError("Error al obtener reserva") from exc


def create_reservation(db: Session, reservation_data: Dict[str, Any]) -> Reservation:
    reservation = Reservation(**reservation_data)
    try:
        db.add(reservation)
        db.flush()
    except SQLAlchemyError as exc:
        raise StoreError("Error al crear reserva") from exc
    return reservation


def update_reservation(
    db: Session, reservation_id: int, changes: Dict[str, Any]
) -> int:
    """Write only the given columns and return the number of affected rows."""
    if not changes:
        return 1 if get_reservation(db, reservation_id) is not None else 0

    statement = (
        update(Reservation)
        .where(Reservation.id == reservation_id)
        .values(**changes)
        .execution_options(synchronize_session="evaluate")
    )
    try:
        result = db.execute(statement)
    except SQLAlchemyError as exc:
        raise StoreError("Error al actualizar reserva") from exc
    return result.rowcount


def delete_reservation(db: Session, reservation_id: int) -> int:
    statement = (
        delete(Reservation)
        .where(Reservation.id == reservation_id)
        .execution_options(synchronize_session="evaluate")
    )
    try:
        result = db.execute(statement)
    except SQLAlchemyError as exc:
        raise StoreError("Error al eliminar reserva") from exc
    return result.rowcount
