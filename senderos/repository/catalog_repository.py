from __future__ import annotations

from typing import List, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from senderos.core.errors import StoreError
from senderos.models import Room, State


def list_rooms(db: Session) -> List[Room]:
    try:
        return db.query(Room).all()
    except SQLAlchemyError as exc:
        raise StoreError("Error al obtener casas") from exc


def list_states(db: Session) -> List[State]:
    try:
        return db.query(State).all()
    except SQLAlchemyError as exc:
        raise StoreError("Error al obtener estados") from exc


def get_room(db: Session, room_id: int) -> Optional[Room]:
    try:
        return db.get(Room, room_id)
    except SQLAlchemyError as exc:
        raise StoreError("Error al obtener casa") from exc


def get_state(db: Session, state_id: int) -> Optional[State]:
    try:
        return db.get(State, state_id)
    except SQLAlchemyError as exc:
        raise StoreError("Error al obtener estado") from exc
