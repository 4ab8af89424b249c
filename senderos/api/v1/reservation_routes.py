"""API routes for managing reservations."""

from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from senderos.dependencies import get_db
from senderos.schemas import (
    CreatedResponse,
    MessageResponse,
    ReservationCreate,
    ReservationUpdate,
    ReservationView,
)
from senderos.services import ReservationService

router = APIRouter(prefix="/reservas", tags=["reservations"])


@router.get("", response_model=List[ReservationView])
def list_reservations(db: Session = Depends(get_db)) -> List[ReservationView]:
    """Retrieve every reservation with its room, state and annotations."""

    service = ReservationService(db)
    return service.list_reservation_views()


@router.post("", response_model=CreatedResponse, status_code=status.HTTP_201_CREATED)
def create_reservation(
    payload: ReservationCreate, db: Session = Depends(get_db)
) -> CreatedResponse:
    service = ReservationService(db)
    reservation_id = service.create_reservation(payload)
    return CreatedResponse(message="Reserva creada", id=reservation_id)


@router.put("/{reservation_id}", response_model=MessageResponse)
def update_reservation(
    reservation_id: int,
    payload: ReservationUpdate,
    db: Session = Depends(get_db),
) -> MessageResponse:
    """Update only the fields present in the request body."""

    service = ReservationService(db)
    service.update_reservation(reservation_id, payload)
    return MessageResponse(message="Reserva actualizada")


@router.delete("/{reservation_id}", response_model=MessageResponse)
def delete_reservation(reservation_id: int, db: Session = Depends(get_db)) -> MessageResponse:
    service = ReservationService(db)
    service.delete_reservation(reservation_id)
    return MessageResponse(message="Reserva eliminada")
