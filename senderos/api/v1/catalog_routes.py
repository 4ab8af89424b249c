from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from senderos.dependencies import get_db
from senderos.schemas import RoomResponse, StateResponse
from senderos.services import CatalogService

router = APIRouter(tags=["catalog"])


@router.get("/casas", response_model=List[RoomResponse])
def list_rooms(db: Session = Depends(get_db)):
    service = CatalogService(db)
    return service.list_rooms()


@router.get("/estados", response_model=List[StateResponse])
def list_states(db: Session = Depends(get_db)):
    service = CatalogService(db)
    return service.list_states()
