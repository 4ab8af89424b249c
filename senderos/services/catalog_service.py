from __future__ import annotations

from typing import List

from sqlalchemy.orm import Session

from senderos.models import Room, State
from senderos.repository import catalog_repository


class CatalogService:
    """Read access to the shared reference data: rooms and states."""

    def __init__(self, db: Session):
        self.db = db

    def list_rooms(self) -> List[Room]:
        return catalog_repository.list_rooms(self.db)

    def list_states(self) -> List[State]:
        return catalog_repository.list_states(self.db)
