from __future__ import annotations

from senderos.schemas.common import CamelModel


class RoomResponse(CamelModel):
    id: int
    name: str


class StateResponse(CamelModel):
    id: int
    name: str


__all__ = ["RoomResponse", "StateResponse"]
