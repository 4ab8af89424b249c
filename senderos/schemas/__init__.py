from .annotation import AnnotationCreate, AnnotationResponse
from .catalog import RoomResponse, StateResponse
from .common import CreatedResponse, MessageResponse
from .reservation import ReservationCreate, ReservationUpdate, ReservationView

__all__ = [
    "AnnotationCreate",
    "AnnotationResponse",
    "CreatedResponse",
    "MessageResponse",
    "ReservationCreate",
    "ReservationUpdate",
    "ReservationView",
    "RoomResponse",
    "StateResponse",
]
