from .annotation import Annotation
from .reservation import DEFAULT_COMMISSION_STATUS, Reservation
from .room import Room
from .state import State

__all__ = [
    "Annotation",
    "DEFAULT_COMMISSION_STATUS",
    "Reservation",
    "Room",
    "State",
]
