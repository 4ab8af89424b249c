from .annotation_repository import (
    create_annotation,
    delete_annotation,
    list_annotations_by_reservation_ids,
)
from .catalog_repository import get_room, get_state, list_rooms, list_states
from .reservation_repository import (
    ReservationRow,
    create_reservation,
    delete_reservation,
    get_reservation,
    list_reservation_rows,
    update_reservation,
)

__all__ = [
    "ReservationRow",
    "create_annotation",
    "create_reservation",
    "delete_annotation",
    "delete_reservation",
    "get_reservation",
    "get_room",
    "get_state",
    "list_annotations_by_reservation_ids",
    "list_reservation_rows",
    "list_rooms",
    "list_states",
    "update_reservation",
]
