"""Load the demo rooms, states and reservations: ``python -m senderos.db.seed``.

Existing rows are removed first, children before parents, so the seeded
rooms and states keep predictable ids.
"""

import logging
import sys
from datetime import datetime
from decimal import Decimal

from sqlalchemy import delete
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from senderos.core.database import SessionLocal
from senderos.core.logging import configure_logging
from senderos.db.migrate import create_tables
from senderos.models import Annotation, Reservation, Room, State

logger = logging.getLogger(__name__)

STATES = [
    {"id": 1, "name": "por cobrar"},
    {"id": 2, "name": "pagado"},
]

ROOMS = [
    {"id": 1, "name": "HAB 1"},
    {"id": 2, "name": "HAB 2"},
    {"id": 3, "name": "HAB 3"},
]

RESERVATIONS = [
    {
        "name": "Reserva 1",
        "room_id": 1,
        "party_size": 2,
        "state_id": 1,
        "total": Decimal("100.00"),
        "start_date": datetime(2025, 12, 1),
        "end_date": datetime(2025, 12, 5),
    },
    {
        "name": "Reserva 2",
        "room_id": 2,
        "party_size": 3,
        "state_id": 2,
        "total": Decimal("200.00"),
        "start_date": datetime(2025, 12, 6),
        "end_date": datetime(2025, 12, 10),
    },
    {
        "name": "Reserva 3",
        "room_id": 3,
        "party_size": 4,
        "state_id": 1,
        "total": Decimal("300.00"),
        "start_date": datetime(2025, 12, 11),
        "end_date": datetime(2025, 12, 15),
    },
]


def seed(db: Session) -> None:
    logger.info("Cleaning tables...")
    for model in (Annotation, Reservation, Room, State):
        db.execute(delete(model))

    logger.info("Inserting states...")
    db.add_all(State(**data) for data in STATES)
    logger.info("Inserting rooms...")
    db.add_all(Room(**data) for data in ROOMS)
    # Parents must exist before reservations reference them
    db.flush()

    logger.info("Inserting reservations...")
    db.add_all(Reservation(**data) for data in RESERVATIONS)
    db.commit()


def main() -> int:
    create_tables()
    db = SessionLocal()
    try:
        seed(db)
    except SQLAlchemyError:
        db.rollback()
        logger.exception("Error seeding database")
        return 1
    finally:
        db.close()
    logger.info("Seeding complete")
    return 0


if __name__ == "__main__":
    configure_logging()
    sys.exit(main())
