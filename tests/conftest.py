"""
Shared pytest fixtures: an in-memory SQLite database and an API client bound to it.
"""
import os

# Must be set before the application modules create their engine
os.environ["DATABASE_URL"] = "sqlite://"

from datetime import datetime
from decimal import Decimal

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from senderos.core.database import Base
from senderos.dependencies import get_db
from senderos.main import app
from senderos.models import Reservation, Room, State

engine = create_engine(
    "sqlite://",
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db_session():
    """A session on a freshly created schema."""
    Base.metadata.create_all(bind=engine)
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def catalog(db_session):
    """Rooms and states as seeded in production."""
    db_session.add_all(
        [
            State(id=1, name="por cobrar"),
            State(id=2, name="pagado"),
            Room(id=1, name="HAB 1"),
            Room(id=2, name="HAB 2"),
        ]
    )
    db_session.commit()
    return db_session


@pytest.fixture
def make_reservation(catalog):
    """Insert a reservation straight into the store and return its id."""

    def _make(**overrides) -> int:
        data = {
            "name": "Reserva 1",
            "room_id": 1,
            "party_size": 2,
            "state_id": 1,
            "total": Decimal("100.00"),
            "start_date": datetime(2025, 12, 1),
            "end_date": datetime(2025, 12, 5),
        }
        data.update(overrides)
        reservation = Reservation(**data)
        catalog.add(reservation)
        catalog.commit()
        return reservation.id

    return _make


@pytest.fixture
def client(db_session):
    def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db
    try:
        with TestClient(app) as test_client:
            yield test_client
    finally:
        app.dependency_overrides.clear()
