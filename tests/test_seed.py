"""
Tests for the demo data loader and schema creation.
"""
from senderos.db.migrate import run_migration
from senderos.db.seed import seed
from senderos.models import Annotation
from senderos.services import CatalogService, ReservationService


def test_seed_loads_catalog_and_reservations(db_session):
    seed(db_session)

    catalog = CatalogService(db_session)
    assert [(s.id, s.name) for s in catalog.list_states()] == [(1, "por cobrar"), (2, "pagado")]
    assert [r.name for r in catalog.list_rooms()] == ["HAB 1", "HAB 2", "HAB 3"]

    views = ReservationService(db_session).list_reservation_views()
    assert [(v.name, v.room, v.state) for v in views] == [
        ("Reserva 1", "HAB 1", "por cobrar"),
        ("Reserva 2", "HAB 2", "pagado"),
        ("Reserva 3", "HAB 3", "por cobrar"),
    ]


def test_seed_replaces_existing_rows(db_session):
    seed(db_session)
    (first, *_) = ReservationService(db_session).list_reservation_views()
    db_session.add(Annotation(reservation_id=first.id, content="Nota"))
    db_session.commit()

    seed(db_session)

    assert len(ReservationService(db_session).list_reservation_views()) == 3
    assert db_session.query(Annotation).count() == 0


def test_run_migration_succeeds():
    assert run_migration() == 0
