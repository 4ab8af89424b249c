"""
Tests for the reservation view aggregation and the reservation mutations.
"""
import warnings
from datetime import datetime
from decimal import Decimal

import pytest
from sqlalchemy.exc import SADeprecationWarning

from senderos.core.database import Base
from senderos.core.errors import NotFoundError, StoreError, ValidationError
from senderos.models import Annotation, Reservation
from senderos.repository import annotation_repository
from senderos.schemas import ReservationCreate, ReservationUpdate
from senderos.services import ReservationService


def _create_payload(**overrides) -> ReservationCreate:
    data = {
        "name": "Reserva 1",
        "roomId": 1,
        "partySize": 2,
        "stateId": 1,
        "total": "100.00",
        "startDate": "2025-12-01",
        "endDate": "2025-12-05",
    }
    data.update(overrides)
    return ReservationCreate.model_validate(data)


class TestListReservationViews:
    """Building the full reservation view."""

    def test_empty_store_skips_annotation_lookup(self, db_session, monkeypatch):
        def fail(*args, **kwargs):
            raise AssertionError("annotation lookup must not run without reservations")

        monkeypatch.setattr(annotation_repository, "list_annotations_by_reservation_ids", fail)

        assert ReservationService(db_session).list_reservation_views() == []

    def test_resolves_room_and_state_names(self, catalog, make_reservation):
        reservation_id = make_reservation()
        service = ReservationService(catalog)

        views = service.list_reservation_views()

        assert len(views) == 1
        view = views[0]
        assert view.id == reservation_id
        assert view.room == "HAB 1"
        assert view.state == "por cobrar"
        assert view.annotations == []
        assert view.total == Decimal("100.00")
        assert view.deposit == Decimal("0.00")
        assert view.commission_amount == Decimal("0.00")
        assert view.commission_status == "pendiente"

    def test_one_view_per_reservation_in_store_order(self, catalog, make_reservation):
        ids = [make_reservation(name=f"Reserva {n}") for n in range(1, 4)]

        views = ReservationService(catalog).list_reservation_views()

        assert [view.id for view in views] == ids
        assert [view.name for view in views] == ["Reserva 1", "Reserva 2", "Reserva 3"]

    def test_missing_or_dangling_references_do_not_drop_rows(self, catalog, make_reservation):
        no_room = make_reservation(name="Sin casa", room_id=None, state_id=None)
        dangling = make_reservation(name="Casa borrada", room_id=99, state_id=42)

        views = {view.id: view for view in ReservationService(catalog).list_reservation_views()}

        assert views[no_room].room is None
        assert views[no_room].state is None
        assert views[dangling].room is None
        assert views[dangling].state is None
        assert views[dangling].room_id == 99

    def test_annotations_grouped_per_reservation_in_creation_order(
        self, catalog, make_reservation
    ):
        first = make_reservation(name="Reserva X")
        second = make_reservation(name="Reserva Y")
        catalog.add_all(
            [
                Annotation(reservation_id=first, content="Llega tarde"),
                Annotation(reservation_id=second, content="Trae mascota"),
                Annotation(reservation_id=first, content="Pagó abono"),
            ]
        )
        catalog.commit()

        views = {view.id: view for view in ReservationService(catalog).list_reservation_views()}

        assert [a.content for a in views[first].annotations] == ["Llega tarde", "Pagó abono"]
        assert [a.content for a in views[second].annotations] == ["Trae mascota"]
        assert all(a.reservation_id == first for a in views[first].annotations)

    def test_store_failure_is_reported_as_store_error(self, db_session):
        Base.metadata.drop_all(bind=db_session.get_bind())

        with pytest.raises(StoreError):
            ReservationService(db_session).list_reservation_views()


class TestCreateReservation:
    def test_persists_with_defaults(self, catalog):
        reservation_id = ReservationService(catalog).create_reservation(_create_payload())

        stored = catalog.get(Reservation, reservation_id)
        assert stored.name == "Reserva 1"
        assert stored.party_size == 2
        assert stored.total == Decimal("100.00")
        assert stored.deposit == Decimal("0.00")
        assert stored.commission_amount == Decimal("0.00")
        assert stored.commission_status == "pendiente"
        assert stored.start_date == datetime(2025, 12, 1)
        assert stored.end_date == datetime(2025, 12, 5)

    def test_keeps_financial_fields(self, catalog):
        payload = _create_payload(
            deposit="40.00", commissionAmount="12.50", commissionStatus="pagada"
        )

        reservation_id = ReservationService(catalog).create_reservation(payload)

        stored = catalog.get(Reservation, reservation_id)
        assert stored.deposit == Decimal("40.00")
        assert stored.commission_amount == Decimal("12.50")
        assert stored.commission_status == "pagada"

    def test_end_before_start_is_rejected(self, catalog):
        payload = _create_payload(startDate="2025-12-05", endDate="2025-12-01")

        with pytest.raises(ValidationError):
            ReservationService(catalog).create_reservation(payload)

    def test_unknown_room_is_rejected(self, catalog):
        with pytest.raises(ValidationError):
            ReservationService(catalog).create_reservation(_create_payload(roomId=99))

    def test_unknown_state_is_rejected(self, catalog):
        with pytest.raises(ValidationError):
            ReservationService(catalog).create_reservation(_create_payload(stateId=99))

    def test_insert_emits_no_deprecation_warnings(self, catalog):
        with warnings.catch_warnings():
            warnings.simplefilter("error", SADeprecationWarning)
            reservation_id = ReservationService(catalog).create_reservation(_create_payload())

        assert catalog.get(Reservation, reservation_id) is not None

    def test_room_and_state_are_optional(self, catalog):
        payload = _create_payload(roomId=None, stateId=None)

        reservation_id = ReservationService(catalog).create_reservation(payload)

        stored = catalog.get(Reservation, reservation_id)
        assert stored.room_id is None
        assert stored.state_id is None


class TestUpdateReservation:
    def test_partial_update_leaves_other_fields(self, catalog, make_reservation):
        reservation_id = make_reservation(
            deposit=Decimal("20.00"), commission_amount=Decimal("5.00")
        )

        ReservationService(catalog).update_reservation(
            reservation_id, ReservationUpdate.model_validate({"total": "150.00"})
        )

        catalog.expire_all()
        stored = catalog.get(Reservation, reservation_id)
        assert stored.total == Decimal("150.00")
        assert stored.name == "Reserva 1"
        assert stored.room_id == 1
        assert stored.state_id == 1
        assert stored.party_size == 2
        assert stored.deposit == Decimal("20.00")
        assert stored.commission_amount == Decimal("5.00")
        assert stored.commission_status == "pendiente"
        assert stored.start_date == datetime(2025, 12, 1)
        assert stored.end_date == datetime(2025, 12, 5)

    def test_can_clear_room_and_change_state(self, catalog, make_reservation):
        reservation_id = make_reservation()

        ReservationService(catalog).update_reservation(
            reservation_id, ReservationUpdate.model_validate({"roomId": None, "stateId": 2})
        )

        catalog.expire_all()
        stored = catalog.get(Reservation, reservation_id)
        assert stored.room_id is None
        assert stored.state_id == 2

    def test_updates_commission_status(self, catalog, make_reservation):
        reservation_id = make_reservation()

        ReservationService(catalog).update_reservation(
            reservation_id,
            ReservationUpdate.model_validate({"commissionStatus": "pagada"}),
        )

        catalog.expire_all()
        assert catalog.get(Reservation, reservation_id).commission_status == "pagada"

    def test_new_end_date_is_checked_against_stored_start(self, catalog, make_reservation):
        reservation_id = make_reservation()

        with pytest.raises(ValidationError):
            ReservationService(catalog).update_reservation(
                reservation_id, ReservationUpdate.model_validate({"endDate": "2025-11-30"})
            )

    def test_unknown_reservation(self, catalog):
        with pytest.raises(NotFoundError):
            ReservationService(catalog).update_reservation(
                404, ReservationUpdate.model_validate({"total": "1.00"})
            )

    def test_unknown_reservation_with_dates(self, catalog):
        with pytest.raises(NotFoundError):
            ReservationService(catalog).update_reservation(
                404, ReservationUpdate.model_validate({"startDate": "2025-12-01"})
            )

    def test_unknown_room_is_rejected(self, catalog, make_reservation):
        reservation_id = make_reservation()

        with pytest.raises(ValidationError):
            ReservationService(catalog).update_reservation(
                reservation_id, ReservationUpdate.model_validate({"roomId": 99})
            )

    def test_unknown_reservation_wins_over_unknown_room(self, catalog):
        with pytest.raises(NotFoundError):
            ReservationService(catalog).update_reservation(
                404, ReservationUpdate.model_validate({"roomId": 99, "stateId": 99})
            )

    def test_reversed_start_and_end_dates_are_rejected(self, catalog, make_reservation):
        reservation_id = make_reservation()
        payload = ReservationUpdate.model_validate(
            {"startDate": "2025-12-10", "endDate": "2025-12-09"}
        )

        with pytest.raises(ValidationError):
            ReservationService(catalog).update_reservation(reservation_id, payload)

        catalog.expire_all()
        stored = catalog.get(Reservation, reservation_id)
        assert stored.start_date == datetime(2025, 12, 1)
        assert stored.end_date == datetime(2025, 12, 5)


class TestDeleteReservation:
    def test_removes_reservation_and_keeps_orphan_annotations(
        self, catalog, make_reservation
    ):
        reservation_id = make_reservation()
        catalog.add(Annotation(reservation_id=reservation_id, content="Llega tarde"))
        catalog.commit()

        service = ReservationService(catalog)
        service.delete_reservation(reservation_id)

        assert service.list_reservation_views() == []
        orphans = catalog.query(Annotation).filter_by(reservation_id=reservation_id).all()
        assert [orphan.content for orphan in orphans] == ["Llega tarde"]

    def test_unknown_reservation(self, catalog):
        with pytest.raises(NotFoundError):
            ReservationService(catalog).delete_reservation(404)
