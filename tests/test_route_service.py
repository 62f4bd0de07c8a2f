# tests/test_route_service.py
"""Unit tests for the route ledger."""

import pytest
from datetime import datetime, timedelta
from pydantic import ValidationError
from app.models.enums import EntityType, RouteStatus
from app.models.route import Route
from app.schemas.route import RouteCreate, RouteUpdate
from app.services import route_service
from app.utils.errors import NotFound
from tests.factories import make_officer, make_vehicle


def start_route(db, entity_type="security_officer", entity_id=1, **extra):
    return route_service.create_route(db, RouteCreate(entity_type=entity_type, entity_id=entity_id, **extra))


class TestCreateRoute:
    def test_defaults(self, db):
        officer = make_officer(db)
        route = start_route(db, entity_id=officer.id, route_name="Night patrol")

        assert route.status == RouteStatus.active
        assert route.route_name == "Night patrol"
        assert route.start_time is not None
        assert route.end_time is None
        assert route.total_distance is None
        assert route.total_duration is None

    def test_explicit_start_time(self, db):
        vehicle = make_vehicle(db)
        start = datetime(2024, 2, 1, 7, 30)
        route = start_route(db, "corporate_vehicle", vehicle.id, start_time=start)
        assert route.start_time == start

    def test_aware_start_time_stored_as_utc(self, db):
        vehicle = make_vehicle(db)
        body = RouteCreate(entity_type="corporate_vehicle", entity_id=vehicle.id,
                           start_time="2024-02-01T09:30:00+02:00")
        route = route_service.create_route(db, body)
        assert route.start_time == datetime(2024, 2, 1, 7, 30)

    def test_unknown_entity(self, db):
        with pytest.raises(NotFound):
            start_route(db, "corporate_vehicle", 404)
        assert db.query(Route).count() == 0


class TestUpdateRoute:
    def test_complete_route(self, db):
        officer = make_officer(db)
        route = start_route(db, entity_id=officer.id, route_name="Loop")
        end = datetime(2024, 2, 1, 9, 0)

        updated = route_service.update_route(db, route.id, RouteUpdate(
            end_time=end, total_distance=12.345, total_duration=90, status="completed"))

        assert updated.status == RouteStatus.completed
        assert updated.end_time == end
        assert updated.total_distance == pytest.approx(12.345)
        assert updated.total_duration == 90
        assert updated.route_name == "Loop"

    def test_omitted_fields_unchanged(self, db):
        officer = make_officer(db)
        route = start_route(db, entity_id=officer.id, route_name="Keep me")
        updated = route_service.update_route(db, route.id, RouteUpdate(total_duration=5))
        assert updated.route_name == "Keep me"
        assert updated.status == RouteStatus.active

    def test_explicit_null_clears(self, db):
        officer = make_officer(db)
        route = start_route(db, entity_id=officer.id, route_name="Temp")
        route_service.update_route(db, route.id, RouteUpdate(total_distance=3.5))

        updated = route_service.update_route(db, route.id, RouteUpdate(route_name=None, total_distance=None))
        assert updated.route_name is None
        assert updated.total_distance is None

    def test_patch_tracks_sent_fields(self):
        assert RouteUpdate(route_name=None).changes() == {"route_name": None}
        assert RouteUpdate().changes() == {}

    @pytest.mark.parametrize("field,value", [
        ("total_distance", 1234567.0), ("total_distance", -1), ("total_duration", 2**31),
    ])
    def test_values_beyond_column_range_rejected(self, field, value):
        with pytest.raises(ValidationError):
            RouteUpdate(**{field: value})

    def test_largest_distance_accepted(self):
        assert RouteUpdate(total_distance=99999.999).total_distance == pytest.approx(99999.999)

    def test_status_cannot_be_null(self):
        with pytest.raises(ValidationError):
            RouteUpdate(status=None)

    def test_completed_route_can_be_reopened(self, db):
        officer = make_officer(db)
        route = start_route(db, entity_id=officer.id)
        route_service.update_route(db, route.id, RouteUpdate(status="completed"))
        reopened = route_service.update_route(db, route.id, RouteUpdate(status="active"))
        assert reopened.status == RouteStatus.active

    def test_missing_route(self, db):
        with pytest.raises(NotFound, match="Route with id 77"):
            route_service.update_route(db, 77, RouteUpdate(status="completed"))


class TestRouteHistory:
    @pytest.fixture
    def seeded(self, db):
        officer = make_officer(db)
        vehicle = make_vehicle(db)
        base = datetime(2024, 4, 1, 8, 0)
        routes = {
            "o1": start_route(db, "security_officer", officer.id, start_time=base),
            "o2": start_route(db, "security_officer", officer.id, start_time=base + timedelta(hours=2)),
            "v1": start_route(db, "corporate_vehicle", vehicle.id, start_time=base + timedelta(hours=1)),
        }
        route_service.update_route(db, routes["o1"].id, RouteUpdate(status="completed"))
        return base, officer, vehicle, routes

    def test_no_filters_returns_all_newest_first(self, db, seeded):
        _, _, _, routes = seeded
        ids = [r.id for r in route_service.get_route_history(db)]
        assert ids == [routes["o2"].id, routes["v1"].id, routes["o1"].id]

    def test_filters_are_anded(self, db, seeded):
        _, officer, _, routes = seeded
        result = route_service.get_route_history(
            db, entity_type=EntityType.security_officer, entity_id=officer.id, status=RouteStatus.active)
        assert [r.id for r in result] == [routes["o2"].id]

    def test_date_range_on_start_time(self, db, seeded):
        base, _, _, routes = seeded
        result = route_service.get_route_history(
            db, start_date=base + timedelta(hours=1), end_date=base + timedelta(hours=2))
        assert [r.id for r in result] == [routes["o2"].id, routes["v1"].id]

    def test_entity_type_only(self, db, seeded):
        _, _, _, routes = seeded
        result = route_service.get_route_history(db, entity_type=EntityType.corporate_vehicle)
        assert [r.id for r in result] == [routes["v1"].id]
