# tests/test_dashboard_service.py
"""Unit tests for the dashboard aggregation."""

from datetime import datetime, timedelta
from app.models.enums import OfficerStatus, VehicleStatus
from app.models.location_point import LocationPoint
from app.schemas.location_point import LocationPointCreate
from app.schemas.route import RouteCreate
from app.services.assignment_service import assign_driver, unassign_driver
from app.services.dashboard_service import get_dashboard_data
from app.services.location_service import record_location
from app.services.route_service import create_route
from tests.factories import make_driver, make_officer, make_vehicle


def add_point(db, entity_type, entity_id, timestamp):
    return record_location(db, LocationPointCreate(
        entity_type=entity_type, entity_id=entity_id, latitude=1.5, longitude=2.5, timestamp=timestamp))


class TestDashboard:
    def test_empty_store(self, db):
        data = get_dashboard_data(db)
        assert data.active_security_officers == 0
        assert data.officers_on_duty == 0
        assert data.active_vehicles == 0
        assert data.vehicles_in_use == 0
        assert data.total_active_routes == 0
        assert data.recent_location_updates == []

    def test_example_scenario(self, db):
        officer_a = make_officer(db, "A", OfficerStatus.active)
        make_officer(db, "B", OfficerStatus.on_duty)
        vehicle = make_vehicle(db, "V")
        driver = make_driver(db)
        assign_driver(db, vehicle.id, driver.id)
        create_route(db, RouteCreate(entity_type="security_officer", entity_id=officer_a.id))
        add_point(db, "security_officer", officer_a.id, datetime.utcnow())

        data = get_dashboard_data(db)
        assert data.active_security_officers == 1
        assert data.officers_on_duty == 1
        assert data.active_vehicles == 1
        assert data.vehicles_in_use == 1
        assert data.total_active_routes == 1
        assert len(data.recent_location_updates) == 1
        assert isinstance(data.recent_location_updates[0].latitude, float)

    def test_vehicles_in_use_requires_active_vehicle_and_assignment(self, db):
        in_service = make_vehicle(db, "V-1")
        in_shop = make_vehicle(db, "V-2", VehicleStatus.maintenance)
        returned = make_vehicle(db, "V-3")
        d1, d2, d3 = make_driver(db, "DL-1"), make_driver(db, "DL-2"), make_driver(db, "DL-3")
        assign_driver(db, in_service.id, d1.id)
        assign_driver(db, in_service.id, d2.id)   # reassignment still one vehicle
        assign_driver(db, in_shop.id, d3.id)
        assign_driver(db, returned.id, d3.id)
        unassign_driver(db, returned.id)

        assert get_dashboard_data(db).vehicles_in_use == 1

    def test_recent_updates_window_and_limit(self, db):
        officer = make_officer(db)
        now = datetime.utcnow()
        add_point(db, "security_officer", officer.id, now - timedelta(hours=30))
        for i in range(12):
            add_point(db, "security_officer", officer.id, now - timedelta(minutes=i))

        recent = get_dashboard_data(db).recent_location_updates
        assert len(recent) == 10
        stamps = [p.timestamp for p in recent]
        assert stamps == sorted(stamps, reverse=True)
        assert all(p.timestamp >= now - timedelta(hours=24) for p in recent)
        assert db.query(LocationPoint).count() == 13

    def test_future_points_not_counted_as_recent(self, db):
        officer = make_officer(db)
        add_point(db, "security_officer", officer.id, datetime.utcnow() + timedelta(hours=2))
        current = add_point(db, "security_officer", officer.id, datetime.utcnow() - timedelta(minutes=1))

        assert [p.id for p in get_dashboard_data(db).recent_location_updates] == [current.id]
