# tests/test_entity_service.py
"""Unit tests for the entity registry (officers, vehicles, drivers)."""

import pytest
from pydantic import ValidationError
from app.models.corporate_vehicle import CorporateVehicle
from app.models.enums import EntityType, OfficerStatus, VehicleStatus, VehicleType
from app.schemas.corporate_vehicle import CorporateVehicleCreate
from app.schemas.driver import DriverCreate
from app.schemas.security_officer import SecurityOfficerCreate
from app.services import entity_service
from app.services.assignment_service import assign_driver
from app.utils.errors import ConstraintViolation, NotFound
from tests.factories import make_driver, make_officer, make_vehicle


def vehicle_input(plate="ABC-123", **overrides):
    data = dict(license_plate=plate, make="Ford", model="Transit", year=2022, vehicle_type="van")
    data.update(overrides)
    return CorporateVehicleCreate(**data)


class TestSecurityOfficers:
    def test_status_defaults_to_active(self, db):
        officer = entity_service.create_officer(db, SecurityOfficerCreate(name="Jane", badge_number="B-100"))
        assert officer.id is not None
        assert officer.status == OfficerStatus.active
        assert officer.phone is None
        assert officer.created_at is not None

    def test_explicit_status_kept(self, db):
        officer = entity_service.create_officer(
            db, SecurityOfficerCreate(name="Jane", badge_number="B-100", status="on_duty"))
        assert officer.status == OfficerStatus.on_duty

    def test_duplicate_badge_rejected(self, db):
        entity_service.create_officer(db, SecurityOfficerCreate(name="Jane", badge_number="B-100"))
        with pytest.raises(ConstraintViolation):
            entity_service.create_officer(db, SecurityOfficerCreate(name="Other", badge_number="B-100"))
        assert len(entity_service.list_officers(db)) == 1

    def test_list_in_insertion_order(self, db):
        for badge in ("B-3", "B-1", "B-2"):
            entity_service.create_officer(db, SecurityOfficerCreate(name="X", badge_number=badge))
        assert [o.badge_number for o in entity_service.list_officers(db)] == ["B-3", "B-1", "B-2"]

    def test_empty_name_invalid(self):
        with pytest.raises(ValidationError):
            SecurityOfficerCreate(name="", badge_number="B-1")

    def test_bad_email_invalid(self):
        with pytest.raises(ValidationError):
            SecurityOfficerCreate(name="Jane", badge_number="B-1", email="not-an-email")


class TestCorporateVehicles:
    def test_create_defaults(self, db):
        vehicle = entity_service.create_vehicle(db, vehicle_input())
        assert vehicle.status == VehicleStatus.active
        assert vehicle.vehicle_type == VehicleType.van

    def test_duplicate_plate_leaves_table_unchanged(self, db):
        entity_service.create_vehicle(db, vehicle_input("DUP-1"))
        with pytest.raises(ConstraintViolation):
            entity_service.create_vehicle(db, vehicle_input("DUP-1", make="Honda"))
        count = db.query(CorporateVehicle).filter(CorporateVehicle.license_plate == "DUP-1").count()
        assert count == 1

    @pytest.mark.parametrize("year", [1899, 2101])
    def test_year_out_of_range(self, year):
        with pytest.raises(ValidationError):
            vehicle_input(year=year)

    def test_unknown_vehicle_type(self):
        with pytest.raises(ValidationError):
            vehicle_input(vehicle_type="bus")

    def test_list_with_driver(self, db):
        v1 = make_vehicle(db, "V-1")
        make_vehicle(db, "V-2")
        driver = make_driver(db, name="Sam")
        assign_driver(db, v1.id, driver.id)

        rows = entity_service.list_vehicles_with_driver(db)
        assert [r.license_plate for r in rows] == ["V-1", "V-2"]
        assert rows[0].assigned_driver_id == driver.id
        assert rows[0].assigned_driver_name == "Sam"
        assert rows[1].assigned_driver_id is None

    def test_get_missing_vehicle(self, db):
        with pytest.raises(NotFound):
            entity_service.get_vehicle(db, 999)


class TestDrivers:
    def test_create_and_list(self, db):
        driver = entity_service.create_driver(
            db, DriverCreate(name="Ann", license_number="DL-9", email="ann@acme-security.com"))
        assert driver.status.value == "active"
        assert driver.email == "ann@acme-security.com"
        assert [d.id for d in entity_service.list_drivers(db)] == [driver.id]

    def test_duplicate_license_number(self, db):
        entity_service.create_driver(db, DriverCreate(name="Ann", license_number="DL-9"))
        with pytest.raises(ConstraintViolation):
            entity_service.create_driver(db, DriverCreate(name="Bob", license_number="DL-9"))


class TestEntityLookup:
    def test_entity_type_selects_table(self, db):
        officer = make_officer(db)
        assert entity_service.ensure_entity_exists(db, EntityType.security_officer, officer.id) is officer
        with pytest.raises(NotFound, match="Corporate vehicle"):
            entity_service.ensure_entity_exists(db, EntityType.corporate_vehicle, officer.id)
