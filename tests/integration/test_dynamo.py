"""Integration tests for the trip and vehicle repositories against DynamoDB Local."""

from datetime import datetime, timedelta, timezone
from uuid import uuid4

import pytest

from core.config import get_config
from core.db import TripRepository, VehicleRepository
from core.errors import ConcurrentModificationError
from core.models import GeoPoint, Place, Trip, TripStatus, VehicleStatus


def _trip(driver_id: str, departure_at: datetime, **overrides) -> Trip:
    now = datetime.now(timezone.utc)
    fields = dict(
        id=str(uuid4()),
        driver_id=driver_id,
        vehicle_id="veh-001",
        origin=Place(name="São Paulo", point=GeoPoint(latitude=-23.5505, longitude=-46.6333)),
        destination=Place(name="Rio de Janeiro", point=GeoPoint(latitude=-22.9068, longitude=-43.1729)),
        departure_at=departure_at,
        estimated_arrival=departure_at + timedelta(minutes=361),
        distance_km=469.0,
        duration_minutes=361,
        created_at=now,
        updated_at=now,
    )
    fields.update(overrides)
    return Trip(**fields)


@pytest.fixture
def trips(trips_table, dynamodb_client):
    return TripRepository(dynamodb_client, get_config().trips_table)


@pytest.fixture
def vehicles(vehicles_table, dynamodb_client):
    return VehicleRepository(dynamodb_client, get_config().vehicles_table)


@pytest.mark.integration
def test_insert_and_get_trip(trips, departure):
    trip = _trip("drv-001", departure, notes="Two seats left", available_seats=2)

    trips.insert(trip)
    stored = trips.get(trip.id)

    assert stored == trip


@pytest.mark.integration
def test_get_missing_trip_returns_none(trips):
    assert trips.get("does-not-exist") is None


@pytest.mark.integration
def test_insert_twice_is_rejected(trips, departure):
    trip = _trip("drv-001", departure)
    trips.insert(trip)

    with pytest.raises(ConcurrentModificationError):
        trips.insert(trip)


@pytest.mark.integration
def test_replace_with_stale_version_is_rejected(trips, departure):
    trip = _trip("drv-001", departure)
    trips.insert(trip)

    started = trip.model_copy(update={"status": TripStatus.ACTIVE, "version": 2})
    trips.replace(started, expected_version=1)

    cancelled = trip.model_copy(update={"status": TripStatus.CANCELLED, "version": 2})
    with pytest.raises(ConcurrentModificationError):
        trips.replace(cancelled, expected_version=1)

    assert trips.get(trip.id).status == TripStatus.ACTIVE


@pytest.mark.integration
def test_delete_with_stale_version_is_rejected(trips, departure):
    trip = _trip("drv-001", departure)
    trips.insert(trip)

    with pytest.raises(ConcurrentModificationError):
        trips.delete(trip.id, expected_version=7)

    trips.delete(trip.id, expected_version=1)
    assert trips.get(trip.id) is None


@pytest.mark.integration
def test_list_by_driver_newest_departure_first(trips, departure):
    early = _trip("drv-002", departure)
    late = _trip("drv-002", departure + timedelta(days=2))
    other = _trip("drv-003", departure + timedelta(days=1))
    for trip in (early, late, other):
        trips.insert(trip)

    listed = trips.list_by_driver("drv-002")

    assert [trip.id for trip in listed] == [late.id, early.id]


@pytest.mark.integration
def test_search_filters_and_orders_by_departure(trips, departure):
    first = _trip("drv-004", departure)
    second = _trip("drv-004", departure + timedelta(hours=3))
    cancelled = _trip("drv-004", departure + timedelta(hours=1), status=TripStatus.CANCELLED)
    for trip in (second, cancelled, first):
        trips.insert(trip)

    found = trips.search(status=TripStatus.SCHEDULED, driver_id="drv-004", from_date=departure)

    assert [trip.id for trip in found] == [first.id, second.id]


@pytest.mark.integration
def test_find_vehicle_by_driver_and_status(vehicles_table, vehicles):
    vehicles_table.put_item(
        Item={"vehicleId": "veh-010", "driverId": "drv-010", "status": "PENDING", "plate": "ABC1D23"}
    )
    vehicles_table.put_item(Item={"vehicleId": "veh-011", "driverId": "drv-010", "status": "APPROVED"})

    approved = vehicles.find_by_driver("drv-010", VehicleStatus.APPROVED)
    assert approved is not None
    assert approved.id == "veh-011"

    assert vehicles.find_by_driver("drv-999") is None
