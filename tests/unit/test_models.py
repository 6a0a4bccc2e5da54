from datetime import datetime, timedelta, timezone

import pytest
from pydantic import ValidationError

from core.models import (
    CalculateRouteRequest,
    CoordinatesRequest,
    CreateTripRequest,
    GeoPoint,
    LatLng,
    LngLat,
    RouteEstimate,
    TripQuery,
    TripStatus,
    UpdateTripRequest,
)

VALID_CREATE = {
    "originName": "São Paulo",
    "originLat": -23.5505,
    "originLng": -46.6333,
    "destName": "Rio de Janeiro",
    "destLat": -22.9068,
    "destLng": -43.1729,
    "departureAt": "2030-03-10T08:00:00Z",
}


# --- GeoPoint ---


def test_geo_point_coordinate_orders():
    point = GeoPoint(latitude=-23.5, longitude=-46.6)
    assert point.as_lat_lng() == LatLng(lat=-23.5, lng=-46.6)
    assert point.as_lng_lat() == LngLat(lng=-46.6, lat=-23.5)
    assert tuple(point.as_lng_lat()) == (-46.6, -23.5)


@pytest.mark.parametrize("lat,lng", [(90.1, 0.0), (-90.1, 0.0), (0.0, 180.1), (0.0, -180.1)])
def test_geo_point_out_of_range(lat, lng):
    with pytest.raises(ValidationError):
        GeoPoint(latitude=lat, longitude=lng)


def test_geo_point_is_immutable():
    point = GeoPoint(latitude=1.0, longitude=2.0)
    with pytest.raises(ValidationError):
        point.latitude = 3.0  # type: ignore[misc]


# --- Requests ---


def test_create_trip_request_from_camel_case():
    request = CreateTripRequest.model_validate(VALID_CREATE)
    assert request.origin.name == "São Paulo"
    assert request.destination.point == GeoPoint(latitude=-22.9068, longitude=-43.1729)
    assert request.departure_at == datetime(2030, 3, 10, 8, 0, tzinfo=timezone.utc)
    assert request.vehicle_id is None


def test_create_trip_request_naive_departure_is_utc():
    request = CreateTripRequest.model_validate({**VALID_CREATE, "departureAt": "2030-03-10T08:00:00"})
    assert request.departure_at.tzinfo == timezone.utc


def test_create_trip_request_offset_departure_normalized_to_utc():
    request = CreateTripRequest.model_validate({**VALID_CREATE, "departureAt": "2030-03-10T05:00:00-03:00"})
    assert request.departure_at == datetime(2030, 3, 10, 8, 0, tzinfo=timezone.utc)
    assert request.departure_at.utcoffset() == timedelta(0)


@pytest.mark.parametrize("field", ["originName", "destLat", "departureAt"])
def test_create_trip_request_missing_field(field):
    with pytest.raises(ValidationError):
        CreateTripRequest.model_validate({k: v for k, v in VALID_CREATE.items() if k != field})


def test_create_trip_request_rejects_empty_name():
    with pytest.raises(ValidationError):
        CreateTripRequest.model_validate({**VALID_CREATE, "originName": ""})


def test_create_trip_request_rejects_negative_seats():
    with pytest.raises(ValidationError):
        CreateTripRequest.model_validate({**VALID_CREATE, "availableSeats": -1})


def test_calculate_route_request_points():
    request = CalculateRouteRequest.model_validate(
        {"originLat": 1.0, "originLng": 2.0, "destLat": 3.0, "destLng": 4.0, "departureAt": "2030-01-01T00:00:00Z"}
    )
    assert request.origin == GeoPoint(latitude=1.0, longitude=2.0)
    assert request.destination == GeoPoint(latitude=3.0, longitude=4.0)


def test_update_trip_request_tracks_presence():
    request = UpdateTripRequest.model_validate({"notes": None, "availableSeats": 3})
    assert request.provided("notes")
    assert request.provided("available_seats")
    assert not request.provided("origin_name")


@pytest.mark.parametrize("field", ["originName", "destLat", "departureAt"])
def test_update_trip_request_rejects_null_for_required_fields(field):
    with pytest.raises(ValidationError, match="cannot be null"):
        UpdateTripRequest.model_validate({field: None})


def test_coordinates_request_point():
    request = CoordinatesRequest.model_validate({"lat": "-23.5", "lng": "-46.6"})
    assert request.point == GeoPoint(latitude=-23.5, longitude=-46.6)


def test_trip_query_all_optional():
    query = TripQuery.model_validate({})
    assert query.status is None and query.driver_id is None and query.from_date is None

    query = TripQuery.model_validate({"status": "ACTIVE", "driverId": "drv-1", "fromDate": "2030-01-01T00:00:00Z"})
    assert query.status == TripStatus.ACTIVE
    assert query.from_date == datetime(2030, 1, 1, tzinfo=timezone.utc)


def test_trip_query_rejects_unknown_status():
    with pytest.raises(ValidationError):
        TripQuery.model_validate({"status": "PAUSED"})


# --- RouteEstimate ---


def test_route_estimate_serializes_camel_case():
    estimate = RouteEstimate(
        distance_km=12.3,
        duration_minutes=15,
        estimated_arrival=datetime(2030, 1, 1, 8, 15, tzinfo=timezone.utc),
        provider="haversine",
    )
    dumped = estimate.model_dump(mode="json", by_alias=True)
    assert dumped == {
        "distanceKm": 12.3,
        "durationMinutes": 15,
        "estimatedArrival": "2030-01-01T08:15:00Z",
        "polyline": None,
        "provider": "haversine",
    }
