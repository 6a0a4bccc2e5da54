"""Pydantic models for trips and the request bodies that create or change them."""

from enum import Enum

from pydantic import ConfigDict, Field, model_validator

from core.models.common import CamelModel, GeoPoint, Latitude, Longitude, UtcDatetime


class TripStatus(str, Enum):
    SCHEDULED = "SCHEDULED"
    ACTIVE = "ACTIVE"
    COMPLETED = "COMPLETED"
    CANCELLED = "CANCELLED"


class Place(CamelModel):
    model_config = ConfigDict(frozen=True)

    name: str
    point: GeoPoint


class LastLocation(CamelModel):
    model_config = ConfigDict(frozen=True)

    point: GeoPoint
    recorded_at: UtcDatetime


class Trip(CamelModel):
    """A driver-published travel leg. Immutable; changes go through ``model_copy``."""

    model_config = ConfigDict(frozen=True)

    id: str
    driver_id: str
    vehicle_id: str
    origin: Place
    destination: Place
    departure_at: UtcDatetime
    estimated_arrival: UtcDatetime
    distance_km: float = Field(..., ge=0.0)
    duration_minutes: int = Field(..., ge=0)
    polyline: str | None = None
    available_seats: int | None = Field(default=None, ge=0)
    available_capacity_kg: float | None = Field(default=None, ge=0.0)
    status: TripStatus = TripStatus.SCHEDULED
    notes: str | None = None
    last_location: LastLocation | None = None
    created_at: UtcDatetime
    updated_at: UtcDatetime
    version: int = Field(default=1, ge=1)


class CalculateRouteRequest(CamelModel):
    origin_lat: Latitude
    origin_lng: Longitude
    dest_lat: Latitude
    dest_lng: Longitude
    departure_at: UtcDatetime

    @property
    def origin(self) -> GeoPoint:
        return GeoPoint(latitude=self.origin_lat, longitude=self.origin_lng)

    @property
    def destination(self) -> GeoPoint:
        return GeoPoint(latitude=self.dest_lat, longitude=self.dest_lng)


class CreateTripRequest(CamelModel):
    origin_name: str = Field(..., min_length=1, max_length=255)
    origin_lat: Latitude
    origin_lng: Longitude
    dest_name: str = Field(..., min_length=1, max_length=255)
    dest_lat: Latitude
    dest_lng: Longitude
    departure_at: UtcDatetime
    vehicle_id: str | None = Field(default=None, min_length=1)
    available_seats: int | None = Field(default=None, ge=0)
    available_capacity_kg: float | None = Field(default=None, ge=0.0)
    notes: str | None = Field(default=None, max_length=1000)

    @property
    def origin(self) -> Place:
        return Place(name=self.origin_name, point=GeoPoint(latitude=self.origin_lat, longitude=self.origin_lng))

    @property
    def destination(self) -> Place:
        return Place(name=self.dest_name, point=GeoPoint(latitude=self.dest_lat, longitude=self.dest_lng))


_NON_NULLABLE_UPDATE_FIELDS = (
    "origin_name",
    "origin_lat",
    "origin_lng",
    "dest_name",
    "dest_lat",
    "dest_lng",
    "departure_at",
)


class UpdateTripRequest(CamelModel):
    """Partial update. Only fields present in the body are applied, tracked via ``model_fields_set``."""

    origin_name: str | None = Field(default=None, min_length=1, max_length=255)
    origin_lat: Latitude | None = None
    origin_lng: Longitude | None = None
    dest_name: str | None = Field(default=None, min_length=1, max_length=255)
    dest_lat: Latitude | None = None
    dest_lng: Longitude | None = None
    departure_at: UtcDatetime | None = None
    available_seats: int | None = Field(default=None, ge=0)
    available_capacity_kg: float | None = Field(default=None, ge=0.0)
    notes: str | None = Field(default=None, max_length=1000)

    @model_validator(mode="after")
    def required_fields_not_null(self) -> "UpdateTripRequest":
        for name in _NON_NULLABLE_UPDATE_FIELDS:
            if name in self.model_fields_set and getattr(self, name) is None:
                raise ValueError(f"{name} cannot be null")
        return self

    def provided(self, name: str) -> bool:
        return name in self.model_fields_set


class CoordinatesRequest(CamelModel):
    """Bare ``lat``/``lng`` pair, used by location updates and reverse geocoding."""

    lat: Latitude
    lng: Longitude

    @property
    def point(self) -> GeoPoint:
        return GeoPoint(latitude=self.lat, longitude=self.lng)


class TripQuery(CamelModel):
    status: TripStatus | None = None
    driver_id: str | None = None
    from_date: UtcDatetime | None = None
