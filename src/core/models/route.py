"""Pydantic models for route estimates and geocoding."""

from pydantic import Field

from core.models.common import CamelModel, UtcDatetime


class RouteEstimate(CamelModel):
    distance_km: float = Field(..., ge=0.0)
    duration_minutes: int = Field(..., ge=0)
    estimated_arrival: UtcDatetime
    polyline: str | None = None
    provider: str


class GeocodeResult(CamelModel):
    latitude: float
    longitude: float
    display_name: str
