"""
Pydantic models for the trip marketplace.
"""

from core.models.common import GeoPoint, LatLng, LngLat
from core.models.route import GeocodeResult, RouteEstimate
from core.models.trip import (
    CalculateRouteRequest,
    CoordinatesRequest,
    CreateTripRequest,
    LastLocation,
    Place,
    Trip,
    TripQuery,
    TripStatus,
    UpdateTripRequest,
)
from core.models.vehicle import Vehicle, VehicleStatus

__all__ = [
    "CalculateRouteRequest",
    "CoordinatesRequest",
    "CreateTripRequest",
    "GeoPoint",
    "GeocodeResult",
    "LastLocation",
    "LatLng",
    "LngLat",
    "Place",
    "RouteEstimate",
    "Trip",
    "TripQuery",
    "TripStatus",
    "UpdateTripRequest",
    "Vehicle",
    "VehicleStatus",
]
