"""Route provider capability shared by every routing backend."""

from abc import ABC, abstractmethod
from datetime import datetime, timedelta

from core.geo import minutes_from_seconds, round_distance_km
from core.models import GeoPoint, RouteEstimate


class RouteProvider(ABC):
    name: str

    @abstractmethod
    def resolve(self, origin: GeoPoint, destination: GeoPoint, departure_at: datetime) -> RouteEstimate:
        """Return a normalized estimate or raise ``ProviderError``."""


def build_estimate(
    provider: str,
    distance_meters: float,
    duration_seconds: float,
    departure_at: datetime,
    polyline: str | None = None,
) -> RouteEstimate:
    """Normalize raw provider units into a ``RouteEstimate``."""
    duration_minutes = minutes_from_seconds(duration_seconds)
    return RouteEstimate(
        distance_km=round_distance_km(distance_meters / 1000),
        duration_minutes=duration_minutes,
        estimated_arrival=departure_at + timedelta(minutes=duration_minutes),
        polyline=polyline,
        provider=provider,
    )
