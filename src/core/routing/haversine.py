"""Always-available fallback provider based on great-circle distance."""

from datetime import datetime, timedelta

from core.geo import haversine_km, minutes_from_seconds, road_distance_km, round_distance_km, travel_seconds
from core.models import GeoPoint, RouteEstimate
from core.routing.providers import RouteProvider


class HaversineProvider(RouteProvider):
    """Straight-line distance inflated to an approximate road distance. Makes no network call."""

    name = "haversine"

    def resolve(self, origin: GeoPoint, destination: GeoPoint, departure_at: datetime) -> RouteEstimate:
        straight = haversine_km(origin.latitude, origin.longitude, destination.latitude, destination.longitude)
        distance_km = road_distance_km(straight)
        duration_minutes = minutes_from_seconds(travel_seconds(distance_km))
        return RouteEstimate(
            distance_km=round_distance_km(distance_km),
            duration_minutes=duration_minutes,
            estimated_arrival=departure_at + timedelta(minutes=duration_minutes),
            provider=self.name,
        )
