"""Route resolution: provider adapters, the fallback chain, and navigation links."""

from core.routing.google import GoogleDirectionsProvider
from core.routing.haversine import HaversineProvider
from core.routing.navigation import google_maps_url, waze_url
from core.routing.openrouteservice import OpenRouteServiceProvider
from core.routing.providers import RouteProvider
from core.routing.resolver import RouteResolver, build_route_resolver

__all__ = [
    "GoogleDirectionsProvider",
    "HaversineProvider",
    "OpenRouteServiceProvider",
    "RouteProvider",
    "RouteResolver",
    "build_route_resolver",
    "google_maps_url",
    "waze_url",
]
