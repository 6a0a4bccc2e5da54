"""Route resolution through an ordered provider chain ending in the haversine fallback."""

import logging
import time
from collections.abc import Sequence
from datetime import datetime

from core.config import Config
from core.errors import ProviderError
from core.models import GeoPoint, RouteEstimate
from core.routing.google import GoogleDirectionsProvider
from core.routing.haversine import HaversineProvider
from core.routing.openrouteservice import OpenRouteServiceProvider
from core.routing.providers import RouteProvider

logger = logging.getLogger(__name__)


class RouteResolver:
    """Tries each configured provider in order; the haversine provider always comes last.

    ``resolve`` never raises: provider failures advance the chain, and anything
    unexpected at this boundary is logged and answered by the fallback.
    """

    def __init__(self, providers: Sequence[RouteProvider] = ()):
        self._fallback = HaversineProvider()
        self._chain: list[RouteProvider] = [*providers, self._fallback]

    @property
    def provider_names(self) -> list[str]:
        return [provider.name for provider in self._chain]

    def resolve(self, origin: GeoPoint, destination: GeoPoint, departure_at: datetime) -> RouteEstimate:
        try:
            for provider in self._chain:
                started = time.monotonic()
                try:
                    estimate = provider.resolve(origin, destination, departure_at)
                except ProviderError as e:
                    logger.warning("Route provider %s failed, trying next: %s", provider.name, e.message)
                    continue
                logger.info(
                    "Route resolved by %s in %.0f ms: %.1f km, %d min",
                    provider.name,
                    (time.monotonic() - started) * 1000,
                    estimate.distance_km,
                    estimate.duration_minutes,
                )
                return estimate
        except Exception:
            logger.exception("Route resolution failed unexpectedly, using %s", self._fallback.name)

        return self._fallback.resolve(origin, destination, departure_at)


def build_route_resolver(config: Config) -> RouteResolver:
    """Assemble the provider chain from whichever credentials are configured."""
    providers: list[RouteProvider] = []
    if config.google_maps_api_key:
        providers.append(
            GoogleDirectionsProvider(config.google_maps_api_key, timeout=config.route_provider_timeout_seconds)
        )
    if config.openrouteservice_api_key:
        providers.append(
            OpenRouteServiceProvider(config.openrouteservice_api_key, timeout=config.route_provider_timeout_seconds)
        )
    return RouteResolver(providers)
