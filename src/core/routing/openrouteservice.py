"""OpenRouteService directions adapter. Expects coordinates as ``[lng, lat]``."""

from datetime import datetime
from typing import Any

import requests

from core.errors import ErrorCode, ProviderError
from core.models import GeoPoint, LngLat, RouteEstimate
from core.routing.providers import RouteProvider, build_estimate

DIRECTIONS_URL = "https://api.openrouteservice.org/v2/directions/driving-car"


class OpenRouteServiceProvider(RouteProvider):
    name = "openrouteservice"

    def __init__(self, api_key: str, timeout: float = 10.0, url: str = DIRECTIONS_URL):
        self._api_key = api_key
        self._timeout = timeout
        self._url = url

    def resolve(self, origin: GeoPoint, destination: GeoPoint, departure_at: datetime) -> RouteEstimate:
        data = self._fetch(origin.as_lng_lat(), destination.as_lng_lat())

        routes = data.get("routes")
        if not routes:
            raise ProviderError(self.name, "no route found")

        try:
            route = routes[0]
            summary = route["summary"]
            geometry = route.get("geometry")
            # ORS omits distance/duration from the summary for zero-length routes
            return build_estimate(
                self.name,
                distance_meters=float(summary.get("distance", 0.0)),
                duration_seconds=float(summary.get("duration", 0.0)),
                departure_at=departure_at,
                polyline=geometry if isinstance(geometry, str) else None,
            )
        except (KeyError, IndexError, TypeError, ValueError, AttributeError) as e:
            raise ProviderError(self.name, f"malformed response: {e}") from e

    def _fetch(self, origin: LngLat, destination: LngLat) -> dict[str, Any]:
        try:
            response = requests.post(
                self._url,
                json={"coordinates": [[origin.lng, origin.lat], [destination.lng, destination.lat]]},
                headers={"Authorization": self._api_key, "Content-Type": "application/json"},
                timeout=self._timeout,
            )
            response.raise_for_status()
            data = response.json()
        except requests.Timeout as e:
            raise ProviderError(self.name, "request timed out", code=ErrorCode.TIMEOUT) from e
        except requests.RequestException as e:
            raise ProviderError(self.name, f"request failed: {e}") from e
        except ValueError as e:
            raise ProviderError(self.name, f"invalid JSON: {e}") from e

        if not isinstance(data, dict):
            raise ProviderError(self.name, f"unexpected payload type: {type(data).__name__}")
        return data
