"""Google Directions API adapter. Expects coordinates as ``lat,lng``."""

from datetime import datetime
from typing import Any

import requests

from core.errors import ErrorCode, ProviderError
from core.models import GeoPoint, LatLng, RouteEstimate
from core.routing.providers import RouteProvider, build_estimate

DIRECTIONS_URL = "https://maps.googleapis.com/maps/api/directions/json"


def _format(point: LatLng) -> str:
    return f"{point.lat},{point.lng}"


class GoogleDirectionsProvider(RouteProvider):
    name = "google"

    def __init__(self, api_key: str, timeout: float = 10.0, url: str = DIRECTIONS_URL):
        self._api_key = api_key
        self._timeout = timeout
        self._url = url

    def resolve(self, origin: GeoPoint, destination: GeoPoint, departure_at: datetime) -> RouteEstimate:
        data = self._fetch(origin.as_lat_lng(), destination.as_lat_lng(), departure_at)

        if data.get("status") != "OK" or not data.get("routes"):
            raise ProviderError(self.name, f"no route found (status={data.get('status')})")

        try:
            route = data["routes"][0]
            leg = route["legs"][0]
            # Traffic-aware duration is only returned for departures with a departure_time
            duration = leg.get("duration_in_traffic") or leg["duration"]
            polyline = (route.get("overview_polyline") or {}).get("points")
            return build_estimate(
                self.name,
                distance_meters=float(leg["distance"]["value"]),
                duration_seconds=float(duration["value"]),
                departure_at=departure_at,
                polyline=polyline,
            )
        except (KeyError, IndexError, TypeError, ValueError) as e:
            raise ProviderError(self.name, f"malformed response: {e}") from e

    def _fetch(self, origin: LatLng, destination: LatLng, departure_at: datetime) -> dict[str, Any]:
        try:
            response = requests.get(
                self._url,
                params={
                    "origin": _format(origin),
                    "destination": _format(destination),
                    "departure_time": int(departure_at.timestamp()),
                    "key": self._api_key,
                },
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
