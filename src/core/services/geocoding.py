"""Forward and reverse geocoding against Nominatim (OpenStreetMap).

Single provider, no fallback chain. Both lookups return ``None`` instead of
raising when the provider finds nothing or is unavailable.
"""

import logging
from typing import Any

import requests

from core.config import Config
from core.errors import ErrorCode, ProviderError
from core.models import GeocodeResult, GeoPoint

logger = logging.getLogger(__name__)


class GeocodeResolver:
    name = "nominatim"

    def __init__(
        self,
        base_url: str,
        user_agent: str,
        country_codes: str = "",
        timeout: float = 10.0,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        # Nominatim's usage policy requires an identifying User-Agent
        self._headers = {"User-Agent": user_agent}
        self._country_codes = country_codes
        self._timeout = timeout

    def geocode(self, address: str) -> GeocodeResult | None:
        params: dict[str, Any] = {"q": address, "format": "json", "limit": 1}
        if self._country_codes:
            params["countrycodes"] = self._country_codes

        try:
            results = self._get("/search", params)
            if not results:
                logger.info("No geocoding result for %r", address)
                return None
            first = results[0]
            return GeocodeResult(
                latitude=float(first["lat"]),
                longitude=float(first["lon"]),
                display_name=first["display_name"],
            )
        except ProviderError as e:
            logger.warning("Geocoding failed for %r: %s", address, e.message)
        except (KeyError, IndexError, TypeError, ValueError) as e:
            logger.warning("Malformed geocoding response for %r: %s", address, e)
        return None

    def reverse_geocode(self, point: GeoPoint) -> str | None:
        params = {"lat": point.latitude, "lon": point.longitude, "format": "json"}

        try:
            result = self._get("/reverse", params)
        except ProviderError as e:
            logger.warning("Reverse geocoding failed for %s: %s", point.as_lat_lng(), e.message)
            return None

        if not isinstance(result, dict) or not result.get("display_name"):
            logger.info("No reverse geocoding result for %s", point.as_lat_lng())
            return None
        return result["display_name"]

    def _get(self, path: str, params: dict[str, Any]) -> Any:
        try:
            response = requests.get(
                f"{self._base_url}{path}",
                params=params,
                headers=self._headers,
                timeout=self._timeout,
            )
            response.raise_for_status()
            return response.json()
        except requests.Timeout as e:
            raise ProviderError(self.name, "request timed out", code=ErrorCode.TIMEOUT) from e
        except requests.RequestException as e:
            raise ProviderError(self.name, f"request failed: {e}") from e
        except ValueError as e:
            raise ProviderError(self.name, f"invalid JSON: {e}") from e


def build_geocode_resolver(config: Config) -> GeocodeResolver:
    return GeocodeResolver(
        base_url=config.nominatim_url,
        user_agent=config.nominatim_user_agent,
        country_codes=config.nominatim_country_codes,
        timeout=config.route_provider_timeout_seconds,
    )
