"""GET /routes/reverse-geocode?lat=...&lng=...: human-readable address for a point."""

from typing import Any

from core.config import get_config
from core.errors import AddressNotFoundError
from core.http import api_handler, json_response, parse_query
from core.models import CoordinatesRequest
from core.services.geocoding import build_geocode_resolver


@api_handler
def handler(event: dict[str, Any], context: object) -> dict[str, Any]:
    coordinates = parse_query(event, CoordinatesRequest)

    address = build_geocode_resolver(get_config()).reverse_geocode(coordinates.point)
    if address is None:
        raise AddressNotFoundError(f"{coordinates.lat},{coordinates.lng}")

    return json_response(200, {"address": address})
