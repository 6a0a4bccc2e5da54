"""GET /routes/geocode?address=...: forward geocoding through Nominatim."""

from typing import Any

from core.config import get_config
from core.errors import AddressNotFoundError
from core.http import api_handler, json_response, model_body, query_param
from core.services.geocoding import build_geocode_resolver


@api_handler
def handler(event: dict[str, Any], context: object) -> dict[str, Any]:
    address = query_param(event, "address")

    result = build_geocode_resolver(get_config()).geocode(address)
    if result is None:
        raise AddressNotFoundError(address)

    return json_response(200, model_body(result))
