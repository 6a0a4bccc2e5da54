"""PUT /trips/{id}: partial edit of a scheduled trip by its owner."""

from typing import Any

from core.http import api_handler, json_response, model_body, parse_body, path_param, require_driver
from core.models import UpdateTripRequest
from core.services.trips import build_trip_manager


@api_handler
def handler(event: dict[str, Any], context: object) -> dict[str, Any]:
    driver_id = require_driver(event)
    trip_id = path_param(event, "id")
    request = parse_body(event, UpdateTripRequest)

    trip = build_trip_manager().update(trip_id, driver_id, request)
    return json_response(200, model_body(trip))
