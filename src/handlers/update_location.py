"""PUT /trips/{id}/location: the driver's latest position on a scheduled or active trip."""

from typing import Any

from core.http import api_handler, json_response, model_body, parse_body, path_param, require_driver
from core.models import CoordinatesRequest
from core.services.trips import build_trip_manager


@api_handler
def handler(event: dict[str, Any], context: object) -> dict[str, Any]:
    driver_id = require_driver(event)
    trip_id = path_param(event, "id")
    coordinates = parse_body(event, CoordinatesRequest)

    trip = build_trip_manager().update_location(trip_id, driver_id, coordinates.point)
    return json_response(200, model_body(trip))
