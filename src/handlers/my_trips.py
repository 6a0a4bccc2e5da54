"""GET /trips/my-trips: the calling driver's trips, newest departure first."""

from typing import Any

from core.http import api_handler, json_response, model_body, require_driver
from core.services.trips import build_trip_manager


@api_handler
def handler(event: dict[str, Any], context: object) -> dict[str, Any]:
    driver_id = require_driver(event)
    trips = build_trip_manager().list_for_driver(driver_id)
    return json_response(200, [model_body(trip) for trip in trips])
