"""DELETE /trips/{id}: remove a trip that is not in progress."""

from typing import Any

from core.http import api_handler, json_response, path_param, require_driver
from core.services.trips import build_trip_manager


@api_handler
def handler(event: dict[str, Any], context: object) -> dict[str, Any]:
    driver_id = require_driver(event)
    trip_id = path_param(event, "id")

    build_trip_manager().delete(trip_id, driver_id)
    return json_response(200, {"id": trip_id, "deleted": True})
