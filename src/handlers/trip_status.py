"""PUT /trips/{id}/start, /complete and /cancel.

One module, one entry point per route; each delegates to the matching
lifecycle operation.
"""

import logging
from typing import Any

from core.http import api_handler, json_response, model_body, path_param, require_driver
from core.services.trips import build_trip_manager

logger = logging.getLogger(__name__)


def _apply(event: dict[str, Any], operation: str) -> dict[str, Any]:
    driver_id = require_driver(event)
    trip_id = path_param(event, "id")

    trip = getattr(build_trip_manager(), operation)(trip_id, driver_id)

    logger.info("Trip %s is now %s", trip.id, trip.status.value)
    return json_response(200, model_body(trip))


@api_handler
def start_handler(event: dict[str, Any], context: object) -> dict[str, Any]:
    return _apply(event, "start")


@api_handler
def complete_handler(event: dict[str, Any], context: object) -> dict[str, Any]:
    return _apply(event, "complete")


@api_handler
def cancel_handler(event: dict[str, Any], context: object) -> dict[str, Any]:
    return _apply(event, "cancel")
