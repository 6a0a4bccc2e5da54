"""POST /trips: a driver publishes a trip."""

import logging
from typing import Any

from core.http import api_handler, json_response, model_body, parse_body, require_driver
from core.models import CreateTripRequest
from core.services.trips import build_trip_manager

logger = logging.getLogger(__name__)


@api_handler
def handler(event: dict[str, Any], context: object) -> dict[str, Any]:
    driver_id = require_driver(event)
    request = parse_body(event, CreateTripRequest)

    trip = build_trip_manager().create(driver_id, request)

    logger.info("Driver %s created trip %s", driver_id, trip.id)
    return json_response(201, model_body(trip))
