"""GET /trips: search trips by status, driver and earliest departure."""

from typing import Any

from core.http import api_handler, json_response, model_body, parse_query
from core.models import TripQuery
from core.services.trips import build_trip_manager


@api_handler
def handler(event: dict[str, Any], context: object) -> dict[str, Any]:
    query = parse_query(event, TripQuery)
    trips = build_trip_manager().search(query)
    return json_response(200, [model_body(trip) for trip in trips])
