"""GET /trips/{id}: one trip with navigation deep links."""

from typing import Any

from core.http import api_handler, json_response, model_body, path_param
from core.routing import google_maps_url, waze_url
from core.services.trips import build_trip_manager


@api_handler
def handler(event: dict[str, Any], context: object) -> dict[str, Any]:
    trip = build_trip_manager().get(path_param(event, "id"))

    body = model_body(trip)
    body["wazeUrl"] = waze_url(trip.destination.point)
    body["googleMapsUrl"] = google_maps_url(trip.origin.point, trip.destination.point)
    return json_response(200, body)
