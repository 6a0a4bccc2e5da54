"""POST /routes/calculate: route estimate between two points, never failing on provider outages."""

from typing import Any

from core.config import get_config
from core.http import api_handler, json_response, model_body, parse_body
from core.models import CalculateRouteRequest
from core.routing import build_route_resolver, google_maps_url, waze_url


@api_handler
def handler(event: dict[str, Any], context: object) -> dict[str, Any]:
    request = parse_body(event, CalculateRouteRequest)
    resolver = build_route_resolver(get_config())

    estimate = resolver.resolve(request.origin, request.destination, request.departure_at)

    body = model_body(estimate)
    body["wazeUrl"] = waze_url(request.destination)
    body["googleMapsUrl"] = google_maps_url(request.origin, request.destination)
    return json_response(200, body)
