import base64
import json

import pytest

from core.errors import (
    AuthenticationError,
    ErrorCode,
    InvalidTransitionError,
    TripCreationError,
    TripForbiddenError,
    ValidationError,
)
from core.http import (
    api_handler,
    caller_id,
    error_response,
    parse_body,
    parse_query,
    path_param,
    query_param,
    require_driver,
)
from core.models import CoordinatesRequest, TripQuery


def _event(**fields):
    return {"requestContext": {"authorizer": {"userId": "drv-1", "roles": "driver,customer"}}, **fields}


# --- Parsing ---


def test_parse_body():
    request = parse_body(_event(body=json.dumps({"lat": -23.5, "lng": -46.6})), CoordinatesRequest)
    assert request.lat == -23.5


def test_parse_body_base64():
    raw = base64.b64encode(json.dumps({"lat": 1, "lng": 2}).encode()).decode()
    request = parse_body(_event(body=raw, isBase64Encoded=True), CoordinatesRequest)
    assert (request.lat, request.lng) == (1.0, 2.0)


def test_parse_body_missing():
    with pytest.raises(ValidationError) as exc_info:
        parse_body(_event(body=None), CoordinatesRequest)
    assert exc_info.value.code == ErrorCode.INVALID_REQUEST


def test_parse_body_invalid_names_field():
    with pytest.raises(ValidationError, match="lat"):
        parse_body(_event(body=json.dumps({"lat": 123, "lng": 0})), CoordinatesRequest)


def test_parse_body_not_json():
    with pytest.raises(ValidationError):
        parse_body(_event(body="{not json"), CoordinatesRequest)


def test_parse_query():
    query = parse_query(_event(queryStringParameters={"status": "ACTIVE"}), TripQuery)
    assert query.status.value == "ACTIVE"
    assert parse_query(_event(queryStringParameters=None), TripQuery).status is None


def test_query_param_strips_and_requires():
    assert query_param(_event(queryStringParameters={"address": "  Curitiba "}), "address") == "Curitiba"
    with pytest.raises(ValidationError):
        query_param(_event(queryStringParameters={"address": "   "}), "address")


def test_path_param():
    assert path_param(_event(pathParameters={"id": "trip-1"}), "id") == "trip-1"
    with pytest.raises(ValidationError):
        path_param(_event(pathParameters=None), "id")


# --- Caller identity ---


def test_caller_and_driver():
    assert caller_id(_event()) == "drv-1"
    assert require_driver(_event()) == "drv-1"


def test_require_driver_rejects_customer():
    event = {"requestContext": {"authorizer": {"userId": "cust-1", "roles": "customer"}}}
    with pytest.raises(TripForbiddenError) as exc_info:
        require_driver(event)
    assert exc_info.value.code == ErrorCode.NOT_A_DRIVER


def test_caller_id_requires_authorizer_context():
    with pytest.raises(AuthenticationError):
        caller_id({"requestContext": {}})


# --- Responses ---


def test_error_response_client_error_has_detail():
    response = error_response(InvalidTransitionError("trip-1", "COMPLETED", "start"))
    body = json.loads(response["body"])

    assert response["statusCode"] == 409
    assert body["error"] == "INVALID_TRANSITION"
    assert body["detail"] == "Trip trip-1 is COMPLETED; cannot start"


def test_error_response_server_error_is_opaque():
    response = error_response(TripCreationError("psql: password authentication failed"))
    body = json.loads(response["body"])

    assert response["statusCode"] == 500
    assert "detail" not in body
    assert "password" not in response["body"]


def test_api_handler_maps_domain_errors():
    @api_handler
    def handler(event, context):
        raise TripForbiddenError("not yours")

    assert handler({}, None)["statusCode"] == 403


def test_api_handler_hides_unexpected_errors(caplog):
    @api_handler
    def handler(event, context):
        raise KeyError("secret internals")

    response = handler({}, None)

    assert response["statusCode"] == 500
    assert json.loads(response["body"])["error"] == "INTERNAL_ERROR"
    assert "secret internals" not in response["body"]
    assert "Unhandled error" in caplog.text
