"""Helpers shared by the API Gateway (REST proxy) Lambda handlers.

Request parsing raises ``ValidationError``; ``api_handler`` turns any
``MarketplaceError`` into a JSON error response and anything else into a
logged 500 that never exposes internal details.
"""

import base64
import functools
import json
import logging
from collections.abc import Callable
from typing import Any, TypeVar

import pydantic
from pydantic import BaseModel

from core.auth.interface import DRIVER_ROLE
from core.errors import (
    AuthenticationError,
    ErrorCode,
    MarketplaceError,
    TripForbiddenError,
    ValidationError,
)

logger = logging.getLogger(__name__)

M = TypeVar("M", bound=BaseModel)
Handler = Callable[[dict[str, Any], Any], dict[str, Any]]


def json_response(status_code: int, body: Any) -> dict[str, Any]:
    return {
        "statusCode": status_code,
        "headers": {"Content-Type": "application/json"},
        "body": json.dumps(body),
    }


def model_body(model: BaseModel) -> dict[str, Any]:
    return model.model_dump(mode="json", by_alias=True)


def error_response(error: MarketplaceError) -> dict[str, Any]:
    body = {"error": error.code.value, "message": error.user_message}
    # Client errors carry a domain-generated explanation; server errors stay opaque
    if error.status_code < 500:
        body["detail"] = error.message
    return json_response(error.status_code, body)


def _describe(error: pydantic.ValidationError) -> str:
    return "; ".join(
        f"{'.'.join(str(part) for part in detail['loc']) or 'body'}: {detail['msg']}"
        for detail in error.errors()
    )


def parse_body(event: dict[str, Any], model_cls: type[M]) -> M:
    raw = event.get("body")
    if not raw:
        raise ValidationError("Request body is required", code=ErrorCode.INVALID_REQUEST)
    if event.get("isBase64Encoded"):
        raw = base64.b64decode(raw).decode("utf-8")

    try:
        return model_cls.model_validate_json(raw)
    except pydantic.ValidationError as e:
        raise ValidationError(_describe(e)) from e


def parse_query(event: dict[str, Any], model_cls: type[M]) -> M:
    params = event.get("queryStringParameters") or {}
    try:
        return model_cls.model_validate(params)
    except pydantic.ValidationError as e:
        raise ValidationError(_describe(e)) from e


def query_param(event: dict[str, Any], name: str) -> str:
    value = (event.get("queryStringParameters") or {}).get(name, "")
    if not value or not value.strip():
        raise ValidationError(f"Query parameter '{name}' is required", code=ErrorCode.INVALID_REQUEST)
    return value.strip()


def path_param(event: dict[str, Any], name: str) -> str:
    value = (event.get("pathParameters") or {}).get(name)
    if not value:
        raise ValidationError(f"Path parameter '{name}' is required", code=ErrorCode.INVALID_REQUEST)
    return value


def _authorizer_context(event: dict[str, Any]) -> dict[str, Any]:
    return (event.get("requestContext") or {}).get("authorizer") or {}


def caller_id(event: dict[str, Any]) -> str:
    user_id = _authorizer_context(event).get("userId")
    if not user_id:
        raise AuthenticationError("Request carries no authenticated caller")
    return user_id


def require_driver(event: dict[str, Any]) -> str:
    """Id of the authenticated caller, who must hold the driver role."""
    user_id = caller_id(event)
    roles = [role for role in _authorizer_context(event).get("roles", "").split(",") if role]
    if DRIVER_ROLE not in roles:
        raise TripForbiddenError(f"User {user_id} is not a driver", code=ErrorCode.NOT_A_DRIVER)
    return user_id


def api_handler(func: Handler) -> Handler:
    @functools.wraps(func)
    def wrapper(event: dict[str, Any], context: Any) -> dict[str, Any]:
        try:
            return func(event, context)
        except MarketplaceError as e:
            if e.status_code >= 500:
                logger.error("%s failed: %s", func.__module__, e.message)
            else:
                logger.info("%s rejected request: %s", func.__module__, e.message)
            return error_response(e)
        except Exception:
            logger.exception("Unhandled error in %s", func.__module__)
            return error_response(MarketplaceError("Unhandled error"))

    return wrapper
