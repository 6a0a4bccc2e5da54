"""REST API Lambda authorizer: validates the Clerk JWT in the Authorization header."""

import asyncio
from typing import Any

from core.auth import get_auth_provider
from core.errors import AuthenticationError

BEARER_PREFIX = "bearer "


def handler(event: dict[str, Any], context: object) -> dict[str, Any]:
    # AuthProvider methods are async; asyncio.run() bridges them into this sync handler.
    try:
        token = _bearer_token(event)
        auth_provider = get_auth_provider()
        auth_user = asyncio.run(auth_provider.verify_token(token))
        return _allow_policy(event["methodArn"], auth_user.user_id, auth_user.roles)
    except (KeyError, AuthenticationError):
        return _deny_policy(event["methodArn"])


def _bearer_token(event: dict[str, Any]) -> str:
    headers = {name.lower(): value for name, value in (event.get("headers") or {}).items()}
    header = headers.get("authorization") or event.get("authorizationToken") or ""
    if not header.lower().startswith(BEARER_PREFIX):
        raise AuthenticationError("Missing bearer token")
    token = header[len(BEARER_PREFIX) :].strip()
    if not token:
        raise AuthenticationError("Missing bearer token")
    return token


def _allow_policy(method_arn: str, user_id: str, roles: list[str]) -> dict[str, Any]:
    return {
        "principalId": user_id,
        "policyDocument": {
            "Version": "2012-10-17",
            "Statement": [{"Action": "execute-api:Invoke", "Effect": "Allow", "Resource": method_arn}],
        },
        # Authorizer context values must be scalars
        "context": {"userId": user_id, "roles": ",".join(roles)},
    }


def _deny_policy(method_arn: str) -> dict[str, Any]:
    return {
        "principalId": "unauthorized",
        "policyDocument": {
            "Version": "2012-10-17",
            "Statement": [{"Action": "execute-api:Invoke", "Effect": "Deny", "Resource": method_arn}],
        },
    }
