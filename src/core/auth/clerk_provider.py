"""Clerk-backed identity: session JWT verification and user lookup.

Marketplace roles live in the user's public metadata under ``roles``; users
without any are plain customers.
"""

from typing import Any

from clerk_backend_api import Clerk, authenticate_request
from clerk_backend_api.security.types import AuthenticateRequestOptions

from core.errors import AuthenticationError, ErrorCode

from .interface import AuthProvider, AuthUser, normalize_roles


class _BearerRequest:
    """Minimal request object carrying the token, as ``authenticate_request`` expects."""

    def __init__(self, token: str):
        self.headers = {"Authorization": f"Bearer {token}"}


def _primary_email(user: Any) -> str:
    addresses = list(user.email_addresses or [])
    for address in addresses:
        if address.id == user.primary_email_address_id:
            return address.email_address
    return addresses[0].email_address if addresses else ""


def _display_name(user: Any) -> str:
    full_name = f"{user.first_name or ''} {user.last_name or ''}".strip()
    return full_name or user.username or ""


def _to_auth_user(user: Any) -> AuthUser:
    metadata = dict(user.public_metadata) if user.public_metadata else {}
    raw_roles = metadata.pop("roles", None)
    return AuthUser(
        user_id=user.id,
        email=_primary_email(user),
        name=_display_name(user),
        roles=normalize_roles(raw_roles if isinstance(raw_roles, list) else None),
        metadata={key: str(value) for key, value in metadata.items()},
    )


class ClerkAuthProvider(AuthProvider):
    def __init__(self, secret_key: str):
        self._client = Clerk(bearer_auth=secret_key)
        self._options = AuthenticateRequestOptions(secret_key=secret_key)

    async def verify_token(self, token: str) -> AuthUser:
        try:
            request_state = authenticate_request(_BearerRequest(token), self._options)
        except Exception as e:
            raise AuthenticationError(f"Token verification failed: {e}", code=ErrorCode.AUTH_FAILED) from e

        if not request_state.is_signed_in or request_state.payload is None:
            raise AuthenticationError(
                f"Token verification failed: {request_state.message or 'unknown'}",
                code=ErrorCode.INVALID_TOKEN,
            )
        return await self.get_user(str(request_state.payload["sub"]))

    async def get_user(self, user_id: str) -> AuthUser:
        try:
            user = self._client.users.get(user_id=user_id)
        except Exception as e:
            raise AuthenticationError(f"Failed to fetch user {user_id}: {e}") from e
        if user is None:
            raise AuthenticationError(f"Failed to fetch user {user_id}: not found")
        return _to_auth_user(user)
