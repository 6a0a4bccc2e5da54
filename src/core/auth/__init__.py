"""Caller authentication: the provider abstraction and its Clerk implementation."""

from core.auth.clerk_provider import ClerkAuthProvider
from core.auth.interface import (
    DEFAULT_ROLE,
    DRIVER_ROLE,
    AuthProvider,
    AuthUser,
    get_auth_provider,
    normalize_roles,
)

__all__ = [
    "DEFAULT_ROLE",
    "DRIVER_ROLE",
    "AuthProvider",
    "AuthUser",
    "ClerkAuthProvider",
    "get_auth_provider",
    "normalize_roles",
]
