"""Identity of API callers, independent of the identity provider."""

from abc import ABC, abstractmethod
from collections.abc import Iterable
from functools import lru_cache

from pydantic import BaseModel

DRIVER_ROLE = "driver"
DEFAULT_ROLE = "customer"


def normalize_roles(raw: Iterable[object] | None) -> list[str]:
    """Lower-cased, de-duplicated role names in their original order; ``[DEFAULT_ROLE]`` when empty."""
    roles: list[str] = []
    for role in raw or ():
        name = str(role).strip().lower()
        if name and name not in roles:
            roles.append(name)
    return roles or [DEFAULT_ROLE]


class AuthUser(BaseModel):
    user_id: str
    email: str
    name: str
    roles: list[str]
    metadata: dict[str, str]

    def has_role(self, role: str) -> bool:
        return role in self.roles

    @property
    def is_driver(self) -> bool:
        return self.has_role(DRIVER_ROLE)


class AuthProvider(ABC):
    @abstractmethod
    async def verify_token(self, token: str) -> AuthUser: ...

    @abstractmethod
    async def get_user(self, user_id: str) -> AuthUser: ...


@lru_cache(maxsize=1)
def _clerk_provider(secret_key: str) -> AuthProvider:
    from core.auth.clerk_provider import ClerkAuthProvider

    return ClerkAuthProvider(secret_key=secret_key)


def get_auth_provider() -> AuthProvider:
    """Provider for the configured identity service, reused across warm invocations."""
    from core.config import get_config

    clerk_secret = get_config().clerk_secret_key
    if not clerk_secret:
        raise ValueError("CLERK_SECRET_KEY not configured")
    return _clerk_provider(clerk_secret)
