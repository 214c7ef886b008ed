"""Resolution of bearer tokens to users."""

from dataclasses import dataclass
from typing import Protocol
from uuid import UUID


class AuthGateway(Protocol):
    """Interface for the hosted auth provider."""

    def get_user_id(self, access_token: str) -> UUID | None:
        """Return the user id for a valid access token."""


@dataclass
class AuthService:
    """Authenticates API callers."""

    gateway: AuthGateway

    def authenticate(self, authorization: str | None) -> UUID | None:
        """Return the caller's user id from an Authorization header value."""
        if not authorization:
            return None
        scheme, _, token = authorization.partition(" ")
        if scheme.lower() != "bearer" or not token.strip():
            return None
        return self.gateway.get_user_id(token.strip())
