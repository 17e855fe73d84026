from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..core.exceptions import AuthenticationError, ValidationError
from .identity import IdentityVerifier
from .policy import AuthorizationPolicy


@dataclass(frozen=True)
class Actor:
    """The verified caller of a request."""

    email: str
    is_admin: bool

    def to_dict(self) -> dict:
        return {"email": self.email, "is_admin": self.is_admin}


class AuthService:
    """Use case: turn a bearer credential into an actor."""

    def __init__(self, verifier: IdentityVerifier, policy: AuthorizationPolicy):
        self._verifier = verifier
        self._policy = policy

    def login(self, token: str) -> Actor:
        if not token:
            raise ValidationError("Token required")
        return self.resolve(token)

    def resolve(self, token: Optional[str]) -> Actor:
        if not token:
            raise AuthenticationError("Unauthorized")
        email = self._verifier.verify(token)
        return Actor(email=email, is_admin=self._policy.is_admin(email))

    def current(self, token: Optional[str]) -> Optional[Actor]:
        try:
            return self.resolve(token)
        except AuthenticationError:
            return None
