from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Protocol

from ..core.exceptions import AccessDenied


class AuthorizationPolicy(Protocol):
    """Capability check: decides whether an actor email is an administrator."""

    def is_admin(self, email: str) -> bool:
        raise NotImplementedError


@dataclass(frozen=True)
class AllowListPolicy:
    """Administrators are a fixed set of emails compared by exact string match."""

    admin_emails: frozenset[str]

    @classmethod
    def from_setting(cls, value: str | Iterable[str] | None) -> "AllowListPolicy":
        if value is None:
            emails: Iterable[str] = ()
        elif isinstance(value, str):
            emails = value.split(",")
        else:
            emails = value
        return cls(frozenset(e.strip() for e in emails if e and e.strip()))

    def is_admin(self, email: str) -> bool:
        return bool(email) and email in self.admin_emails


def require_admin(policy: AuthorizationPolicy, actor_email: str) -> None:
    if not policy.is_admin(actor_email):
        raise AccessDenied("Forbidden")
