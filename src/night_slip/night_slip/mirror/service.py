from __future__ import annotations

from ..auth.policy import AuthorizationPolicy, require_admin
from .dispatcher import MirrorDispatcher


class SyncService:
    """Use case: an administrator forces a spreadsheet sync and waits for it."""

    def __init__(self, mirror: MirrorDispatcher, policy: AuthorizationPolicy):
        self._mirror = mirror
        self._policy = policy

    def sync_now(self, *, actor_email: str) -> None:
        require_admin(self._policy, actor_email)
        self._mirror.sync_now()
