from __future__ import annotations

import logging
from typing import Sequence

from ..auth.policy import AuthorizationPolicy, require_admin
from ..common.validators import require_non_empty
from ..core.exceptions import NotFound, ValidationError
from ..mirror.dispatcher import MirrorDispatcher
from .model import TrackedDate
from .repository import DateRepository

logger = logging.getLogger(__name__)


class DateService:
    """Use case: manage tracked dates (admin)."""

    def __init__(
        self,
        dates: DateRepository,
        policy: AuthorizationPolicy,
        mirror: MirrorDispatcher,
    ):
        self._dates = dates
        self._policy = policy
        self._mirror = mirror

    def list_dates(self) -> Sequence[TrackedDate]:
        return self._dates.list_newest_first()

    def add_date(self, *, actor_email: str, date_string: str) -> TrackedDate:
        require_admin(self._policy, actor_email)
        date_string = require_non_empty(date_string, "date_string")

        if self._dates.get_by_date_string(date_string):
            raise ValidationError("Date already exists")

        created = self._dates.create(date_string)
        logger.info("Date %s (%s) added by %s", created.date_id, date_string, actor_email)
        self._mirror.dispatch("date added")
        return created

    def delete_date(self, *, actor_email: str, date_id: str) -> int:
        """Delete a date and every attendance record on it; returns records removed."""
        require_admin(self._policy, actor_email)

        if not self._dates.get_by_id(date_id):
            raise NotFound("Date not found")

        removed = self._dates.delete_with_attendance(date_id)
        logger.info("Date %s deleted by %s (%d attendance records)", date_id, actor_email, removed)
        self._mirror.dispatch("date deleted")
        return removed
