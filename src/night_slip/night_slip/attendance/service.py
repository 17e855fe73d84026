from __future__ import annotations

import logging
from typing import Sequence

from ..auth.policy import AuthorizationPolicy, require_admin
from ..core.enums import AttendanceField
from ..core.exceptions import AccessDenied, Locked, NotFound, ValidationError
from ..members.repository import MemberRepository
from ..mirror.dispatcher import MirrorDispatcher
from .model import AttendanceRecord, Entry, materialize
from .repository import AttendanceRepository
from .rules import OWN_ROW_ONLY, apply_update, authorize_update

logger = logging.getLogger(__name__)


class AttendanceCoordinator:
    """Decides and applies every change to an attendance record.

    All permission and lock checks run before anything is written. Each
    accepted write is followed by a background spreadsheet mirror that the
    caller never waits for.
    """

    def __init__(
        self,
        attendance: AttendanceRepository,
        members: MemberRepository,
        policy: AuthorizationPolicy,
        mirror: MirrorDispatcher,
    ):
        self._attendance = attendance
        self._members = members
        self._policy = policy
        self._mirror = mirror

    def get_record(self, member_id: str, date_id: str) -> AttendanceRecord:
        return materialize(self._attendance.get(member_id, date_id), member_id, date_id)

    def list_entries(self, date_id: str) -> Sequence[Entry]:
        stored = {r.member_id: r for r in self._attendance.list_for_date(date_id)}
        return [
            Entry(member=m, record=materialize(stored.get(m.member_id), m.member_id, date_id))
            for m in self._members.list_by_name()
        ]

    def apply_field_update(
        self,
        *,
        actor_email: str,
        target_member_id: str,
        date_id: str,
        field: str,
        value: str,
    ) -> AttendanceRecord:
        is_admin = self._policy.is_admin(actor_email)

        try:
            attendance_field = AttendanceField.parse(field)
        except ValueError as e:
            # Members may only touch coming/applied, so any other name is a permission failure.
            if not is_admin:
                logger.warning("Rejected unknown field %r on %s by %s", field, target_member_id, actor_email)
                raise AccessDenied(OWN_ROW_ONLY) from e
            raise ValidationError(str(e)) from e

        target = self._members.get_by_id(target_member_id)
        if not target:
            raise NotFound("User not found")

        record = self.get_record(target_member_id, date_id)

        try:
            authorize_update(
                record=record,
                target=target,
                actor_email=actor_email,
                field=attendance_field,
                is_admin=is_admin,
            )
        except (AccessDenied, Locked) as e:
            logger.warning(
                "Rejected %s=%r on %s by %s: %s", attendance_field.value, value, record.key, actor_email, e
            )
            raise

        updated = apply_update(record, attendance_field, "" if value is None else str(value), is_admin=is_admin)
        self._attendance.save(updated)
        logger.info("%s set %s=%r on %s", actor_email, attendance_field.value, value, updated.key)

        self._mirror.dispatch("attendance update")
        return updated

    def reset(self, *, actor_email: str, date_id: str) -> int:
        """Drop every stored record for a date so all members read as defaults."""
        require_admin(self._policy, actor_email)
        removed = self._attendance.delete_for_date(date_id)
        logger.info("Reset date %s by %s (%d records)", date_id, actor_email, removed)
        self._mirror.dispatch("date reset")
        return removed
