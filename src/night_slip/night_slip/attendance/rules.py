"""Attendance state transitions.

Pure functions over ``AttendanceRecord``: no store, no clock, no I/O. The
coordinator loads a record, asks these rules whether the change is allowed and
what the record becomes, then persists the result.

Transitions:

* intent changed (any actor): applied resets to NOT APPLIED and both
  checkpoints to ABSENT.
* applied changed (any actor): both checkpoints become PRESENT when the
  member is COMING and APPLIED, otherwise ABSENT. A member changing their own
  applied value also locks the record.
* checkpoint changed (administrator only): stored as given, no propagation,
  so the two checkpoints can differ.
"""
from __future__ import annotations

from dataclasses import replace

from ..common.validators import same_email
from ..core.enums import SELF_EDITABLE_FIELDS, Applied, AttendanceField, Intent, Presence
from ..core.exceptions import AccessDenied, Locked
from ..members.model import Member
from .model import AttendanceRecord

OWN_ROW_ONLY = "Access Denied: You can only edit your own row (Coming/Applied)."


def authorize_update(
    *,
    record: AttendanceRecord,
    target: Member,
    actor_email: str,
    field: AttendanceField,
    is_admin: bool,
) -> None:
    if is_admin:
        return

    if not same_email(actor_email, target.email) or field not in SELF_EDITABLE_FIELDS:
        raise AccessDenied(OWN_ROW_ONLY)

    if record.is_locked:
        raise Locked("Submission Locked: You have already used your one chance to edit.")


def _checkpoints(coming: str, applied: str) -> str:
    if coming.upper() == Intent.COMING.value and applied.upper() == Applied.APPLIED.value:
        return Presence.PRESENT.value
    return Presence.ABSENT.value


def apply_update(record: AttendanceRecord, field: AttendanceField, value: str, *, is_admin: bool) -> AttendanceRecord:
    """Return ``record`` with ``field`` set to ``value`` and dependent fields updated."""
    updates: dict = {field.value: value}

    if field is AttendanceField.INTENT:
        updates["applied"] = Applied.NOT_APPLIED.value
        updates["attendance_1"] = Presence.ABSENT.value
        updates["attendance_2"] = Presence.ABSENT.value

    elif field is AttendanceField.APPLIED:
        presence = _checkpoints(record.coming, value)
        updates["attendance_1"] = presence
        updates["attendance_2"] = presence
        # Only the applied change consumes the self-edit, not intent.
        if not is_admin:
            updates["is_locked"] = True

    return replace(record, **updates)
