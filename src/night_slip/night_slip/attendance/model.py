from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..core.constants import attendance_key
from ..core.enums import Applied, Intent, Presence
from ..members.model import Member


@dataclass(frozen=True)
class AttendanceRecord:
    """Domain entity: one member's sign-up state for one tracked date.

    Field names match the stored columns so an update can be expressed as
    ``{column: value}``. Values are kept as the strings that were written.
    """

    member_id: str
    date_id: str
    coming: str = Intent.NOT_COMING.value
    applied: str = Applied.NOT_APPLIED.value
    attendance_1: str = Presence.ABSENT.value
    attendance_2: str = Presence.ABSENT.value
    is_locked: bool = False

    @property
    def key(self) -> str:
        return attendance_key(self.member_id, self.date_id)

    def to_dict(self) -> dict:
        return {
            "id": self.key,
            "user_id": self.member_id,
            "date_id": self.date_id,
            "coming": self.coming,
            "applied": self.applied,
            "attendance_1": self.attendance_1,
            "attendance_2": self.attendance_2,
            "is_locked": 1 if self.is_locked else 0,
        }


def materialize(stored: Optional[AttendanceRecord], member_id: str, date_id: str) -> AttendanceRecord:
    """Return the stored record, or the default record when nothing was written."""
    if stored is not None:
        return stored
    return AttendanceRecord(member_id=member_id, date_id=date_id)


@dataclass(frozen=True)
class Entry:
    """Read-model: a member row on the per-date sheet."""

    member: Member
    record: AttendanceRecord

    def to_dict(self) -> dict:
        r = self.record
        return {
            "id": self.member.member_id,
            "name": self.member.name,
            "reg_no": self.member.reg_no,
            "email": self.member.email,
            "coming": r.coming,
            "applied": r.applied,
            "attendance_1": r.attendance_1,
            "attendance_2": r.attendance_2,
            "is_locked": 1 if r.is_locked else 0,
        }
