from __future__ import annotations

from enum import Enum


class Intent(str, Enum):
    """Whether the member plans to attend the night."""

    COMING = "COMING"
    NOT_COMING = "NOT COMING"


class Applied(str, Enum):
    """Whether the member has applied for the night slip."""

    APPLIED = "APPLIED"
    NOT_APPLIED = "NOT APPLIED"


class Presence(str, Enum):
    """Checkpoint presence as confirmed by an administrator."""

    PRESENT = "PRESENT"
    ABSENT = "ABSENT"


class AttendanceField(str, Enum):
    """Updatable attendance fields, valued by their stored column name."""

    INTENT = "coming"
    APPLIED = "applied"
    PRESENCE_1 = "attendance_1"
    PRESENCE_2 = "attendance_2"

    @classmethod
    def parse(cls, name: str) -> "AttendanceField":
        key = (name or "").strip()
        field = _FIELD_ALIASES.get(key.lower())
        if field is None:
            raise ValueError(f"Unknown attendance field: {name!r}")
        return field


class MemberField(str, Enum):
    """Member columns an administrator may edit."""

    NAME = "name"
    REG_NO = "reg_no"
    EMAIL = "email"


_FIELD_ALIASES = {
    "coming": AttendanceField.INTENT,
    "intent": AttendanceField.INTENT,
    "applied": AttendanceField.APPLIED,
    "attendance_1": AttendanceField.PRESENCE_1,
    "presence1": AttendanceField.PRESENCE_1,
    "attendance_2": AttendanceField.PRESENCE_2,
    "presence2": AttendanceField.PRESENCE_2,
}

SELF_EDITABLE_FIELDS = frozenset({AttendanceField.INTENT, AttendanceField.APPLIED})
