from __future__ import annotations

from ..attendance.repository import AttendanceRepository
from ..dates.repository import DateRepository
from ..members.repository import MemberRepository


class SnapshotService:
    """Builds the full dataset pushed to the spreadsheet mirror."""

    def __init__(self, dates: DateRepository, members: MemberRepository, attendance: AttendanceRepository):
        self._dates = dates
        self._members = members
        self._attendance = attendance

    def build(self) -> dict:
        return {
            "dates": [d.to_dict() for d in self._dates.list_newest_first()],
            "users": [m.to_dict() for m in self._members.list_by_name()],
            "attendance": [r.to_dict() for r in self._attendance.list_all()],
        }
