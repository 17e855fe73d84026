from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import AttendanceRecord


class AttendanceRepository(Protocol):
    def get(self, member_id: str, date_id: str) -> Optional[AttendanceRecord]:
        raise NotImplementedError

    def save(self, record: AttendanceRecord) -> None:
        """Write the whole record under its composite key (insert or overwrite)."""

        raise NotImplementedError

    def list_for_date(self, date_id: str) -> Sequence[AttendanceRecord]:
        raise NotImplementedError

    def list_all(self) -> Sequence[AttendanceRecord]:
        raise NotImplementedError

    def delete_for_date(self, date_id: str) -> int:
        """Delete every record of a date in one batch; returns how many went."""

        raise NotImplementedError
