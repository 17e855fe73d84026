from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import TrackedDate


class DateRepository(Protocol):
    def get_by_id(self, date_id: str) -> Optional[TrackedDate]:
        raise NotImplementedError

    def get_by_date_string(self, date_string: str) -> Optional[TrackedDate]:
        raise NotImplementedError

    def list_newest_first(self) -> Sequence[TrackedDate]:
        raise NotImplementedError

    def create(self, date_string: str) -> TrackedDate:
        raise NotImplementedError

    def delete_with_attendance(self, date_id: str) -> int:
        """Remove the date and its attendance together; returns attendance rows removed."""
        raise NotImplementedError
