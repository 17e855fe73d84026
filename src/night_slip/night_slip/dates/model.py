from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class TrackedDate:
    """Domain entity: a calendar date under attendance tracking."""

    date_id: str
    date_string: str

    def to_dict(self) -> dict:
        return {"id": self.date_id, "date_string": self.date_string}
