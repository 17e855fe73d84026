from __future__ import annotations

import secrets
from typing import Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import TrackedDate
from .repository import DateRepository


def new_date_id() -> str:
    return secrets.token_hex(10)


class MySQLDateRepository(DateRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, date_id: str) -> Optional[TrackedDate]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT date_id, date_string FROM tracked_dates WHERE date_id=%s", (date_id,))
            r = fetchone(cur)
            return TrackedDate(date_id=r["date_id"], date_string=r["date_string"]) if r else None

    def get_by_date_string(self, date_string: str) -> Optional[TrackedDate]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT date_id, date_string FROM tracked_dates WHERE date_string=%s", (date_string,))
            r = fetchone(cur)
            return TrackedDate(date_id=r["date_id"], date_string=r["date_string"]) if r else None

    def list_newest_first(self) -> Sequence[TrackedDate]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT date_id, date_string FROM tracked_dates ORDER BY date_string DESC")
            return [TrackedDate(date_id=r["date_id"], date_string=r["date_string"]) for r in fetchall(cur)]

    def create(self, date_string: str) -> TrackedDate:
        date = TrackedDate(date_id=new_date_id(), date_string=date_string)
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "INSERT INTO tracked_dates(date_id, date_string) VALUES(%s,%s)",
                (date.date_id, date.date_string),
            )
        return date

    def delete_with_attendance(self, date_id: str) -> int:
        # Both deletes share one transaction.
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM attendance WHERE date_id=%s", (date_id,))
            removed = int(cur.rowcount)
            cur.execute("DELETE FROM tracked_dates WHERE date_id=%s", (date_id,))
            return removed
