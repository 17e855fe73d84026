from __future__ import annotations

from typing import Optional, Sequence

from ..core.constants import attendance_key
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import AttendanceRecord
from .repository import AttendanceRepository

_COLUMNS = "member_id, date_id, coming, applied, attendance_1, attendance_2, is_locked"


def _to_record(r: dict) -> AttendanceRecord:
    return AttendanceRecord(
        member_id=r["member_id"],
        date_id=r["date_id"],
        coming=r["coming"],
        applied=r["applied"],
        attendance_1=r["attendance_1"],
        attendance_2=r["attendance_2"],
        is_locked=bool(r["is_locked"]),
    )


class MySQLAttendanceRepository(AttendanceRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get(self, member_id: str, date_id: str) -> Optional[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"SELECT {_COLUMNS} FROM attendance WHERE attendance_id=%s",
                (attendance_key(member_id, date_id),),
            )
            r = fetchone(cur)
            return _to_record(r) if r else None

    def save(self, record: AttendanceRecord) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                INSERT INTO attendance(attendance_id, {_COLUMNS})
                VALUES(%s,%s,%s,%s,%s,%s,%s,%s)
                ON DUPLICATE KEY UPDATE
                    coming=VALUES(coming),
                    applied=VALUES(applied),
                    attendance_1=VALUES(attendance_1),
                    attendance_2=VALUES(attendance_2),
                    is_locked=VALUES(is_locked)
                """,
                (
                    record.key,
                    record.member_id,
                    record.date_id,
                    record.coming,
                    record.applied,
                    record.attendance_1,
                    record.attendance_2,
                    1 if record.is_locked else 0,
                ),
            )

    def list_for_date(self, date_id: str) -> Sequence[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM attendance WHERE date_id=%s", (date_id,))
            return [_to_record(r) for r in fetchall(cur)]

    def list_all(self) -> Sequence[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM attendance")
            return [_to_record(r) for r in fetchall(cur)]

    def delete_for_date(self, date_id: str) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM attendance WHERE date_id=%s", (date_id,))
            return int(cur.rowcount)
