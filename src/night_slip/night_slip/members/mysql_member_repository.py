from __future__ import annotations

from typing import Iterable, Optional, Sequence

from ..core.enums import MemberField
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import Member
from .repository import MemberRepository


def _to_member(row: dict) -> Member:
    return Member(
        member_id=row["member_id"],
        name=row["name"],
        reg_no=row.get("reg_no") or "",
        email=row["email"],
    )


class MySQLMemberRepository(MemberRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, member_id: str) -> Optional[Member]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "SELECT member_id, name, reg_no, email FROM members WHERE member_id=%s",
                (member_id,),
            )
            row = fetchone(cur)
            return _to_member(row) if row else None

    def list_by_name(self) -> Sequence[Member]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT member_id, name, reg_no, email FROM members ORDER BY name ASC")
            return [_to_member(r) for r in fetchall(cur)]

    def upsert_many(self, members: Iterable[Member]) -> int:
        rows = [(m.member_id, m.name, m.reg_no, m.email) for m in members]
        if not rows:
            return 0
        with db_cursor(self._conn_factory) as (_, cur):
            cur.executemany(
                """
                INSERT INTO members(member_id, name, reg_no, email)
                VALUES(%s,%s,%s,%s)
                ON DUPLICATE KEY UPDATE name=VALUES(name), reg_no=VALUES(reg_no), email=VALUES(email)
                """,
                rows,
            )
        return len(rows)

    def update_field(self, member_id: str, *, field: str, value: str) -> bool:
        # Column name comes from the enum, never from user input directly.
        column = MemberField(field).value
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"UPDATE members SET {column}=%s WHERE member_id=%s", (value, member_id))
            return cur.rowcount > 0

    def delete_by_id(self, member_id: str) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM members WHERE member_id=%s", (member_id,))
            return cur.rowcount > 0
