from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, Sequence

from ..auth.policy import AuthorizationPolicy, require_admin
from ..common.validators import normalize_email
from ..core.enums import MemberField
from ..core.exceptions import NotFound, ValidationError
from ..mirror.dispatcher import MirrorDispatcher
from .model import Member
from .repository import MemberRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ImportResult:
    imported: int
    skipped: int

    def to_dict(self) -> dict:
        return {"imported": self.imported, "skipped": self.skipped}


class MemberService:
    """Use case: maintain the member master list (admin)."""

    def __init__(self, members: MemberRepository, policy: AuthorizationPolicy, mirror: MirrorDispatcher):
        self._members = members
        self._policy = policy
        self._mirror = mirror

    def list_members(self) -> Sequence[Member]:
        return self._members.list_by_name()

    def get_member(self, member_id: str) -> Member:
        member = self._members.get_by_id(member_id)
        if not member:
            raise NotFound("User not found")
        return member

    def import_members(self, *, actor_email: str, rows: Iterable[dict]) -> ImportResult:
        """Upsert members keyed by email.

        Rows without an email or a name are skipped. Members missing from the
        import are left as they are.
        """
        require_admin(self._policy, actor_email)

        batch: dict[str, Member] = {}
        skipped = 0
        for row in rows:
            if not isinstance(row, dict):
                skipped += 1
                continue
            email = normalize_email(str(row.get("email") or ""))
            name = str(row.get("name") or "").strip()
            if not email or not name:
                skipped += 1
                continue
            # Later rows for the same email win, as with sequential merges.
            batch[email] = Member(
                member_id=email,
                name=name,
                reg_no=str(row.get("reg_no") or "").strip(),
                email=email,
            )

        imported = self._members.upsert_many(batch.values())
        logger.info("Imported %d members (%d skipped) by %s", imported, skipped, actor_email)
        self._mirror.dispatch("member import")
        return ImportResult(imported=imported, skipped=skipped)

    def update_member_field(self, *, actor_email: str, member_id: str, field: str, value: str) -> Member:
        require_admin(self._policy, actor_email)

        try:
            member_field = MemberField(field)
        except ValueError:
            raise ValidationError(f"Field {field!r} cannot be edited")

        self.get_member(member_id)
        self._members.update_field(member_id, field=member_field.value, value=str(value or "").strip())
        self._mirror.dispatch("member update")
        return self.get_member(member_id)

    def delete_member(self, *, actor_email: str, member_id: str) -> None:
        require_admin(self._policy, actor_email)

        if not self._members.delete_by_id(member_id):
            raise NotFound("User not found")
        logger.info("Member %s deleted by %s", member_id, actor_email)
        self._mirror.dispatch("member delete")
