from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Member:
    """Domain entity: an organisation member.

    ``member_id`` is the email the member was first imported with.
    """

    member_id: str
    name: str
    reg_no: str
    email: str

    def to_dict(self) -> dict:
        return {"id": self.member_id, "name": self.name, "reg_no": self.reg_no, "email": self.email}
