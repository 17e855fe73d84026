from __future__ import annotations

from typing import Iterable, Optional, Protocol, Sequence

from .model import Member


class MemberRepository(Protocol):
    """Repository interface for members.

    Services depend on this interface, never on a concrete store.
    """

    def get_by_id(self, member_id: str) -> Optional[Member]:
        raise NotImplementedError

    def list_by_name(self) -> Sequence[Member]:
        raise NotImplementedError

    def upsert_many(self, members: Iterable[Member]) -> int:
        """Insert or merge members keyed by ``member_id`` in one batch."""

        raise NotImplementedError

    def update_field(self, member_id: str, *, field: str, value: str) -> bool:
        raise NotImplementedError

    def delete_by_id(self, member_id: str) -> bool:
        raise NotImplementedError
