"""JSON-file-backed implementation of MemberRepository."""

from __future__ import annotations

from cart.domain.model.member import Member
from cart.domain.repository.member_repository import MemberRepository
from cart.infrastructure.persistence.json_store import Transaction


class JsonMemberRepository(MemberRepository):

    def __init__(self, tx: Transaction) -> None:
        self._tx = tx

    def save_and_get_id(self, member: Member) -> int:
        return self._tx.insert(
            "member", {"email": member.email, "password": member.password}
        )

    def find_by_id(self, member_id: int) -> Member | None:
        for raw in self._tx.rows("member"):
            if raw["id"] == member_id:
                return self._to_domain(raw)
        return None

    def find_all(self) -> list[Member]:
        return [self._to_domain(raw) for raw in self._tx.rows("member")]

    @staticmethod
    def _to_domain(raw: dict) -> Member:
        return Member(id=raw["id"], email=raw["email"], password=raw["password"])
