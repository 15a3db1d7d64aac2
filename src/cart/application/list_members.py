"""Application service: List Members use case (query)."""

from __future__ import annotations

from cart.application.dto import MemberDto
from cart.domain.repository.member_repository import MemberRepository


class ListMembersHandler:

    def __init__(self, member_repo: MemberRepository) -> None:
        self._member_repo = member_repo

    def handle(self) -> list[MemberDto]:
        return [MemberDto.from_member(m) for m in self._member_repo.find_all()]
