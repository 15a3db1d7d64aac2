"""Application service: Add Member use case."""

from __future__ import annotations

from cart.domain.exceptions import FieldValidationError
from cart.domain.model.member import Member
from cart.domain.repository.member_repository import MemberRepository


class AddMemberHandler:

    def __init__(self, member_repo: MemberRepository) -> None:
        self._member_repo = member_repo

    def handle(self, email: str, password: str) -> int:
        messages: list[str] = []
        if not email or not email.strip():
            messages.append("이메일은 비어있을 수 없습니다.")
        if not password:
            messages.append("비밀번호는 비어있을 수 없습니다.")
        if messages:
            raise FieldValidationError(messages)

        return self._member_repo.save_and_get_id(
            Member(email=email.strip(), password=password)
        )
