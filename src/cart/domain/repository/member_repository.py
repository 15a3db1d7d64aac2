"""Abstract repository for Member entity."""

from __future__ import annotations

from abc import ABC, abstractmethod

from cart.domain.model.member import Member


class MemberRepository(ABC):

    @abstractmethod
    def save_and_get_id(self, member: Member) -> int:
        """Persist a new member and return its generated ID."""

    @abstractmethod
    def find_by_id(self, member_id: int) -> Member | None:
        """Return a member by its ID, or None if not found."""

    @abstractmethod
    def find_all(self) -> list[Member]:
        """Return every registered member."""
