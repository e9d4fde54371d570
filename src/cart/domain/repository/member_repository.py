"""Abstract repository for Member aggregate.

Defined in the domain layer so the domain never depends on
infrastructure. Concrete implementations (JSON, in-memory)
live in the infrastructure layer.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from cart.domain.model.member import Member


class MemberRepository(ABC):

    @abstractmethod
    def get_by_id(self, member_id: int) -> Member | None:
        """Return a member by its ID, or None if not found."""

    @abstractmethod
    def get_by_email(self, email: str) -> Member | None:
        """Return a member by its exact email, or None if not found."""

    @abstractmethod
    def save(self, member: Member) -> None:
        """Persist a new or updated member."""
