"""Abstract repository for Order aggregate."""

from __future__ import annotations

from abc import ABC, abstractmethod

from cart.domain.model.order import Order


class OrderRepository(ABC):

    @abstractmethod
    def get_by_id(self, order_id: int) -> Order | None:
        """Return an order by its ID, or None if not found."""

    @abstractmethod
    def list_by_member(self, member_id: int) -> list[Order]:
        """Return every order placed by the member, in no particular order."""

    @abstractmethod
    def save(self, order: Order) -> None:
        """Persist a new order together with its items, assigning an ID."""
