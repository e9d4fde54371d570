"""Abstract repository for CartItem aggregate."""

from __future__ import annotations

from abc import ABC, abstractmethod

from cart.domain.model.cart_item import CartItem


class CartItemRepository(ABC):

    @abstractmethod
    def get_by_id(self, cart_item_id: int) -> CartItem | None:
        """Return a cart item by its ID, or None if not found."""

    @abstractmethod
    def list_by_member(self, member_id: int) -> list[CartItem]:
        """Return every cart item owned by the member."""

    @abstractmethod
    def save(self, cart_item: CartItem) -> None:
        """Persist a new or updated cart item, assigning an ID if needed."""

    @abstractmethod
    def delete(self, cart_item_id: int) -> None:
        """Remove a cart item. Unknown IDs are ignored."""
