"""Abstract Unit of Work, the transaction boundary.

A use case that touches several aggregates (placing an order deletes
cart items and debits member points) opens one unit of work, stages
every change through its repositories and calls ``commit()`` once.
Leaving the ``with`` block without committing discards everything.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from types import TracebackType

from cart.domain.repository.cart_item_repository import CartItemRepository
from cart.domain.repository.member_repository import MemberRepository
from cart.domain.repository.order_repository import OrderRepository
from cart.domain.repository.product_repository import ProductRepository


class UnitOfWork(ABC):

    members: MemberRepository
    products: ProductRepository
    cart_items: CartItemRepository
    orders: OrderRepository

    def __enter__(self) -> UnitOfWork:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.rollback()

    @abstractmethod
    def commit(self) -> None:
        """Make every staged change durable at once."""

    @abstractmethod
    def rollback(self) -> None:
        """Discard staged changes. A no-op after a successful commit."""
