"""Application service: Remove Cart Item use case."""

from __future__ import annotations

from cart.domain.exceptions import EntityNotFoundError
from cart.domain.repository.unit_of_work import UnitOfWork


class RemoveCartItemHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(self, member_id: int, cart_item_id: int) -> None:
        with self._uow as uow:
            item = uow.cart_items.get_by_id(cart_item_id)
            if item is None:
                raise EntityNotFoundError(f"Cart item #{cart_item_id} not found")
            item.check_owner(member_id)
            uow.cart_items.delete(cart_item_id)
            uow.commit()
