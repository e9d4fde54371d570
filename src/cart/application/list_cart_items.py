"""Application service: List Cart Items use case (query)."""

from __future__ import annotations

from cart.application.dto import CartItemDTO
from cart.domain.repository.unit_of_work import UnitOfWork


class ListCartItemsHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(self, member_id: int) -> list[CartItemDTO]:
        with self._uow as uow:
            items = uow.cart_items.list_by_member(member_id)
        return [CartItemDTO.from_cart_item(item) for item in items]
