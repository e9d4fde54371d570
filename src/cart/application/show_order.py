"""Application service: Show Order use case (query)."""

from __future__ import annotations

from cart.application.dto import OrderDetailDTO
from cart.domain.exceptions import ForbiddenError, OrderNotFoundError
from cart.domain.repository.unit_of_work import UnitOfWork


class ShowOrderHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(self, member_id: int, order_id: int) -> OrderDetailDTO:
        with self._uow as uow:
            order = uow.orders.get_by_id(order_id)
        if order is None:
            raise OrderNotFoundError(f"Order #{order_id} not found")
        if not order.is_owned_by(member_id):
            raise ForbiddenError(f"Order #{order_id} belongs to another member")
        return OrderDetailDTO.from_order(order)
