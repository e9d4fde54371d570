"""Application service: List Orders use case (query).

Builds the member's order history: one summary per order, most
recent first.  Recomputed from storage on every call.
"""

from __future__ import annotations

from cart.application.dto import OrderSummaryDTO
from cart.domain.repository.unit_of_work import UnitOfWork


class ListOrdersHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(self, member_id: int) -> list[OrderSummaryDTO]:
        with self._uow as uow:
            orders = uow.orders.list_by_member(member_id)

        # Same timestamp: the later ID was placed later.
        orders.sort(key=lambda order: (order.created_at, order.id), reverse=True)
        return [OrderSummaryDTO.from_order(order) for order in orders]
