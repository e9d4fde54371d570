"""JSON-document-backed implementation of OrderRepository.

An order and its items are one record: the items are nested inside
the order, so they are written and read together.
"""

from __future__ import annotations

from datetime import datetime

from cart.domain.model.order import Order, OrderItem
from cart.domain.model.value_objects import Price, Quantity
from cart.domain.repository.order_repository import OrderRepository


class JsonOrderRepository(OrderRepository):

    def __init__(self, document: dict[str, list[dict]]) -> None:
        self._document = document

    # --- OrderRepository interface --------------------------------------------

    def get_by_id(self, order_id: int) -> Order | None:
        for raw in self._load_raw():
            if raw["id"] == order_id:
                return self._to_domain(raw)
        return None

    def list_by_member(self, member_id: int) -> list[Order]:
        return [self._to_domain(raw) for raw in self._load_raw() if raw["member_id"] == member_id]

    def save(self, order: Order) -> None:
        orders = self._load_raw()

        if order.id is None:
            order.id = max((o["id"] for o in orders), default=0) + 1

        # Upsert: replace if exists, otherwise append
        for i, raw in enumerate(orders):
            if raw["id"] == order.id:
                orders[i] = self._to_raw(order)
                break
        else:
            orders.append(self._to_raw(order))

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(order: Order) -> dict:
        return {
            "id": order.id,
            "member_id": order.member_id,
            "spend_point": order.spend_point,
            "created_at": order.created_at.isoformat(),
            "items": [
                {
                    "product_id": item.product_id,
                    "product_name": item.product_name,
                    "image_url": item.image_url,
                    "unit_price": item.unit_price.amount,
                    "quantity": item.quantity.value,
                }
                for item in order.items
            ],
        }

    @staticmethod
    def _to_domain(raw: dict) -> Order:
        items = [
            OrderItem(
                product_id=i["product_id"],
                product_name=i["product_name"],
                image_url=i.get("image_url", ""),
                unit_price=Price(i["unit_price"]),
                quantity=Quantity(i["quantity"]),
            )
            for i in raw["items"]
        ]
        return Order(
            id=raw["id"],
            member_id=raw["member_id"],
            items=items,
            spend_point=raw.get("spend_point", 0),
            created_at=datetime.fromisoformat(raw["created_at"]),
        )

    def _load_raw(self) -> list[dict]:
        return self._document["orders"]
