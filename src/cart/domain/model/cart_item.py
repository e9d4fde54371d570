"""CartItem aggregate: a member's pending selection of a product."""

from __future__ import annotations

from dataclasses import dataclass

from cart.domain.exceptions import ForbiddenError
from cart.domain.model.product import Product
from cart.domain.model.value_objects import Price, Quantity


@dataclass
class CartItem:
    """One product a member intends to buy, with a quantity.

    Owned by exactly one member. Consumed (deleted) when it is turned
    into an order.
    """

    id: int | None
    quantity: Quantity
    product: Product
    member_id: int

    @property
    def line_total(self) -> Price:
        return self.product.price * self.quantity.value

    def is_owned_by(self, member_id: int) -> bool:
        return self.member_id == member_id

    def check_owner(self, member_id: int) -> None:
        if not self.is_owned_by(member_id):
            raise ForbiddenError(f"Cart item #{self.id} belongs to another member")

    def add_one(self) -> None:
        self.quantity = self.quantity.increased()

    def change_quantity(self, quantity: Quantity) -> None:
        self.quantity = quantity
