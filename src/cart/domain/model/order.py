"""Order aggregate — the core of the domain.

The Order is an aggregate root that owns its line items.
All business invariants are enforced here.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone

from cart.domain.exceptions import InvalidSpendPointError, ValidationError
from cart.domain.model.cart_item import CartItem
from cart.domain.model.value_objects import Price, Quantity


@dataclass(frozen=True)
class OrderItem:
    """Snapshot of a product at order-creation time.

    Deliberately a separate type from ``Product``: it keeps the name,
    image and price the member actually paid for, no matter what the
    catalog does afterwards.
    """

    product_id: int
    product_name: str
    image_url: str
    unit_price: Price
    quantity: Quantity

    @property
    def line_total(self) -> Price:
        return self.unit_price * self.quantity.value

    @staticmethod
    def snapshot_of(cart_item: CartItem) -> OrderItem:
        product = cart_item.product
        return OrderItem(
            product_id=product.id,  # type: ignore[arg-type]
            product_name=product.name,
            image_url=product.image_url,
            unit_price=product.price,
            quantity=cart_item.quantity,
        )


@dataclass
class Order:
    """Aggregate root for placed orders.

    Use the ``Order.create()`` factory for new orders — it enforces all
    business rules.  The ``__init__`` is intentionally simple so the
    repository can reconstitute persisted orders without re-validating.

    Orders are immutable once placed: there is no state transition.
    """

    id: int | None
    member_id: int
    items: list[OrderItem]
    spend_point: int = 0
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    # --- Factory (used for NEW orders only) -----------------------------------

    @staticmethod
    def create(member_id: int, items: list[OrderItem], spend_point: int) -> Order:
        """Build a new order aggregate, enforcing all invariants."""
        if not items:
            raise ValidationError("Order must contain at least one item")

        order = Order(id=None, member_id=member_id, items=list(items), spend_point=spend_point)

        if spend_point < 0:
            raise InvalidSpendPointError(f"Spend point cannot be negative, got {spend_point}")
        if spend_point > order.total_price.amount:
            raise InvalidSpendPointError(
                f"Spend point {spend_point} exceeds order total {order.total_price}"
            )

        return order

    # --- Computed properties --------------------------------------------------

    @property
    def total_price(self) -> Price:
        result = Price.zero()
        for item in self.items:
            result = result + item.line_total
        return result

    @property
    def spend_price(self) -> Price:
        """What the member pays after redeeming points."""
        return self.total_price - Price(self.spend_point)

    @property
    def total_quantity(self) -> int:
        return sum(item.quantity.value for item in self.items)

    @property
    def first_item(self) -> OrderItem:
        return self.items[0]

    def is_owned_by(self, member_id: int) -> bool:
        return self.member_id == member_id
