"""Application service: Place Order use case.

Turns a subset of the member's cart into an immutable order.  This is
the only use case that coordinates several aggregates (CartItem lookup,
Order creation, Member point debit), so it runs inside a single unit of
work: either the order is stored, the cart items are gone and the points
are debited, or nothing changed at all.
"""

from __future__ import annotations

import structlog

from cart.application.dto import OrderItemSpec
from cart.domain.exceptions import (
    DomainException,
    EntityNotFoundError,
    InvalidQuantityError,
    OrderItemNotFoundError,
    ValidationError,
)
from cart.domain.model.cart_item import CartItem
from cart.domain.model.order import Order, OrderItem
from cart.domain.model.value_objects import Quantity
from cart.domain.repository.unit_of_work import UnitOfWork

logger = structlog.get_logger(__name__)


class PlaceOrderHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(self, requester_id: int, item_specs: list[OrderItemSpec], spend_point: int) -> int:
        """Place an order for *requester_id* and return the new order ID.

        Steps:
        1. Resolve every requested product to one of the requester's cart items.
        2. Check each requested quantity against the cart.
        3. Snapshot the cart items into an Order (validates spend point vs total).
        4. Debit the member's points (validates spend point vs balance).
        5. Stage order, cart deletions and member update; commit once.
        """
        log = logger.bind(member_id=requester_id, spend_point=spend_point)

        with self._uow as uow:
            try:
                member = uow.members.get_by_id(requester_id)
                if member is None:
                    raise EntityNotFoundError(f"Member #{requester_id} not found")

                cart_items = self._resolve_cart_items(
                    requester_id, item_specs, uow.cart_items.list_by_member(requester_id)
                )

                order = Order.create(
                    member_id=requester_id,
                    items=[OrderItem.snapshot_of(item) for item in cart_items],
                    spend_point=spend_point,
                )
                member.spend_point(spend_point)
            except DomainException as exc:
                log.warning("Order rejected", reason=str(exc), error=type(exc).__name__)
                raise

            uow.orders.save(order)
            for item in cart_items:
                uow.cart_items.delete(item.id)  # type: ignore[arg-type]
            uow.members.save(member)
            uow.commit()

        log.info(
            "Order placed",
            order_id=order.id,
            total_price=order.total_price.amount,
            spend_price=order.spend_price.amount,
            remaining_point=member.point,
        )
        return order.id  # type: ignore[return-value]

    # --- Resolution -----------------------------------------------------------

    @staticmethod
    def _resolve_cart_items(
        requester_id: int,
        item_specs: list[OrderItemSpec],
        member_cart: list[CartItem],
    ) -> list[CartItem]:
        if not item_specs:
            raise ValidationError("Order must contain at least one item")

        by_product = {item.product.id: item for item in member_cart}
        resolved: list[CartItem] = []
        seen: set[int] = set()

        for spec in item_specs:
            if spec.product_id in seen:
                raise ValidationError(f"Product #{spec.product_id} requested more than once")
            seen.add(spec.product_id)

            cart_item = by_product.get(spec.product_id)
            if cart_item is None:
                raise OrderItemNotFoundError(
                    f"Product #{spec.product_id} is not in the member's cart"
                )
            cart_item.check_owner(requester_id)

            requested = Quantity(spec.quantity)
            # Partial consumption of a cart item is not supported.
            if requested != cart_item.quantity:
                raise InvalidQuantityError(
                    f"Requested quantity {requested} for product #{spec.product_id} "
                    f"does not match cart quantity {cart_item.quantity}"
                )
            resolved.append(cart_item)

        return resolved
