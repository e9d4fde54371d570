"""Application service: Add Cart Item use case."""

from __future__ import annotations

import structlog

from cart.domain.exceptions import EntityNotFoundError
from cart.domain.model.cart_item import CartItem
from cart.domain.model.value_objects import Quantity
from cart.domain.repository.unit_of_work import UnitOfWork

logger = structlog.get_logger(__name__)


class AddCartItemHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(self, member_id: int, product_id: int) -> int:
        """Put one unit of a product in the member's cart.

        Adding a product that is already in the cart bumps its quantity
        instead of creating a second cart item.
        """
        with self._uow as uow:
            product = uow.products.get_by_id(product_id)
            if product is None:
                raise EntityNotFoundError(f"Product with ID '{product_id}' not found")

            existing = next(
                (item for item in uow.cart_items.list_by_member(member_id)
                 if item.product.id == product_id),
                None,
            )
            if existing is not None:
                existing.add_one()
                cart_item = existing
            else:
                cart_item = CartItem(id=None, quantity=Quantity(1), product=product, member_id=member_id)

            uow.cart_items.save(cart_item)
            uow.commit()

        logger.debug(
            "Cart item saved",
            member_id=member_id,
            cart_item_id=cart_item.id,
            quantity=cart_item.quantity.value,
        )
        return cart_item.id  # type: ignore[return-value]
