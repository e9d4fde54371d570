"""Application service: Update Cart Item Quantity use case."""

from __future__ import annotations

from cart.domain.exceptions import EntityNotFoundError, InvalidQuantityError
from cart.domain.model.value_objects import Quantity
from cart.domain.repository.unit_of_work import UnitOfWork


class UpdateCartItemQuantityHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(self, member_id: int, cart_item_id: int, quantity: int) -> None:
        """Set the quantity of a cart item; zero removes it from the cart."""
        if quantity < 0:
            raise InvalidQuantityError("Quantity cannot be negative")

        with self._uow as uow:
            item = uow.cart_items.get_by_id(cart_item_id)
            if item is None:
                raise EntityNotFoundError(f"Cart item #{cart_item_id} not found")
            item.check_owner(member_id)

            if quantity == 0:
                uow.cart_items.delete(cart_item_id)
            else:
                item.change_quantity(Quantity(quantity))
                uow.cart_items.save(item)
            uow.commit()
