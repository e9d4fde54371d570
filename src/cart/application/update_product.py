"""Application service: Update Product use case."""

from __future__ import annotations

from cart.domain.exceptions import EntityNotFoundError
from cart.domain.model.value_objects import Price
from cart.domain.repository.unit_of_work import UnitOfWork


class UpdateProductHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(
        self,
        product_id: int,
        new_price: str | int | None = None,
        new_name: str | None = None,
    ) -> None:
        """Update a product's price and/or name.

        This does NOT affect any existing orders; they captured a
        snapshot at creation time.
        """
        with self._uow as uow:
            product = uow.products.get_by_id(product_id)
            if product is None:
                raise EntityNotFoundError(f"Product with ID '{product_id}' not found")

            if new_price is not None:
                product.update_price(Price.of(new_price))
            if new_name is not None:
                product.rename(new_name)
            uow.products.save(product)
            uow.commit()
