"""Application service: Add Product use case."""

from __future__ import annotations

from cart.domain.exceptions import ValidationError
from cart.domain.model.product import Product
from cart.domain.model.value_objects import Price
from cart.domain.repository.unit_of_work import UnitOfWork


class AddProductHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(self, name: str, price: str | int, image_url: str = "") -> Product:
        """Add a new product to the catalog."""
        if not name or not name.strip():
            raise ValidationError("Product name is required")

        with self._uow as uow:
            if uow.products.get_by_name(name.strip()) is not None:
                raise ValidationError(f"Product '{name}' already exists")

            # ID is assigned by the repository on save
            product = Product(id=None, name=name.strip(), price=Price.of(price), image_url=image_url.strip())
            uow.products.save(product)
            uow.commit()
        return product
