"""Product aggregate.

Products live independently of orders. They have their own lifecycle:
prices change, products are added and removed from the catalog.
"""

from __future__ import annotations

from dataclasses import dataclass

from cart.domain.exceptions import ValidationError
from cart.domain.model.value_objects import Price


@dataclass
class Product:
    """A product in the catalog.

    Cart items hold a live reference to it; orders never do; they copy
    what they need into an ``OrderItem`` snapshot.
    """

    id: int | None
    name: str
    price: Price
    image_url: str = ""

    def update_price(self, new_price: Price) -> None:
        """Change the product price.

        This does NOT affect any existing orders because orders
        capture a snapshot at creation time.
        """
        self.price = new_price

    def rename(self, new_name: str) -> None:
        if not new_name or not new_name.strip():
            raise ValidationError("Product name is required")
        self.name = new_name.strip()
