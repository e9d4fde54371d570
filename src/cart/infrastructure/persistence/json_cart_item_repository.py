"""JSON-document-backed implementation of CartItemRepository.

Cart items are stored with a product ID only; the product is looked up
through the product repository when a cart item is loaded.
"""

from __future__ import annotations

from cart.domain.exceptions import EntityNotFoundError
from cart.domain.model.cart_item import CartItem
from cart.domain.model.value_objects import Quantity
from cart.domain.repository.cart_item_repository import CartItemRepository
from cart.domain.repository.product_repository import ProductRepository


class JsonCartItemRepository(CartItemRepository):

    def __init__(
        self,
        document: dict[str, list[dict]],
        product_repo: ProductRepository,
    ) -> None:
        self._document = document
        self._product_repo = product_repo

    # --- CartItemRepository interface -----------------------------------------

    def get_by_id(self, cart_item_id: int) -> CartItem | None:
        for raw in self._load_raw():
            if raw["id"] == cart_item_id:
                return self._to_domain(raw)
        return None

    def list_by_member(self, member_id: int) -> list[CartItem]:
        return [self._to_domain(raw) for raw in self._load_raw() if raw["member_id"] == member_id]

    def save(self, cart_item: CartItem) -> None:
        records = self._load_raw()
        if cart_item.id is None:
            cart_item.id = max((r["id"] for r in records), default=0) + 1

        for i, raw in enumerate(records):
            if raw["id"] == cart_item.id:
                records[i] = self._to_raw(cart_item)
                break
        else:
            records.append(self._to_raw(cart_item))

    def delete(self, cart_item_id: int) -> None:
        self._document["cart_items"] = [
            raw for raw in self._load_raw() if raw["id"] != cart_item_id
        ]

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(cart_item: CartItem) -> dict:
        return {
            "id": cart_item.id,
            "member_id": cart_item.member_id,
            "product_id": cart_item.product.id,
            "quantity": cart_item.quantity.value,
        }

    def _to_domain(self, raw: dict) -> CartItem:
        product = self._product_repo.get_by_id(raw["product_id"])
        if product is None:
            raise EntityNotFoundError(
                f"Cart item #{raw['id']} refers to missing product #{raw['product_id']}"
            )
        return CartItem(
            id=raw["id"],
            quantity=Quantity(raw["quantity"]),
            product=product,
            member_id=raw["member_id"],
        )

    def _load_raw(self) -> list[dict]:
        return self._document["cart_items"]
