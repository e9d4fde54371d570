"""JSON-document-backed implementation of ProductRepository."""

from __future__ import annotations

from cart.domain.model.product import Product
from cart.domain.model.value_objects import Price
from cart.domain.repository.product_repository import ProductRepository


class JsonProductRepository(ProductRepository):

    def __init__(self, document: dict[str, list[dict]]) -> None:
        self._document = document

    # --- ProductRepository interface ------------------------------------------

    def get_by_id(self, product_id: int) -> Product | None:
        for raw in self._load_raw():
            if raw["id"] == product_id:
                return self._to_domain(raw)
        return None

    def get_by_name(self, name: str) -> Product | None:
        for raw in self._load_raw():
            if raw["name"].lower() == name.lower():
                return self._to_domain(raw)
        return None

    def list_all(self) -> list[Product]:
        return [self._to_domain(raw) for raw in self._load_raw()]

    def save(self, product: Product) -> None:
        records = self._load_raw()
        if product.id is None:
            product.id = max((r["id"] for r in records), default=0) + 1

        for i, raw in enumerate(records):
            if raw["id"] == product.id:
                records[i] = self._to_raw(product)
                break
        else:
            records.append(self._to_raw(product))

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(product: Product) -> dict:
        return {
            "id": product.id,
            "name": product.name,
            "price": product.price.amount,
            "image_url": product.image_url,
        }

    @staticmethod
    def _to_domain(raw: dict) -> Product:
        return Product(
            id=raw["id"],
            name=raw["name"],
            price=Price(raw["price"]),
            image_url=raw.get("image_url", ""),
        )

    def _load_raw(self) -> list[dict]:
        return self._document["products"]
