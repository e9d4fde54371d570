"""Data Transfer Objects — plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.  ``as_payload()``
renders the camelCase JSON shape clients of the shop API expect.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any

from cart.domain.model.cart_item import CartItem
from cart.domain.model.order import Order, OrderItem
from cart.domain.model.product import Product


@dataclass(frozen=True)
class OrderItemSpec:
    """Input: what the member asked for (product id + quantity)."""

    product_id: int
    quantity: int


@dataclass(frozen=True)
class OrderRequest:
    """Input: a validated order request."""

    items: list[OrderItemSpec]
    spend_point: int


@dataclass(frozen=True)
class ProductDTO:
    id: int
    name: str
    price: int
    image_url: str

    @staticmethod
    def from_product(product: Product) -> ProductDTO:
        return ProductDTO(
            id=product.id,  # type: ignore[arg-type]
            name=product.name,
            price=product.price.amount,
            image_url=product.image_url,
        )

    def as_payload(self) -> dict[str, Any]:
        return {"id": self.id, "name": self.name, "price": self.price, "imageUrl": self.image_url}


@dataclass(frozen=True)
class CartItemDTO:
    id: int
    quantity: int
    product: ProductDTO

    @staticmethod
    def from_cart_item(item: CartItem) -> CartItemDTO:
        return CartItemDTO(
            id=item.id,  # type: ignore[arg-type]
            quantity=item.quantity.value,
            product=ProductDTO.from_product(item.product),
        )

    def as_payload(self) -> dict[str, Any]:
        return {"id": self.id, "quantity": self.quantity, "product": self.product.as_payload()}


@dataclass(frozen=True)
class OrderSummaryDTO:
    """Output: one row of a member's order history."""

    order_id: int
    thumbnail: str
    first_product_name: str
    total_count: int
    spend_price: int
    created_at: datetime

    @staticmethod
    def from_order(order: Order) -> OrderSummaryDTO:
        first = order.first_item
        return OrderSummaryDTO(
            order_id=order.id,  # type: ignore[arg-type]
            thumbnail=first.image_url,
            first_product_name=first.product_name,
            total_count=order.total_quantity,
            spend_price=order.spend_price.amount,
            created_at=order.created_at,
        )

    def as_payload(self) -> dict[str, Any]:
        return {
            "orderId": self.order_id,
            "thumbnail": self.thumbnail,
            "firstProductName": self.first_product_name,
            "totalCount": self.total_count,
            "spendPrice": self.spend_price,
            "createdAt": self.created_at.isoformat(),
        }


@dataclass(frozen=True)
class OrderItemDTO:
    """Output: a single line item as snapshotted at order time."""

    product_id: int
    name: str
    image_url: str
    price: int
    quantity: int

    @staticmethod
    def from_item(item: OrderItem) -> OrderItemDTO:
        return OrderItemDTO(
            product_id=item.product_id,
            name=item.product_name,
            image_url=item.image_url,
            price=item.unit_price.amount,
            quantity=item.quantity.value,
        )

    def as_payload(self) -> dict[str, Any]:
        return {
            "productId": self.product_id,
            "name": self.name,
            "imageUrl": self.image_url,
            "price": self.price,
            "quantity": self.quantity,
        }


@dataclass(frozen=True)
class OrderDetailDTO:
    """Output: a complete order as displayed to the member."""

    order_id: int
    total_price: int
    spend_point: int
    spend_price: int
    created_at: datetime
    items: list[OrderItemDTO]

    @staticmethod
    def from_order(order: Order) -> OrderDetailDTO:
        return OrderDetailDTO(
            order_id=order.id,  # type: ignore[arg-type]
            total_price=order.total_price.amount,
            spend_point=order.spend_point,
            spend_price=order.spend_price.amount,
            created_at=order.created_at,
            items=[OrderItemDTO.from_item(item) for item in order.items],
        )

    def as_payload(self) -> dict[str, Any]:
        return {
            "orderId": self.order_id,
            "totalPrice": self.total_price,
            "spendPoint": self.spend_point,
            "spendPrice": self.spend_price,
            "createdAt": self.created_at.isoformat(),
            "orderItemResponses": [item.as_payload() for item in self.items],
        }
