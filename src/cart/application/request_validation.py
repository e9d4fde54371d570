"""Request-shape validation for incoming order requests.

Runs before any use case: it only checks that the payload is well formed
(ids and quantities present and positive, spend point present and not
negative).  Business rules such as "is this product in the cart" belong
to the handlers.  Every problem is collected so the caller can report
them all at once, keyed by field path.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from cart.application.dto import OrderItemSpec, OrderRequest
from cart.domain.exceptions import RequestValidationError

_MISSING = object()


def parse_order_request(payload: Mapping[str, Any]) -> OrderRequest:
    """Validate ``{"orderItems": [{"productId", "quantity"}], "spendPoint"}``."""
    errors: dict[str, str] = {}
    specs: list[OrderItemSpec] = []

    raw_items = payload.get("orderItems", _MISSING)
    if raw_items is _MISSING or raw_items is None:
        errors["orderItems"] = "Order items are required"
    elif not isinstance(raw_items, list) or not raw_items:
        errors["orderItems"] = "At least one order item is required"
    else:
        for index, raw_item in enumerate(raw_items):
            spec = _parse_item(raw_item, f"orderItems[{index}]", errors)
            if spec is not None:
                specs.append(spec)

    spend_point = _check_int(
        payload.get("spendPoint"),
        "spendPoint",
        errors,
        missing="Spend point is required",
        label="Spend point",
        allow_zero=True,
    )

    if errors:
        raise RequestValidationError(errors)
    return OrderRequest(items=specs, spend_point=spend_point)  # type: ignore[arg-type]


def _parse_item(raw: Any, path: str, errors: dict[str, str]) -> OrderItemSpec | None:
    if not isinstance(raw, Mapping):
        errors[path] = "Order item must be an object"
        return None

    product_id = _check_int(
        raw.get("productId"),
        f"{path}.productId",
        errors,
        missing="Product id is required",
        label="Product id",
    )
    quantity = _check_int(
        raw.get("quantity"),
        f"{path}.quantity",
        errors,
        missing="Quantity is required",
        label="Quantity",
    )
    if product_id is None or quantity is None:
        return None
    return OrderItemSpec(product_id=product_id, quantity=quantity)


def _check_int(
    value: Any,
    field: str,
    errors: dict[str, str],
    *,
    missing: str,
    label: str,
    allow_zero: bool = False,
) -> int | None:
    if value is None:
        errors[field] = missing
        return None
    if isinstance(value, bool) or not isinstance(value, int):
        errors[field] = f"{label} must be an integer"
        return None
    if allow_zero and value < 0:
        errors[field] = f"{label} cannot be negative"
        return None
    if not allow_zero and value <= 0:
        errors[field] = f"{label} cannot be zero or negative"
        return None
    return value
