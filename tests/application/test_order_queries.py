"""Integration tests for the ListOrders and ShowOrder use cases."""

from datetime import datetime, timedelta, timezone

import pytest

from cart.application.dto import OrderItemSpec
from cart.application.list_orders import ListOrdersHandler
from cart.application.place_order import PlaceOrderHandler
from cart.application.show_order import ShowOrderHandler
from cart.application.update_product import UpdateProductHandler
from cart.domain.exceptions import ForbiddenError, OrderNotFoundError
from cart.domain.model.cart_item import CartItem
from cart.domain.model.member import Member
from cart.domain.model.order import Order, OrderItem
from cart.domain.model.product import Product
from cart.domain.model.value_objects import Price, Quantity
from tests.fakes import FakeUnitOfWork

ALICE = 1
BOB = 2


def _setup() -> FakeUnitOfWork:
    apple = Product(id=1, name="Apple", price=Price(1000), image_url="https://img/apple.png")
    pear = Product(id=2, name="Pear", price=Price(2500), image_url="https://img/pear.png")
    return FakeUnitOfWork(
        members=[
            Member(id=ALICE, email="a@a.com", password="1234", point=1000),
            Member(id=BOB, email="b@b.com", password="1234", point=0),
        ],
        products=[apple, pear],
        cart_items=[
            CartItem(id=1, quantity=Quantity(5), product=apple, member_id=ALICE),
            CartItem(id=2, quantity=Quantity(2), product=pear, member_id=ALICE),
            CartItem(id=3, quantity=Quantity(1), product=pear, member_id=BOB),
        ],
    )


def _stored_order(uow: FakeUnitOfWork, member_id: int, created_at: datetime, name: str) -> int:
    item = OrderItem(
        product_id=1,
        product_name=name,
        image_url=f"https://img/{name.lower()}.png",
        unit_price=Price(1000),
        quantity=Quantity(2),
    )
    order = Order(id=None, member_id=member_id, items=[item], spend_point=0, created_at=created_at)
    uow.orders.save(order)
    return order.id  # type: ignore[return-value]


class TestListOrders:

    def test_summary_fields(self):
        uow = _setup()
        order_id = PlaceOrderHandler(uow).handle(
            ALICE, [OrderItemSpec(1, 5), OrderItemSpec(2, 2)], spend_point=500
        )

        (summary,) = ListOrdersHandler(uow).handle(ALICE)

        assert summary.order_id == order_id
        assert summary.thumbnail == "https://img/apple.png"
        assert summary.first_product_name == "Apple"
        assert summary.total_count == 7
        assert summary.spend_price == 10000 - 500

    def test_most_recent_first(self):
        uow = _setup()
        now = datetime.now(timezone.utc)
        older = _stored_order(uow, ALICE, now - timedelta(days=1), "Older")
        newer = _stored_order(uow, ALICE, now, "Newer")

        summaries = ListOrdersHandler(uow).handle(ALICE)

        assert [s.order_id for s in summaries] == [newer, older]

    def test_same_timestamp_orders_by_id_descending(self):
        uow = _setup()
        now = datetime.now(timezone.utc)
        first = _stored_order(uow, ALICE, now, "First")
        second = _stored_order(uow, ALICE, now, "Second")

        summaries = ListOrdersHandler(uow).handle(ALICE)

        assert [s.order_id for s in summaries] == [second, first]

    def test_two_placed_orders_are_both_listed(self):
        uow = _setup()
        handler = PlaceOrderHandler(uow)
        first = handler.handle(ALICE, [OrderItemSpec(1, 5)], spend_point=0)
        second = handler.handle(ALICE, [OrderItemSpec(2, 2)], spend_point=0)

        summaries = ListOrdersHandler(uow).handle(ALICE)

        assert [s.order_id for s in summaries] == [second, first]

    def test_only_own_orders_listed(self):
        uow = _setup()
        PlaceOrderHandler(uow).handle(BOB, [OrderItemSpec(2, 1)], spend_point=0)
        assert ListOrdersHandler(uow).handle(ALICE) == []

    def test_recomputed_on_every_call(self):
        uow = _setup()
        listing = ListOrdersHandler(uow)
        assert listing.handle(ALICE) == []

        PlaceOrderHandler(uow).handle(ALICE, [OrderItemSpec(1, 5)], spend_point=0)

        assert len(listing.handle(ALICE)) == 1

    def test_payload_shape(self):
        uow = _setup()
        PlaceOrderHandler(uow).handle(ALICE, [OrderItemSpec(1, 5)], spend_point=0)

        payload = ListOrdersHandler(uow).handle(ALICE)[0].as_payload()

        assert set(payload) == {
            "orderId", "thumbnail", "firstProductName", "totalCount", "spendPrice", "createdAt",
        }


class TestShowOrder:

    def test_detail_fields(self):
        uow = _setup()
        order_id = PlaceOrderHandler(uow).handle(
            ALICE, [OrderItemSpec(1, 5), OrderItemSpec(2, 2)], spend_point=300
        )

        dto = ShowOrderHandler(uow).handle(ALICE, order_id)

        assert dto.order_id == order_id
        assert dto.total_price == 10000
        assert dto.spend_point == 300
        assert dto.spend_price == 9700
        assert [(i.product_id, i.name, i.price, i.quantity) for i in dto.items] == [
            (1, "Apple", 1000, 5),
            (2, "Pear", 2500, 2),
        ]

    def test_unknown_order_rejected(self):
        uow = _setup()
        with pytest.raises(OrderNotFoundError, match="Order #999 not found"):
            ShowOrderHandler(uow).handle(ALICE, 999)

    def test_other_members_order_forbidden(self):
        uow = _setup()
        order_id = PlaceOrderHandler(uow).handle(ALICE, [OrderItemSpec(1, 5)], spend_point=0)

        with pytest.raises(ForbiddenError, match="another member"):
            ShowOrderHandler(uow).handle(BOB, order_id)

    def test_payload_shape(self):
        uow = _setup()
        order_id = PlaceOrderHandler(uow).handle(ALICE, [OrderItemSpec(1, 5)], spend_point=0)

        payload = ShowOrderHandler(uow).handle(ALICE, order_id).as_payload()

        assert payload["orderItemResponses"] == [
            {
                "productId": 1,
                "name": "Apple",
                "imageUrl": "https://img/apple.png",
                "price": 1000,
                "quantity": 5,
            }
        ]


class TestOrderHistorySnapshot:

    def test_product_edits_do_not_rewrite_history(self):
        uow = _setup()
        order_id = PlaceOrderHandler(uow).handle(ALICE, [OrderItemSpec(1, 5)], spend_point=0)

        UpdateProductHandler(uow).handle(1, new_price=99999, new_name="Golden Apple")

        dto = ShowOrderHandler(uow).handle(ALICE, order_id)
        assert dto.items[0].name == "Apple"
        assert dto.items[0].price == 1000
        assert dto.total_price == 5000
        assert ListOrdersHandler(uow).handle(ALICE)[0].first_product_name == "Apple"
