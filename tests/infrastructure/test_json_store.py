"""Tests for the JSON data store and its unit of work.

These run the real use cases against a data file under ``tmp_path``.
"""

import json
import threading

import pytest
from filelock import Timeout

from cart.application.dto import OrderItemSpec
from cart.application.list_orders import ListOrdersHandler
from cart.application.place_order import PlaceOrderHandler
from cart.application.show_order import ShowOrderHandler
from cart.domain.exceptions import InsufficientPointError, OrderItemNotFoundError
from cart.domain.model.cart_item import CartItem
from cart.domain.model.member import Member
from cart.domain.model.product import Product
from cart.domain.model.value_objects import Price, Quantity
from cart.infrastructure.persistence.json_store import JsonDataStore, JsonUnitOfWork


@pytest.fixture
def store(tmp_path):
    store = JsonDataStore(tmp_path / "shop.json")
    with JsonUnitOfWork(store) as uow:
        uow.members.save(Member(id=None, email="a@a.com", password="1234", point=1000))
        apple = Product(id=None, name="Apple", price=Price(1000), image_url="https://img/apple.png")
        uow.products.save(apple)
        uow.cart_items.save(CartItem(id=None, quantity=Quantity(5), product=apple, member_id=1))
        uow.commit()
    return store


def _raw(store: JsonDataStore) -> dict:
    return json.loads(store.file_path.read_text(encoding="utf-8"))


class TestJsonDataStore:

    def test_creates_empty_document(self, tmp_path):
        store = JsonDataStore(tmp_path / "nested" / "shop.json")
        assert _raw(store) == {"members": [], "products": [], "cart_items": [], "orders": []}

    def test_ids_are_assigned_on_save(self, store):
        raw = _raw(store)
        assert raw["members"][0]["id"] == 1
        assert raw["products"][0]["id"] == 1
        assert raw["cart_items"][0] == {"id": 1, "member_id": 1, "product_id": 1, "quantity": 5}

    def test_no_temporary_files_left_behind(self, store):
        names = sorted(p.name for p in store.file_path.parent.iterdir())
        assert not [n for n in names if n.endswith(".tmp")]
        assert "shop.json" in names


class TestJsonUnitOfWork:

    def test_uncommitted_changes_are_discarded(self, store):
        before = store.file_path.read_text(encoding="utf-8")

        with JsonUnitOfWork(store) as uow:
            member = uow.members.get_by_id(1)
            member.spend_point(500)
            uow.members.save(member)
            uow.cart_items.delete(1)

        assert store.file_path.read_text(encoding="utf-8") == before

    def test_exception_mid_transaction_rolls_back(self, store):
        before = store.file_path.read_text(encoding="utf-8")

        with pytest.raises(RuntimeError):
            with JsonUnitOfWork(store) as uow:
                uow.cart_items.delete(1)
                raise RuntimeError("storage blew up")

        assert store.file_path.read_text(encoding="utf-8") == before

    def test_rollback_resets_staged_changes(self, store):
        with JsonUnitOfWork(store) as uow:
            uow.cart_items.delete(1)
            uow.rollback()
            assert uow.cart_items.get_by_id(1) is not None

    def test_lock_is_released_after_failure(self, store):
        with pytest.raises(RuntimeError):
            with JsonUnitOfWork(store):
                raise RuntimeError("boom")
        assert not store.lock.is_locked


class TestPlaceOrderOnJsonStore:

    def test_order_round_trips_through_file(self, store):
        order_id = PlaceOrderHandler(JsonUnitOfWork(store)).handle(
            1, [OrderItemSpec(1, 5)], spend_point=300
        )

        detail = ShowOrderHandler(JsonUnitOfWork(store)).handle(1, order_id)
        assert detail.total_price == 5000
        assert detail.spend_price == 4700
        assert detail.items[0].name == "Apple"

        raw = _raw(store)
        assert raw["cart_items"] == []
        assert raw["members"][0]["point"] == 700
        assert len(ListOrdersHandler(JsonUnitOfWork(store)).handle(1)) == 1

    def test_failed_placement_leaves_file_untouched(self, store):
        before = store.file_path.read_text(encoding="utf-8")

        with pytest.raises(InsufficientPointError):
            PlaceOrderHandler(JsonUnitOfWork(store)).handle(1, [OrderItemSpec(1, 5)], spend_point=2000)

        assert store.file_path.read_text(encoding="utf-8") == before

    def test_failure_after_staging_writes_is_rolled_back(self, store, monkeypatch):
        before = store.file_path.read_text(encoding="utf-8")

        def broken_write(document):
            raise OSError("disk full")

        monkeypatch.setattr(store, "write", broken_write)

        with pytest.raises(OSError, match="disk full"):
            PlaceOrderHandler(JsonUnitOfWork(store)).handle(1, [OrderItemSpec(1, 5)], spend_point=0)

        assert store.file_path.read_text(encoding="utf-8") == before

    def test_concurrent_placements_consume_cart_item_once(self, store):
        results: list[object] = []
        barrier = threading.Barrier(2)

        def place() -> None:
            handler = PlaceOrderHandler(JsonUnitOfWork(store))
            barrier.wait()
            try:
                results.append(handler.handle(1, [OrderItemSpec(1, 5)], spend_point=1000))
            except OrderItemNotFoundError as exc:
                results.append(exc)

        threads = [threading.Thread(target=place) for _ in range(2)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        placed = [r for r in results if isinstance(r, int)]
        rejected = [r for r in results if isinstance(r, OrderItemNotFoundError)]
        assert len(placed) == 1
        assert len(rejected) == 1

        raw = _raw(store)
        assert len(raw["orders"]) == 1
        assert raw["members"][0]["point"] == 0


class TestSeparateStoresOnOneFile:
    """Each CLI invocation builds its own store, so the lock must live on disk."""

    def test_open_unit_of_work_blocks_another_store(self, store):
        other = JsonDataStore(store.file_path)

        with JsonUnitOfWork(store):
            with pytest.raises(Timeout):
                other.lock.acquire(timeout=0)

        other.lock.acquire(timeout=0)
        other.lock.release()

    def test_concurrent_placements_across_stores_consume_cart_item_once(self, store):
        stores = [store, JsonDataStore(store.file_path)]
        results: list[object] = []
        barrier = threading.Barrier(2)

        def place(own_store: JsonDataStore) -> None:
            handler = PlaceOrderHandler(JsonUnitOfWork(own_store))
            barrier.wait()
            try:
                results.append(handler.handle(1, [OrderItemSpec(1, 5)], spend_point=1000))
            except OrderItemNotFoundError as exc:
                results.append(exc)

        threads = [threading.Thread(target=place, args=(s,)) for s in stores]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert sorted(type(r).__name__ for r in results) == ["OrderItemNotFoundError", "int"]

        raw = _raw(store)
        assert [o["id"] for o in raw["orders"]] == [1]
        assert raw["cart_items"] == []
        assert raw["members"][0]["point"] == 0
