"""Tests for the JSON-file repositories."""

import json

from storefront.application.cart_store import CartStore
from storefront.domain.model.cart import Cart
from storefront.domain.model.coupon import Coupon
from storefront.domain.model.value_objects import Money, Percent
from storefront.infrastructure.persistence.json_cart_repository import JsonCartRepository
from storefront.infrastructure.persistence.json_product_repository import (
    JsonProductRepository,
)
from tests.fakes import make_product


class TestJsonCartRepository:

    def test_missing_file_loads_empty_cart(self, tmp_path):
        cart = JsonCartRepository(tmp_path / "cart.json").load()
        assert cart == Cart.empty()

    def test_save_and_load(self, tmp_path):
        repo = JsonCartRepository(tmp_path / "nested" / "cart.json")
        cart = Cart.empty()
        cart.add(make_product("1", name="Widget", price="5000.50", stock_count=3, image="w.png"))
        cart.increment("1")
        cart.toggle_favorite(make_product("2", name="Gadget", price=2000, stock_count=7))
        cart.apply_coupon(Coupon("SAVE10", Percent(10)))
        cart.open_drawer()
        repo.save(cart)

        loaded = repo.load()
        item = loaded.items[0]
        assert (item.product_id, item.quantity, item.max_units) == ("1", 2, 3)
        assert item.unit_price == Money.of("5000.50")
        assert item.image == "w.png"
        assert loaded.saved_for_later[0].stock_count == 7
        assert loaded.coupon == Coupon("SAVE10", Percent(10))
        assert loaded.is_drawer_open is False

    def test_drawer_flag_not_written(self, tmp_path):
        path = tmp_path / "cart.json"
        cart = Cart.empty()
        cart.open_drawer()
        JsonCartRepository(path).save(cart)
        raw = json.loads(path.read_text(encoding="utf-8"))
        assert "is_drawer_open" not in raw
        assert raw["coupon"] is None

    def test_rehydrated_items_still_addressable_by_id(self, tmp_path):
        path = tmp_path / "cart.json"
        store = CartStore(JsonCartRepository(path))
        store.add_to_cart(make_product("1", price=5000, stock_count=3))
        store.increment_quantity("1")

        rehydrated = CartStore(JsonCartRepository(path))
        assert rehydrated.increment_quantity("1") is True
        assert rehydrated.snapshot().find_item("1").quantity == 3
        assert rehydrated.snapshot().subtotal == Money.of(15000)

    def test_store_writes_through(self, tmp_path):
        path = tmp_path / "cart.json"
        store = CartStore(JsonCartRepository(path))
        store.add_to_cart(make_product("1"))

        rehydrated = CartStore(JsonCartRepository(path))
        assert rehydrated.snapshot().find_item("1").quantity == 1


class TestJsonProductRepository:

    def test_creates_file(self, tmp_path):
        path = tmp_path / "products.json"
        repo = JsonProductRepository(path)
        assert path.exists()
        assert repo.list_all() == []

    def test_save_and_lookup(self, tmp_path):
        repo = JsonProductRepository(tmp_path / "products.json")
        repo.save(make_product("1", name="Widget", price=5000, stock_count=4))

        assert repo.get_by_id("1").stock_count == 4
        assert repo.get_by_name("WIDGET").id == "1"
        assert repo.get_by_id("2") is None
        assert repo.get_by_name("Gadget") is None
