"""Integration tests for the ShowCart use case (query)."""

from storefront.application.cart_store import CartStore
from storefront.application.show_cart import ShowCartHandler
from storefront.domain.model.coupon import Coupon
from storefront.domain.model.value_objects import Percent
from tests.fakes import make_product


class TestShowCart:

    def test_empty_cart(self):
        dto = ShowCartHandler(CartStore()).handle()
        assert dto.items == []
        assert dto.total_items == 0
        assert dto.subtotal == "₦0.00"
        assert dto.shipping_fee == "₦0.00"
        assert dto.free_shipping is False

    def test_priced_cart_with_coupon(self):
        store = CartStore()
        store.add_to_cart(make_product("1", name="Widget", price=5000, stock_count=3))
        store.increment_quantity("1")
        store.increment_quantity("1")
        store.toggle_favorite(make_product("2", name="Gadget", price=2000))
        store.apply_coupon(Coupon("SAVE10", Percent(10)))

        dto = ShowCartHandler(store).handle()

        assert len(dto.items) == 1
        line = dto.items[0]
        assert (line.name, line.quantity, line.max_units) == ("Widget", 3, 3)
        assert line.unit_price == "₦5,000.00"
        assert line.line_total == "₦15,000.00"
        assert dto.total_items == 3
        assert dto.coupon_code == "SAVE10"
        assert dto.discount == 10
        assert dto.subtotal == "₦15,000.00"
        assert dto.discount_amount == "₦1,500.00"
        assert dto.shipping_fee == "₦2,500.00"
        assert dto.grand_total == "₦16,000.00"
        assert dto.free_shipping_remaining == "₦85,000.00"
        assert [s.name for s in dto.saved_for_later] == ["Gadget"]

    def test_free_shipping_flag(self):
        store = CartStore()
        store.add_to_cart(make_product("1", price=150000))
        dto = ShowCartHandler(store).handle()
        assert dto.free_shipping is True
        assert dto.grand_total == "₦150,000.00"
