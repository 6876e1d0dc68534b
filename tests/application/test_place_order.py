"""Integration tests for the PlaceOrder use case."""

from datetime import date

import pytest

from storefront.application.cart_store import CartStore
from storefront.application.place_order import PlaceOrderHandler
from storefront.domain.exceptions import ValidationError
from storefront.domain.model.coupon import Coupon
from storefront.domain.model.shipping import ShippingDetails
from storefront.domain.model.value_objects import Percent
from tests.fakes import InMemoryCartRepository, make_product

DETAILS = ShippingDetails(
    name="Ada Obi",
    email="ada@example.com",
    address="12 Marina Rd",
    city="Lagos",
    postal_code="101001",
    phone="08030000000",
)


def _filled_store(repo=None):
    store = CartStore(repo)
    store.add_to_cart(make_product("1", name="Widget", price=5000, stock_count=3))
    store.increment_quantity("1")
    store.increment_quantity("1")
    store.toggle_favorite(make_product("2", name="Gadget", price=2000))
    return store


class TestPlaceOrderHappyPath:

    def test_confirmation_uses_applied_coupon(self):
        store = _filled_store()
        store.apply_coupon(Coupon("SAVE10", Percent(10)))

        dto = PlaceOrderHandler(store).handle(DETAILS, "cod", today=date(2026, 10, 19))

        assert dto.customer_name == "Ada Obi"
        assert dto.address == "12 Marina Rd, Lagos 101001"
        assert dto.total_items == 3
        assert dto.coupon_code == "SAVE10"
        assert dto.subtotal == "₦15,000.00"
        assert dto.discount_amount == "₦1,500.00"
        assert dto.shipping_fee == "₦2,500.00"
        assert dto.total == "₦16,000.00"
        assert dto.payment_method == "cod"
        assert dto.estimated_delivery == "Thursday, Oct 22"

    def test_cart_and_coupon_cleared_saved_items_kept(self):
        repo = InMemoryCartRepository()
        store = _filled_store(repo)
        store.apply_coupon(Coupon("SAVE10", Percent(10)))

        PlaceOrderHandler(store).handle(DETAILS)

        snap = store.snapshot()
        assert snap.items == ()
        assert snap.discount == 0
        assert snap.is_saved("2")
        assert repo.stored.items == []

    def test_listeners_see_cleared_cart(self):
        store = _filled_store()
        seen = []
        store.subscribe(seen.append)
        PlaceOrderHandler(store).handle(DETAILS)
        assert seen[-1].total_items == 0


class TestPlaceOrderValidation:

    def test_empty_cart_rejected(self):
        with pytest.raises(ValidationError, match="empty cart"):
            PlaceOrderHandler(CartStore()).handle(DETAILS)

    def test_unknown_payment_method_rejected(self):
        store = _filled_store()
        with pytest.raises(ValidationError, match="Unknown payment method"):
            PlaceOrderHandler(store).handle(DETAILS, "bitcoin")
        assert store.snapshot().total_items == 3
