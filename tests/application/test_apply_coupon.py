"""Integration tests for the ApplyCoupon use case."""

import pytest

from storefront.application.apply_coupon import ApplyCouponHandler
from storefront.application.cart_store import CartStore
from storefront.domain.exceptions import InvalidCouponError, ValidationError
from storefront.infrastructure.persistence.static_coupon_repository import (
    StaticCouponRepository,
)


class TestApplyCoupon:

    def test_valid_code_sets_discount(self):
        store = CartStore()
        dto = ApplyCouponHandler(store, StaticCouponRepository()).handle("SAVE10")
        assert dto.code == "SAVE10"
        assert dto.discount == 10
        assert store.snapshot().discount == 10

    def test_code_is_normalized(self):
        store = CartStore()
        ApplyCouponHandler(store, StaticCouponRepository()).handle("  save20 ")
        assert store.snapshot().coupon_code == "SAVE20"

    def test_invalid_code_leaves_discount_unchanged(self):
        store = CartStore()
        handler = ApplyCouponHandler(store, StaticCouponRepository())
        handler.handle("SAVE10")

        with pytest.raises(InvalidCouponError, match="Invalid coupon code"):
            handler.handle("BOGUS")
        assert store.snapshot().discount == 10

    def test_blank_code_rejected(self):
        with pytest.raises(InvalidCouponError):
            ApplyCouponHandler(CartStore(), StaticCouponRepository()).handle("   ")

    def test_invalid_coupon_is_a_validation_error(self):
        with pytest.raises(ValidationError):
            ApplyCouponHandler(CartStore(), StaticCouponRepository({})).handle("SAVE10")

    def test_replacing_coupon(self):
        store = CartStore()
        handler = ApplyCouponHandler(store, StaticCouponRepository())
        handler.handle("SAVE10")
        handler.handle("WELCOME15")
        assert store.snapshot().discount == 15
