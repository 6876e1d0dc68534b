"""Application service: Apply Coupon use case.

The cart trusts whatever discount it is handed, so the code is checked
here first.  An unknown code leaves the current discount untouched.
"""

from __future__ import annotations

import logging

from storefront.application.cart_store import CartStore
from storefront.application.dto import CouponDTO
from storefront.domain.exceptions import InvalidCouponError
from storefront.domain.model.coupon import Coupon
from storefront.domain.repository.coupon_repository import CouponRepository

logger = logging.getLogger(__name__)


class ApplyCouponHandler:

    def __init__(self, store: CartStore, coupon_repo: CouponRepository) -> None:
        self._store = store
        self._coupon_repo = coupon_repo

    def handle(self, raw_code: str) -> CouponDTO:
        code = Coupon.normalize_code(raw_code or "")
        coupon = self._coupon_repo.get_by_code(code) if code else None
        if coupon is None:
            logger.warning("Rejected coupon code %r", raw_code)
            raise InvalidCouponError("Invalid coupon code")

        self._store.apply_coupon(coupon)
        return CouponDTO(code=coupon.code, discount=coupon.discount_percent)
