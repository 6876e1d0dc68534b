"""In-memory coupon table.

The storefront ships a fixed list of promotional codes; there is no
coupon administration.
"""

from __future__ import annotations

from storefront.domain.model.coupon import Coupon
from storefront.domain.model.value_objects import Percent
from storefront.domain.repository.coupon_repository import CouponRepository

DEFAULT_COUPONS: dict[str, int] = {
    "SAVE10": 10,
    "SAVE20": 20,
    "WELCOME15": 15,
    "SAVE5": 5,
}


class StaticCouponRepository(CouponRepository):

    def __init__(self, table: dict[str, int] | None = None) -> None:
        source = DEFAULT_COUPONS if table is None else table
        self._coupons = {
            Coupon.normalize_code(code): Coupon(Coupon.normalize_code(code), Percent(pct))
            for code, pct in source.items()
        }

    def get_by_code(self, code: str) -> Coupon | None:
        return self._coupons.get(Coupon.normalize_code(code))

    def codes(self) -> list[str]:
        return sorted(self._coupons)
