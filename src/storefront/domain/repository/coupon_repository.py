"""Abstract repository for coupon codes."""

from __future__ import annotations

from abc import ABC, abstractmethod

from storefront.domain.model.coupon import Coupon


class CouponRepository(ABC):

    @abstractmethod
    def get_by_code(self, code: str) -> Coupon | None:
        """Return the coupon for a normalized code, or None if unknown."""
