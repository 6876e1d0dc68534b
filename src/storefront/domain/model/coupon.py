"""Coupon value object."""

from __future__ import annotations

from dataclasses import dataclass

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.value_objects import Percent


@dataclass(frozen=True)
class Coupon:
    """A coupon code that has already been resolved to a discount.

    The cart trusts whatever percent it carries; checking that a code is
    legitimate is the job of the coupon repository.
    """

    code: str
    discount: Percent

    def __post_init__(self) -> None:
        if not self.code or not self.code.strip():
            raise ValidationError("Coupon code is required")
        if self.code != Coupon.normalize_code(self.code):
            raise ValidationError(f"Coupon code must be normalized, got {self.code!r}")

    @property
    def discount_percent(self) -> int:
        return self.discount.value

    @staticmethod
    def normalize_code(raw: str) -> str:
        return raw.strip().upper()

    def __str__(self) -> str:
        return f"{self.code} ({self.discount} off)"
