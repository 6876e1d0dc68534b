"""Domain service: Pricing.

Turns a cart into the figures shown on the cart and checkout pages:
subtotal, coupon discount, shipping fee and grand total.  The cart only
knows its subtotal and discount percent; shipping rules live here.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from storefront.domain.model.cart import Cart
from storefront.domain.model.value_objects import Money, Percent

FREE_SHIPPING_THRESHOLD = Money(Decimal("100000"))
FLAT_SHIPPING_FEE = Money(Decimal("2500"))


@dataclass(frozen=True)
class PriceQuote:
    subtotal: Money
    discount: Percent
    discount_amount: Money
    shipping_fee: Money
    grand_total: Money
    free_shipping_remaining: Money


class PricingService:

    def __init__(
        self,
        free_shipping_threshold: Money = FREE_SHIPPING_THRESHOLD,
        flat_shipping_fee: Money = FLAT_SHIPPING_FEE,
    ) -> None:
        self._threshold = free_shipping_threshold
        self._flat_fee = flat_shipping_fee

    def shipping_fee(self, subtotal: Money) -> Money:
        """Flat fee, waived once the subtotal is strictly above the threshold.

        Nothing to ship means no fee.
        """
        if subtotal.is_zero or subtotal > self._threshold:
            return Money.zero()
        return self._flat_fee

    def quote(self, cart: Cart) -> PriceQuote:
        subtotal = cart.subtotal
        discount = Percent(cart.discount)
        discount_amount = subtotal.percent_of(discount)
        shipping = self.shipping_fee(subtotal)

        if subtotal > self._threshold:
            remaining = Money.zero()
        else:
            remaining = self._threshold - subtotal

        return PriceQuote(
            subtotal=subtotal,
            discount=discount,
            discount_amount=discount_amount,
            shipping_fee=shipping,
            grand_total=subtotal - discount_amount + shipping,
            free_shipping_remaining=remaining,
        )
