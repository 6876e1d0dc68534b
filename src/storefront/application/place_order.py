"""Application service: Place Order use case.

Prices the cart with the applied coupon, validates the shipping form and
then empties the cart (items and coupon).  Payment capture happens
outside this system; by the time this handler runs the payment step has
either succeeded or the shopper chose cash on delivery.
"""

from __future__ import annotations

import logging
from datetime import date, timedelta

from storefront.application.cart_store import CartStore
from storefront.application.dto import OrderConfirmationDTO
from storefront.application.show_cart import to_line_dto
from storefront.domain.exceptions import ValidationError
from storefront.domain.model.cart import Cart
from storefront.domain.model.shipping import ShippingDetails
from storefront.domain.service.pricing_service import PricingService

logger = logging.getLogger(__name__)

PAYMENT_METHODS = ("paystack", "cod")
DELIVERY_DAYS = 3


class PlaceOrderHandler:

    def __init__(self, store: CartStore, pricing: PricingService | None = None) -> None:
        self._store = store
        self._pricing = pricing or PricingService()

    def handle(
        self,
        details: ShippingDetails,
        payment_method: str = "paystack",
        today: date | None = None,
    ) -> OrderConfirmationDTO:
        if payment_method not in PAYMENT_METHODS:
            raise ValidationError(
                f"Unknown payment method '{payment_method}' "
                f"(expected one of: {', '.join(PAYMENT_METHODS)})"
            )

        delivery = (today or date.today()) + timedelta(days=DELIVERY_DAYS)

        def confirm(cart: Cart) -> OrderConfirmationDTO:
            if cart.is_empty:
                raise ValidationError("Cannot check out an empty cart")
            quote = self._pricing.quote(cart)
            confirmation = OrderConfirmationDTO(
                customer_name=details.name.strip(),
                email=details.email.strip(),
                address=f"{details.address.strip()}, {details.city.strip()} {details.postal_code.strip()}",
                items=[to_line_dto(item) for item in cart.items],
                total_items=cart.total_items,
                coupon_code=cart.coupon.code if cart.coupon else None,
                subtotal=str(quote.subtotal),
                discount_amount=str(quote.discount_amount),
                shipping_fee=str(quote.shipping_fee),
                total=str(quote.grand_total),
                payment_method=payment_method,
                estimated_delivery=f"{delivery:%A}, {delivery:%b} {delivery.day}",
            )
            # Still under the store lock: nothing can slip in between
            # pricing the cart and emptying it.
            self._store.clear_cart()
            return confirmation

        confirmation = self._store.read(confirm)
        logger.info(
            "Order placed for %s: %d items, total %s via %s",
            confirmation.email,
            confirmation.total_items,
            confirmation.total,
            payment_method,
        )
        return confirmation
