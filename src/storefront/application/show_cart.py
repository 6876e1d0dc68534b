"""Application service: Show Cart use case (query)."""

from __future__ import annotations

from storefront.application.cart_store import CartStore
from storefront.application.dto import CartDTO, CartLineDTO, SavedItemDTO
from storefront.domain.model.cart import Cart, CartLineItem
from storefront.domain.service.pricing_service import PricingService


def to_line_dto(item: CartLineItem) -> CartLineDTO:
    return CartLineDTO(
        product_id=item.product_id,
        name=item.name,
        quantity=item.quantity,
        max_units=item.max_units,
        unit_price=str(item.unit_price),
        line_total=str(item.line_total),
    )


class ShowCartHandler:

    def __init__(self, store: CartStore, pricing: PricingService | None = None) -> None:
        self._store = store
        self._pricing = pricing or PricingService()

    def handle(self) -> CartDTO:
        return self._store.read(self._to_dto)

    def _to_dto(self, cart: Cart) -> CartDTO:
        quote = self._pricing.quote(cart)
        return CartDTO(
            items=[to_line_dto(item) for item in cart.items],
            saved_for_later=[
                SavedItemDTO(product_id=p.id, name=p.name, price=str(p.price))
                for p in cart.saved_for_later
            ],
            total_items=cart.total_items,
            coupon_code=cart.coupon.code if cart.coupon else None,
            discount=cart.discount,
            subtotal=str(quote.subtotal),
            discount_amount=str(quote.discount_amount),
            shipping_fee=str(quote.shipping_fee),
            grand_total=str(quote.grand_total),
            free_shipping=not cart.is_empty and quote.shipping_fee.is_zero,
            free_shipping_remaining=str(quote.free_shipping_remaining),
        )
