"""Data Transfer Objects: plain containers that cross layer boundaries.

Snapshots are what subscribers and handlers read; they are frozen copies,
so holding one never lets a caller write back into the cart.  The ``*DTO``
classes carry preformatted strings for display.
"""

from __future__ import annotations

from dataclasses import dataclass

from storefront.domain.model.cart import Cart
from storefront.domain.model.product import Product
from storefront.domain.model.value_objects import Money


# --- Snapshots ----------------------------------------------------------------


@dataclass(frozen=True)
class LineItemSnapshot:
    product_id: str
    name: str
    unit_price: Money
    image: str
    quantity: int
    max_units: int

    @property
    def line_total(self) -> Money:
        return self.unit_price * self.quantity


@dataclass(frozen=True)
class CartSnapshot:
    """Read-only view of the cart at one point in time."""

    items: tuple[LineItemSnapshot, ...]
    saved_for_later: tuple[Product, ...]
    coupon_code: str | None
    discount: int
    total_items: int
    subtotal: Money
    is_drawer_open: bool

    @staticmethod
    def of(cart: Cart) -> CartSnapshot:
        return CartSnapshot(
            items=tuple(
                LineItemSnapshot(
                    product_id=item.product_id,
                    name=item.name,
                    unit_price=item.unit_price,
                    image=item.image,
                    quantity=item.quantity,
                    max_units=item.max_units,
                )
                for item in cart.items
            ),
            saved_for_later=tuple(cart.saved_for_later),
            coupon_code=cart.coupon.code if cart.coupon else None,
            discount=cart.discount,
            total_items=cart.total_items,
            subtotal=cart.subtotal,
            is_drawer_open=cart.is_drawer_open,
        )

    def find_item(self, product_id: str) -> LineItemSnapshot | None:
        for item in self.items:
            if item.product_id == product_id:
                return item
        return None

    def is_saved(self, product_id: str) -> bool:
        return any(p.id == product_id for p in self.saved_for_later)


# --- Display DTOs -------------------------------------------------------------


@dataclass(frozen=True)
class CartLineDTO:
    product_id: str
    name: str
    quantity: int
    max_units: int
    unit_price: str  # formatted, e.g. "₦5,000.00"
    line_total: str


@dataclass(frozen=True)
class SavedItemDTO:
    product_id: str
    name: str
    price: str


@dataclass(frozen=True)
class CartDTO:
    """Output: the cart page, fully priced."""

    items: list[CartLineDTO]
    saved_for_later: list[SavedItemDTO]
    total_items: int
    coupon_code: str | None
    discount: int
    subtotal: str
    discount_amount: str
    shipping_fee: str
    grand_total: str
    free_shipping: bool
    free_shipping_remaining: str


@dataclass(frozen=True)
class CouponDTO:
    code: str
    discount: int


@dataclass(frozen=True)
class OrderConfirmationDTO:
    """Output: what the order-success page shows."""

    customer_name: str
    email: str
    address: str
    items: list[CartLineDTO]
    total_items: int
    coupon_code: str | None
    subtotal: str
    discount_amount: str
    shipping_fee: str
    total: str
    payment_method: str
    estimated_delivery: str  # e.g. "Friday, Dec 15"
