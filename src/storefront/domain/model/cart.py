"""Cart aggregate: the shopper's line items, bookmarks and coupon.

The Cart is an aggregate root that owns its line items.  Every transition
is clamped rather than rejected: an operation that cannot apply (unknown
id, quantity already at its ceiling or floor, duplicate add) leaves the
cart untouched and reports ``False``.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.coupon import Coupon
from storefront.domain.model.product import Product
from storefront.domain.model.value_objects import Money

logger = logging.getLogger(__name__)


@dataclass
class CartLineItem:
    """Ties a product to a quantity and a stock ceiling.

    Invariant: ``1 <= quantity <= max_units``.  Mutable only via
    ``increment()`` / ``decrement()``, both of which clamp.
    """

    product_id: str
    name: str
    unit_price: Money
    image: str = ""
    quantity: int = 1
    max_units: int = 1

    def __post_init__(self) -> None:
        if not isinstance(self.product_id, str) or not self.product_id.strip():
            raise ValidationError(
                f"Line item product id must be a non-empty string, got {self.product_id!r}"
            )
        if not isinstance(self.unit_price, Money):
            raise ValidationError(
                f"Unit price of {self.name} must be Money, got {type(self.unit_price).__name__}"
            )
        for label, value in (("Quantity", self.quantity), ("Max units", self.max_units)):
            if isinstance(value, bool) or not isinstance(value, int):
                raise ValidationError(
                    f"{label} must be an integer, got {type(value).__name__}"
                )
        if self.max_units < 1:
            raise ValidationError(
                f"Max units for {self.name} must be at least 1, got {self.max_units}"
            )
        if not 1 <= self.quantity <= self.max_units:
            raise ValidationError(
                f"Quantity for {self.name} must be between 1 and {self.max_units}, "
                f"got {self.quantity}"
            )

    @staticmethod
    def from_product(product: Product, max_units: int | None = None) -> CartLineItem:
        """Build a fresh line (quantity 1) capped at the product's stock."""
        return CartLineItem(
            product_id=product.id,
            name=product.name,
            unit_price=product.price,
            image=product.image,
            quantity=1,
            max_units=product.stock_count if max_units is None else max_units,
        )

    @property
    def line_total(self) -> Money:
        return self.unit_price * self.quantity

    @property
    def at_ceiling(self) -> bool:
        return self.quantity >= self.max_units

    def increment(self) -> bool:
        if self.at_ceiling:
            return False
        self.quantity += 1
        return True

    def decrement(self) -> bool:
        if self.quantity <= 1:
            return False
        self.quantity -= 1
        return True

    def to_product(self) -> Product:
        """The bookmark shape of this line, used when saving it for later."""
        return Product(
            id=self.product_id,
            name=self.name,
            price=self.unit_price,
            image=self.image,
            stock_count=self.max_units,
        )


@dataclass
class Cart:
    """Aggregate root for the shopping session.

    Use ``Cart.empty()`` for a new session.  The ``__init__`` is kept plain
    so the repository can reconstitute a persisted cart.
    """

    items: list[CartLineItem] = field(default_factory=list)
    saved_for_later: list[Product] = field(default_factory=list)
    coupon: Coupon | None = None
    is_drawer_open: bool = False

    @staticmethod
    def empty() -> Cart:
        return Cart()

    # --- Line items -----------------------------------------------------------

    def add(self, product: Product, max_units: int | None = None) -> bool:
        """Append *product* with quantity 1 unless it is already in the cart.

        An existing line is left as-is; adding again does not bump the
        quantity.
        """
        if self.find_item(product.id) is not None:
            logger.debug("Product %s already in cart, add ignored", product.id)
            return False
        self.items.append(CartLineItem.from_product(product, max_units))
        return True

    def increment(self, product_id: str) -> bool:
        item = self.find_item(product_id)
        if item is None:
            logger.debug("Increment ignored, %s not in cart", product_id)
            return False
        changed = item.increment()
        if not changed:
            logger.debug("Increment ignored, %s already at %d units", product_id, item.max_units)
        return changed

    def decrement(self, product_id: str) -> bool:
        item = self.find_item(product_id)
        if item is None:
            logger.debug("Decrement ignored, %s not in cart", product_id)
            return False
        return item.decrement()

    def remove(self, product_id: str) -> bool:
        item = self.find_item(product_id)
        if item is None:
            return False
        self.items.remove(item)
        return True

    def clear(self) -> bool:
        """Empty the cart and drop the coupon.  Saved items are kept."""
        if not self.items and self.coupon is None:
            return False
        self.items = []
        self.coupon = None
        return True

    # --- Saved for later ------------------------------------------------------

    def toggle_favorite(self, product: Product) -> bool:
        """Bookmark *product*, or un-bookmark it if it is already saved.

        Always changes state; the return value says whether the product is
        saved afterwards.
        """
        saved = self.find_saved(product.id)
        if saved is not None:
            self.saved_for_later.remove(saved)
            return False
        self.saved_for_later.append(product)
        return True

    def is_saved(self, product_id: str) -> bool:
        return self.find_saved(product_id) is not None

    def move_to_saved(self, product_id: str) -> bool:
        """Take a line out of the cart and make sure it is bookmarked."""
        item = self.find_item(product_id)
        if item is None:
            return False
        if not self.is_saved(product_id):
            self.saved_for_later.append(item.to_product())
        self.items.remove(item)
        return True

    def move_to_cart(self, product_id: str, max_units: int | None = None) -> bool:
        """Turn a bookmark back into a cart line.

        If the product is already in the cart its line is left unchanged;
        the bookmark is dropped either way.
        """
        saved = self.find_saved(product_id)
        if saved is None:
            return False
        if saved.in_stock or max_units is not None:
            self.add(saved, max_units)
        else:
            logger.debug("Saved product %s is out of stock, kept as bookmark", product_id)
            return False
        self.saved_for_later.remove(saved)
        return True

    # --- Coupon ---------------------------------------------------------------

    def apply_coupon(self, coupon: Coupon) -> bool:
        if self.coupon == coupon:
            return False
        self.coupon = coupon
        return True

    def clear_coupon(self) -> bool:
        if self.coupon is None:
            return False
        self.coupon = None
        return True

    # --- Drawer ---------------------------------------------------------------

    def open_drawer(self) -> bool:
        if self.is_drawer_open:
            return False
        self.is_drawer_open = True
        return True

    def close_drawer(self) -> bool:
        if not self.is_drawer_open:
            return False
        self.is_drawer_open = False
        return True

    # --- Computed properties --------------------------------------------------

    @property
    def discount(self) -> int:
        return self.coupon.discount_percent if self.coupon else 0

    @property
    def total_items(self) -> int:
        return sum(item.quantity for item in self.items)

    @property
    def subtotal(self) -> Money:
        result = Money.zero()
        for item in self.items:
            result = result + item.line_total
        return result

    @property
    def is_empty(self) -> bool:
        return not self.items

    # --- Lookups --------------------------------------------------------------

    def find_item(self, product_id: str) -> CartLineItem | None:
        for item in self.items:
            if item.product_id == product_id:
                return item
        return None

    def find_saved(self, product_id: str) -> Product | None:
        for product in self.saved_for_later:
            if product.id == product_id:
                return product
        return None
