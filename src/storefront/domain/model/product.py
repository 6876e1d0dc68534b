"""Product record.

Products come from the catalog.  The cart never edits them: it copies the
fields it needs into a line item, or keeps the whole record as a
saved-for-later bookmark.
"""

from __future__ import annotations

from dataclasses import dataclass

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.value_objects import Money


@dataclass(frozen=True)
class Product:
    """A product in the catalog.

    ``stock_count`` is the number of units on hand and becomes the
    ``max_units`` ceiling of a cart line built from this product.
    """

    id: str
    name: str
    price: Money
    image: str = ""
    stock_count: int = 1

    def __post_init__(self) -> None:
        if not isinstance(self.id, str):
            raise ValidationError(
                f"Product id must be a string, got {type(self.id).__name__}"
            )
        if not self.id.strip():
            raise ValidationError("Product id is required")
        if not self.name or not self.name.strip():
            raise ValidationError("Product name is required")
        if not isinstance(self.price, Money):
            raise ValidationError(
                f"Price of {self.name} must be Money, got {type(self.price).__name__}"
            )
        if isinstance(self.stock_count, bool) or not isinstance(self.stock_count, int):
            raise ValidationError(
                f"Stock count must be an integer, got {type(self.stock_count).__name__}"
            )
        if self.stock_count < 0:
            raise ValidationError("Stock count cannot be negative")

    @property
    def in_stock(self) -> bool:
        return self.stock_count > 0
