"""Value Objects shared across the domain.

Value Objects are immutable and compared by value, not identity.
They encapsulate validation so invalid values can never exist.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

from storefront.domain.exceptions import ValidationError

_CENTS = Decimal("0.01")


@dataclass(frozen=True)
class Money:
    """Monetary amount with currency.

    Uses Decimal so that line totals and discounts add up exactly; the
    storefront prices in whole naira but discounts can produce kobo.
    """

    amount: Decimal
    currency: str = "NGN"

    def __post_init__(self) -> None:
        if not isinstance(self.amount, Decimal):
            raise ValidationError(
                f"Money amount must be a Decimal, got {type(self.amount).__name__}"
            )
        if self.amount < Decimal("0"):
            raise ValidationError(
                f"Money amount cannot be negative, got {self.amount}"
            )

    # --- Arithmetic helpers ---------------------------------------------------

    def __add__(self, other: Money) -> Money:
        self._assert_same_currency(other)
        return Money(self.amount + other.amount, self.currency)

    def __sub__(self, other: Money) -> Money:
        self._assert_same_currency(other)
        result = self.amount - other.amount
        if result < Decimal("0"):
            raise ValidationError("Money subtraction would result in a negative amount")
        return Money(result, self.currency)

    def __mul__(self, factor: int) -> Money:
        if not isinstance(factor, int):
            raise TypeError(f"Can only multiply Money by int, got {type(factor).__name__}")
        return Money(self.amount * factor, self.currency)

    def __gt__(self, other: Money) -> bool:
        self._assert_same_currency(other)
        return self.amount > other.amount

    def percent_of(self, percent: Percent) -> Money:
        """Return *percent* of this amount, rounded half-up to the kobo."""
        portion = (self.amount * percent.value / Decimal(100)).quantize(
            _CENTS, rounding=ROUND_HALF_UP
        )
        return Money(portion, self.currency)

    @property
    def is_zero(self) -> bool:
        return self.amount == Decimal("0")

    # --- Display --------------------------------------------------------------

    def __str__(self) -> str:
        return f"₦{self.amount:,.2f}"

    # --- Internal helpers -----------------------------------------------------

    def _assert_same_currency(self, other: Money) -> None:
        if self.currency != other.currency:
            raise ValidationError(
                f"Cannot combine {self.currency} with {other.currency}"
            )

    # --- Factories ------------------------------------------------------------

    @staticmethod
    def of(amount: str | float | int | Decimal) -> Money:
        """Convenient factory that coerces to Decimal safely."""
        try:
            return Money(Decimal(str(amount)))
        except (InvalidOperation, ValueError) as exc:
            raise ValidationError(f"Invalid money amount: {amount!r}") from exc

    @staticmethod
    def zero() -> Money:
        return Money(Decimal("0"))


@dataclass(frozen=True)
class Percent:
    """A whole-number percentage between 0 and 100 inclusive."""

    value: int

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise ValidationError(
                f"Percent must be an integer, got {type(self.value).__name__}"
            )
        if not 0 <= self.value <= 100:
            raise ValidationError(f"Percent must be between 0 and 100, got {self.value}")

    def __str__(self) -> str:
        return f"{self.value}%"
