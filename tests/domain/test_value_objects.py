"""Unit tests for domain value objects."""

from decimal import Decimal

import pytest

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.value_objects import Money, Percent


# ── Money ────────────────────────────────────────────────────────────────────


class TestMoney:

    def test_creation(self):
        m = Money(Decimal("5000"))
        assert m.amount == Decimal("5000")
        assert m.currency == "NGN"

    def test_of_factory_from_string(self):
        assert Money.of("2500.50").amount == Decimal("2500.50")

    def test_of_factory_from_int(self):
        assert Money.of(10).amount == Decimal("10")

    def test_of_factory_rejects_garbage(self):
        with pytest.raises(ValidationError, match="Invalid money amount"):
            Money.of("ten naira")

    def test_negative_amount_rejected(self):
        with pytest.raises(ValidationError, match="cannot be negative"):
            Money(Decimal("-1"))

    def test_addition(self):
        assert Money.of("10") + Money.of("5.50") == Money.of("15.50")

    def test_subtraction_going_negative_rejected(self):
        with pytest.raises(ValidationError, match="negative amount"):
            Money.of("5") - Money.of("10")

    def test_multiplication_by_int(self):
        assert Money.of(5000) * 3 == Money.of(15000)

    def test_multiplication_by_float_rejected(self):
        with pytest.raises(TypeError):
            Money.of(5000) * 1.5

    def test_currency_mismatch_rejected(self):
        with pytest.raises(ValidationError, match="Cannot combine"):
            Money(Decimal("10"), "NGN") + Money(Decimal("5"), "USD")

    def test_percent_of_rounds_half_up(self):
        assert Money.of(15000).percent_of(Percent(10)) == Money.of(1500)
        assert Money.of("0.05").percent_of(Percent(10)).amount == Decimal("0.01")

    def test_zero(self):
        assert Money.zero().is_zero
        assert not Money.of(1).is_zero

    def test_str_formatting(self):
        assert str(Money.of(15000)) == "₦15,000.00"
        assert str(Money.of("9.5")) == "₦9.50"

    def test_greater_than(self):
        assert Money.of("10") > Money.of("5")
        assert not Money.of("10") > Money.of("10")

    def test_comparison_currency_mismatch_rejected(self):
        with pytest.raises(ValidationError, match="Cannot combine"):
            Money(Decimal("10"), "NGN") > Money(Decimal("5"), "USD")


# ── Percent ──────────────────────────────────────────────────────────────────


class TestPercent:

    def test_bounds_inclusive(self):
        assert Percent(0).value == 0
        assert Percent(100).value == 100

    @pytest.mark.parametrize("value", [-1, 101])
    def test_out_of_range_rejected(self, value):
        with pytest.raises(ValidationError, match="between 0 and 100"):
            Percent(value)

    def test_non_integer_rejected(self):
        with pytest.raises(ValidationError, match="must be an integer"):
            Percent(12.5)

    def test_str(self):
        assert str(Percent(15)) == "15%"
