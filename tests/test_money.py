"""Tests for credit_support.core.money -- Decimal context, NonEmptyStr, Money."""

from __future__ import annotations

import dataclasses
from decimal import ROUND_HALF_EVEN, Decimal, localcontext

import pytest

from credit_support.core.money import (
    CSA_DECIMAL_CONTEXT,
    CURRENCY_SCHEME,
    MAX_SIGNIFICANT_DIGITS,
    Money,
    NonEmptyStr,
    validate_currency,
)
from credit_support.core.result import Err, Ok, unwrap

# ---------------------------------------------------------------------------
# CSA_DECIMAL_CONTEXT
# ---------------------------------------------------------------------------


class TestDecimalContext:
    def test_precision_is_28(self) -> None:
        assert CSA_DECIMAL_CONTEXT.prec == 28

    def test_max_significant_digits_matches_precision(self) -> None:
        assert MAX_SIGNIFICANT_DIGITS == CSA_DECIMAL_CONTEXT.prec

    def test_rounding_is_half_even(self) -> None:
        assert CSA_DECIMAL_CONTEXT.rounding == ROUND_HALF_EVEN

    def test_traps_division_by_zero(self) -> None:
        with localcontext(CSA_DECIMAL_CONTEXT), pytest.raises(Exception):  # noqa: B017
            Decimal("1") / Decimal("0")


# ---------------------------------------------------------------------------
# Currency codes
# ---------------------------------------------------------------------------


class TestCurrency:
    def test_scheme_is_fpml_iso4217(self) -> None:
        assert CURRENCY_SCHEME == "http://www.fpml.org/coding-scheme/external/iso4217"

    @pytest.mark.parametrize("code", ["EUR", "USD", "GBP", "JPY", "CHF"])
    def test_known(self, code: str) -> None:
        assert validate_currency(code)

    @pytest.mark.parametrize("code", ["", "eur", "XXX", "EURO"])
    def test_unknown(self, code: str) -> None:
        assert not validate_currency(code)


# ---------------------------------------------------------------------------
# NonEmptyStr
# ---------------------------------------------------------------------------


class TestNonEmptyStr:
    def test_parse_ok(self) -> None:
        assert unwrap(NonEmptyStr.parse("EUR")).value == "EUR"

    def test_parse_empty_err(self) -> None:
        assert isinstance(NonEmptyStr.parse(""), Err)

    def test_direct_empty_raises(self) -> None:
        with pytest.raises(TypeError):
            NonEmptyStr(value="")


# ---------------------------------------------------------------------------
# Money
# ---------------------------------------------------------------------------


class TestMoneyCreate:
    def test_valid(self) -> None:
        result = Money.create(Decimal("10.50"), "EUR")
        assert isinstance(result, Ok)
        m = unwrap(result)
        assert m.amount == Decimal("10.50")
        assert m.currency.value == "EUR"

    def test_float_rejected(self) -> None:
        result = Money.create(10.5, "EUR")  # type: ignore[arg-type]
        assert isinstance(result, Err)
        assert "Decimal" in result.error

    def test_nan_rejected(self) -> None:
        assert isinstance(Money.create(Decimal("NaN"), "EUR"), Err)

    def test_infinity_rejected(self) -> None:
        assert isinstance(Money.create(Decimal("Infinity"), "EUR"), Err)

    def test_unknown_currency_rejected(self) -> None:
        result = Money.create(Decimal("1"), "XXX")
        assert isinstance(result, Err)
        assert "ISO 4217" in result.error

    def test_direct_float_raises(self) -> None:
        with pytest.raises(TypeError):
            Money(amount=1.0, currency=NonEmptyStr(value="EUR"))  # type: ignore[arg-type]

    def test_direct_plain_str_currency_raises(self) -> None:
        with pytest.raises(TypeError):
            Money(amount=Decimal("1"), currency="EUR")  # type: ignore[arg-type]

    def test_zero(self) -> None:
        z = Money.zero("EUR")
        assert z.amount == 0
        assert z.currency.value == "EUR"

    def test_frozen(self) -> None:
        m = Money.zero("EUR")
        with pytest.raises(dataclasses.FrozenInstanceError):
            m.amount = Decimal("1")  # type: ignore[misc]
