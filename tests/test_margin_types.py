"""Tests for credit_support.margin.types -- items, rounding, margin approach."""

from __future__ import annotations

import dataclasses
from decimal import Decimal

import pytest

from credit_support.core.money import Money, NonEmptyStr
from credit_support.core.result import Err, Ok, unwrap
from credit_support.margin.types import (
    CollateralRounding,
    MarginApproachEnum,
    PostedCreditSupportItem,
)


def _eur(amount: str) -> Money:
    return Money(amount=Decimal(amount), currency=NonEmptyStr(value="EUR"))


class TestMarginApproachEnum:
    def test_two_values(self) -> None:
        assert len(MarginApproachEnum) == 2

    def test_values(self) -> None:
        assert MarginApproachEnum.ALLOCATED.value == "Allocated"
        assert MarginApproachEnum.GREATER_OF.value == "GreaterOf"


class TestPostedCreditSupportItem:
    def test_create_defaults_dispute_to_zero(self) -> None:
        item = unwrap(PostedCreditSupportItem.create(_eur("5"), Decimal("90")))
        assert item.fx_haircut_percentage == 0
        assert item.disputed_cash_or_security_value.amount == 0
        assert item.disputed_cash_or_security_value.currency.value == "EUR"

    def test_create_with_dispute(self) -> None:
        item = unwrap(PostedCreditSupportItem.create(
            _eur("5"), Decimal("90"), Decimal("8"), _eur("2"),
        ))
        assert item.disputed_cash_or_security_value.amount == Decimal("2")

    def test_create_rejects_float_percentage(self) -> None:
        result = PostedCreditSupportItem.create(_eur("5"), 90.0)  # type: ignore[arg-type]
        assert isinstance(result, Err)
        assert "valuation_percentage" in result.error

    def test_create_rejects_nan_haircut(self) -> None:
        result = PostedCreditSupportItem.create(_eur("5"), Decimal("90"), Decimal("NaN"))
        assert isinstance(result, Err)
        assert "fx_haircut_percentage" in result.error

    def test_create_rejects_non_money_value(self) -> None:
        result = PostedCreditSupportItem.create(Decimal("5"), Decimal("90"))  # type: ignore[arg-type]
        assert isinstance(result, Err)

    def test_direct_non_money_dispute_raises(self) -> None:
        with pytest.raises(TypeError):
            PostedCreditSupportItem(
                cash_or_security_value=_eur("5"),
                valuation_percentage=Decimal("100"),
                fx_haircut_percentage=Decimal("0"),
                disputed_cash_or_security_value=None,  # type: ignore[arg-type]
            )

    def test_frozen(self) -> None:
        item = unwrap(PostedCreditSupportItem.create(_eur("5"), Decimal("100")))
        with pytest.raises(dataclasses.FrozenInstanceError):
            item.valuation_percentage = Decimal("50")  # type: ignore[misc]


class TestCollateralRounding:
    def test_create(self) -> None:
        r = unwrap(CollateralRounding.create(Decimal("0.5"), Decimal("1")))
        assert r.delivery_amount == Decimal("0.5")
        assert r.return_amount == Decimal("1")

    def test_uniform(self) -> None:
        r = unwrap(CollateralRounding.uniform(Decimal("10000")))
        assert r.delivery_amount == r.return_amount == Decimal("10000")

    def test_zero_allowed(self) -> None:
        assert isinstance(CollateralRounding.create(Decimal("0"), Decimal("0")), Ok)

    def test_create_rejects_negative_delivery(self) -> None:
        result = CollateralRounding.create(Decimal("-1"), Decimal("1"))
        assert isinstance(result, Err)
        assert "delivery_amount" in result.error

    def test_create_rejects_negative_return(self) -> None:
        assert isinstance(CollateralRounding.create(Decimal("1"), Decimal("-1")), Err)

    def test_direct_allows_negative_for_calculator_to_reject(self) -> None:
        r = CollateralRounding(delivery_amount=Decimal("-1"), return_amount=Decimal("0"))
        assert r.delivery_amount < 0

    def test_direct_rejects_float(self) -> None:
        with pytest.raises(TypeError):
            CollateralRounding(delivery_amount=0.5, return_amount=Decimal("0"))  # type: ignore[arg-type]
