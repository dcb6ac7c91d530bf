"""Money, the decimal context, and the NonEmptyStr refined type.

Amounts are always ``Decimal``; binary floats are rejected at construction.
Arithmetic runs in CSA_DECIMAL_CONTEXT (prec=28, ROUND_HALF_EVEN, traps for
InvalidOperation/DivisionByZero/Overflow) via ``localcontext`` so callers on
other threads are unaffected.

The context carries 28 significant digits. A value with more digits would
be rounded half-even on its first operation, so calculators reject such
inputs instead of computing with them (see MAX_SIGNIFICANT_DIGITS).
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import ROUND_HALF_EVEN as _ROUND_HALF_EVEN
from decimal import (
    Context,
    Decimal,
    DivisionByZero,
    InvalidOperation,
    Overflow,
)
from typing import final

from credit_support.core.result import Err, Ok

CSA_DECIMAL_CONTEXT = Context(
    prec=28,
    rounding=_ROUND_HALF_EVEN,
    Emin=-999999,
    Emax=999999,
    capitals=1,
    clamp=0,
    flags=[],
    traps=[InvalidOperation, DivisionByZero, Overflow],
)

MAX_SIGNIFICANT_DIGITS: int = CSA_DECIMAL_CONTEXT.prec

# FpML coding scheme that qualifies every currency code.
CURRENCY_SCHEME = "http://www.fpml.org/coding-scheme/external/iso4217"

ISO4217_CURRENCIES: frozenset[str] = frozenset({
    "AUD", "BRL", "CAD", "CHF", "CNY", "CZK", "DKK", "EUR", "GBP", "HKD",
    "HUF", "ILS", "INR", "JPY", "KRW", "MXN", "NOK", "NZD", "PLN", "SEK",
    "SGD", "THB", "TRY", "TWD", "USD", "ZAR",
})


def validate_currency(code: str) -> bool:
    """Check if a currency code is in the known ISO 4217 set."""
    return code in ISO4217_CURRENCIES


@final
@dataclass(frozen=True, slots=True)
class NonEmptyStr:
    """String constrained to be non-empty."""

    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str) or not self.value:
            raise TypeError("NonEmptyStr requires non-empty string")

    @staticmethod
    def parse(raw: str) -> Ok[NonEmptyStr] | Err[str]:
        if not isinstance(raw, str) or not raw:
            return Err("NonEmptyStr requires non-empty string")
        return Ok(NonEmptyStr(value=raw))


@final
@dataclass(frozen=True, slots=True)
class Money:
    """Immutable monetary amount in a single currency.

    No currency conversion happens here or anywhere in the package.
    """

    amount: Decimal
    currency: NonEmptyStr

    def __post_init__(self) -> None:
        if not isinstance(self.amount, Decimal) or not self.amount.is_finite():
            raise TypeError(f"Money.amount must be finite Decimal, got {self.amount!r}")
        if not isinstance(self.currency, NonEmptyStr):
            raise TypeError(
                f"Money.currency must be NonEmptyStr, got {type(self.currency).__name__}"
            )

    @staticmethod
    def create(amount: Decimal, currency: str) -> Ok[Money] | Err[str]:
        """Validated construction: finite Decimal amount, known ISO 4217 code."""
        if not isinstance(amount, Decimal):
            return Err(f"Money.amount must be Decimal, got {type(amount).__name__}")
        if not amount.is_finite():
            return Err(f"Money.amount must be finite, got {amount}")
        if not validate_currency(currency):
            return Err(f"Money.currency: unknown ISO 4217 code {currency!r}")
        return Ok(Money(amount=amount, currency=NonEmptyStr(value=currency)))

    @staticmethod
    def zero(currency: str) -> Money:
        return Money(amount=Decimal("0"), currency=NonEmptyStr(value=currency))
