"""CSA margin inputs -- posted collateral items, rounding terms, margin approach.

Aligned with ISDA CDM: PostedCreditSupportItem, CollateralRounding,
MarginApproachEnum. Percentages are carried in percent units (90 means
90%), never as fractions.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import final

from credit_support.core.money import Money
from credit_support.core.result import Err, Ok


class MarginApproachEnum(Enum):
    """How the margin amount combines with an independent amount.

    CDM: MarginApproachEnum (2 values). Closed set.
    """

    ALLOCATED = "Allocated"
    GREATER_OF = "GreaterOf"


def _is_finite_decimal(value: object) -> bool:
    return isinstance(value, Decimal) and value.is_finite()


@final
@dataclass(frozen=True, slots=True)
class PostedCreditSupportItem:
    """One posted collateral asset and its valuation treatment.

    CDM: PostedCreditSupportItem = cashOrSecurityValue + haircutPercentage
    (here valuation_percentage) + fxHaircutPercentage +
    disputedCashOrSecurityValue.
    """

    cash_or_security_value: Money
    valuation_percentage: Decimal
    fx_haircut_percentage: Decimal
    disputed_cash_or_security_value: Money

    def __post_init__(self) -> None:
        if not isinstance(self.cash_or_security_value, Money):
            raise TypeError(
                "PostedCreditSupportItem.cash_or_security_value must be Money, "
                f"got {type(self.cash_or_security_value).__name__}"
            )
        if not isinstance(self.disputed_cash_or_security_value, Money):
            raise TypeError(
                "PostedCreditSupportItem.disputed_cash_or_security_value must be Money, "
                f"got {type(self.disputed_cash_or_security_value).__name__}"
            )
        if not _is_finite_decimal(self.valuation_percentage):
            raise TypeError(
                "PostedCreditSupportItem.valuation_percentage must be finite Decimal, "
                f"got {self.valuation_percentage!r}"
            )
        if not _is_finite_decimal(self.fx_haircut_percentage):
            raise TypeError(
                "PostedCreditSupportItem.fx_haircut_percentage must be finite Decimal, "
                f"got {self.fx_haircut_percentage!r}"
            )

    @staticmethod
    def create(
        cash_or_security_value: Money,
        valuation_percentage: Decimal,
        fx_haircut_percentage: Decimal = Decimal("0"),
        disputed_cash_or_security_value: Money | None = None,
    ) -> Ok[PostedCreditSupportItem] | Err[str]:
        """Validated construction. An absent dispute means zero disputed value."""
        if not isinstance(cash_or_security_value, Money):
            return Err(
                "cash_or_security_value must be Money, "
                f"got {type(cash_or_security_value).__name__}"
            )
        if not _is_finite_decimal(valuation_percentage):
            return Err(f"valuation_percentage must be finite Decimal, got {valuation_percentage!r}")
        if not _is_finite_decimal(fx_haircut_percentage):
            return Err(
                f"fx_haircut_percentage must be finite Decimal, got {fx_haircut_percentage!r}"
            )
        if disputed_cash_or_security_value is None:
            disputed_cash_or_security_value = Money.zero(cash_or_security_value.currency.value)
        elif not isinstance(disputed_cash_or_security_value, Money):
            return Err(
                "disputed_cash_or_security_value must be Money, "
                f"got {type(disputed_cash_or_security_value).__name__}"
            )
        return Ok(PostedCreditSupportItem(
            cash_or_security_value=cash_or_security_value,
            valuation_percentage=valuation_percentage,
            fx_haircut_percentage=fx_haircut_percentage,
            disputed_cash_or_security_value=disputed_cash_or_security_value,
        ))


@final
@dataclass(frozen=True, slots=True)
class CollateralRounding:
    """Contractual rounding increments for each transfer direction.

    CDM: CollateralRounding = deliveryAmount + returnAmount.
    A zero increment means no rounding. The sign of delivery_amount is
    checked by the calculator so that it surfaces as an InvalidInputError.
    """

    delivery_amount: Decimal
    return_amount: Decimal

    def __post_init__(self) -> None:
        if not _is_finite_decimal(self.delivery_amount):
            raise TypeError(
                "CollateralRounding.delivery_amount must be finite Decimal, "
                f"got {self.delivery_amount!r}"
            )
        if not _is_finite_decimal(self.return_amount):
            raise TypeError(
                "CollateralRounding.return_amount must be finite Decimal, "
                f"got {self.return_amount!r}"
            )

    @staticmethod
    def create(
        delivery_amount: Decimal, return_amount: Decimal,
    ) -> Ok[CollateralRounding] | Err[str]:
        """Validated construction. Rejects negative increments."""
        if not _is_finite_decimal(delivery_amount):
            return Err(f"delivery_amount must be finite Decimal, got {delivery_amount!r}")
        if not _is_finite_decimal(return_amount):
            return Err(f"return_amount must be finite Decimal, got {return_amount!r}")
        if delivery_amount < 0:
            return Err(f"delivery_amount must be >= 0, got {delivery_amount}")
        if return_amount < 0:
            return Err(f"return_amount must be >= 0, got {return_amount}")
        return Ok(CollateralRounding(
            delivery_amount=delivery_amount, return_amount=return_amount,
        ))

    @staticmethod
    def uniform(increment: Decimal) -> Ok[CollateralRounding] | Err[str]:
        """Same increment in both directions."""
        return CollateralRounding.create(increment, increment)
