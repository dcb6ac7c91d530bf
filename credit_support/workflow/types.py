"""Activity input/output types for the margin delivery activity.

All types: @final @dataclass(frozen=True, slots=True).
Invariants that must always hold live in __post_init__.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import final

from credit_support.core.money import Money, NonEmptyStr
from credit_support.margin.types import (
    CollateralRounding,
    MarginApproachEnum,
    PostedCreditSupportItem,
)


@final
@dataclass(frozen=True, slots=True)
class DeliveryAmountInput:
    """Everything the delivery calculator needs for one agreement.

    The agreement_id identifies the CSA; it is only used for logging and
    echoed back in the output.
    """

    agreement_id: NonEmptyStr
    posted_credit_support_items: tuple[PostedCreditSupportItem, ...]
    prior_delivery_adjustment: Money
    prior_return_adjustment: Money
    disputed_transferred_amount: Money
    margin_amount: Money
    threshold: Money
    margin_approach: MarginApproachEnum
    minimum_transfer_amount: Money
    rounding: CollateralRounding
    disputed_delivery_amount: Money
    base_currency: str
    independent_amount: Money | None = None
    enforce_currency_match: bool = False


@final
@dataclass(frozen=True, slots=True)
class DeliveryAmountOutput:
    """Activity result: a delivery amount or an error message, never both."""

    agreement_id: NonEmptyStr
    delivery_amount: Money | None = None
    error: str | None = None

    def __post_init__(self) -> None:
        if (self.delivery_amount is None) == (self.error is None):
            raise TypeError(
                "DeliveryAmountOutput must have exactly one of delivery_amount or error"
            )
