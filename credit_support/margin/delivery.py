"""Delivery amount -- what the posting party must deliver on a margin call.

Pure computation, no side effects. Steps:

1. Value each posted item:
   value = cash_or_security_value * (valuation% - fx_haircut%) / 100
           - disputed_cash_or_security_value
2. Net collateral:
   sum(items) + prior_delivery_adjustment - prior_return_adjustment
   - disputed_transferred_amount
3. Exposure:
   required - threshold, where required is the margin amount, or the greater
   of margin and independent amount under GREATER_OF
4. Raw delivery:
   exposure - net collateral - disputed_delivery_amount
5. Gate and round:
   0 if raw < minimum_transfer_amount (unrounded, strict), else raw rounded
   half-up to rounding.delivery_amount; floored at 0.

All amounts are assumed to be in base_currency. Nothing is converted; with
DeliveryAmountConfig.enforce_currency_match the assumption is checked.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from decimal import Decimal, localcontext
from typing import assert_never, final

from credit_support.core.decimal_math import percent_of, round_to_nearest, sum_d
from credit_support.core.errors import (
    CreditSupportError,
    CurrencyMismatchError,
    FieldViolation,
    InvalidInputError,
)
from credit_support.core.money import (
    CSA_DECIMAL_CONTEXT,
    MAX_SIGNIFICANT_DIGITS,
    Money,
    NonEmptyStr,
    validate_currency,
)
from credit_support.core.result import Err, Ok
from credit_support.infra.config import DEFAULT_DELIVERY_AMOUNT_CONFIG, DeliveryAmountConfig
from credit_support.margin.types import (
    CollateralRounding,
    MarginApproachEnum,
    PostedCreditSupportItem,
)

_ZERO = Decimal("0")
_SRC = "margin.delivery.compute_delivery_breakdown"


@final
@dataclass(frozen=True, slots=True)
class DeliveryAmountBreakdown:
    """Every intermediate figure of one delivery amount calculation."""

    sum_collateral: Decimal
    net_collateral: Decimal
    required_amount: Decimal
    exposure: Decimal
    raw_delivery: Decimal
    below_minimum_transfer: bool
    delivery_amount: Money


# ---------------------------------------------------------------------------
# Steps
# ---------------------------------------------------------------------------


def value_posted_item(item: PostedCreditSupportItem) -> Decimal:
    """Credit-support value of one posted item, net of its disputed portion.

    The FX haircut is subtracted from the valuation percentage before
    scaling (linear, not compounded). The disputed value is removed at its
    full, unscaled amount.
    """
    with localcontext(CSA_DECIMAL_CONTEXT):
        effective_pct = item.valuation_percentage - item.fx_haircut_percentage
        scaled = percent_of(item.cash_or_security_value.amount, effective_pct)
        return scaled - item.disputed_cash_or_security_value.amount


def _required_amount(
    margin_approach: MarginApproachEnum,
    margin_amount: Money,
    independent_amount: Money | None,
) -> Decimal:
    match margin_approach:
        case MarginApproachEnum.ALLOCATED:
            return margin_amount.amount
        case MarginApproachEnum.GREATER_OF:
            if independent_amount is None:
                return margin_amount.amount
            return max(margin_amount.amount, independent_amount.amount)
        case _:
            assert_never(margin_approach)


# ---------------------------------------------------------------------------
# Input checks
# ---------------------------------------------------------------------------


def _too_precise(path: str, value: Decimal) -> FieldViolation | None:
    digits = len(value.as_tuple().digits)
    if digits > MAX_SIGNIFICANT_DIGITS:
        return FieldViolation(
            path, f"must have at most {MAX_SIGNIFICANT_DIGITS} significant digits", str(value),
        )
    return None


def _check_inputs(
    items: tuple[object, ...] | None,
    required_money: dict[str, object],
    margin_approach: object,
    independent_amount: object,
    rounding: object,
    base_currency: object,
) -> tuple[FieldViolation, ...]:
    violations: list[FieldViolation] = []
    # Decimals that enter the arithmetic, checked against the context precision.
    decimals: list[tuple[str, Decimal]] = []

    for name, value in required_money.items():
        if value is None:
            violations.append(FieldViolation(name, "is required", "None"))
        elif not isinstance(value, Money):
            violations.append(FieldViolation(name, "must be Money", type(value).__name__))
        else:
            decimals.append((name, value.amount))

    if isinstance(independent_amount, Money):
        decimals.append(("independent_amount", independent_amount.amount))
    elif independent_amount is not None:
        violations.append(FieldViolation(
            "independent_amount", "must be Money or None", type(independent_amount).__name__,
        ))

    if not isinstance(margin_approach, MarginApproachEnum):
        violations.append(FieldViolation(
            "margin_approach", "must be MarginApproachEnum", repr(margin_approach),
        ))

    if not isinstance(rounding, CollateralRounding):
        violations.append(FieldViolation(
            "rounding", "must be CollateralRounding", type(rounding).__name__,
        ))
    elif rounding.delivery_amount < _ZERO:
        violations.append(FieldViolation(
            "rounding.delivery_amount", "must be >= 0", str(rounding.delivery_amount),
        ))
    else:
        decimals.append(("rounding.delivery_amount", rounding.delivery_amount))

    if not isinstance(base_currency, str) or not validate_currency(base_currency):
        violations.append(FieldViolation(
            "base_currency", "must be a known ISO 4217 code", repr(base_currency),
        ))

    if items is None:
        violations.append(FieldViolation("posted_credit_support_items", "is required", "None"))
    else:
        for i, item in enumerate(items):
            if not isinstance(item, PostedCreditSupportItem):
                violations.append(FieldViolation(
                    f"posted_credit_support_items[{i}]",
                    "must be PostedCreditSupportItem",
                    type(item).__name__,
                ))
                continue
            prefix = f"posted_credit_support_items[{i}]"
            decimals.extend([
                (f"{prefix}.cash_or_security_value", item.cash_or_security_value.amount),
                (f"{prefix}.valuation_percentage", item.valuation_percentage),
                (f"{prefix}.fx_haircut_percentage", item.fx_haircut_percentage),
                (
                    f"{prefix}.disputed_cash_or_security_value",
                    item.disputed_cash_or_security_value.amount,
                ),
            ])

    for path, value in decimals:
        violation = _too_precise(path, value)
        if violation is not None:
            violations.append(violation)

    return tuple(violations)


def _check_currencies(
    base_currency: str,
    named_money: dict[str, Money | None],
    posted_credit_support_items: Sequence[PostedCreditSupportItem],
) -> CurrencyMismatchError | None:
    candidates: list[tuple[str, Money | None]] = list(named_money.items())
    for i, item in enumerate(posted_credit_support_items):
        prefix = f"posted_credit_support_items[{i}]"
        candidates.append((f"{prefix}.cash_or_security_value", item.cash_or_security_value))
        candidates.append((
            f"{prefix}.disputed_cash_or_security_value",
            item.disputed_cash_or_security_value,
        ))
    for name, money in candidates:
        if money is not None and money.currency.value != base_currency:
            return CurrencyMismatchError(
                message=(
                    f"{name} is in {money.currency.value}, "
                    f"expected base currency {base_currency}"
                ),
                code="CURRENCY_MISMATCH",
                source=_SRC,
                field=name,
                expected=base_currency,
                actual=money.currency.value,
            )
    return None


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def compute_delivery_breakdown(
    posted_credit_support_items: Iterable[PostedCreditSupportItem],
    prior_delivery_adjustment: Money,
    prior_return_adjustment: Money,
    disputed_transferred_amount: Money,
    margin_amount: Money,
    threshold: Money,
    margin_approach: MarginApproachEnum,
    independent_amount: Money | None,
    minimum_transfer_amount: Money,
    rounding: CollateralRounding,
    disputed_delivery_amount: Money,
    base_currency: str,
    *,
    config: DeliveryAmountConfig | None = None,
) -> Ok[DeliveryAmountBreakdown] | Err[CreditSupportError]:
    """Compute the delivery amount and every figure that leads to it.

    Returns Err(InvalidInputError) when a required argument is missing or
    malformed, rounding.delivery_amount is negative, or any input Decimal has
    more than MAX_SIGNIFICANT_DIGITS significant digits. Returns
    Err(CurrencyMismatchError) only when config.enforce_currency_match is set.
    """
    cfg = config if config is not None else DEFAULT_DELIVERY_AMOUNT_CONFIG
    items = (
        tuple(posted_credit_support_items)
        if posted_credit_support_items is not None
        else None
    )

    required_money: dict[str, object] = {
        "prior_delivery_adjustment": prior_delivery_adjustment,
        "prior_return_adjustment": prior_return_adjustment,
        "disputed_transferred_amount": disputed_transferred_amount,
        "margin_amount": margin_amount,
        "threshold": threshold,
        "minimum_transfer_amount": minimum_transfer_amount,
        "disputed_delivery_amount": disputed_delivery_amount,
    }
    violations = _check_inputs(
        items, required_money,
        margin_approach, independent_amount, rounding, base_currency,
    )
    if violations:
        return Err(InvalidInputError(
            message="; ".join(f"{v.path} {v.constraint}" for v in violations),
            code="INVALID_INPUT",
            source=_SRC,
            fields=violations,
        ))

    if cfg.enforce_currency_match:
        mismatch = _check_currencies(
            base_currency,
            {
                "prior_delivery_adjustment": prior_delivery_adjustment,
                "prior_return_adjustment": prior_return_adjustment,
                "disputed_transferred_amount": disputed_transferred_amount,
                "margin_amount": margin_amount,
                "threshold": threshold,
                "independent_amount": independent_amount,
                "minimum_transfer_amount": minimum_transfer_amount,
                "disputed_delivery_amount": disputed_delivery_amount,
            },
            items,
        )
        if mismatch is not None:
            return Err(mismatch)

    with localcontext(CSA_DECIMAL_CONTEXT):
        sum_collateral = sum_d(value_posted_item(i) for i in items)
        net_collateral = (
            sum_collateral
            + prior_delivery_adjustment.amount
            - prior_return_adjustment.amount
            - disputed_transferred_amount.amount
        )
        required = _required_amount(margin_approach, margin_amount, independent_amount)
        exposure = required - threshold.amount
        raw_delivery = exposure - net_collateral - disputed_delivery_amount.amount

        below_mta = raw_delivery < minimum_transfer_amount.amount
        if below_mta:
            amount = _ZERO
        else:
            amount = round_to_nearest(raw_delivery, rounding.delivery_amount)
        # Floor at zero; also canonicalizes Decimal('-0') for stable output.
        if amount <= _ZERO:
            amount = _ZERO

    return Ok(DeliveryAmountBreakdown(
        sum_collateral=sum_collateral,
        net_collateral=net_collateral,
        required_amount=required,
        exposure=exposure,
        raw_delivery=raw_delivery,
        below_minimum_transfer=below_mta,
        delivery_amount=Money(amount=amount, currency=NonEmptyStr(value=base_currency)),
    ))


def compute_delivery_amount(
    posted_credit_support_items: Iterable[PostedCreditSupportItem],
    prior_delivery_adjustment: Money,
    prior_return_adjustment: Money,
    disputed_transferred_amount: Money,
    margin_amount: Money,
    threshold: Money,
    margin_approach: MarginApproachEnum,
    independent_amount: Money | None,
    minimum_transfer_amount: Money,
    rounding: CollateralRounding,
    disputed_delivery_amount: Money,
    base_currency: str,
    *,
    config: DeliveryAmountConfig | None = None,
) -> Ok[Money] | Err[CreditSupportError]:
    """Delivery amount in base_currency: never negative, rounded or zero."""
    return compute_delivery_breakdown(
        posted_credit_support_items,
        prior_delivery_adjustment,
        prior_return_adjustment,
        disputed_transferred_amount,
        margin_amount,
        threshold,
        margin_approach,
        independent_amount,
        minimum_transfer_amount,
        rounding,
        disputed_delivery_amount,
        base_currency,
        config=config,
    ).map(lambda b: b.delivery_amount)
