"""Temporal activity wrapping the delivery amount calculator.

The activity is a thin boundary: all domain logic lives in
credit_support.margin. It takes a single frozen-dataclass input, returns a
frozen-dataclass output with an optional error field, and is idempotent
(same input -> same output, no side effects).
"""

from __future__ import annotations

from temporalio import activity

from credit_support.core.result import Err, Ok
from credit_support.infra.config import DeliveryAmountConfig
from credit_support.margin.delivery import compute_delivery_amount
from credit_support.workflow.types import DeliveryAmountInput, DeliveryAmountOutput


@activity.defn(name="compute_delivery_amount")
async def compute_delivery_amount_activity(inp: DeliveryAmountInput) -> DeliveryAmountOutput:
    """Compute the delivery amount for one CSA.

    Timeout: 30s | Retries: 1 (pure arithmetic -- a retry gives the same answer)
    Domain errors are returned in ``error``, not raised.
    """
    activity.logger.info(
        "Computing delivery amount for agreement %s (%d posted items, %s)",
        inp.agreement_id.value,
        len(inp.posted_credit_support_items),
        inp.margin_approach.value,
    )

    result = compute_delivery_amount(
        inp.posted_credit_support_items,
        inp.prior_delivery_adjustment,
        inp.prior_return_adjustment,
        inp.disputed_transferred_amount,
        inp.margin_amount,
        inp.threshold,
        inp.margin_approach,
        inp.independent_amount,
        inp.minimum_transfer_amount,
        inp.rounding,
        inp.disputed_delivery_amount,
        inp.base_currency,
        config=DeliveryAmountConfig(enforce_currency_match=inp.enforce_currency_match),
    )

    match result:
        case Ok(amount):
            activity.logger.info(
                "Delivery amount for agreement %s: %s %s",
                inp.agreement_id.value, amount.amount, amount.currency.value,
            )
            return DeliveryAmountOutput(agreement_id=inp.agreement_id, delivery_amount=amount)
        case Err(e):
            activity.logger.warning(
                "Delivery amount rejected for agreement %s: [%s] %s",
                inp.agreement_id.value, e.code, e.message,
            )
            return DeliveryAmountOutput(
                agreement_id=inp.agreement_id, error=f"{e.code}: {e.message}",
            )
