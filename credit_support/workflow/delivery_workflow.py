"""Durable workflow that runs the delivery amount activity for one CSA.

Determinism contract: this module contains NO I/O, NO randomness and NO
system clock access. The calculation itself is delegated to the activity.
"""

from __future__ import annotations

from datetime import timedelta

from temporalio import workflow
from temporalio.common import RetryPolicy

with workflow.unsafe.imports_passed_through():
    from credit_support.workflow.activities import compute_delivery_amount_activity
    from credit_support.workflow.types import DeliveryAmountInput, DeliveryAmountOutput

# Pure arithmetic: a retry gives the same answer.
DELIVERY_AMOUNT_RETRY = RetryPolicy(maximum_attempts=1)
DELIVERY_AMOUNT_TIMEOUT: timedelta = timedelta(seconds=30)


@workflow.defn(name="MarginDeliveryAmount")
class DeliveryAmountWorkflow:
    """Compute the delivery amount on a margin call.

    Domain errors come back inside DeliveryAmountOutput.error; the workflow
    itself only fails on infrastructure errors.
    """

    @workflow.run
    async def run(self, inp: DeliveryAmountInput) -> DeliveryAmountOutput:
        return await workflow.execute_activity(
            compute_delivery_amount_activity,
            inp,
            start_to_close_timeout=DELIVERY_AMOUNT_TIMEOUT,
            retry_policy=DELIVERY_AMOUNT_RETRY,
        )
