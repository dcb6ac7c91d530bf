"""credit_support.workflow -- Temporal.io workflow surface for margin calls."""

from credit_support.workflow.activities import (
    compute_delivery_amount_activity as compute_delivery_amount_activity,
)
from credit_support.workflow.converter import (
    CREDIT_SUPPORT_DATA_CONVERTER as CREDIT_SUPPORT_DATA_CONVERTER,
)
from credit_support.workflow.delivery_workflow import (
    DeliveryAmountWorkflow as DeliveryAmountWorkflow,
)
from credit_support.workflow.types import (
    DeliveryAmountInput as DeliveryAmountInput,
)
from credit_support.workflow.types import (
    DeliveryAmountOutput as DeliveryAmountOutput,
)
