"""credit_support.margin -- CSA margin call amounts."""

from credit_support.margin.delivery import (
    DeliveryAmountBreakdown as DeliveryAmountBreakdown,
)
from credit_support.margin.delivery import (
    compute_delivery_amount as compute_delivery_amount,
)
from credit_support.margin.delivery import (
    compute_delivery_breakdown as compute_delivery_breakdown,
)
from credit_support.margin.delivery import (
    value_posted_item as value_posted_item,
)
from credit_support.margin.types import (
    CollateralRounding as CollateralRounding,
)
from credit_support.margin.types import (
    MarginApproachEnum as MarginApproachEnum,
)
from credit_support.margin.types import (
    PostedCreditSupportItem as PostedCreditSupportItem,
)
