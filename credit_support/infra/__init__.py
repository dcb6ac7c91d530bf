"""credit_support.infra -- configuration."""

from credit_support.infra.config import (
    DEFAULT_DELIVERY_AMOUNT_CONFIG as DEFAULT_DELIVERY_AMOUNT_CONFIG,
)
from credit_support.infra.config import TASK_QUEUE as TASK_QUEUE
from credit_support.infra.config import DeliveryAmountConfig as DeliveryAmountConfig
from credit_support.infra.config import WorkerConfig as WorkerConfig
