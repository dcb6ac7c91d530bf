"""Calculation and worker configuration.

Pure configuration data: frozen dataclasses with production defaults.
No client library is imported here.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import final

TASK_QUEUE: str = "credit-support-margin"


@final
@dataclass(frozen=True, slots=True)
class DeliveryAmountConfig:
    """Knobs for the delivery amount calculator.

    enforce_currency_match: when False (the default) every Money argument is
    assumed to be pre-converted into the base currency and is not checked.
    Mixed currencies are then undefined behavior the caller must prevent.
    """

    enforce_currency_match: bool = False


DEFAULT_DELIVERY_AMOUNT_CONFIG = DeliveryAmountConfig()


@final
@dataclass(frozen=True, slots=True)
class WorkerConfig:
    """Temporal connection settings for the margin worker."""

    target_host: str = "localhost:7233"
    namespace: str = "default"
    task_queue: str = TASK_QUEUE

    def __post_init__(self) -> None:
        if not self.target_host:
            raise TypeError("WorkerConfig.target_host must be non-empty")
        if not self.task_queue:
            raise TypeError("WorkerConfig.task_queue must be non-empty")

    @property
    def address(self) -> str:
        """Human-readable ``namespace@host/queue`` label for logs."""
        return f"{self.namespace}@{self.target_host}/{self.task_queue}"
