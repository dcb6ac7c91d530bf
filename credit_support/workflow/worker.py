"""Worker for the margin delivery workflow and activity.

Usage::

    import asyncio
    from credit_support.workflow.worker import run_worker

    asyncio.run(run_worker())
"""

from __future__ import annotations

import logging

from temporalio.client import Client
from temporalio.worker import Worker

from credit_support.infra.config import WorkerConfig
from credit_support.workflow.activities import compute_delivery_amount_activity
from credit_support.workflow.converter import CREDIT_SUPPORT_DATA_CONVERTER
from credit_support.workflow.delivery_workflow import DeliveryAmountWorkflow

logger = logging.getLogger(__name__)


def build_worker(client: Client, config: WorkerConfig | None = None) -> Worker:
    """Worker with the delivery workflow and activity on config.task_queue.

    The client should be connected with CREDIT_SUPPORT_DATA_CONVERTER so that
    Decimal amounts cross the wire exactly.
    """
    cfg = config if config is not None else WorkerConfig()
    return Worker(
        client,
        task_queue=cfg.task_queue,
        workflows=[DeliveryAmountWorkflow],
        activities=[compute_delivery_amount_activity],
    )


async def run_worker(config: WorkerConfig | None = None) -> None:
    """Connect to Temporal and run the worker until interrupted."""
    cfg = config if config is not None else WorkerConfig()
    client = await Client.connect(
        cfg.target_host, namespace=cfg.namespace,
        data_converter=CREDIT_SUPPORT_DATA_CONVERTER,
    )
    logger.info("Starting credit support worker on %s", cfg.address)
    await build_worker(client, cfg).run()
