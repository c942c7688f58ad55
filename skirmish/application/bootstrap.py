from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from ..infrastructure.metrics import metrics
from .container import AppConfig, create_container
from .metrics import configure_metrics_logger

logger = logging.getLogger(__name__)


@asynccontextmanager
async def bootstrap_app(config: AppConfig):
    if config.metrics_log_path:
        metrics.configure(configure_metrics_logger(config.metrics_log_path))
        logger.info("Action metrics written to %s", config.metrics_log_path)
    container = create_container(config)
    await container.init_resources()
    try:
        yield container
    finally:
        await container.close()
