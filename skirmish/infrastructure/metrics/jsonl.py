from __future__ import annotations

import functools
import json
import logging
import time
from contextlib import asynccontextmanager
from datetime import datetime, timezone
from typing import Any, Awaitable, Callable, TypeVar

T = TypeVar("T")

METRICS_LOGGER_NAME = "metrics.actions"


class ActionMetrics:
    """
    Writes one JSON line per tracked action (bot command, store call) with its
    duration and whether it raised.
    """

    def __init__(self, logger_name: str = METRICS_LOGGER_NAME):
        self._logger = logging.getLogger(logger_name)

    def configure(self, logger: logging.Logger | None = None) -> None:
        if logger:
            self._logger = logger

    def _emit(self, action: str, started: float, success: bool, source: str | None, extra: dict | None) -> None:
        payload: dict[str, Any] = {
            "ts": datetime.now(timezone.utc).isoformat(),
            "action": action,
            "duration_ms": round((time.perf_counter() - started) * 1000, 3),
            "success": success,
        }
        if source:
            payload["source"] = source
        if extra:
            payload.update(extra)
        self._logger.info(json.dumps(payload, ensure_ascii=False))

    @asynccontextmanager
    async def span(self, action: str, *, source: str | None = None, extra: dict | None = None):
        started = time.perf_counter()
        success = True
        try:
            yield
        except Exception:
            success = False
            raise
        finally:
            self._emit(action, started, success, source, extra)

    def track(self, action: str, *, source: str | None = None):
        def decorator(func: Callable[..., Awaitable[T]]) -> Callable[..., Awaitable[T]]:
            @functools.wraps(func)
            async def wrapper(*args, **kwargs):
                async with self.span(action, source=source):
                    return await func(*args, **kwargs)

            return wrapper

        return decorator


metrics = ActionMetrics()
