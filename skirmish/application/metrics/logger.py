from __future__ import annotations

import logging
from logging.handlers import TimedRotatingFileHandler
from pathlib import Path

from ...infrastructure.metrics import METRICS_LOGGER_NAME


class ReopeningTimedRotatingFileHandler(TimedRotatingFileHandler):
    """Reopens the log file when it disappears underneath a running process."""

    def emit(self, record):
        if self.stream and not Path(self.baseFilename).exists():
            self.stream.close()
            self.stream = self._open()
        super().emit(record)


def configure_metrics_logger(
    path: str,
    *,
    when: str = "midnight",
    backups: int = 14,
    logger_name: str = METRICS_LOGGER_NAME,
) -> logging.Logger:
    """
    Route the action metrics logger to a JSON-lines file, rotated daily.
    Calling it again with the same path keeps the existing handler.
    """
    target = Path(path)
    target.parent.mkdir(parents=True, exist_ok=True)

    metrics_logger = logging.getLogger(logger_name)
    metrics_logger.setLevel(logging.INFO)
    metrics_logger.propagate = False

    for handler in metrics_logger.handlers[:]:
        if getattr(handler, "baseFilename", None) == str(target.absolute()):
            return metrics_logger
        metrics_logger.removeHandler(handler)
        handler.close()

    handler = ReopeningTimedRotatingFileHandler(
        filename=target,
        when=when,
        backupCount=backups,
        encoding="utf-8",
    )
    handler.setFormatter(logging.Formatter("%(message)s"))
    metrics_logger.addHandler(handler)
    return metrics_logger
