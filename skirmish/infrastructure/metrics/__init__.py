from .jsonl import METRICS_LOGGER_NAME, ActionMetrics, metrics

__all__ = ["METRICS_LOGGER_NAME", "ActionMetrics", "metrics"]
