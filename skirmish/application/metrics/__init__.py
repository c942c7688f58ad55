from .logger import configure_metrics_logger

__all__ = ["configure_metrics_logger"]
