from .broadcast_loader import BroadcastTarget, load_broadcast_targets
from .health import HealthServer, build_health_app

__all__ = [
    "BroadcastTarget",
    "load_broadcast_targets",
    "HealthServer",
    "build_health_app",
]
