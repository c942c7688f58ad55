from .services import SeasonService

__all__ = ["SeasonService"]
