from .season_service import SeasonService

__all__ = ["SeasonService"]
