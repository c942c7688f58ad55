from .match_service import MatchService

__all__ = ["MatchService"]
