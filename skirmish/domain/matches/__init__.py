from .services import MatchService

__all__ = ["MatchService"]
