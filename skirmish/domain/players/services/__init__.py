from .players_service import PlayersService

__all__ = ["PlayersService"]
