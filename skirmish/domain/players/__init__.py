from .services import PlayersService

__all__ = ["PlayersService"]
