from .database import SQLiteDatabase
from .players import SQLitePlayersRepository

__all__ = [
    "SQLiteDatabase",
    "SQLitePlayersRepository",
]
