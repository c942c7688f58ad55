from .models import (
    DEFAULT_SEASON,
    INITIAL_RATING,
    LeaderboardEntry,
    MatchOutcome,
    MatchReport,
    PlayerRecord,
    PlayerResult,
    SeasonRecord,
    StatKey,
)
from .errors import AlreadyRegistered, LadderError, NotRegistered, ValidationError
from .repositories import PlayersRepository

__all__ = [
    "DEFAULT_SEASON",
    "INITIAL_RATING",
    "LeaderboardEntry",
    "MatchOutcome",
    "MatchReport",
    "PlayerRecord",
    "PlayerResult",
    "SeasonRecord",
    "StatKey",
    "AlreadyRegistered",
    "LadderError",
    "NotRegistered",
    "ValidationError",
    "PlayersRepository",
]
