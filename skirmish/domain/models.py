from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import ClassVar, Mapping

DEFAULT_SEASON = "current"
INITIAL_RATING = 1000.0


class StatKey(str, Enum):
    RATING = "rating"
    TOTAL_KILLS = "totalKills"
    TOTAL_WINS = "totalWins"

    @classmethod
    def parse(cls, raw: str) -> "StatKey":
        key = (raw or "").strip().lower()
        try:
            return _STAT_ALIASES[key]
        except KeyError:
            raise ValueError(f"Unknown stat key: {raw!r}") from None

    @property
    def label(self) -> str:
        return _STAT_LABELS[self]


_STAT_ALIASES = {
    "rating": StatKey.RATING,
    "sr": StatKey.RATING,
    "kills": StatKey.TOTAL_KILLS,
    "totalkills": StatKey.TOTAL_KILLS,
    "wins": StatKey.TOTAL_WINS,
    "totalwins": StatKey.TOTAL_WINS,
}

_STAT_LABELS = {
    StatKey.RATING: "Rating",
    StatKey.TOTAL_KILLS: "Kills",
    StatKey.TOTAL_WINS: "Wins",
}


@dataclass(frozen=True)
class SeasonRecord:
    rating: float = 0.0
    kills: int = 0
    wins: int = 0

    ZERO: ClassVar["SeasonRecord"]

    def add(self, *, delta: float, kills: int, won: bool) -> "SeasonRecord":
        return SeasonRecord(
            rating=self.rating + delta,
            kills=self.kills + kills,
            wins=self.wins + (1 if won else 0),
        )


SeasonRecord.ZERO = SeasonRecord()


@dataclass(frozen=True)
class PlayerRecord:
    id: str
    rating: float = 0.0
    total_kills: int = 0
    total_wins: int = 0
    total_matches: int = 0
    seasonal_stats: Mapping[str, SeasonRecord] = field(default_factory=dict)

    @classmethod
    def registered(cls, player_id: str) -> "PlayerRecord":
        """Fresh record as created by explicit registration."""
        return cls(
            id=player_id,
            rating=INITIAL_RATING,
            seasonal_stats={DEFAULT_SEASON: SeasonRecord.ZERO},
        )

    @classmethod
    def empty(cls, player_id: str) -> "PlayerRecord":
        """All-zero record used when a match names an unknown player."""
        return cls(id=player_id)

    def season(self, season_id: str) -> SeasonRecord:
        return self.seasonal_stats.get(season_id, SeasonRecord.ZERO)

    def record_match(self, *, delta: float, kills: int, won: bool, season_id: str) -> "PlayerRecord":
        seasons = dict(self.seasonal_stats)
        seasons[season_id] = self.season(season_id).add(delta=delta, kills=kills, won=won)
        return replace(
            self,
            rating=self.rating + delta,
            total_kills=self.total_kills + kills,
            total_wins=self.total_wins + (1 if won else 0),
            total_matches=self.total_matches + 1,
            seasonal_stats=seasons,
        )

    def with_season_reset(self, season_id: str) -> "PlayerRecord":
        seasons = dict(self.seasonal_stats)
        seasons[season_id] = SeasonRecord.ZERO
        return replace(self, seasonal_stats=seasons)


@dataclass(frozen=True)
class MatchReport:
    player1_id: str
    player2_id: str
    kills1: int
    kills2: int
    rounds1: int
    rounds2: int
    season_id: str = DEFAULT_SEASON

    @property
    def winner_id(self) -> str | None:
        if self.rounds1 > self.rounds2:
            return self.player1_id
        if self.rounds2 > self.rounds1:
            return self.player2_id
        return None

    def sides(self) -> tuple[tuple[str, int, int, int], tuple[str, int, int, int]]:
        """(player_id, kills, rounds_won, rounds_lost) for both players."""
        return (
            (self.player1_id, self.kills1, self.rounds1, self.rounds2),
            (self.player2_id, self.kills2, self.rounds2, self.rounds1),
        )


@dataclass(frozen=True)
class LeaderboardEntry:
    player_id: str
    value: float | int


@dataclass(frozen=True)
class PlayerResult:
    player_id: str
    delta: float
    rating: float
    won: bool


@dataclass(frozen=True)
class MatchOutcome:
    season_id: str
    winner_id: str | None
    results: tuple[PlayerResult, PlayerResult]
