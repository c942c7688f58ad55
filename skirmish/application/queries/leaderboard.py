from __future__ import annotations

from dataclasses import dataclass

from ...domain import StatKey
from ...domain.leaderboard import LeaderboardService


@dataclass(frozen=True)
class RankedEntry:
    rank: int
    player_id: str
    value: float | int


@dataclass(frozen=True)
class LeaderboardListing:
    stat: StatKey
    season_id: str | None
    entries: list[RankedEntry]

    @property
    def title(self) -> str:
        if self.season_id:
            return f"{self.stat.label} ({self.season_id})"
        return self.stat.label


class LeaderboardQueryService:
    def __init__(self, leaderboard: LeaderboardService):
        self._leaderboard = leaderboard

    async def listing(self, stat: StatKey, season_id: str | None, limit: int) -> LeaderboardListing | None:
        top = await self._leaderboard.top_n(stat, season_id, limit)
        if not top:
            return None
        entries = [
            RankedEntry(rank=idx, player_id=entry.player_id, value=entry.value)
            for idx, entry in enumerate(top, start=1)
        ]
        return LeaderboardListing(stat=stat, season_id=season_id, entries=entries)
