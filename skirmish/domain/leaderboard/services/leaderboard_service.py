from __future__ import annotations

from ...models import LeaderboardEntry, StatKey
from ...repositories import PlayersRepository

DEFAULT_TOP_N = 10


class LeaderboardService:
    def __init__(self, repo: PlayersRepository):
        self._repo = repo

    async def top_n(
        self,
        stat: StatKey,
        season_id: str | None = None,
        n: int = DEFAULT_TOP_N,
    ) -> list[LeaderboardEntry]:
        """
        Highest values first. With a season id the season's stats are ranked and
        players that never played the season count as zero.
        """
        if n <= 0:
            raise ValueError("leaderboard size must be positive")
        return list(await self._repo.top(StatKey(stat), season_id, n))
