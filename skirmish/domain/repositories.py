from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .models import LeaderboardEntry, PlayerRecord, StatKey


class PlayersRepository(Protocol):
    async def get(self, player_id: str) -> Optional[PlayerRecord]: ...

    async def insert_if_absent(self, player: PlayerRecord) -> bool: ...

    async def save(self, player: PlayerRecord) -> None: ...

    async def reset_season(self, season_id: str) -> int: ...

    async def top(self, stat: StatKey, season_id: Optional[str], limit: int) -> Sequence[LeaderboardEntry]: ...
