from __future__ import annotations

import logging

from ...models import DEFAULT_SEASON
from ...repositories import PlayersRepository

logger = logging.getLogger(__name__)


class SeasonService:
    def __init__(self, repo: PlayersRepository):
        self._repo = repo

    async def reset_season(self, season_id: str = DEFAULT_SEASON) -> int:
        """Zero one season for every stored player. Lifetime totals stay as they are."""
        touched = await self._repo.reset_season(season_id)
        logger.info("Season %s reset for %s players", season_id, touched)
        return touched
