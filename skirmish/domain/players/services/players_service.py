from __future__ import annotations

import logging

from ...errors import AlreadyRegistered, NotRegistered
from ...models import PlayerRecord
from ...repositories import PlayersRepository

logger = logging.getLogger(__name__)


class PlayersService:
    """
    Registration and lookup of ladder players.
    """

    def __init__(self, repo: PlayersRepository):
        self._repo = repo

    async def register(self, player_id: str) -> PlayerRecord:
        player = PlayerRecord.registered(player_id)
        if not await self._repo.insert_if_absent(player):
            existing = await self._repo.get(player_id)
            raise AlreadyRegistered(existing or player)
        logger.info("Registered player %s with rating %.2f", player_id, player.rating)
        return player

    async def get_player(self, player_id: str) -> PlayerRecord:
        player = await self._repo.get(player_id)
        if player is None:
            raise NotRegistered(player_id)
        return player
