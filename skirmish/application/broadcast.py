from __future__ import annotations

import logging
from typing import Protocol, Sequence

from ..infrastructure.broadcast_loader import BroadcastTarget
from .presenters import BotPresenter
from .queries import LeaderboardQueryService

logger = logging.getLogger(__name__)


class MessageSender(Protocol):
    async def send(self, destination: str, text: str) -> None: ...


class LeaderboardBroadcaster:
    """
    Reposts configured leaderboards after a match report. Delivery is best effort:
    a failing target is logged and skipped, the match stays recorded.
    """

    def __init__(
        self,
        *,
        queries: LeaderboardQueryService,
        presenter: BotPresenter,
        targets: Sequence[BroadcastTarget],
        limit: int,
    ):
        self._queries = queries
        self._presenter = presenter
        self._targets = list(targets)
        self._limit = limit
        self._sender: MessageSender | None = None

    @property
    def targets(self) -> list[BroadcastTarget]:
        return list(self._targets)

    def attach(self, sender: MessageSender) -> None:
        self._sender = sender

    async def broadcast(self) -> int:
        if not self._targets or self._sender is None:
            return 0
        delivered = 0
        for target in self._targets:
            try:
                listing = await self._queries.listing(target.stat, target.season_id, self._limit)
                if listing is None:
                    continue
                page = self._presenter.leaderboard_page(listing)
                await self._sender.send(target.destination, page.text)
                delivered += 1
            except Exception:
                logger.warning(
                    "Leaderboard broadcast to %s (%s) failed",
                    target.destination,
                    target.stat.value,
                    exc_info=True,
                )
        return delivered
