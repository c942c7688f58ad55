from __future__ import annotations

import logging
from dataclasses import dataclass, field

from ..domain import DEFAULT_SEASON
from ..domain.leaderboard import LeaderboardService
from ..domain.matches import MatchService
from ..domain.players import PlayersService
from ..domain.seasons import SeasonService
from ..infrastructure import HealthServer, load_broadcast_targets
from ..infrastructure.sqlite import SQLiteDatabase, SQLitePlayersRepository
from .broadcast import LeaderboardBroadcaster
from .presenters import BotPresenter
from .queries import LeaderboardQueryService

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AppConfig:
    bot_token: str
    db_path: str
    admin_ids: frozenset[str] = field(default_factory=frozenset)
    default_season: str = DEFAULT_SEASON
    leaderboard_size: int = 10
    broadcast_targets_path: str = "broadcast.yaml"
    health_enabled: bool = True
    health_host: str = "0.0.0.0"
    health_port: int = 8080
    metrics_log_path: str | None = None


class AppContainer:
    def __init__(
        self,
        *,
        config: AppConfig,
        players_service: PlayersService,
        match_service: MatchService,
        season_service: SeasonService,
        leaderboard_queries: LeaderboardQueryService,
        broadcaster: LeaderboardBroadcaster,
        presenter: BotPresenter,
        database: SQLiteDatabase,
        health_server: HealthServer | None,
    ):
        self.config = config
        self.players_service = players_service
        self.match_service = match_service
        self.season_service = season_service
        self.leaderboard_queries = leaderboard_queries
        self.broadcaster = broadcaster
        self.presenter = presenter

        self._database = database
        self._health_server = health_server

    async def init_resources(self) -> None:
        await self._database.init()
        if self._health_server is not None:
            await self._health_server.start()

    async def close(self) -> None:
        if self._health_server is not None:
            await self._health_server.stop()


def create_container(config: AppConfig) -> AppContainer:
    database = SQLiteDatabase(config.db_path)
    players_repo = SQLitePlayersRepository(database)

    leaderboard_queries = LeaderboardQueryService(LeaderboardService(players_repo))
    presenter = BotPresenter()

    targets = load_broadcast_targets(config.broadcast_targets_path)
    if targets:
        logger.info("Leaderboard broadcast enabled for %s targets", len(targets))
    broadcaster = LeaderboardBroadcaster(
        queries=leaderboard_queries,
        presenter=presenter,
        targets=targets,
        limit=config.leaderboard_size,
    )

    health_server = (
        HealthServer(host=config.health_host, port=config.health_port)
        if config.health_enabled
        else None
    )

    return AppContainer(
        config=config,
        players_service=PlayersService(players_repo),
        match_service=MatchService(players_repo),
        season_service=SeasonService(players_repo),
        leaderboard_queries=leaderboard_queries,
        broadcaster=broadcaster,
        presenter=presenter,
        database=database,
        health_server=health_server,
    )
