from __future__ import annotations

from dataclasses import dataclass

from ..domain import AlreadyRegistered, NotRegistered, ValidationError
from ..domain.matches import MatchService
from ..domain.players import PlayersService
from ..domain.seasons import SeasonService
from .broadcast import LeaderboardBroadcaster
from .commands import (
    BotCommand,
    HelpCommand,
    LeaderboardCommand,
    RegisterCommand,
    ReportMatchCommand,
    ResetSeasonCommand,
    StatsCommand,
)
from .pages import Page
from .presenters import BotPresenter
from .queries import LeaderboardQueryService


@dataclass
class BotWorkflow:
    players: PlayersService
    matches: MatchService
    seasons: SeasonService
    leaderboard: LeaderboardQueryService
    broadcaster: LeaderboardBroadcaster
    presenter: BotPresenter
    leaderboard_size: int = 10

    def __post_init__(self):
        self._handlers = {
            HelpCommand: self.help_page,
            RegisterCommand: self.register,
            StatsCommand: self.stats,
            ReportMatchCommand: self.report_match,
            ResetSeasonCommand: self.reset_season,
            LeaderboardCommand: self.leaderboard_page,
        }

    async def handle(self, command: BotCommand, user_id: str) -> Page:
        handler = self._handlers[type(command)]
        return await handler(command, user_id)

    async def help_page(self, command: HelpCommand, user_id: str) -> Page:
        return self.presenter.help_page(user_id)

    async def register(self, command: RegisterCommand, user_id: str) -> Page:
        try:
            player = await self.players.register(user_id)
        except AlreadyRegistered as exc:
            return self.presenter.already_registered_page(exc.player)
        return self.presenter.registered_page(player)

    async def stats(self, command: StatsCommand, user_id: str) -> Page:
        target = command.target_id or user_id
        try:
            player = await self.players.get_player(target)
        except NotRegistered:
            return self.presenter.not_registered_page(target, own=target == user_id)
        return self.presenter.stats_page(player)

    async def report_match(self, command: ReportMatchCommand, user_id: str) -> Page:
        try:
            outcome = await self.matches.report_match(command.report)
        except ValidationError as exc:
            return self.presenter.validation_error_page(exc)
        await self.broadcaster.broadcast()
        return self.presenter.match_reported_page(outcome)

    async def reset_season(self, command: ResetSeasonCommand, user_id: str) -> Page:
        touched = await self.seasons.reset_season(command.season_id)
        return self.presenter.season_reset_page(command.season_id, touched)

    async def leaderboard_page(self, command: LeaderboardCommand, user_id: str) -> Page:
        listing = await self.leaderboard.listing(command.stat, command.season_id, self.leaderboard_size)
        if not listing:
            return self.presenter.leaderboard_empty(command.stat, command.season_id)
        return self.presenter.leaderboard_page(listing)
