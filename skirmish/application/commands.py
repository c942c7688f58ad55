from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Optional, Union

from ..domain import DEFAULT_SEASON, MatchReport, StatKey


class CommandSyntaxError(ValueError):
    def __init__(self, usage: str):
        super().__init__(usage)
        self.usage = usage


@dataclass(frozen=True)
class HelpCommand:
    privileged: ClassVar[bool] = False


@dataclass(frozen=True)
class RegisterCommand:
    privileged: ClassVar[bool] = False


@dataclass(frozen=True)
class StatsCommand:
    target_id: Optional[str] = None
    privileged: ClassVar[bool] = False


@dataclass(frozen=True)
class ReportMatchCommand:
    report: MatchReport
    privileged: ClassVar[bool] = True


@dataclass(frozen=True)
class ResetSeasonCommand:
    season_id: str = DEFAULT_SEASON
    privileged: ClassVar[bool] = True


@dataclass(frozen=True)
class LeaderboardCommand:
    stat: StatKey
    season_id: Optional[str] = None
    privileged: ClassVar[bool] = False


BotCommand = Union[
    HelpCommand,
    RegisterCommand,
    StatsCommand,
    ReportMatchCommand,
    ResetSeasonCommand,
    LeaderboardCommand,
]

USAGE = {
    "register": "/register",
    "stats": "/stats [player_id]",
    "report_match": "/report_match <player1> <player2> <kills1> <kills2> <rounds1> <rounds2> [season]",
    "reset_season": "/reset_season [season]",
    "leaderboard": "/leaderboard <rating|kills|wins> [season]",
}


def _parse_int(raw: str, name: str) -> int:
    try:
        return int(raw)
    except ValueError:
        raise CommandSyntaxError(USAGE[name]) from None


def _parse_help(args: list[str], default_season: str) -> BotCommand:
    return HelpCommand()


def _parse_register(args: list[str], default_season: str) -> BotCommand:
    return RegisterCommand()


def _parse_stats(args: list[str], default_season: str) -> BotCommand:
    if len(args) > 1:
        raise CommandSyntaxError(USAGE["stats"])
    return StatsCommand(target_id=args[0] if args else None)


def _parse_report_match(args: list[str], default_season: str) -> BotCommand:
    if len(args) not in (6, 7):
        raise CommandSyntaxError(USAGE["report_match"])
    player1, player2 = args[0], args[1]
    kills1, kills2, rounds1, rounds2 = (_parse_int(raw, "report_match") for raw in args[2:6])
    season = args[6] if len(args) == 7 else default_season
    return ReportMatchCommand(
        MatchReport(
            player1_id=player1,
            player2_id=player2,
            kills1=kills1,
            kills2=kills2,
            rounds1=rounds1,
            rounds2=rounds2,
            season_id=season,
        )
    )


def _parse_reset_season(args: list[str], default_season: str) -> BotCommand:
    if len(args) > 1:
        raise CommandSyntaxError(USAGE["reset_season"])
    return ResetSeasonCommand(season_id=args[0] if args else default_season)


def _parse_leaderboard(args: list[str], default_season: str) -> BotCommand:
    if not args or len(args) > 2:
        raise CommandSyntaxError(USAGE["leaderboard"])
    try:
        stat = StatKey.parse(args[0])
    except ValueError:
        raise CommandSyntaxError(USAGE["leaderboard"]) from None
    return LeaderboardCommand(stat=stat, season_id=args[1] if len(args) == 2 else None)


PARSERS = {
    "start": _parse_help,
    "help": _parse_help,
    "register": _parse_register,
    "stats": _parse_stats,
    "report_match": _parse_report_match,
    "reset_season": _parse_reset_season,
    "leaderboard": _parse_leaderboard,
}

COMMAND_NAMES = tuple(PARSERS)


def parse_command(name: str, args: str | None, *, default_season: str = DEFAULT_SEASON) -> BotCommand:
    """Turn a slash command name and its raw argument string into a command object."""
    parser = PARSERS.get(name.lower())
    if parser is None:
        raise CommandSyntaxError("/help")
    return parser((args or "").split(), default_season)
