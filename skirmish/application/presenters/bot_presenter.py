from __future__ import annotations

from html import escape
from pathlib import Path

from jinja2 import Environment, FileSystemLoader, select_autoescape

from ...domain import MatchOutcome, PlayerRecord, StatKey, ValidationError
from ...domain.rating import MAX_KILLS, MAX_ROUNDS, ValidationFailure
from ..commands import USAGE
from ..pages import Page
from ..queries import LeaderboardListing

VALIDATION_MESSAGES = {
    ValidationFailure.NEGATIVE_VALUE: "Values cannot be negative.",
    ValidationFailure.TOO_MANY_ROUNDS: f"Total rounds cannot exceed {MAX_ROUNDS}.",
    ValidationFailure.TOO_MANY_KILLS: f"Kills cannot exceed {MAX_KILLS}.",
    ValidationFailure.SAME_PLAYER: "A player cannot play against themselves.",
}


def _stat(value) -> str:
    if isinstance(value, float):
        return f"{value:.2f}"
    return str(value)


def _signed(value: float) -> str:
    return f"{value:+.2f}"


class BotPresenter:
    def __init__(self, templates_dir: Path | None = None):
        base_dir = templates_dir or (Path(__file__).resolve().parent / "templates")
        self._env = Environment(
            loader=FileSystemLoader(str(base_dir)),
            autoescape=select_autoescape(enabled_extensions=("j2",), default_for_string=True, default=True),
            trim_blocks=True,
            lstrip_blocks=True,
        )
        self._env.filters["stat"] = _stat
        self._env.filters["signed"] = _signed

    def _render(self, template: str, **context) -> str:
        return self._env.get_template(template).render(**context).strip()

    def help_page(self, user_id: str) -> Page:
        return Page(self._render("help_page.j2", commands=list(USAGE.values()), user_id=user_id))

    def usage_page(self, usage: str) -> Page:
        return Page(f"Usage: <code>{escape(usage)}</code>")

    def permission_denied(self) -> Page:
        return Page("⛔ Only ladder admins can use this command.")

    def registered_page(self, player: PlayerRecord) -> Page:
        return Page(f"✅ Registered! Your starting SR is <b>{_stat(player.rating)}</b>.")

    def already_registered_page(self, player: PlayerRecord) -> Page:
        return Page(f"You are already registered. Current SR: <b>{_stat(player.rating)}</b>.")

    def not_registered_page(self, player_id: str, *, own: bool) -> Page:
        if own:
            return Page("You are not registered yet. Use /register to join the ladder.")
        return Page(f"Player <code>{escape(player_id)}</code> is not registered.")

    def stats_page(self, player: PlayerRecord) -> Page:
        win_rate = player.total_wins / player.total_matches * 100 if player.total_matches else 0.0
        seasons = sorted(player.seasonal_stats.items())
        return Page(self._render("stats_page.j2", player=player, seasons=seasons, win_rate=win_rate))

    def validation_error_page(self, error: ValidationError) -> Page:
        message = VALIDATION_MESSAGES.get(error.reason, error.reason.value)
        return Page(f"❌ Match rejected for <code>{escape(error.player_id)}</code>: {escape(message)}")

    def match_reported_page(self, outcome: MatchOutcome) -> Page:
        return Page(self._render("match_report.j2", outcome=outcome))

    def season_reset_page(self, season_id: str, players: int) -> Page:
        return Page(f"♻️ Season <b>{escape(season_id)}</b> has been reset for {players} players.")

    def leaderboard_page(self, listing: LeaderboardListing) -> Page:
        return Page(self._render("leaderboard_page.j2", listing=listing))

    def leaderboard_empty(self, stat: StatKey, season_id: str | None) -> Page:
        scope = f" for season {escape(season_id)}" if season_id else ""
        return Page(f"No players on the {stat.label.lower()} leaderboard{scope} yet.")
