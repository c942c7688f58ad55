from __future__ import annotations

from typing import Any, Iterable, Mapping

from ..domain.models import LeaderboardEntry, PlayerRecord, SeasonRecord, StatKey


def _coerce(mapping: Mapping[str, Any], key: str, default: Any = None) -> Any:
    value = mapping.get(key, default)
    return value if value is not None else default


def season_from_row(row: Mapping[str, Any]) -> SeasonRecord:
    return SeasonRecord(
        rating=float(_coerce(row, "rating", 0.0)),
        kills=int(_coerce(row, "kills", 0)),
        wins=int(_coerce(row, "wins", 0)),
    )


def player_from_rows(row: Mapping[str, Any], season_rows: Iterable[Mapping[str, Any]]) -> PlayerRecord:
    return PlayerRecord(
        id=str(row["player_id"]),
        rating=float(_coerce(row, "rating", 0.0)),
        total_kills=int(_coerce(row, "total_kills", 0)),
        total_wins=int(_coerce(row, "total_wins", 0)),
        total_matches=int(_coerce(row, "total_matches", 0)),
        seasonal_stats={str(s["season_id"]): season_from_row(s) for s in season_rows},
    )


def leaderboard_entry_from_row(row: Mapping[str, Any], stat: StatKey) -> LeaderboardEntry:
    raw = _coerce(row, "value", 0)
    value = float(raw) if stat is StatKey.RATING else int(raw)
    return LeaderboardEntry(player_id=str(row["player_id"]), value=value)


def player_params(player: PlayerRecord) -> tuple:
    return (player.id, player.rating, player.total_kills, player.total_wins, player.total_matches)


def season_params(player: PlayerRecord) -> list[tuple]:
    return [
        (player.id, season_id, season.rating, season.kills, season.wins)
        for season_id, season in player.seasonal_stats.items()
    ]
