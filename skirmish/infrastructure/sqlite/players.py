from __future__ import annotations

from typing import Optional, Sequence

import aiosqlite

from ...domain import LeaderboardEntry, PlayerRecord, PlayersRepository, StatKey
from ..mappers import leaderboard_entry_from_row, player_from_rows, player_params, season_params
from ..metrics import metrics
from .database import SQLiteDatabase

LIFETIME_COLUMNS = {
    StatKey.RATING: "rating",
    StatKey.TOTAL_KILLS: "total_kills",
    StatKey.TOTAL_WINS: "total_wins",
}

SEASON_COLUMNS = {
    StatKey.RATING: "rating",
    StatKey.TOTAL_KILLS: "kills",
    StatKey.TOTAL_WINS: "wins",
}


class SQLitePlayersRepository(PlayersRepository):
    """
    Player documents split over two tables: lifetime counters in ``players``
    and one ``player_seasons`` row per season the player has stats for.
    """

    def __init__(self, db: SQLiteDatabase):
        self._db = db

    @metrics.track("db:players.get", source="database")
    async def get(self, player_id: str) -> Optional[PlayerRecord]:
        async with self._db.connect() as conn:
            # both selects must see the same snapshot
            await conn.execute("BEGIN;")
            try:
                cur = await conn.execute(
                    """
                    SELECT player_id, rating, total_kills, total_wins, total_matches
                    FROM players
                    WHERE player_id=?
                    """,
                    (player_id,),
                )
                row = await cur.fetchone()
                if not row:
                    return None
                cur = await conn.execute(
                    "SELECT season_id, rating, kills, wins FROM player_seasons WHERE player_id=?",
                    (player_id,),
                )
                season_rows = await cur.fetchall()
            finally:
                await conn.commit()
        return player_from_rows(dict(row), [dict(s) for s in season_rows])

    @metrics.track("db:players.insert_if_absent", source="database")
    async def insert_if_absent(self, player: PlayerRecord) -> bool:
        async with self._db.connect() as conn:
            await conn.execute("BEGIN IMMEDIATE;")
            cur = await conn.execute(
                """
                INSERT INTO players(player_id, rating, total_kills, total_wins, total_matches)
                VALUES(?, ?, ?, ?, ?)
                ON CONFLICT(player_id) DO NOTHING
                """,
                player_params(player),
            )
            created = cur.rowcount == 1
            if created:
                await self._write_seasons(conn, player)
            await conn.commit()
        return created

    @metrics.track("db:players.save", source="database")
    async def save(self, player: PlayerRecord) -> None:
        async with self._db.connect() as conn:
            await conn.execute("BEGIN IMMEDIATE;")
            await conn.execute(
                """
                INSERT INTO players(player_id, rating, total_kills, total_wins, total_matches)
                VALUES(?, ?, ?, ?, ?)
                ON CONFLICT(player_id) DO UPDATE SET
                  rating=excluded.rating,
                  total_kills=excluded.total_kills,
                  total_wins=excluded.total_wins,
                  total_matches=excluded.total_matches,
                  updated_at=datetime('now')
                """,
                player_params(player),
            )
            await conn.execute("DELETE FROM player_seasons WHERE player_id=?", (player.id,))
            await self._write_seasons(conn, player)
            await conn.commit()

    @metrics.track("db:players.reset_season", source="database")
    async def reset_season(self, season_id: str) -> int:
        async with self._db.connect() as conn:
            await conn.execute("BEGIN IMMEDIATE;")
            # WHERE true keeps the upsert clause from being parsed as a join constraint
            await conn.execute(
                """
                INSERT INTO player_seasons(player_id, season_id, rating, kills, wins)
                SELECT player_id, ?, 0, 0, 0 FROM players WHERE true
                ON CONFLICT(player_id, season_id) DO UPDATE SET
                  rating=0,
                  kills=0,
                  wins=0
                """,
                (season_id,),
            )
            cur = await conn.execute("SELECT COUNT(*) AS c FROM players")
            row = await cur.fetchone()
            await conn.commit()
        return int(row["c"])

    @metrics.track("db:players.top", source="database")
    async def top(self, stat: StatKey, season_id: Optional[str], limit: int) -> Sequence[LeaderboardEntry]:
        async with self._db.connect() as conn:
            if season_id is None:
                column = LIFETIME_COLUMNS[stat]
                cur = await conn.execute(
                    f"""
                    SELECT player_id, {column} AS value
                    FROM players
                    ORDER BY value DESC, player_id
                    LIMIT ?
                    """,
                    (limit,),
                )
            else:
                column = SEASON_COLUMNS[stat]
                cur = await conn.execute(
                    f"""
                    SELECT p.player_id, COALESCE(s.{column}, 0) AS value
                    FROM players p
                    LEFT JOIN player_seasons s
                      ON s.player_id = p.player_id AND s.season_id = ?
                    ORDER BY value DESC, p.player_id
                    LIMIT ?
                    """,
                    (season_id, limit),
                )
            rows = await cur.fetchall()
        return [leaderboard_entry_from_row(dict(row), stat) for row in rows]

    async def _write_seasons(self, conn: aiosqlite.Connection, player: PlayerRecord) -> None:
        params = season_params(player)
        if params:
            await conn.executemany(
                """
                INSERT INTO player_seasons(player_id, season_id, rating, kills, wins)
                VALUES(?, ?, ?, ?, ?)
                """,
                params,
            )
