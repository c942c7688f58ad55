import asyncio
import tempfile
import unittest
from pathlib import Path

from skirmish.domain import (
    DEFAULT_SEASON,
    AlreadyRegistered,
    MatchReport,
    PlayerRecord,
    SeasonRecord,
    StatKey,
)
from skirmish.domain.leaderboard import LeaderboardService
from skirmish.domain.matches import MatchService
from skirmish.domain.players import PlayersService
from skirmish.domain.seasons import SeasonService
from skirmish.infrastructure.sqlite import SQLiteDatabase, SQLitePlayersRepository


class SQLitePlayersRepositoryTests(unittest.IsolatedAsyncioTestCase):
    async def asyncSetUp(self):
        self.tmpdir = tempfile.TemporaryDirectory()
        self.db_path = Path(self.tmpdir.name) / "test.db"
        self.db = SQLiteDatabase(str(self.db_path))
        await self.db.init()
        self.repo = SQLitePlayersRepository(self.db)

    async def asyncTearDown(self):
        self.tmpdir.cleanup()

    async def test_init_is_repeatable(self):
        await self.db.init()
        self.assertIsNone(await self.repo.get("missing"))

    async def test_insert_if_absent_only_inserts_once(self):
        created = await self.repo.insert_if_absent(PlayerRecord.registered("A"))
        again = await self.repo.insert_if_absent(PlayerRecord(id="A", rating=1.0))

        self.assertTrue(created)
        self.assertFalse(again)
        stored = await self.repo.get("A")
        self.assertEqual(stored, PlayerRecord.registered("A"))

    async def test_save_overwrites_full_record(self):
        await self.repo.insert_if_absent(PlayerRecord.registered("A"))
        updated = PlayerRecord(
            id="A",
            rating=1012.5,
            total_kills=10,
            total_wins=1,
            total_matches=1,
            seasonal_stats={"s1": SeasonRecord(rating=12.5, kills=10, wins=1)},
        )

        await self.repo.save(updated)

        self.assertEqual(await self.repo.get("A"), updated)

    async def test_save_creates_missing_record(self):
        record = PlayerRecord(id="B", rating=-5.0, total_kills=4, total_matches=1,
                              seasonal_stats={DEFAULT_SEASON: SeasonRecord(rating=-5.0, kills=4)})

        await self.repo.save(record)

        self.assertEqual(await self.repo.get("B"), record)

    async def test_reset_season_touches_every_player(self):
        await self.repo.insert_if_absent(PlayerRecord.registered("A"))
        await self.repo.save(
            PlayerRecord(id="B", rating=3.0, seasonal_stats={"s1": SeasonRecord(rating=3.0, kills=2, wins=1),
                                                             "old": SeasonRecord(rating=1.0, kills=1, wins=0)})
        )

        touched = await self.repo.reset_season("s1")

        self.assertEqual(touched, 2)
        a = await self.repo.get("A")
        b = await self.repo.get("B")
        self.assertEqual(a.seasonal_stats, {DEFAULT_SEASON: SeasonRecord.ZERO, "s1": SeasonRecord.ZERO})
        self.assertEqual(b.season("s1"), SeasonRecord.ZERO)
        self.assertEqual(b.season("old"), SeasonRecord(rating=1.0, kills=1, wins=0))
        self.assertEqual(b.rating, 3.0)

    async def test_reset_season_twice_matches_once(self):
        await self.repo.save(PlayerRecord(id="A", seasonal_stats={"s1": SeasonRecord(rating=2.0, kills=1, wins=1)}))

        await self.repo.reset_season("s1")
        once = await self.repo.get("A")
        await self.repo.reset_season("s1")

        self.assertEqual(await self.repo.get("A"), once)

    async def test_top_lifetime_and_seasonal(self):
        await self.repo.save(PlayerRecord(id="A", rating=1012.5, total_kills=10,
                                          seasonal_stats={"s1": SeasonRecord(rating=1.0, kills=1)}))
        await self.repo.save(PlayerRecord(id="B", rating=995.0, total_kills=4,
                                          seasonal_stats={"s1": SeasonRecord(rating=9.0, kills=7)}))
        await self.repo.save(PlayerRecord(id="C", rating=990.0, total_kills=30))

        kills = await self.repo.top(StatKey.TOTAL_KILLS, None, 1)
        self.assertEqual([(e.player_id, e.value) for e in kills], [("C", 30)])

        rating = await self.repo.top(StatKey.RATING, None, 10)
        self.assertEqual([e.player_id for e in rating], ["A", "B", "C"])
        self.assertIsInstance(rating[0].value, float)

        seasonal = await self.repo.top(StatKey.TOTAL_KILLS, "s1", 10)
        self.assertEqual([(e.player_id, e.value) for e in seasonal], [("B", 7), ("A", 1), ("C", 0)])


class LadderScenarioTests(unittest.IsolatedAsyncioTestCase):
    async def asyncSetUp(self):
        self.tmpdir = tempfile.TemporaryDirectory()
        self.db = SQLiteDatabase(str(Path(self.tmpdir.name) / "ladder.db"))
        await self.db.init()
        repo = SQLitePlayersRepository(self.db)
        self.players = PlayersService(repo)
        self.matches = MatchService(repo)
        self.seasons = SeasonService(repo)
        self.leaderboard = LeaderboardService(repo)

    async def asyncTearDown(self):
        self.tmpdir.cleanup()

    async def test_register_report_and_rank(self):
        a = await self.players.register("A")
        self.assertEqual((a.rating, a.total_matches), (1000.0, 0))

        await self.matches.report_match(
            MatchReport(player1_id="A", player2_id="B", kills1=10, kills2=4, rounds1=6, rounds2=2)
        )

        a = await self.players.get_player("A")
        b = await self.players.get_player("B")
        self.assertEqual((a.rating, a.total_wins, a.total_matches), (1012.5, 1, 1))
        self.assertEqual((b.rating, b.total_wins, b.total_matches), (-5.0, 0, 1))
        self.assertEqual(a.season(DEFAULT_SEASON), SeasonRecord(rating=12.5, kills=10, wins=1))

        top = await self.leaderboard.top_n(StatKey.TOTAL_KILLS, None, 1)
        self.assertEqual([(e.player_id, e.value) for e in top], [("A", 10)])

    async def test_registered_opponent_keeps_starting_rating(self):
        await self.players.register("A")
        await self.players.register("B")

        await self.matches.report_match(
            MatchReport(player1_id="A", player2_id="B", kills1=10, kills2=4, rounds1=6, rounds2=2)
        )

        b = await self.players.get_player("B")
        self.assertEqual((b.rating, b.total_wins, b.total_matches), (995.0, 0, 1))

    async def test_double_registration_leaves_record_untouched(self):
        await self.players.register("A")
        await self.matches.apply_match_result("A", 10, 6, 2, "A", DEFAULT_SEASON)
        before = await self.players.get_player("A")

        with self.assertRaises(AlreadyRegistered) as ctx:
            await self.players.register("A")

        self.assertEqual(ctx.exception.player, before)
        self.assertEqual(await self.players.get_player("A"), before)

    async def test_concurrent_registration_creates_one_record(self):
        results = await asyncio.gather(
            self.players.register("A"),
            self.players.register("A"),
            return_exceptions=True,
        )

        errors = [r for r in results if isinstance(r, AlreadyRegistered)]
        self.assertEqual(len(errors), 1)

    async def test_reset_unknown_season_creates_it(self):
        await self.players.register("A")
        await self.players.register("B")

        await self.seasons.reset_season("s1")

        for player_id in ("A", "B"):
            player = await self.players.get_player(player_id)
            self.assertEqual(player.seasonal_stats["s1"], SeasonRecord.ZERO)
            self.assertEqual(player.season(DEFAULT_SEASON), SeasonRecord.ZERO)

    async def test_concurrent_results_for_different_players_do_not_interfere(self):
        player_ids = [f"P{i}" for i in range(20)]

        await asyncio.gather(
            *(self.matches.apply_match_result(pid, 10, 6, 2, pid, "s1") for pid in player_ids)
        )

        for pid in player_ids:
            player = await self.players.get_player(pid)
            self.assertEqual((player.total_matches, player.total_wins, player.total_kills), (1, 1, 10))
            self.assertEqual(player.season("s1"), SeasonRecord(rating=12.5, kills=10, wins=1))


class SQLiteSnapshotReadTests(unittest.IsolatedAsyncioTestCase):
    async def asyncSetUp(self):
        self.tmpdir = tempfile.TemporaryDirectory()
        self.db = SQLiteDatabase(str(Path(self.tmpdir.name) / "snapshot.db"))
        await self.db.init()
        self.repo = SQLitePlayersRepository(self.db)

    async def asyncTearDown(self):
        self.tmpdir.cleanup()

    @staticmethod
    def _version(i: int) -> PlayerRecord:
        return PlayerRecord(
            id="A",
            total_kills=i,
            total_matches=i,
            seasonal_stats={"s1": SeasonRecord(kills=i)},
        )

    async def test_get_never_mixes_lifetime_and_seasons_from_different_writes(self):
        await self.repo.save(self._version(0))
        done = asyncio.Event()

        async def writer():
            for i in range(1, 60):
                await self.repo.save(self._version(i))
            done.set()

        async def reader():
            seen = []
            while not done.is_set():
                player = await self.repo.get("A")
                seen.append((player.total_kills, player.season("s1").kills))
            return seen

        _, first, second = await asyncio.gather(writer(), reader(), reader())

        mixed = [pair for pair in first + second if pair[0] != pair[1]]
        self.assertEqual(mixed, [])
