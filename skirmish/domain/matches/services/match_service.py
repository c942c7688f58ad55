from __future__ import annotations

import logging

from ...errors import ValidationError
from ...models import MatchOutcome, MatchReport, PlayerRecord, PlayerResult
from ...rating import ValidationFailure, rating_delta, validate
from ...repositories import PlayersRepository

logger = logging.getLogger(__name__)


class MatchService:
    """
    Applies reported matches to player records.

    Every update re-reads the stored record, derives a new one and writes it back
    in full. The two players of a report are written independently, there is no
    transaction spanning both records.
    """

    def __init__(self, repo: PlayersRepository):
        self._repo = repo

    async def apply_match_result(
        self,
        player_id: str,
        kills: int,
        rounds_won: int,
        rounds_lost: int,
        winner_id: str | None,
        season_id: str,
    ) -> float:
        delta, _ = await self._record(player_id, kills, rounds_won, rounds_lost, winner_id, season_id)
        return delta

    async def report_match(self, report: MatchReport) -> MatchOutcome:
        if report.player1_id == report.player2_id:
            raise ValidationError(report.player1_id, ValidationFailure.SAME_PLAYER)
        sides = report.sides()
        for player_id, kills, rounds_won, rounds_lost in sides:
            result = validate(kills, rounds_won, rounds_lost)
            if not result.is_valid:
                raise ValidationError(player_id, result.failure)

        winner_id = report.winner_id
        results: list[PlayerResult] = []
        for player_id, kills, rounds_won, rounds_lost in sides:
            delta, updated = await self._record(
                player_id,
                kills,
                rounds_won,
                rounds_lost,
                winner_id,
                report.season_id,
            )
            results.append(
                PlayerResult(
                    player_id=player_id,
                    delta=delta,
                    rating=updated.rating,
                    won=winner_id == player_id,
                )
            )
        first, second = results
        logger.info(
            "Match reported: %s vs %s (%s:%s) season=%s winner=%s deltas=%s/%s",
            report.player1_id,
            report.player2_id,
            report.rounds1,
            report.rounds2,
            report.season_id,
            winner_id or "draw",
            first.delta,
            second.delta,
        )
        return MatchOutcome(season_id=report.season_id, winner_id=winner_id, results=(first, second))

    async def _record(
        self,
        player_id: str,
        kills: int,
        rounds_won: int,
        rounds_lost: int,
        winner_id: str | None,
        season_id: str,
    ) -> tuple[float, PlayerRecord]:
        # unknown players get a zeroed record, registration is not required here
        player = await self._repo.get(player_id) or PlayerRecord.empty(player_id)
        delta = rating_delta(kills, rounds_won, rounds_lost)
        updated = player.record_match(
            delta=delta,
            kills=kills,
            won=winner_id == player_id,
            season_id=season_id,
        )
        await self._repo.save(updated)
        return delta, updated
