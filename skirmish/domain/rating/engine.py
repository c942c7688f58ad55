from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal

RATING_BASE = 20.0
_CENTS = Decimal("0.01")


def round_rating(value: float) -> float:
    # half away from zero on the exact binary value of the float
    return float(Decimal(value).quantize(_CENTS, rounding=ROUND_HALF_UP))


def rating_delta(kills: int, rounds_won: int, rounds_lost: int) -> float:
    """
    SR change for one player: base * kills-per-round * round margin.
    Zero for a match without rounds, for an even split and for zero kills.
    """
    rounds_total = rounds_won + rounds_lost
    if rounds_total == 0:
        return 0.0
    performance_factor = kills / rounds_total
    margin_factor = (rounds_won - rounds_lost) / rounds_total
    return round_rating(RATING_BASE * performance_factor * margin_factor)
