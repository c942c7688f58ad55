from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

MAX_ROUNDS = 60
MAX_KILLS = 60


class ValidationFailure(Enum):
    NEGATIVE_VALUE = "negative value"
    TOO_MANY_ROUNDS = "total rounds exceed maximum"
    TOO_MANY_KILLS = "kills exceed maximum"
    SAME_PLAYER = "same player on both sides"


@dataclass(frozen=True)
class ValidationResult:
    failure: Optional[ValidationFailure] = None

    @property
    def is_valid(self) -> bool:
        return self.failure is None

    @property
    def reason(self) -> str | None:
        return self.failure.value if self.failure else None


VALID = ValidationResult()


def validate(kills: int, rounds_won: int, rounds_lost: int) -> ValidationResult:
    """
    Check one side of a match report against the ladder bounds.
    Rules are checked in order, the first failing one is reported.
    """
    if kills < 0 or rounds_won < 0 or rounds_lost < 0:
        return ValidationResult(ValidationFailure.NEGATIVE_VALUE)
    if rounds_won + rounds_lost > MAX_ROUNDS:
        return ValidationResult(ValidationFailure.TOO_MANY_ROUNDS)
    if kills > MAX_KILLS:
        return ValidationResult(ValidationFailure.TOO_MANY_KILLS)
    return VALID
