from .engine import RATING_BASE, rating_delta, round_rating
from .validation import (
    MAX_KILLS,
    MAX_ROUNDS,
    VALID,
    ValidationFailure,
    ValidationResult,
    validate,
)

__all__ = [
    "RATING_BASE",
    "rating_delta",
    "round_rating",
    "MAX_KILLS",
    "MAX_ROUNDS",
    "VALID",
    "ValidationFailure",
    "ValidationResult",
    "validate",
]
