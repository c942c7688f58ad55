from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .models import PlayerRecord
    from .rating.validation import ValidationFailure


class LadderError(Exception):
    """Base class for errors surfaced to users as a reply instead of a crash."""


class ValidationError(LadderError):
    def __init__(self, player_id: str, reason: "ValidationFailure"):
        super().__init__(f"{reason.value} (player {player_id})")
        self.player_id = player_id
        self.reason = reason


class AlreadyRegistered(LadderError):
    def __init__(self, player: "PlayerRecord"):
        super().__init__(f"player {player.id} is already registered")
        self.player = player


class NotRegistered(LadderError):
    def __init__(self, player_id: str):
        super().__init__(f"player {player_id} is not registered")
        self.player_id = player_id
