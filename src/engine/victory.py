"""Mission outcome assessment.

This module handles:
1. Checking whether the ship was destroyed
2. Checking whether every enemy was destroyed
3. Checking whether the player quit
4. Checking whether the mission clock ran out

The checks are evaluated in that priority order.
"""

from enum import Enum
from typing import Optional

from ..models.game import GameState


class MissionOutcome(Enum):
    """How a finished session ended."""

    DESTROYED = "destroyed"
    VICTORY = "victory"
    QUIT = "quit"
    TIMEOUT = "timeout"

    @property
    def message(self) -> str:
        return OUTCOME_MESSAGES[self]

    @property
    def is_success(self) -> bool:
        return self is MissionOutcome.VICTORY


OUTCOME_MESSAGES = {
    MissionOutcome.DESTROYED: "MISSION FAILED: The Enterprise was lost.",
    MissionOutcome.VICTORY: "MISSION SUCCESS: Enemy ships destroyed.",
    MissionOutcome.QUIT: "Simulation terminated by command.",
    MissionOutcome.TIMEOUT: "MISSION FAILED: Stardate limit exceeded.",
}


def evaluate_outcome(game: GameState, quit_requested: bool = False) -> Optional[MissionOutcome]:
    """Determine how the session ended.

    Args:
        game: Current game state
        quit_requested: Whether the player issued QUIT

    Returns:
        MissionOutcome, or None if the mission is still in progress
    """
    if game.ship.is_destroyed:
        return MissionOutcome.DESTROYED

    if game.alive_enemy_count() == 0:
        return MissionOutcome.VICTORY

    if quit_requested:
        return MissionOutcome.QUIT

    if game.turns_remaining <= 0:
        return MissionOutcome.TIMEOUT

    return None
