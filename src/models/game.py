"""Game state container and observer hook."""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, List, Protocol

from ..utils.constants import START_STARDATE, START_TURNS
from .sector import Sector
from .ship import AlertLevel, Ship

logger = logging.getLogger(__name__)


class GameEvent(Enum):
    """Notifications broadcast to registered observers."""

    RENDER_REQUESTED = "RenderRequested"  # payload: reason tag
    MESSAGE_ADDED = "MessageAdded"  # payload: message text
    TURN_ADVANCED = "TurnAdvanced"  # payload: None
    CONDITION_CHANGED = "ConditionChanged"  # payload: AlertLevel
    COMBAT_RESOLVED = "CombatResolved"  # payload: None


class GameObserver(Protocol):
    """Anything that wants to hear about state changes (usually a renderer)."""

    def update(self, event: GameEvent, payload: Any, game: "GameState") -> None: ...


@dataclass
class GameState:
    """Main game state container.

    Holds the ship, the sector and the mission clock. All game logic
    operates on this state. Observers are notified synchronously, in
    registration order; they must not mutate the state from inside update().
    """

    ship: Ship = field(default_factory=Ship)
    sector: Sector = field(default_factory=Sector)
    stardate: int = START_STARDATE
    turns_remaining: int = START_TURNS
    message_log: List[str] = field(default_factory=list)  # Append-only
    observers: List[GameObserver] = field(default_factory=list, repr=False, compare=False)

    def add_message(self, message: str) -> None:
        """Append to the computer log and broadcast it."""
        self.message_log.append(message)
        self.notify(GameEvent.MESSAGE_ADDED, message)

    def add_observer(self, observer: GameObserver) -> None:
        self.observers.append(observer)

    def remove_observer(self, observer: GameObserver) -> None:
        if observer in self.observers:
            self.observers.remove(observer)

    def notify(self, event: GameEvent, payload: Any = None) -> None:
        """Fan an event out to every observer."""
        for observer in list(self.observers):
            observer.update(event, payload, self)

    def alive_enemy_count(self) -> int:
        return len(self.sector.alive_enemies())

    def is_game_over(self) -> bool:
        """Check terminal conditions: ship lost, sector clear, or out of time."""
        if self.ship.is_destroyed:
            return True

        if self.alive_enemy_count() == 0:
            return True

        return self.turns_remaining <= 0

    def advance_turn(self) -> None:
        """Move the mission clock forward one turn."""
        self.stardate += 1
        self.turns_remaining -= 1
        logger.debug(
            "Turn advanced: stardate %d, %d turns remaining",
            self.stardate,
            self.turns_remaining,
        )
        self.notify(GameEvent.TURN_ADVANCED)

    def evaluate_ship_condition(self) -> None:
        """Recompute the alert condition from the enemy presence.

        A destroyed ship is never downgraded. Otherwise the condition is
        re-set and ConditionChanged is emitted even when the value is the same.
        """
        if self.ship.is_destroyed:
            return

        if self.alive_enemy_count() > 0:
            self.ship.condition = AlertLevel.RED_ALERT
        else:
            self.ship.condition = AlertLevel.NORMAL
        self.notify(GameEvent.CONDITION_CHANGED, self.ship.condition)
