"""Player ship data model."""

import math
from dataclasses import dataclass, field
from enum import Enum

from ..utils.constants import (
    RED_ALERT_MULTIPLIER,
    SHIP_NAME,
    START_ENERGY,
    START_POSITION,
    START_SHIELDS,
    START_TORPEDOES,
)
from .position import Position


class AlertLevel(Enum):
    """Ship-wide alert condition."""

    NORMAL = "Normal"
    RED_ALERT = "RedAlert"
    DESTROYED = "Destroyed"


# Incoming damage scaling per condition. Destroyed is terminal, so its
# multiplier is never applied in practice.
CONDITION_MULTIPLIERS = {
    AlertLevel.NORMAL: 1.0,
    AlertLevel.RED_ALERT: RED_ALERT_MULTIPLIER,
    AlertLevel.DESTROYED: 1.0,
}


@dataclass
class Ship:
    """The player's vessel.

    Energy doubles as hull integrity: when incoming fire exhausts both
    shields and energy, the ship is destroyed and stays destroyed.
    """

    name: str = SHIP_NAME
    energy: int = START_ENERGY
    shields: int = START_SHIELDS
    torpedoes: int = START_TORPEDOES
    position: Position = field(default_factory=lambda: Position(*START_POSITION))
    condition: AlertLevel = AlertLevel.NORMAL

    def __post_init__(self):
        """Validate ship data after initialization."""
        if self.energy < 0:
            raise ValueError(f"Invalid energy: {self.energy} (must be >= 0)")
        if self.shields < 0:
            raise ValueError(f"Invalid shields: {self.shields} (must be >= 0)")
        if self.torpedoes < 0:
            raise ValueError(f"Invalid torpedoes: {self.torpedoes} (must be >= 0)")

    @property
    def damage_multiplier(self) -> float:
        """Incoming damage multiplier for the current condition."""
        return CONDITION_MULTIPLIERS[self.condition]

    @property
    def is_destroyed(self) -> bool:
        return self.condition is AlertLevel.DESTROYED

    def apply_damage(self, raw_damage: int) -> int:
        """Apply incoming fire to shields, then energy.

        Damage is scaled by the condition multiplier and floored. Shields
        absorb first; the excess drains energy. Energy reaching zero destroys
        the ship.

        Args:
            raw_damage: Unscaled incoming damage

        Returns:
            Scaled damage actually applied
        """
        scaled = math.floor(raw_damage * self.damage_multiplier)

        if self.shields >= scaled:
            self.shields -= scaled
            return scaled

        remaining = scaled - self.shields
        self.shields = 0
        self.energy = max(0, self.energy - remaining)

        if self.energy == 0:
            self.condition = AlertLevel.DESTROYED

        return scaled
