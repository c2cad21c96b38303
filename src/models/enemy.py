"""Enemy vessel data model."""

from dataclasses import dataclass

from .position import Position


@dataclass
class Enemy:
    """A Klingon warship in the sector.

    Enemies are never removed from the sector when destroyed; a hull of zero
    marks them as dead.
    """

    id: int  # Stable 1-based identifier
    hull: int  # Remaining hull points
    position: Position

    def __post_init__(self):
        """Validate enemy data after initialization."""
        if self.id < 1:
            raise ValueError(f"Invalid id: {self.id} (must be >= 1)")
        if self.hull < 0:
            raise ValueError(f"Invalid hull: {self.hull} (must be >= 0)")

    @property
    def is_alive(self) -> bool:
        return self.hull > 0

    def take_damage(self, damage: int) -> bool:
        """Reduce hull, clamping at zero.

        Args:
            damage: Hull points to remove

        Returns:
            True if this hit destroyed the enemy
        """
        self.hull = max(0, self.hull - damage)
        return self.hull == 0
