"""Sector coordinate value."""

from dataclasses import dataclass

from ..utils.constants import SECTOR_HEIGHT, SECTOR_WIDTH
from ..utils.distance import euclidean_distance


@dataclass(frozen=True)
class Position:
    """A cell in the 8x8 sector grid (1-based).

    Positions are immutable; a ship that moves gets a new Position.
    """

    x: int  # Column (1-8)
    y: int  # Row (1-8)

    def __post_init__(self):
        """Validate coordinates after initialization."""
        if not (1 <= self.x <= SECTOR_WIDTH):
            raise ValueError(f"Invalid x coordinate: {self.x} (must be 1-{SECTOR_WIDTH})")
        if not (1 <= self.y <= SECTOR_HEIGHT):
            raise ValueError(f"Invalid y coordinate: {self.y} (must be 1-{SECTOR_HEIGHT})")

    def distance_to(self, other: "Position") -> float:
        """Euclidean distance to another position."""
        return euclidean_distance(self.x, self.y, other.x, other.y)
