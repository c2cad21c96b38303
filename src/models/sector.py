"""Sector grid container."""

from dataclasses import dataclass, field
from typing import List, Optional

from ..utils.constants import SECTOR_HEIGHT, SECTOR_WIDTH
from .enemy import Enemy
from .position import Position


@dataclass
class Sector:
    """The single 8x8 sector in which all play occurs.

    Holds every enemy ever created, in creation order. Dead enemies stay in
    the list so that iteration order is stable across the whole game.
    """

    width: int = SECTOR_WIDTH
    height: int = SECTOR_HEIGHT
    enemies: List[Enemy] = field(default_factory=list)

    def add_enemy(self, enemy: Enemy) -> None:
        self.enemies.append(enemy)

    def alive_enemies(self) -> List[Enemy]:
        """Return enemies with hull remaining, in creation order."""
        return [enemy for enemy in self.enemies if enemy.is_alive]

    def enemy_at(self, position: Position) -> Optional[Enemy]:
        """Return the first alive enemy occupying a cell, if any."""
        for enemy in self.alive_enemies():
            if enemy.position == position:
                return enemy
        return None

    def contains(self, x: int, y: int) -> bool:
        """Check whether raw coordinates fall inside the sector."""
        return 1 <= x <= self.width and 1 <= y <= self.height
