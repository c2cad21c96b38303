"""Data models for the sector command simulation."""

from .enemy import Enemy
from .game import GameEvent, GameObserver, GameState
from .position import Position
from .sector import Sector
from .ship import CONDITION_MULTIPLIERS, AlertLevel, Ship

__all__ = [
    "AlertLevel",
    "CONDITION_MULTIPLIERS",
    "Enemy",
    "GameEvent",
    "GameObserver",
    "GameState",
    "Position",
    "Sector",
    "Ship",
]
