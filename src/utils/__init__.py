"""Utility functions and constants for the sector command simulation."""

from .constants import (
    BROWSER_LOG_TAIL,
    CONSOLE_LOG_TAIL,
    ENEMY_ATTACK_BASE_RANGE,
    ENEMY_COUNT,
    ENEMY_HULL_RANGE,
    NAV_COST_PER_SECTOR,
    NAV_MIN_COST,
    RED_ALERT_MULTIPLIER,
    SECTOR_HEIGHT,
    SECTOR_WIDTH,
    SHIP_NAME,
    START_ENERGY,
    START_POSITION,
    START_SHIELDS,
    START_STARDATE,
    START_TORPEDOES,
    START_TURNS,
    TORPEDO_BASE_RANGE,
)
from .distance import euclidean_distance
from .rng import GameRNG

__all__ = [
    "BROWSER_LOG_TAIL",
    "CONSOLE_LOG_TAIL",
    "ENEMY_ATTACK_BASE_RANGE",
    "ENEMY_COUNT",
    "ENEMY_HULL_RANGE",
    "NAV_COST_PER_SECTOR",
    "NAV_MIN_COST",
    "RED_ALERT_MULTIPLIER",
    "SECTOR_HEIGHT",
    "SECTOR_WIDTH",
    "SHIP_NAME",
    "START_ENERGY",
    "START_POSITION",
    "START_SHIELDS",
    "START_STARDATE",
    "START_TORPEDOES",
    "START_TURNS",
    "TORPEDO_BASE_RANGE",
    "euclidean_distance",
    "GameRNG",
]
