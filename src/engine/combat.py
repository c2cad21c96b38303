"""Combat damage model.

This module handles:
1. Phaser damage for an energy share at a given range
2. Photon torpedo damage at a given range
3. Enemy return fire against the player ship

All three are pure aside from consuming draws from the RNG. Distances are
Euclidean and results are floored only at the final division.
"""

import math

from ..models.enemy import Enemy
from ..models.ship import Ship
from ..utils.constants import ENEMY_ATTACK_BASE_RANGE, TORPEDO_BASE_RANGE
from ..utils.rng import GameRNG


def resolve_phaser_damage(allocated_energy: int, distance: float) -> int:
    """Damage delivered by a phaser energy share.

    Args:
        allocated_energy: Energy routed to this target
        distance: Range to target in sectors

    Returns:
        floor(energy / max(distance, 1)), or 0 for a non-positive share
    """
    if allocated_energy <= 0:
        return 0

    effective_distance = max(distance, 1.0)
    return math.floor(allocated_energy / effective_distance)


def resolve_torpedo_damage(distance: float, rng: GameRNG) -> int:
    """Damage delivered by a photon torpedo hit.

    Args:
        distance: Range to target in sectors
        rng: Random source (one draw)

    Returns:
        floor(base / sqrt(max(distance, 1))) with base drawn from [360, 620)
    """
    effective_distance = max(distance, 1.0)
    base = rng.next_int(*TORPEDO_BASE_RANGE)
    return math.floor(base / math.sqrt(effective_distance))


def resolve_enemy_attack(attacker: Enemy, ship: Ship, rng: GameRNG) -> int:
    """Raw damage of one enemy shot at the player ship.

    Args:
        attacker: Firing enemy
        ship: Target ship
        rng: Random source (one draw)

    Returns:
        floor(base / max(distance, 1)) with base drawn from [120, 340)
    """
    distance = attacker.position.distance_to(ship.position)
    base = rng.next_int(*ENEMY_ATTACK_BASE_RANGE)
    return math.floor(base / max(distance, 1.0))
