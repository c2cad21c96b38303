"""Scenario factory: builds the starting game state."""

import logging

from ..models.enemy import Enemy
from ..models.game import GameState
from ..models.position import Position
from ..utils.constants import ENEMY_COUNT, ENEMY_HULL_RANGE, SECTOR_HEIGHT, SECTOR_WIDTH
from ..utils.rng import GameRNG

logger = logging.getLogger(__name__)


def create_default_game(rng: GameRNG, enemy_count: int = ENEMY_COUNT) -> GameState:
    """Create a new mission with randomly placed enemies.

    Each enemy consumes three draws, in order: x, y, hull. An enemy rolled
    onto the ship's cell is nudged one column to the right (wrapping to
    column 1). Enemies may share a cell with each other.

    Args:
        rng: Seeded random source (kept by the caller for the rest of the game)
        enemy_count: Number of enemies to place

    Returns:
        GameState at red alert with the arrival message logged
    """
    game = GameState()
    ship_position = game.ship.position

    for enemy_id in range(1, enemy_count + 1):
        x = rng.next_int(1, SECTOR_WIDTH + 1)
        y = rng.next_int(1, SECTOR_HEIGHT + 1)

        if x == ship_position.x and y == ship_position.y:
            x = (x % SECTOR_WIDTH) + 1

        hull = rng.next_int(*ENEMY_HULL_RANGE)
        game.sector.add_enemy(Enemy(id=enemy_id, hull=hull, position=Position(x, y)))

    logger.info("Created game (seed %d) with %d enemies", rng.seed, enemy_count)

    game.add_message("Incoming transmission: Klingon vessels detected in this quadrant.")
    game.evaluate_ship_condition()
    return game
