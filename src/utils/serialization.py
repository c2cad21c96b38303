"""Game state snapshots for the browser API.

Converts a GameState into a JSON-compatible dictionary. Snapshots are
one-way: games are never reloaded from them.
"""

from typing import Any, Optional

from ..models.enemy import Enemy
from ..models.game import GameState
from ..models.position import Position
from ..models.ship import Ship


def serialize_game_state(game: GameState, log_tail: Optional[int] = None) -> dict[str, Any]:
    """Convert GameState to a JSON-compatible dictionary.

    Args:
        game: Game to serialize
        log_tail: If given, only include the last N log messages

    Returns:
        Dictionary with camelCase keys, ready for a JSON response

    Example:
        >>> state = serialize_game_state(game)
        >>> state["ship"]["position"]
        {'x': 4, 'y': 4}
    """
    messages = game.message_log
    if log_tail is not None:
        messages = messages[-log_tail:] if log_tail > 0 else []

    return {
        "stardate": game.stardate,
        "turnsRemaining": game.turns_remaining,
        "ship": _serialize_ship(game.ship),
        "enemies": [_serialize_enemy(enemy) for enemy in game.sector.enemies],
        "aliveEnemies": game.alive_enemy_count(),
        "gameOver": game.is_game_over(),
        "messageLog": list(messages),
    }


def _serialize_position(position: Position) -> dict[str, int]:
    return {"x": position.x, "y": position.y}


def _serialize_ship(ship: Ship) -> dict[str, Any]:
    """Convert Ship to dictionary."""
    return {
        "name": ship.name,
        "energy": ship.energy,
        "shields": ship.shields,
        "torpedoes": ship.torpedoes,
        "position": _serialize_position(ship.position),
        "condition": ship.condition.value,
    }


def _serialize_enemy(enemy: Enemy) -> dict[str, Any]:
    """Convert Enemy to dictionary."""
    return {
        "id": enemy.id,
        "hull": enemy.hull,
        "position": _serialize_position(enemy.position),
        "alive": enemy.is_alive,
    }
