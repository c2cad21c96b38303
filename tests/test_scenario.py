"""Tests for the scenario factory."""

from src.engine.scenario import create_default_game
from src.models import AlertLevel, Position
from src.utils.rng import GameRNG


def test_seed_42_layout():
    """Test enemy placement and hulls for a known seed."""
    game = create_default_game(GameRNG(42))

    assert [(e.id, e.position, e.hull) for e in game.sector.enemies] == [
        (1, Position(3, 1), 444),
        (2, Position(2, 4), 306),
        (3, Position(4, 1), 518),
    ]


def test_initial_state():
    game = create_default_game(GameRNG(42))

    assert game.ship.position == Position(4, 4)
    assert game.ship.energy == 3000
    assert game.ship.shields == 1000
    assert game.ship.torpedoes == 10
    assert game.ship.condition is AlertLevel.RED_ALERT
    assert game.stardate == 1312
    assert game.turns_remaining == 30
    assert game.message_log == [
        "Incoming transmission: Klingon vessels detected in this quadrant."
    ]


def test_same_seed_same_layout():
    a = create_default_game(GameRNG(2024))
    b = create_default_game(GameRNG(2024))

    assert [(e.position, e.hull) for e in a.sector.enemies] == [
        (e.position, e.hull) for e in b.sector.enemies
    ]


def test_enemies_never_start_on_ship():
    for seed in range(1, 200):
        game = create_default_game(GameRNG(seed))
        for enemy in game.sector.enemies:
            assert enemy.position != game.ship.position
            assert 300 <= enemy.hull < 550


def test_enemy_count():
    game = create_default_game(GameRNG(7), enemy_count=5)

    assert [e.id for e in game.sector.enemies] == [1, 2, 3, 4, 5]


def test_consumes_three_draws_per_enemy():
    rng = GameRNG(42)
    create_default_game(rng)

    reference = GameRNG(42)
    for _ in range(9):
        reference.next_int(0, 10)

    assert rng.get_state() == reference.get_state()
