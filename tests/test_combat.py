"""Tests for the combat damage model."""

import math

from src.engine.combat import resolve_enemy_attack, resolve_phaser_damage, resolve_torpedo_damage
from src.models import Enemy, Position, Ship


class FixedRNG:
    """Returns a fixed value and records requested ranges."""

    def __init__(self, value):
        self.value = value
        self.calls = []

    def next_int(self, min_inclusive, max_exclusive):
        self.calls.append((min_inclusive, max_exclusive))
        return self.value


def test_phaser_damage_divides_by_distance():
    assert resolve_phaser_damage(700, 2.0) == 350
    assert resolve_phaser_damage(209, math.sqrt(5)) == 93


def test_phaser_damage_clamps_close_range_to_one():
    assert resolve_phaser_damage(300, 0.0) == 300
    assert resolve_phaser_damage(300, 0.5) == 300


def test_phaser_damage_non_positive_share():
    assert resolve_phaser_damage(0, 2.0) == 0
    assert resolve_phaser_damage(-10, 2.0) == 0


def test_torpedo_damage_uses_sqrt_distance():
    rng = FixedRNG(400)

    assert resolve_torpedo_damage(4.0, rng) == 200
    assert rng.calls == [(360, 620)]


def test_torpedo_damage_clamps_close_range():
    assert resolve_torpedo_damage(0.0, FixedRNG(500)) == 500


def test_enemy_attack_scaled_by_distance():
    rng = FixedRNG(300)
    enemy = Enemy(id=1, hull=300, position=Position(1, 1))
    ship = Ship(position=Position(4, 5))

    assert resolve_enemy_attack(enemy, ship, rng) == 60
    assert rng.calls == [(120, 340)]


def test_enemy_attack_point_blank():
    enemy = Enemy(id=1, hull=300, position=Position(4, 4))
    ship = Ship(position=Position(4, 4))

    assert resolve_enemy_attack(enemy, ship, FixedRNG(250)) == 250
