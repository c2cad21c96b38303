"""Tests for ASCII sector rendering."""

from src.engine.scenario import create_default_game
from src.interface.renderer import COMMAND_SUMMARY, SectorRenderer
from src.models import Enemy, GameState, Position
from src.utils.rng import GameRNG


def test_render_marks_ship_and_enemies():
    game = create_default_game(GameRNG(42))
    rows = SectorRenderer().render(game).split("\n")

    assert len(rows) == 8
    assert rows[0] == ". . K K . . . ."
    assert rows[3] == ". K . E . . . ."
    assert rows[7] == ". . . . . . . ."


def test_dead_enemies_not_drawn():
    game = GameState()
    game.sector.add_enemy(Enemy(id=1, hull=0, position=Position(1, 1)))

    assert SectorRenderer().render(game).split("\n")[0] == ". . . . . . . ."


def test_enemy_drawn_over_ship():
    game = GameState()
    game.sector.add_enemy(Enemy(id=1, hull=300, position=Position(4, 4)))

    assert SectorRenderer().render(game).split("\n")[3] == ". . . K . . . ."


def test_render_with_coords():
    game = GameState()
    lines = SectorRenderer().render_with_coords(game).split("\n")

    assert len(lines) == 9
    assert lines[0] == ". . . . . . . .  | 1"
    assert lines[3] == ". . . E . . . .  | 4"
    assert lines[-1] == "1 2 3 4 5 6 7 8  | X-axis"


def test_status_lines():
    game = create_default_game(GameRNG(42))
    lines = SectorRenderer().status_lines(game)

    assert lines == [
        "STARDATE: 1312   TURNS: 30   ALERT: RedAlert",
        "ENERGY: 3000   SHIELDS: 1000   TORPEDOES: 10",
        "POSITION: X=4, Y=4   HOSTILES: 3",
    ]


def test_frame_has_fixed_height_log():
    game = create_default_game(GameRNG(42))
    renderer = SectorRenderer()

    short = renderer.build_frame(game, log_tail=8)
    for i in range(20):
        game.add_message(f"line {i}")
    full = renderer.build_frame(game, log_tail=8)

    assert len(short) == len(full)
    assert "- Incoming transmission: Klingon vessels detected in this quadrant." in short
    assert "- line 19" in full
    assert "- line 11" not in full
    assert full[-1] == COMMAND_SUMMARY
    assert full[1] == "MAINFRAME TSO STAR TREK - COMMAND CONSOLE"
