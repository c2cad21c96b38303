"""Tests for command dispatch and turn sequencing."""

from src.engine.controller import GameController
from src.engine.scenario import create_default_game
from src.engine.victory import MissionOutcome
from src.models import AlertLevel, Enemy, GameEvent, GameState, Position, Ship
from src.utils.rng import GameRNG


class RecordingObserver:
    def __init__(self):
        self.events = []

    def update(self, event, payload, game):
        self.events.append((event, payload))


def seeded_controller(seed=42):
    rng = GameRNG(seed)
    return GameController(create_default_game(rng), rng)


def make_controller(enemies=(), seed=42, **ship_kwargs):
    """Controller over a hand-built game with (x, y, hull) enemies."""
    game = GameState(ship=Ship(**ship_kwargs))
    for i, (x, y, hull) in enumerate(enemies, 1):
        game.sector.add_enemy(Enemy(id=i, hull=hull, position=Position(x, y)))
    game.evaluate_ship_condition()
    return GameController(game, GameRNG(seed))


class TestSeededMission:
    """Replay a short mission from seed 42."""

    def test_navigate_then_enemy_turn(self):
        controller = seeded_controller()
        game = controller.game

        result = controller.dispatch("NAV 5 4")

        assert result.verb == "NAV"
        assert result.executed
        assert result.turn_consumed
        assert game.ship.position == Position(5, 4)
        assert game.ship.energy == 2920
        assert game.ship.shields == 762
        assert game.turns_remaining == 29
        assert game.stardate == 1313
        assert game.ship.condition is AlertLevel.RED_ALERT

    def test_three_turn_sequence(self):
        controller = seeded_controller()
        game = controller.game

        controller.dispatch("NAV 5 4")
        controller.dispatch("TOR 3 1")

        assert game.ship.torpedoes == 9
        assert game.sector.enemies[0].hull == 167
        assert game.ship.shields == 574
        assert game.turns_remaining == 28

        controller.dispatch("PHA 700")

        assert [e.hull for e in game.sector.enemies] == [110, 223, 443]
        assert game.ship.energy == 2220
        assert game.ship.shields == 349
        assert game.turns_remaining == 27
        assert controller.can_continue()

    def test_enemy_fire_logged_per_enemy(self):
        controller = seeded_controller()
        controller.dispatch("NAV 5 4")

        fire = [m for m in controller.game.message_log if m.startswith("Klingon #")]
        assert [m.split()[1] for m in fire] == ["#1", "#2", "#3"]


class TestTurnConsumption:
    """Test which dispatches advance the clock."""

    def test_rejected_command_does_not_consume_turn(self):
        controller = make_controller(enemies=[(1, 1, 300)])
        game = controller.game

        result = controller.dispatch("NAV 4 4")

        assert not result.executed
        assert not result.turn_consumed
        assert game.turns_remaining == 30
        assert game.ship.shields == 1000

    def test_torpedo_miss_consumes_turn(self):
        controller = make_controller(enemies=[(1, 1, 300)])
        game = controller.game

        result = controller.dispatch("TOR 8 8")

        assert result.executed
        assert result.turn_consumed
        assert game.turns_remaining == 29
        assert game.ship.torpedoes == 9

    def test_scan_and_status_are_free(self):
        controller = make_controller(enemies=[(1, 1, 300)])
        game = controller.game

        for line in ("SRS", "STATUS", "HELP", "srs"):
            result = controller.dispatch(line)
            assert result.executed
            assert not result.turn_consumed

        assert game.turns_remaining == 30
        assert game.stardate == 1312
        assert game.ship.shields == 1000

    def test_unknown_verb(self):
        controller = make_controller(enemies=[(1, 1, 300)])

        result = controller.dispatch("WARP 9")

        assert result.verb == "UNKNOWN"
        assert not result.executed
        assert controller.game.message_log[-1] == (
            "Unknown command. Type HELP for available commands."
        )

    def test_blank_input_is_ignored(self):
        controller = make_controller(enemies=[(1, 1, 300)])
        observer = RecordingObserver()
        controller.game.add_observer(observer)

        assert controller.dispatch("   ") is None
        assert observer.events == []
        assert controller.game.message_log == []

    def test_phaser_without_targets_rejected(self):
        controller = make_controller()
        result = controller.dispatch("PHA 100")

        assert not result.executed
        assert controller.game.ship.energy == 3000


class TestNotifications:
    """Test observer traffic from dispatch."""

    def test_render_requested_after_every_command(self):
        controller = make_controller(enemies=[(1, 1, 300)])
        observer = RecordingObserver()
        controller.game.add_observer(observer)

        controller.dispatch("NAV 4 4")  # rejected

        assert observer.events[-1] == (GameEvent.RENDER_REQUESTED, "POST_COMMAND")

    def test_turn_events_in_order(self):
        controller = make_controller(enemies=[(1, 1, 300)])
        observer = RecordingObserver()
        controller.game.add_observer(observer)

        controller.dispatch("NAV 5 4")

        kinds = [event for event, _ in observer.events]
        turn_index = kinds.index(GameEvent.TURN_ADVANCED)
        assert kinds[turn_index + 1] is GameEvent.CONDITION_CHANGED
        assert kinds[-1] is GameEvent.RENDER_REQUESTED


class TestEnemyTurn:
    """Test the enemy fire pass."""

    def test_clear_sector_message(self):
        controller = make_controller(enemies=[(1, 1, 0)])
        controller.run_enemy_turn()

        assert controller.game.message_log[-1] == "Sector clear of enemy threats."

    def test_pass_stops_when_ship_destroyed(self):
        controller = make_controller(
            enemies=[(4, 5, 300), (5, 4, 300)], energy=1, shields=0
        )
        game = controller.game

        controller.run_enemy_turn()

        assert game.ship.is_destroyed
        assert game.message_log[-1] == "The Enterprise has been destroyed."
        assert sum(1 for m in game.message_log if m.endswith("damage.")) == 1

    def test_destroyed_ship_ends_mission(self):
        controller = make_controller(enemies=[(4, 5, 300)], energy=1, shields=0)

        controller.dispatch("SRS")
        assert controller.can_continue()

        controller.dispatch("TOR 8 8")

        assert not controller.can_continue()
        assert controller.outcome() is MissionOutcome.DESTROYED
        assert controller.game.ship.condition is AlertLevel.DESTROYED


class TestMissionEnd:
    """Test quit, victory and timeout through dispatch."""

    def test_quit(self):
        controller = make_controller(enemies=[(1, 1, 300)])
        result = controller.dispatch("quit")

        assert result.executed
        assert not result.turn_consumed
        assert not controller.can_continue()
        assert controller.outcome() is MissionOutcome.QUIT

    def test_victory(self):
        controller = make_controller(enemies=[(4, 5, 50)])
        controller.dispatch("PHA 500")

        assert controller.game.alive_enemy_count() == 0
        assert controller.outcome() is MissionOutcome.VICTORY
        assert controller.game.message_log[-1] == "Sector clear of enemy threats."
        assert controller.game.ship.condition is AlertLevel.NORMAL

    def test_timeout(self):
        controller = make_controller(enemies=[(1, 1, 300)])
        controller.game.turns_remaining = 1

        controller.dispatch("TOR 8 8")

        assert controller.game.turns_remaining == 0
        assert controller.outcome() is MissionOutcome.TIMEOUT

    def test_help_lists_registered_verbs(self):
        controller = make_controller(enemies=[(1, 1, 300)])
        controller.dispatch("HELP")

        assert "Available commands: HELP, NAV, PHA, QUIT, SRS, STATUS, TOR" in (
            controller.game.message_log
        )
