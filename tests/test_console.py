"""Tests for the line-oriented console session."""

import io

from src.engine.controller import GameController
from src.engine.scenario import create_default_game
from src.engine.victory import MissionOutcome
from src.interface.console import PROMPT, ConsoleSession
from src.interface.display import ConsoleDisplay
from src.models import GameEvent
from src.utils.rng import GameRNG


def scripted_input(lines):
    """Create a read_line function that replays lines, then signals EOF."""
    remaining = list(lines)
    prompts = []

    def read_line(prompt):
        prompts.append(prompt)
        if not remaining:
            raise EOFError
        return remaining.pop(0)

    read_line.prompts = prompts
    return read_line


def make_session(lines):
    rng = GameRNG(42)
    controller = GameController(create_default_game(rng), rng)
    stream = io.StringIO()
    read_line = scripted_input(lines)
    session = ConsoleSession(controller, ConsoleDisplay(stream=stream), read_line)
    return session, stream, read_line


def test_quit_ends_session():
    session, stream, read_line = make_session(["SRS", "QUIT"])

    outcome = session.run()

    assert outcome is MissionOutcome.QUIT
    assert read_line.prompts == [PROMPT, PROMPT]
    output = stream.getvalue()
    assert output.rstrip().endswith("Simulation terminated by command.")
    assert "- Starfleet command acknowledged. Ending simulation." in output


def test_renders_initial_frame_and_on_each_request():
    session, stream, _ = make_session(["STATUS", "QUIT"])
    session.run()

    assert stream.getvalue().count("MAINFRAME TSO STAR TREK - COMMAND CONSOLE") == 4


def test_eof_ends_without_outcome():
    session, stream, _ = make_session(["NAV 5 4"])

    outcome = session.run()

    assert outcome is None
    assert session.controller.game.turns_remaining == 29
    assert "MISSION" not in stream.getvalue()


def test_display_detached_after_run():
    session, stream, _ = make_session(["QUIT"])
    session.run()
    length = len(stream.getvalue())

    session.controller.game.notify(GameEvent.RENDER_REQUESTED, "LATE")

    assert len(stream.getvalue()) == length


def test_display_ignores_other_events():
    game = create_default_game(GameRNG(42))
    stream = io.StringIO()
    display = ConsoleDisplay(stream=stream)

    display.update(GameEvent.MESSAGE_ADDED, "hello", game)
    assert stream.getvalue() == ""

    display.update(GameEvent.RENDER_REQUESTED, "SRS", game)
    assert "SECTOR MAP (E=Enterprise, K=Klingon)" in stream.getvalue()
