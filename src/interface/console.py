"""Line-oriented console session.

Reads commands from standard input, hands each one to the controller and
lets the ConsoleDisplay observer redraw. The loop ends when the mission is
over, the player quits, or input runs out.
"""

import logging
from typing import Callable

from ..engine.controller import GameController
from ..engine.victory import MissionOutcome
from ..models.game import GameEvent
from .display import ConsoleDisplay

logger = logging.getLogger(__name__)

PROMPT = "COMMAND (HELP for list) "


class ConsoleSession:
    """Runs one game in the terminal."""

    def __init__(
        self,
        controller: GameController,
        display: ConsoleDisplay | None = None,
        read_line: Callable[[str], str] = input,
    ):
        """Initialize console session.

        Args:
            controller: Controller wrapping the game to play
            display: Frame printer (a default one is created if omitted)
            read_line: Prompting line reader (injectable for tests)
        """
        self.controller = controller
        self.display = display or ConsoleDisplay()
        self.read_line = read_line

    def run(self) -> MissionOutcome | None:
        """Play until the game ends.

        Returns:
            The mission outcome, or None if input ran out mid-mission
        """
        game = self.controller.game
        game.add_observer(self.display)
        game.notify(GameEvent.RENDER_REQUESTED, "INITIAL")

        try:
            while self.controller.can_continue():
                try:
                    line = self.read_line(PROMPT)
                except (EOFError, KeyboardInterrupt):
                    logger.info("Console input closed; ending session")
                    break
                self.controller.dispatch(line)
        finally:
            game.remove_observer(self.display)

        outcome = self.controller.outcome()
        if outcome is not None:
            self.display.show_outcome(outcome.message)
        return outcome
