"""Console display for the command console.

Redraws the whole frame whenever the engine requests a render. On a real
terminal the frame is painted in place at the top of the screen; when output
is redirected the frame is simply printed.
"""

import shutil
import sys
from typing import Any, TextIO

from ..models.game import GameEvent, GameState
from ..utils.constants import CONSOLE_LOG_TAIL
from .renderer import SectorRenderer

CURSOR_HOME = "\033[H"
CLEAR_TO_END = "\033[J"


class ConsoleDisplay:
    """Game observer that prints the console frame."""

    def __init__(self, stream: TextIO | None = None, log_tail: int = CONSOLE_LOG_TAIL):
        """Initialize console display.

        Args:
            stream: Output stream (defaults to sys.stdout)
            log_tail: Number of log lines in the frame
        """
        self.stream = stream or sys.stdout
        self.log_tail = log_tail
        self.renderer = SectorRenderer()

    def update(self, event: GameEvent, payload: Any, game: GameState) -> None:
        """Redraw on render requests; other events are picked up by the next frame."""
        if event is not GameEvent.RENDER_REQUESTED:
            return
        self.render(game)

    def render(self, game: GameState) -> None:
        frame = self.renderer.build_frame(game, self.log_tail)

        if not self.stream.isatty():
            self.stream.write("\n".join(frame) + "\n")
            self.stream.flush()
            return

        width = max(60, shutil.get_terminal_size().columns - 1)
        self.stream.write(CURSOR_HOME + CLEAR_TO_END)
        for line in frame:
            self.stream.write(line[:width] + "\n")
        self.stream.flush()

    def show_outcome(self, message: str) -> None:
        self.stream.write(f"\n{message}\n")
        self.stream.flush()
