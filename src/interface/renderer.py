"""ASCII sector rendering.

This module renders the 8x8 sector grid and the full console frame
(telemetry, map, computer log tail, command summary).
"""

from typing import List

from ..models.game import GameState
from ..utils.constants import CONSOLE_LOG_TAIL

FRAME_WIDTH = 68
COMMAND_SUMMARY = "Commands: NAV <x> <y>, PHA <energy>, TOR <x> <y>, SRS, STATUS, HELP, QUIT"


class SectorRenderer:
    """Renders the sector map and console frame as plain text."""

    def render(self, game: GameState) -> str:
        """Render the sector grid.

        Output format (8 rows, one char per cell, row 1 at the top):
        . . . . . . . .
        . . K . . . . .
        . . . E . . . .
        ...

        Legend:
        - 'E' = the Enterprise
        - 'K' = a live Klingon (drawn over the ship if they share a cell)
        - '.' = empty space

        Args:
            game: Current game state

        Returns:
            Multi-line string representing the sector
        """
        sector = game.sector
        grid = [["."] * sector.width for _ in range(sector.height)]

        ship = game.ship.position
        grid[ship.y - 1][ship.x - 1] = "E"

        for enemy in sector.alive_enemies():
            grid[enemy.position.y - 1][enemy.position.x - 1] = "K"

        return "\n".join(" ".join(row) for row in grid)

    def render_with_coords(self, game: GameState) -> str:
        """Render the grid with Y labels on the right and an X axis below.

        Args:
            game: Current game state

        Returns:
            Map with coordinate labels
        """
        lines = self.render(game).split("\n")
        numbered_lines = [f"{line}  | {y}" for y, line in enumerate(lines, 1)]
        axis = " ".join(str(x) for x in range(1, game.sector.width + 1))
        return "\n".join(numbered_lines) + f"\n{axis}  | X-axis"

    def status_lines(self, game: GameState) -> List[str]:
        """Mission clock and ship telemetry, one fact group per line."""
        ship = game.ship
        return [
            f"STARDATE: {game.stardate}   TURNS: {game.turns_remaining}   "
            f"ALERT: {ship.condition.value}",
            f"ENERGY: {ship.energy}   SHIELDS: {ship.shields}   TORPEDOES: {ship.torpedoes}",
            f"POSITION: X={ship.position.x}, Y={ship.position.y}   "
            f"HOSTILES: {game.alive_enemy_count()}",
        ]

    def build_frame(self, game: GameState, log_tail: int = CONSOLE_LOG_TAIL) -> List[str]:
        """Build the full console screen.

        The log section is always log_tail lines tall (padded with blanks) so
        consecutive frames line up when redrawn in place.

        Args:
            game: Current game state
            log_tail: Number of recent log messages to show

        Returns:
            List of lines, top to bottom
        """
        rule = "=" * FRAME_WIDTH
        lines = [rule, "MAINFRAME TSO STAR TREK - COMMAND CONSOLE", rule]
        lines.extend(self.status_lines(game))
        lines.append(rule)
        lines.append("SECTOR MAP (E=Enterprise, K=Klingon)")
        lines.extend(self.render_with_coords(game).split("\n"))
        lines.append("")
        lines.append("--- COMPUTER LOG ---")

        recent = game.message_log[-log_tail:] if log_tail > 0 else []
        lines.extend(f"- {message}" for message in recent)
        lines.extend([""] * (log_tail - len(recent)))

        lines.append("")
        lines.append(COMMAND_SUMMARY)
        return lines
