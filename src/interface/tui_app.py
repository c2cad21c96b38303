"""Textual TUI application for the command console.

This module provides a Terminal User Interface using the Textual framework.
It displays the sector map, ship telemetry and the computer log, and routes
typed commands to the game controller.
"""

from typing import Any

from rich.markup import escape
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Container, Horizontal
from textual.widgets import Footer, Header, Input, RichLog, Static

from ..engine.controller import GameController
from ..engine.victory import MissionOutcome
from ..models.game import GameEvent, GameState
from ..models.ship import AlertLevel
from .history import CommandHistory
from .renderer import COMMAND_SUMMARY, SectorRenderer

ALERT_STYLES = {
    AlertLevel.NORMAL: "green",
    AlertLevel.RED_ALERT: "bold red",
    AlertLevel.DESTROYED: "bold white on red",
}


class SectorPanel(Static):
    """Widget to display the sector map."""

    def __init__(self, *args, **kwargs):
        """Initialize sector panel."""
        super().__init__(*args, **kwargs)
        self.renderer = SectorRenderer()
        self.border_title = "Sector Map (8x8)"

    def update_map(self, game: GameState) -> None:
        self.update(self.renderer.render_with_coords(game))


class TelemetryPanel(Static):
    """Widget to display mission clock and ship status."""

    def update_telemetry(self, game: GameState) -> None:
        ship = game.ship
        style = ALERT_STYLES[ship.condition]
        self.update(
            "\n".join(
                [
                    f"[bold]{escape(ship.name)}[/bold]",
                    "",
                    f"Stardate:   [cyan]{game.stardate}[/cyan]",
                    f"Turns left: [cyan]{game.turns_remaining}[/cyan]",
                    f"Alert:      [{style}]{ship.condition.value}[/{style}]",
                    "",
                    f"Energy:     [cyan]{ship.energy}[/cyan]",
                    f"Shields:    [cyan]{ship.shields}[/cyan]",
                    f"Torpedoes:  [cyan]{ship.torpedoes}[/cyan]",
                    f"Position:   [cyan]X={ship.position.x}, Y={ship.position.y}[/cyan]",
                    f"Hostiles:   [cyan]{game.alive_enemy_count()}[/cyan]",
                ]
            )
        )


class TerminalPanel(RichLog):
    """Computer log with command echo."""

    def __init__(self, *args, **kwargs):
        """Initialize terminal panel."""
        super().__init__(*args, highlight=False, markup=True, wrap=True, **kwargs)

    def show_command(self, command: str) -> None:
        """Echo the command that was entered.

        Args:
            command: Command string entered by user
        """
        self.write(f"[bold cyan]>[/bold cyan] {escape(command)}")

    def show_message(self, message: str) -> None:
        self.write(escape(message))

    def show_outcome(self, outcome: MissionOutcome) -> None:
        """Show the end-of-mission banner.

        Args:
            outcome: How the mission ended
        """
        style = "bold green" if outcome.is_success else "bold red"
        self.write("")
        self.write(f"[{style}]{escape(outcome.message)}[/{style}]")
        self.write("[dim]Press Ctrl+C to leave the bridge.[/dim]")


class GameEventRelay:
    """Observer that forwards game events to the TUI."""

    def __init__(self, app: "StarTrekTUI"):
        self.app = app

    def update(self, event: GameEvent, payload: Any, game: GameState) -> None:
        self.app.handle_game_event(event, payload)


class StarTrekTUI(App):
    """Command console TUI application.

    The app registers a GameEventRelay as a game observer: MessageAdded lines go to
    the terminal panel and RenderRequested refreshes the map and telemetry.
    """

    # Disable command palette (Ctrl+P) - we use custom keybindings
    ENABLE_COMMAND_PALETTE = False

    CSS = """
    #top_row {
        height: 14;
    }

    #map_container {
        width: 1fr;
        border: solid green;
        padding: 0 1;
    }

    #telemetry_container {
        width: 1fr;
        border: solid blue;
        padding: 0 1;
    }

    #terminal_container {
        height: 1fr;
        border: solid cyan;
    }

    TerminalPanel {
        height: 1fr;
        overflow-y: auto;
        border: none;
    }

    #input_row {
        dock: bottom;
        height: 1;
        background: $surface;
    }

    #prompt_label {
        width: auto;
        background: $surface;
        color: cyan;
        padding: 0;
    }

    #command_input {
        width: 1fr;
        height: 1;
        background: $surface;
        border: none;
        padding: 0;
    }
    """

    BINDINGS = [
        Binding("ctrl+c", "quit", "Quit", show=True),
        Binding("up", "history_previous", "Previous", show=False),
        Binding("down", "history_next", "Next", show=False),
    ]

    def __init__(self, controller: GameController, *args, **kwargs):
        """Initialize the TUI app.

        Args:
            controller: Controller wrapping the game to play
        """
        super().__init__(*args, **kwargs)
        self.controller = controller
        self.game = controller.game
        self.history = CommandHistory()
        self.sector_panel = None
        self.telemetry_panel = None
        self.terminal_panel = None
        self.relay = GameEventRelay(self)

    def compose(self) -> ComposeResult:
        """Create child widgets."""
        yield Header()

        with Horizontal(id="top_row"):
            self.sector_panel = SectorPanel(id="map_container")
            yield self.sector_panel

            self.telemetry_panel = TelemetryPanel(id="telemetry_container")
            self.telemetry_panel.border_title = "Ship Telemetry"
            yield self.telemetry_panel

        terminal_container = Container(id="terminal_container")
        terminal_container.border_title = "Computer Log"
        with terminal_container:
            self.terminal_panel = TerminalPanel()
            yield self.terminal_panel
            with Horizontal(id="input_row"):
                yield Static("COMMAND> ", id="prompt_label")
                yield Input(placeholder="HELP for list", id="command_input")

        yield Footer()

    def on_mount(self) -> None:
        """Handle mount event."""
        self.title = "Mainframe TSO Star Trek"

        # Replay messages logged before the UI existed (scenario setup)
        for message in self.game.message_log:
            self.terminal_panel.show_message(message)
        self.terminal_panel.write(f"[dim]{COMMAND_SUMMARY}[/dim]")

        self.game.add_observer(self.relay)
        self.game.notify(GameEvent.RENDER_REQUESTED, "INITIAL")
        self.query_one("#command_input", Input).focus()

    def on_unmount(self) -> None:
        self.game.remove_observer(self.relay)

    def handle_game_event(self, event: GameEvent, payload: Any) -> None:
        """React to an engine notification."""
        if event is GameEvent.MESSAGE_ADDED and self.terminal_panel:
            self.terminal_panel.show_message(payload)
        elif event is GameEvent.RENDER_REQUESTED:
            self.refresh_display()

    def refresh_display(self) -> None:
        """Refresh map and telemetry panels."""
        if self.sector_panel:
            self.sector_panel.update_map(self.game)
        if self.telemetry_panel:
            self.telemetry_panel.update_telemetry(self.game)

    def on_input_submitted(self, event: Input.Submitted) -> None:
        """Handle input submission.

        Args:
            event: Input submission event
        """
        command = event.value.strip()
        event.input.value = ""

        if not command:
            return

        self.history.push(command)
        self.terminal_panel.show_command(command)
        self.controller.dispatch(command)

        outcome = self.controller.outcome()
        if outcome is None:
            return

        event.input.disabled = True
        self.terminal_panel.show_outcome(outcome)
        if outcome is MissionOutcome.QUIT:
            self.exit(outcome)

    def _recall(self, line: str | None) -> None:
        if line is None:
            return
        command_input = self.query_one("#command_input", Input)
        if command_input.disabled:
            return
        command_input.value = line
        command_input.cursor_position = len(line)

    def action_history_previous(self) -> None:
        self._recall(self.history.previous())

    def action_history_next(self) -> None:
        self._recall(self.history.next())

    def action_quit(self) -> None:
        """Quit the application, reporting the outcome if there is one."""
        self.exit(self.controller.outcome())
