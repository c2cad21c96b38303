"""Game session management for browser play."""

import logging
import uuid
from dataclasses import dataclass, field
from typing import Any

from fastapi import WebSocket

from ..engine.controller import DispatchResult, GameController
from ..engine.scenario import create_default_game
from ..models.game import GameEvent, GameState
from ..models.ship import AlertLevel
from ..utils.constants import BROWSER_LOG_TAIL
from ..utils.rng import GameRNG
from ..utils.serialization import serialize_game_state

logger = logging.getLogger(__name__)


class EventRecorder:
    """Game observer that buffers notifications for the next broadcast."""

    def __init__(self):
        self.events: list[dict[str, Any]] = []

    def update(self, event: GameEvent, payload: Any, game: GameState) -> None:
        if isinstance(payload, AlertLevel):
            payload = payload.value
        self.events.append({"event": event.value, "payload": payload})

    def drain(self) -> list[dict[str, Any]]:
        """Return buffered events and start a fresh buffer."""
        events, self.events = self.events, []
        return events


@dataclass
class GameSession:
    """Manages one browser game.

    Coordinates the game state, the controller and the WebSocket
    connections watching this game.
    """

    id: str
    controller: GameController
    recorder: EventRecorder = field(default_factory=EventRecorder)
    connections: list[WebSocket] = field(default_factory=list)

    def __post_init__(self):
        self.game.add_observer(self.recorder)

    @property
    def game(self) -> GameState:
        return self.controller.game

    @property
    def seed(self) -> int:
        return self.controller.rng.seed

    def get_state(self) -> dict:
        """Serialize game state for the page (log tail only)."""
        return serialize_game_state(self.game, log_tail=BROWSER_LOG_TAIL)

    def outcome_fields(self) -> dict:
        """Outcome code and banner text, both None while the game runs."""
        outcome = self.controller.outcome()
        return {
            "outcome": outcome.value if outcome else None,
            "outcomeMessage": outcome.message if outcome else None,
        }

    def execute_command(self, line: str) -> DispatchResult | None:
        """Run one command line through the controller.

        Args:
            line: Raw command line

        Returns:
            DispatchResult, or None for blank input
        """
        result = self.controller.dispatch(line)
        if result is not None:
            logger.info(
                "Game %s: %s executed=%s turn_consumed=%s",
                self.id,
                result.verb,
                result.executed,
                result.turn_consumed,
            )
        return result

    def add_connection(self, websocket: WebSocket) -> None:
        self.connections.append(websocket)

    def remove_connection(self, websocket: WebSocket) -> None:
        if websocket in self.connections:
            self.connections.remove(websocket)

    async def broadcast(self, message: dict) -> None:
        """Send a message to every connected client, dropping dead sockets."""
        for websocket in list(self.connections):
            try:
                await websocket.send_json(message)
            except Exception as e:
                logger.warning(f"Game {self.id}: dropping WebSocket after send failure: {e}")
                self.remove_connection(websocket)

    async def broadcast_events(self) -> None:
        """Push everything the engine emitted since the last broadcast."""
        await self.broadcast(
            {
                "type": "GAME_EVENTS",
                "events": self.recorder.drain(),
                "state": self.get_state(),
                **self.outcome_fields(),
            }
        )

    async def close_connections(self) -> None:
        for websocket in list(self.connections):
            try:
                await websocket.close()
            except Exception as e:
                logger.debug(f"Game {self.id}: WebSocket already closed: {e}")
        self.connections.clear()


class GameSessionManager:
    """Registry of active browser games."""

    def __init__(self):
        self.sessions: dict[str, GameSession] = {}

    def create_session(self, seed: int | None = None) -> GameSession:
        """Start a new game.

        Args:
            seed: Optional RNG seed (None or 0 picks a time-based seed)

        Returns:
            The new session
        """
        rng = GameRNG(seed)
        game = create_default_game(rng)
        session = GameSession(
            id=f"game-{uuid.uuid4().hex[:8]}",
            controller=GameController(game, rng),
        )
        self.sessions[session.id] = session
        logger.info(f"Created session {session.id} (seed {session.seed})")
        return session

    def get(self, game_id: str) -> GameSession | None:
        return self.sessions.get(game_id)

    def delete(self, game_id: str) -> bool:
        """Forget a session.

        Returns:
            True if the session existed
        """
        session = self.sessions.pop(game_id, None)
        if session is None:
            return False
        session.game.remove_observer(session.recorder)
        logger.info(f"Deleted session {game_id}")
        return True

    async def cleanup_all(self) -> None:
        """Close every WebSocket and drop all sessions (server shutdown)."""
        for session in list(self.sessions.values()):
            await session.close_connections()
        self.sessions.clear()
