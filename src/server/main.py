"""FastAPI server for the browser command console.

Provides an HTTP/WebSocket API and serves the single-page front end.
"""

import logging
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI, HTTPException, WebSocket, WebSocketDisconnect
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse
from fastapi.staticfiles import StaticFiles

from .schemas.requests import CommandRequest, CreateGameRequest
from .schemas.responses import CommandResponse, CreateGameResponse, GameStateResponse
from .session import GameSession, GameSessionManager

# Configure logging
logging.basicConfig(
    level=logging.INFO, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)

FRONTEND_DIR = Path(__file__).parent.parent.parent / "frontend"

# Global session manager
sessions = GameSessionManager()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager for startup/shutdown."""
    logger.info("Star Trek command console server starting...")
    yield
    logger.info("Star Trek command console server shutting down...")
    await sessions.cleanup_all()


app = FastAPI(
    title="Star Trek Command Console API",
    description="Web API for the single-player sector combat simulation",
    version="1.0.0",
    lifespan=lifespan,
)

# Enable CORS for frontend
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # In production, specify exact origins
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def _require_session(game_id: str) -> GameSession:
    session = sessions.get(game_id)
    if not session:
        raise HTTPException(status_code=404, detail="Game not found")
    return session


# ============================================
# API ENDPOINTS
# ============================================


@app.get("/api")
async def api_root():
    """API root endpoint - server health check."""
    return {
        "service": "Star Trek Command Console",
        "status": "operational",
        "activeGames": len(sessions.sessions),
    }


@app.get("/")
async def root():
    """Serve the game frontend."""
    return FileResponse(FRONTEND_DIR / "index.html")


@app.post("/api/games", response_model=CreateGameResponse)
async def create_game(request: CreateGameRequest):
    """Create a new game.

    Args:
        request: Game creation parameters

    Returns:
        Game ID, effective seed and initial state

    Example:
        POST /api/games
        {"seed": 42}
    """
    try:
        session = sessions.create_session(seed=request.seed)
    except Exception as e:
        logger.error(f"Failed to create game: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail=f"Failed to create game: {str(e)}")

    return CreateGameResponse(gameId=session.id, seed=session.seed, state=session.get_state())


@app.get("/api/games/{game_id}/state", response_model=GameStateResponse)
async def get_game_state(game_id: str):
    """Get current game state.

    Example:
        GET /api/games/game-abc123/state
    """
    session = _require_session(game_id)
    return GameStateResponse(
        gameId=game_id,
        state=session.get_state(),
        canContinue=session.controller.can_continue(),
        **session.outcome_fields(),
    )


@app.post("/api/games/{game_id}/commands", response_model=CommandResponse)
async def submit_command(game_id: str, request: CommandRequest):
    """Dispatch one command line and broadcast the resulting events.

    Rejected commands (bad arguments, blocked course, ...) are not HTTP
    errors: they come back with executed=false and the reason in the log.

    Example:
        POST /api/games/game-abc123/commands
        {"command": "PHA 700"}
    """
    session = _require_session(game_id)

    if not session.controller.can_continue():
        raise HTTPException(
            status_code=400,
            detail=f"Game already ended: {session.controller.outcome().message}",
        )

    try:
        result = session.execute_command(request.command)
    except Exception as e:
        logger.error(f"Game {game_id}: command failed: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail=f"Failed to execute command: {str(e)}")

    if result is None:
        raise HTTPException(status_code=422, detail="Command must not be blank")

    await session.broadcast_events()

    return CommandResponse(
        verb=result.verb,
        executed=result.executed,
        turnConsumed=result.turn_consumed,
        state=session.get_state(),
        **session.outcome_fields(),
    )


@app.delete("/api/games/{game_id}")
async def delete_game(game_id: str):
    """Delete a game session."""
    session = _require_session(game_id)
    await session.close_connections()
    sessions.delete(game_id)
    return {"message": f"Game {game_id} deleted"}


# ============================================
# WEBSOCKET ENDPOINT
# ============================================


@app.websocket("/ws/games/{game_id}")
async def websocket_endpoint(websocket: WebSocket, game_id: str):
    """WebSocket connection for real-time game updates.

    Clients receive:
    - CONNECTED: Initial connection confirmation with state
    - GAME_EVENTS: Engine notifications and new state after each command
    """
    session = sessions.get(game_id)
    if not session:
        await websocket.close(code=1008, reason="Game not found")
        return

    await websocket.accept()
    session.add_connection(websocket)

    try:
        await websocket.send_json(
            {
                "type": "CONNECTED",
                "gameId": game_id,
                "state": session.get_state(),
                **session.outcome_fields(),
            }
        )
        logger.info(f"WebSocket connected to game {game_id}")

        # Keep connection alive and handle client messages
        while True:
            data = await websocket.receive_json()
            if data.get("type") == "PING":
                await websocket.send_json({"type": "PONG"})

    except WebSocketDisconnect:
        logger.info(f"WebSocket disconnected from game {game_id}")
    except Exception as e:
        logger.error(f"WebSocket error in game {game_id}: {e}", exc_info=True)
    finally:
        session.remove_connection(websocket)


# ============================================
# SERVE FRONTEND STATIC FILES
# ============================================

# Mount static assets AFTER all API routes
app.mount("/static", StaticFiles(directory=FRONTEND_DIR), name="static")


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=8000, log_level="info")
