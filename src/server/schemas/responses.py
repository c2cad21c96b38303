"""Pydantic response schemas for API endpoints."""

from pydantic import BaseModel


class GameStateResponse(BaseModel):
    """Response containing current game state."""

    gameId: str  # noqa: N815
    state: dict
    canContinue: bool  # noqa: N815
    outcome: str | None = None
    outcomeMessage: str | None = None  # noqa: N815


class CreateGameResponse(BaseModel):
    """Response after creating a new game."""

    gameId: str  # noqa: N815
    seed: int
    state: dict


class CommandResponse(BaseModel):
    """Response after dispatching a command."""

    verb: str
    executed: bool
    turnConsumed: bool  # noqa: N815
    state: dict
    outcome: str | None = None
    outcomeMessage: str | None = None  # noqa: N815
