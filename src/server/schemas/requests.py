"""Pydantic request schemas for API endpoints."""

from pydantic import BaseModel, Field, field_validator


class CreateGameRequest(BaseModel):
    """Request to create a new game."""

    seed: int | None = Field(default=None, description="Optional RNG seed for determinism")


class CommandRequest(BaseModel):
    """A single command line, exactly as the player typed it."""

    command: str = Field(
        min_length=1,
        description="Command line, e.g. 'NAV 5 4' or 'PHA 700'",
    )

    @field_validator("command")
    @classmethod
    def command_has_verb(cls, value: str) -> str:
        # Must agree with CommandParser, which splits on str.split() whitespace
        if not value.split():
            raise ValueError("Command must not be blank")
        return value
