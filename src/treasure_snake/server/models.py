"""Pydantic models for API request/response schemas."""

from __future__ import annotations

from pydantic import BaseModel, Field


class DirectionRequest(BaseModel):
    """Request body for POST /game/direction.

    Either a direction name (``up``) or a key name (``ArrowUp``, ``w``).
    """

    direction: str | None = Field(default=None, max_length=16)
    key: str | None = Field(default=None, max_length=16)


class BoardModel(BaseModel):
    """Board contents as cell codes indexed ``cells[y][x]``."""

    size: int
    cells: list[list[int]]


class GameStateResponse(BaseModel):
    """Observable game state."""

    tick: int
    score: int
    started: bool
    running: bool
    is_playing: bool
    paused: bool
    game_over: bool
    won: bool
    snake: list[list[int]]
    direction: list[int]
    pending_direction: list[int]
    treasure: list[int] | None
    grid: BoardModel
    config: dict[str, int]


class CommandResponse(BaseModel):
    """Result of a game command and the state it left behind."""

    accepted: bool
    state: GameStateResponse
