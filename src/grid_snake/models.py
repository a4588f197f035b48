"""Pydantic models for read-only session views."""

from __future__ import annotations

import enum

from pydantic import BaseModel, ConfigDict, Field


class GameState(str, enum.Enum):
    """Lifecycle states for a game session."""

    RUNNING = "running"
    PAUSED = "paused"
    GAME_OVER = "game_over"


class GameOverReason(str, enum.Enum):
    """Why a session ended."""

    WALL = "wall"
    SELF = "self"
    BOARD_FULL = "board_full"


class Snapshot(BaseModel):
    """Everything a renderer needs to draw one frame."""

    model_config = ConfigDict(frozen=True)

    snake_segments: list[tuple[int, int]]
    food_position: tuple[int, int] | None
    score: int = Field(ge=0)
    tick_interval: float = Field(gt=0)
    level: int = Field(default=0, ge=0)
    tick: int = Field(default=0, ge=0)
    state: GameState = GameState.RUNNING
    game_over_reason: GameOverReason | None = None
