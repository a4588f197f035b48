"""Grid Snake — tick-driven snake simulation engine."""

from grid_snake.config import GameConfig
from grid_snake.grid import GridBounds, Position, WallMode
from grid_snake.models import GameOverReason, GameState, Snapshot
from grid_snake.scoring import ScoreBoard
from grid_snake.session import GameSession, new_session
from grid_snake.snake import Direction, Segment, Snake

__all__ = [
    "Direction",
    "GameConfig",
    "GameOverReason",
    "GameSession",
    "GameState",
    "GridBounds",
    "Position",
    "ScoreBoard",
    "Segment",
    "Snake",
    "Snapshot",
    "WallMode",
    "new_session",
]
