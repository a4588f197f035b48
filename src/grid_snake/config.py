"""Game configuration."""

from __future__ import annotations

import json
import logging
from dataclasses import asdict, dataclass, fields
from pathlib import Path

from grid_snake.grid import GridBounds, Position, WallMode
from grid_snake.scoring import (
    BASE_INTERVAL,
    INTERVAL_STEP,
    LEVEL_THRESHOLD,
    MAX_LEVEL,
    SCORE_PER_FOOD,
)
from grid_snake.snake import Direction

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GameConfig:
    """Full session configuration.

    Supports JSON serialization so a game can be replayed from its seed.
    """

    # Board
    grid_width: int = 20
    grid_height: int = 20
    wall_mode: str = "death"

    # Snake
    starting_length: int = 4
    starting_x: int | None = None
    starting_y: int | None = None
    starting_direction: str | None = "right"

    # Scoring and cadence
    score_per_food: int = SCORE_PER_FOOD
    level_threshold: int = LEVEL_THRESHOLD
    max_level: int = MAX_LEVEL
    base_interval: float = BASE_INTERVAL
    interval_step: float = INTERVAL_STEP

    # Food
    max_spawn_attempts: int = 64
    seed: int | None = None

    def __post_init__(self) -> None:
        if self.grid_width < 1 or self.grid_height < 1:
            raise ValueError("grid_width and grid_height must be at least 1.")
        if self.starting_length < 1:
            raise ValueError("starting_length must be at least 1.")
        if self.max_spawn_attempts < 1:
            raise ValueError("max_spawn_attempts must be at least 1.")
        # Raise early on unknown names.
        WallMode(self.wall_mode)
        if self.starting_direction is not None:
            Direction.parse(self.starting_direction)

    def bounds(self) -> GridBounds:
        return GridBounds.of_size(self.grid_width, self.grid_height)

    def start_position(self) -> Position:
        """Configured head position, defaulting to the board centre."""
        center = self.bounds().center
        return Position(
            center.x if self.starting_x is None else self.starting_x,
            center.y if self.starting_y is None else self.starting_y,
        )

    def direction(self) -> Direction | None:
        if self.starting_direction is None:
            return None
        return Direction.parse(self.starting_direction)

    def to_dict(self) -> dict:
        """Serialize to a plain dict."""
        return asdict(self)

    def save(self, path: str | Path) -> None:
        """Write config to a JSON file."""
        p = Path(path)
        p.parent.mkdir(parents=True, exist_ok=True)
        p.write_text(json.dumps(self.to_dict(), indent=2))
        logger.info("Config saved to %s", p)

    @classmethod
    def load(cls, path: str | Path) -> GameConfig:
        """Load config from a JSON file."""
        raw = json.loads(Path(path).read_text())
        unknown = sorted(set(raw) - {f.name for f in fields(cls)})
        if unknown:
            raise ValueError(f"Unknown config keys in {path}: {', '.join(unknown)}.")
        return cls(**raw)
