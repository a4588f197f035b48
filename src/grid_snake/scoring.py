"""Score keeping and difficulty scaling."""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)

SCORE_PER_FOOD = 100
LEVEL_THRESHOLD = 500
MAX_LEVEL = 6
BASE_INTERVAL = 0.16
INTERVAL_STEP = 0.02


class ScoreBoard:
    """Tracks the score and the difficulty level derived from it.

    Every ``level_threshold`` points raise the level by one, up to
    ``max_level``. Each level shortens the tick interval by
    ``interval_step`` seconds.
    """

    def __init__(
        self,
        score_per_food: int = SCORE_PER_FOOD,
        level_threshold: int = LEVEL_THRESHOLD,
        max_level: int = MAX_LEVEL,
        base_interval: float = BASE_INTERVAL,
        interval_step: float = INTERVAL_STEP,
    ) -> None:
        if score_per_food < 0:
            raise ValueError("score_per_food must not be negative.")
        if level_threshold < 1:
            raise ValueError("level_threshold must be at least 1.")
        if max_level < 0:
            raise ValueError("max_level must not be negative.")
        if base_interval - interval_step * max_level <= 0:
            raise ValueError("Tick interval must stay positive at max_level.")
        self.score_per_food = score_per_food
        self.level_threshold = level_threshold
        self.max_level = max_level
        self.base_interval = base_interval
        self.interval_step = interval_step

        self.score = 0
        self.foods_eaten = 0
        self.level = 0
        self.tick_interval = base_interval

    def record_food(self) -> None:
        """Credit one consumed food and rescale difficulty."""
        self.foods_eaten += 1
        self.score += self.score_per_food
        self.update_difficulty()

    def update_difficulty(self) -> bool:
        """Raise the level if the score allows it.

        Returns True when the level changed. The level only ever rises.
        """
        level = min(self.score // self.level_threshold, self.max_level)
        if level <= self.level:
            return False
        self.level = level
        self.tick_interval = self.interval_for(level)
        logger.info(
            "Difficulty raised to level %d (tick interval %.3fs).",
            level, self.tick_interval,
        )
        return True

    def interval_for(self, level: int) -> float:
        return self.base_interval - self.interval_step * level

    def to_dict(self) -> dict:
        return {
            "score": self.score,
            "level": self.level,
            "tick_interval": self.tick_interval,
        }
