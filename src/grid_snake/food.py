"""Food spawning logic."""

from __future__ import annotations

import logging
from collections.abc import Collection
from typing import TYPE_CHECKING

import numpy as np

from grid_snake.grid import Position

if TYPE_CHECKING:
    from grid_snake.grid import GridBounds

logger = logging.getLogger(__name__)


class FoodSpawner:
    """Manages the single food item on the board.

    Placement first tries up to ``max_attempts`` uniform random draws,
    rejecting cells the snake occupies, then falls back to choosing among
    all free cells. Uses a seeded NumPy RNG for reproducible placement.
    """

    def __init__(
        self,
        bounds: GridBounds,
        rng: np.random.Generator | None = None,
        max_attempts: int = 64,
    ) -> None:
        if max_attempts < 1:
            raise ValueError("max_attempts must be at least 1.")
        self.bounds = bounds
        self.rng = rng if rng is not None else np.random.default_rng()
        self.max_attempts = max_attempts
        self.position: Position | None = None

    def spawn(self, occupied: Collection[tuple[int, int]]) -> Position | None:
        """Place food on a cell not in *occupied*.

        Returns the new position, or ``None`` when the board is full.
        """
        taken = set(occupied)
        for _ in range(self.max_attempts):
            candidate = self._random_cell()
            if candidate not in taken:
                self.position = candidate
                logger.debug("Food spawned at %s.", candidate)
                return candidate

        free = self.bounds.free_cells(taken)
        if not free:
            logger.warning("No free cells available for food spawning.")
            self.position = None
            return None

        logger.debug(
            "Random placement missed %d times; choosing among %d free cells.",
            self.max_attempts, len(free),
        )
        self.position = free[int(self.rng.integers(len(free)))]
        return self.position

    def consume(self) -> Position | None:
        """Remove the current food item and return where it was."""
        pos, self.position = self.position, None
        return pos

    def _random_cell(self) -> Position:
        b = self.bounds
        return Position(
            int(self.rng.integers(b.min_x, b.max_x + 1)),
            int(self.rng.integers(b.min_y, b.max_y + 1)),
        )

    def to_dict(self) -> dict:
        """Serialize food state to a dictionary."""
        return {
            "position": list(self.position) if self.position is not None else None,
        }
