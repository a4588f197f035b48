"""Performance benchmarking utilities for the simulation core."""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass

import numpy as np

from grid_snake.autopilot import GreedyPilot
from grid_snake.grid import GridBounds
from grid_snake.session import GameSession

logger = logging.getLogger(__name__)


@dataclass
class BenchmarkResult:
    """Results from a throughput benchmark run."""

    total_games: int
    total_ticks: int
    total_score: int
    wall_time_seconds: float
    games_per_second: float
    ticks_per_second: float

    @property
    def mean_score(self) -> float:
        return self.total_score / max(self.total_games, 1)

    def summary(self) -> str:
        return (
            f"Benchmark: {self.total_games} games, {self.total_ticks} ticks in "
            f"{self.wall_time_seconds:.2f}s | "
            f"{self.games_per_second:.1f} games/s, "
            f"{self.ticks_per_second:.1f} ticks/s, "
            f"mean score {self.mean_score:.1f}"
        )


def benchmark_throughput(
    *,
    num_games: int = 100,
    grid_width: int = 20,
    grid_height: int = 20,
    max_ticks: int = 500,
    seed: int = 42,
) -> BenchmarkResult:
    """Measure raw tick throughput.

    Plays *num_games* headless games driven by :class:`GreedyPilot`,
    each capped at *max_ticks*, and reports games/second and
    ticks/second.
    """
    rng = np.random.default_rng(seed)
    pilot = GreedyPilot(rng)
    bounds = GridBounds.of_size(grid_width, grid_height)

    total_ticks = 0
    total_score = 0
    start = time.perf_counter()

    for _ in range(num_games):
        session = GameSession(bounds, seed=int(rng.integers(2**31)))
        while not session.is_game_over and session.tick < max_ticks:
            direction = pilot.choose(session)
            if direction is not None:
                session.set_direction(direction)
            session.advance_tick()
        total_ticks += session.tick
        total_score += session.score

    elapsed = time.perf_counter() - start
    result = BenchmarkResult(
        total_games=num_games,
        total_ticks=total_ticks,
        total_score=total_score,
        wall_time_seconds=elapsed,
        games_per_second=num_games / max(elapsed, 1e-9),
        ticks_per_second=total_ticks / max(elapsed, 1e-9),
    )
    logger.info(result.summary())
    return result
