"""Greedy headless driver used by the simulator and benchmarks."""

from __future__ import annotations

from typing import TYPE_CHECKING

import numpy as np

from grid_snake.grid import Position, WallMode
from grid_snake.snake import Direction

if TYPE_CHECKING:
    from grid_snake.session import GameSession


def manhattan(a: tuple[int, int], b: tuple[int, int]) -> int:
    return abs(a[0] - b[0]) + abs(a[1] - b[1])


class GreedyPilot:
    """Steers toward the food while avoiding walls and the body.

    Among the safe turns, the one that brings the head closest to the
    food wins; ties are broken with the pilot's RNG. With no safe turn
    the pilot keeps the current heading.
    """

    def __init__(self, rng: np.random.Generator | None = None) -> None:
        self.rng = rng if rng is not None else np.random.default_rng()

    def choose(self, session: GameSession) -> Direction | None:
        snake = session.snake
        if session.is_game_over:
            return snake.direction

        head = snake.head.position
        target = session.food.position or session.bounds.center
        # The tail cell is vacated by the move unless it is also the food.
        blocked = set(snake.positions()[:-1])

        scored: list[tuple[int, Direction]] = []
        for d in Direction:
            if not snake.accepts(d):
                continue
            nxt = Position(head.x + d.value[0], head.y + d.value[1])
            if session.wall_mode == WallMode.WRAP:
                nxt = session.bounds.wrap(nxt)
            elif not session.bounds.contains(nxt):
                continue
            if nxt in blocked:
                continue
            scored.append((manhattan(nxt, target), d))

        if not scored:
            return snake.direction

        best_dist = min(dist for dist, _ in scored)
        best = [d for dist, d in scored if dist == best_dist]
        return best[int(self.rng.integers(len(best)))]
