"""Tick-based game session composing grid, snake, food and scoring."""

from __future__ import annotations

import logging

import numpy as np

from grid_snake.config import GameConfig
from grid_snake.food import FoodSpawner
from grid_snake.grid import GridBounds, WallMode
from grid_snake.models import GameOverReason, GameState, Snapshot
from grid_snake.scoring import ScoreBoard
from grid_snake.snake import Direction, Segment, Snake

logger = logging.getLogger(__name__)


class GameSession:
    """Single-snake, tick-based game session.

    The session owns the snake, the food spawner and the score board.
    Commands (:meth:`set_direction`, :meth:`toggle_pause`) may arrive at
    any time between ticks; a buffered turn only reaches the snake at the
    start of the next :meth:`advance_tick`. Once the game is over every
    command is ignored and only the read accessors stay meaningful.
    """

    def __init__(
        self,
        bounds: GridBounds,
        starting_length: int = 4,
        starting_position: tuple[int, int] | None = None,
        starting_direction: Direction | None = Direction.RIGHT,
        *,
        wall_mode: WallMode = WallMode.DEATH,
        seed: int | None = None,
        scoreboard: ScoreBoard | None = None,
        max_spawn_attempts: int = 64,
    ) -> None:
        self.bounds = bounds
        self.wall_mode = wall_mode

        start = starting_position if starting_position is not None else bounds.center
        self.snake = Snake(start, starting_direction, length=starting_length)
        if not all(bounds.contains(p) for p in self.snake.positions()):
            raise ValueError(
                "Starting snake does not fit inside the grid bounds; "
                "move it or reduce its length.",
            )

        self.rng = np.random.default_rng(seed)
        self.food = FoodSpawner(bounds, rng=self.rng, max_attempts=max_spawn_attempts)
        if self.food.spawn(self.snake.positions()) is None:
            raise ValueError("Starting snake leaves no free cell for food.")

        self.scoreboard = scoreboard if scoreboard is not None else ScoreBoard()
        self.tick = 0
        self.game_over_reason: GameOverReason | None = None
        self._state = GameState.RUNNING
        self._pending_direction: Direction | None = None

    @classmethod
    def from_config(cls, config: GameConfig) -> GameSession:
        """Build a session from a :class:`GameConfig`."""
        return cls(
            config.bounds(),
            starting_length=config.starting_length,
            starting_position=config.start_position(),
            starting_direction=config.direction(),
            wall_mode=WallMode(config.wall_mode),
            seed=config.seed,
            scoreboard=ScoreBoard(
                score_per_food=config.score_per_food,
                level_threshold=config.level_threshold,
                max_level=config.max_level,
                base_interval=config.base_interval,
                interval_step=config.interval_step,
            ),
            max_spawn_attempts=config.max_spawn_attempts,
        )

    # --- queries ---

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def is_game_over(self) -> bool:
        return self._state is GameState.GAME_OVER

    @property
    def score(self) -> int:
        return self.scoreboard.score

    @property
    def final_score(self) -> int | None:
        """Score at the moment the game ended, ``None`` while playing."""
        return self.scoreboard.score if self.is_game_over else None

    @property
    def level(self) -> int:
        return self.scoreboard.level

    @property
    def tick_interval(self) -> float:
        """Seconds the driver should wait before the next tick."""
        return self.scoreboard.tick_interval

    @property
    def pending_direction(self) -> Direction | None:
        return self._pending_direction

    # --- commands ---

    def set_direction(self, direction: Direction) -> None:
        """Buffer a turn for the next tick, ignoring 180° reversals.

        A still snake is straightened behind its head and starts moving
        in *direction* right away, unless the straightened body would leave
        the board. Later calls before the next tick replace earlier
        accepted ones. Turns made while paused wait for the first tick
        after resuming.
        """
        if self._state is GameState.GAME_OVER:
            return
        if not self.snake.accepts(direction):
            return
        if not self.snake.is_moving:
            if not all(self.bounds.contains(p) for p in self.snake.layout(direction)):
                return
            if self._state is GameState.RUNNING:
                self._start(direction)
                return
        self._pending_direction = direction

    def toggle_pause(self) -> None:
        """Switch between running and paused; ignored after game over.

        The switch is immediate. Ticks are the only thing it gates, so the
        next :meth:`advance_tick` sees it either way.
        """
        if self._state is GameState.RUNNING:
            self._state = GameState.PAUSED
        elif self._state is GameState.PAUSED:
            self._state = GameState.RUNNING

    def advance_tick(self) -> None:
        """Advance the game by one tick.

        Moves the snake, then checks food, self-collision and the walls
        in that order. Does nothing unless the game is running.
        """
        if self._state is not GameState.RUNNING:
            return

        if self._pending_direction is not None:
            if self.snake.is_moving:
                self.snake.steer(self._pending_direction)
            else:
                self._start(self._pending_direction)
            self._pending_direction = None

        wrap = self.bounds.wrap if self.wall_mode == WallMode.WRAP else None
        vacated = self.snake.move(wrap=wrap)
        self.tick += 1
        if vacated is None:
            return

        head = self.snake.head.position
        if head == self.food.position:
            self._consume(vacated)
        elif self.snake.self_collision():
            self._end(GameOverReason.SELF)
        elif not self.bounds.contains(head):
            self._end(GameOverReason.WALL)

    # --- rendering helpers ---

    def snapshot(self) -> Snapshot:
        """Return a read-only view of the current frame."""
        food = self.food.position
        return Snapshot(
            snake_segments=[tuple(p) for p in self.snake.positions()],
            food_position=tuple(food) if food is not None else None,
            score=self.score,
            tick_interval=self.tick_interval,
            level=self.level,
            tick=self.tick,
            state=self._state,
            game_over_reason=self.game_over_reason,
        )

    def game_over_message(self) -> str:
        return f"Game Over! Your score is {self.score}"

    def pause_message(self) -> str:
        return "Paused"

    def to_dict(self) -> dict:
        """Return the full, serializable session state."""
        return {
            "tick": self.tick,
            "state": self._state.value,
            "bounds": self.bounds.to_dict(),
            "wall_mode": self.wall_mode.value,
            "snake": self.snake.to_dict(),
            "food": self.food.to_dict(),
            **self.scoreboard.to_dict(),
        }

    def _start(self, direction: Direction) -> None:
        self.snake.start(direction)
        # The straightened body may now cover the food.
        if self.food.position is not None and self.snake.occupies(self.food.position):
            self.food.spawn(self.snake.positions())

    def _consume(self, vacated: Segment) -> None:
        self.food.consume()
        self.snake.grow(vacated)
        self.scoreboard.record_food()
        if self.food.spawn(self.snake.positions()) is None:
            self._end(GameOverReason.BOARD_FULL)

    def _end(self, reason: GameOverReason) -> None:
        self._state = GameState.GAME_OVER
        self.game_over_reason = reason
        self._pending_direction = None
        logger.info(
            "Game over at tick %d with score %d (%s).",
            self.tick, self.score, reason.value,
        )


def new_session(
    bounds: GridBounds,
    starting_length: int = 4,
    starting_position: tuple[int, int] | None = None,
    starting_direction: Direction | None = Direction.RIGHT,
    **kwargs,
) -> GameSession:
    """Create a fresh session; keyword options go to :class:`GameSession`."""
    return GameSession(
        bounds, starting_length, starting_position, starting_direction, **kwargs,
    )


def set_direction(session: GameSession, direction: Direction) -> None:
    session.set_direction(direction)


def toggle_pause(session: GameSession) -> None:
    session.toggle_pause()


def advance_tick(session: GameSession) -> None:
    session.advance_tick()


def is_game_over(session: GameSession) -> bool:
    return session.is_game_over


def state(session: GameSession) -> GameState:
    return session.state


def snapshot(session: GameSession) -> Snapshot:
    return session.snapshot()


def game_over_message(session: GameSession) -> str:
    return session.game_over_message()

