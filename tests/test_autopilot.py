"""Tests for the greedy autopilot."""

import numpy as np

from grid_snake.autopilot import GreedyPilot, manhattan
from grid_snake.grid import GridBounds, Position, WallMode
from grid_snake.session import GameSession
from grid_snake.snake import Direction

BOUNDS = GridBounds.of_size(10, 10)


def _session(start, direction=Direction.RIGHT, length=3, food=(0, 0), **kwargs):
    session = GameSession(BOUNDS, length, start, direction, seed=0, **kwargs)
    session.food.position = Position(*food)
    return session


class TestManhattan:
    def test_distance(self):
        assert manhattan((0, 0), (3, 4)) == 7
        assert manhattan((2, 2), (2, 2)) == 0


class TestGreedyPilot:
    def test_heads_toward_food(self):
        pilot = GreedyPilot(np.random.default_rng(0))
        session = _session((5, 5), food=(5, 2))
        assert pilot.choose(session) is Direction.UP

    def test_never_reverses(self):
        pilot = GreedyPilot(np.random.default_rng(0))
        session = _session((5, 5), food=(1, 5))
        assert pilot.choose(session) is not Direction.LEFT

    def test_avoids_wall(self):
        pilot = GreedyPilot(np.random.default_rng(0))
        session = _session((9, 5), food=(9, 0))
        assert pilot.choose(session) is Direction.UP

    def test_wrap_mode_crosses_edge(self):
        pilot = GreedyPilot(np.random.default_rng(0))
        session = _session((9, 5), food=(0, 5), wall_mode=WallMode.WRAP)
        assert pilot.choose(session) is Direction.RIGHT

    def test_avoids_body(self):
        pilot = GreedyPilot(np.random.default_rng(0))
        session = _session((5, 5), length=5, food=(4, 0))
        # Hook the body so the cell above the head is occupied.
        for turn in (Direction.DOWN, Direction.LEFT):
            session.set_direction(turn)
            session.advance_tick()
        assert session.snake.head.position == (4, 6)
        assert session.snake.occupies((4, 5))
        assert pilot.choose(session) in (Direction.LEFT, Direction.DOWN)

    def test_plays_full_games(self):
        pilot = GreedyPilot(np.random.default_rng(1))
        for seed in range(5):
            session = GameSession(BOUNDS, seed=seed)
            while not session.is_game_over and session.tick < 300:
                session.set_direction(pilot.choose(session))
                session.advance_tick()
            assert session.score % 100 == 0
            assert session.score > 0
