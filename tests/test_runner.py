"""Tests for the asyncio cadence driver."""

import asyncio

import numpy as np
import pytest

from grid_snake import runner
from grid_snake.autopilot import GreedyPilot
from grid_snake.grid import GridBounds, Position
from grid_snake.models import GameState
from grid_snake.scoring import ScoreBoard
from grid_snake.session import GameSession


def _session(size=10, **kwargs) -> GameSession:
    session = GameSession(GridBounds.of_size(size, size), seed=0, **kwargs)
    session.food.position = Position(0, size - 1)
    return session


class TestRunSession:
    @pytest.mark.asyncio
    async def test_stops_at_tick_limit(self):
        session = _session(size=20)
        final = await runner.run_session(session, max_ticks=10, time_scale=0)
        assert final.tick == 10
        assert final.state is GameState.RUNNING

    @pytest.mark.asyncio
    async def test_runs_until_game_over(self):
        session = _session()
        frames = []
        final = await runner.run_session(
            session, on_tick=frames.append, time_scale=0,
        )
        assert final.state is GameState.GAME_OVER
        # Head starts at (4, 4) heading right and leaves the board on tick 6.
        assert len(frames) == 6
        assert frames[-1] == final

    @pytest.mark.asyncio
    async def test_interval_reread_every_tick(self, monkeypatch):
        delays = []

        async def fake_sleep(delay):
            delays.append(delay)

        monkeypatch.setattr(runner.asyncio, "sleep", fake_sleep)
        session = _session(scoreboard=ScoreBoard(score_per_food=500))
        session.food.position = Position(5, 4)
        await runner.run_session(session, max_ticks=2)
        assert delays == [pytest.approx(0.16), pytest.approx(0.14)]

    @pytest.mark.asyncio
    async def test_paused_session_does_not_advance(self):
        session = _session()
        session.toggle_pause()
        final = await runner.run_session(session, max_ticks=5, time_scale=0)
        assert final.tick == 0
        assert final.state is GameState.PAUSED

    @pytest.mark.asyncio
    async def test_pilot_steers(self):
        session = _session(size=12)
        pilot = GreedyPilot(np.random.default_rng(0))
        final = await runner.run_session(
            session, pilot=pilot, max_ticks=100, time_scale=0,
        )
        assert final.score >= 100

    @pytest.mark.asyncio
    async def test_cancellation_propagates(self):
        session = _session()
        task = asyncio.create_task(runner.run_session(session, time_scale=10))
        await asyncio.sleep(0)
        task.cancel()
        with pytest.raises(asyncio.CancelledError):
            await task
        assert session.tick == 0
