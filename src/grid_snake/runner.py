"""Asyncio cadence driver for a game session."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from grid_snake.autopilot import GreedyPilot
    from grid_snake.models import Snapshot
    from grid_snake.session import GameSession

logger = logging.getLogger(__name__)


async def run_session(
    session: GameSession,
    *,
    pilot: GreedyPilot | None = None,
    on_tick: Callable[[Snapshot], None] | None = None,
    max_ticks: int | None = None,
    time_scale: float = 1.0,
) -> Snapshot:
    """Tick *session* at its own cadence until the game ends.

    The interval is re-read after every tick, so the loop speeds up as
    the difficulty level rises. *time_scale* multiplies every sleep;
    ``0`` runs as fast as the event loop allows. Paused sessions keep
    sleeping without advancing.

    Returns the final snapshot.
    """
    ticks = 0
    try:
        while not session.is_game_over:
            if max_ticks is not None and ticks >= max_ticks:
                logger.info("Tick limit %d reached.", max_ticks)
                break
            await asyncio.sleep(session.tick_interval * time_scale)
            if pilot is not None:
                direction = pilot.choose(session)
                if direction is not None:
                    session.set_direction(direction)
            session.advance_tick()
            ticks += 1
            if on_tick is not None:
                on_tick(session.snapshot())
    except asyncio.CancelledError:
        logger.info("Tick loop cancelled at tick %d.", session.tick)
        raise
    return session.snapshot()
