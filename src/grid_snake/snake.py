"""Snake representation and movement logic."""

from __future__ import annotations

import enum
from collections.abc import Callable
from dataclasses import dataclass

from grid_snake.grid import Position


class Direction(enum.Enum):
    """Cardinal movement directions with (dx, dy) values.

    ``y`` grows downward, matching terminal and screen coordinates.
    """

    LEFT = (-1, 0)
    RIGHT = (1, 0)
    UP = (0, -1)
    DOWN = (0, 1)

    @property
    def opposite(self) -> Direction:
        dx, dy = self.value
        return Direction((-dx, -dy))

    @classmethod
    def parse(cls, name: str) -> Direction:
        """Look up a direction by case-insensitive name."""
        try:
            return cls[name.upper()]
        except KeyError:
            raise ValueError(f"Unknown direction {name!r}.") from None


STILL = (0, 0)


def _layout(
    head: tuple[int, int], direction: Direction, length: int,
) -> list[Position]:
    dx, dy = direction.value
    x, y = head
    return [Position(x - dx * i, y - dy * i) for i in range(length)]


@dataclass
class Segment:
    """One body cell: where it is and which way it moves next tick."""

    position: Position
    direction: Direction | None = None

    @property
    def velocity(self) -> tuple[int, int]:
        return self.direction.value if self.direction is not None else STILL

    def stepped(self) -> Position:
        dx, dy = self.velocity
        return Position(self.position.x + dx, self.position.y + dy)


class Snake:
    """A snake represented as an ordered list of segments.

    The head is ``segments[0]``. Every trailing segment's direction points
    at the cell its predecessor occupied, so moving all segments at once
    makes the body retrace the head's path.
    """

    def __init__(
        self,
        start: tuple[int, int],
        direction: Direction | None = Direction.RIGHT,
        length: int = 4,
    ) -> None:
        if length < 1:
            raise ValueError("Snake length must be at least 1.")
        # A still snake is laid out as if it were facing right.
        cells = _layout(start, direction or Direction.RIGHT, length)
        self.segments: list[Segment] = [Segment(p, direction) for p in cells]

    def __len__(self) -> int:
        return len(self.segments)

    @property
    def head(self) -> Segment:
        return self.segments[0]

    @property
    def tail(self) -> list[Segment]:
        return self.segments[1:]

    @property
    def direction(self) -> Direction | None:
        """Direction of the head, ``None`` before motion starts."""
        return self.head.direction

    @property
    def velocity(self) -> tuple[int, int]:
        return self.head.velocity

    @property
    def is_moving(self) -> bool:
        return self.head.direction is not None

    def positions(self) -> list[Position]:
        """Segment positions, head first."""
        return [seg.position for seg in self.segments]

    def accepts(self, direction: Direction) -> bool:
        """Whether *direction* is a legal turn for the head.

        Any direction starts a still snake; otherwise only 180° reversals
        are refused.
        """
        if not self.is_moving:
            return True
        return direction is not self.direction.opposite

    def layout(self, direction: Direction) -> list[Position]:
        """Cells the body would cover if straightened behind the head."""
        return _layout(self.head.position, direction, len(self))

    def start(self, direction: Direction) -> None:
        """Straighten the body behind the head and set it moving.

        Trailing segments are re-laid opposite *direction* so each one
        points at its predecessor.
        """
        self.segments = [Segment(p, direction) for p in self.layout(direction)]

    def steer(self, direction: Direction) -> None:
        """Point the head in *direction* for the next move."""
        self.head.direction = direction

    def move(
        self, wrap: Callable[[Position], Position] | None = None,
    ) -> Segment | None:
        """Move every segment one cell.

        Each segment moves by its own direction and then takes over the
        direction its predecessor held before this move. *wrap*, when
        given, maps each new position back onto the board.

        Returns a copy of the tail segment as it was before the move, or
        ``None`` if the snake is still.
        """
        if not self.is_moving:
            return None
        last = self.segments[-1]
        vacated = Segment(last.position, last.direction)
        previous: Direction | None = None
        for i, seg in enumerate(self.segments):
            old = seg.direction
            new_pos = seg.stepped()
            seg.position = wrap(new_pos) if wrap is not None else new_pos
            if i > 0:
                seg.direction = previous
            previous = old
        return vacated

    def grow(self, vacated: Segment) -> None:
        """Append a segment where the tail was before the last move."""
        self.segments.append(Segment(vacated.position, vacated.direction))

    def occupies(self, pos: tuple[int, int]) -> bool:
        """Check whether any segment sits on *pos*."""
        return any(seg.position == pos for seg in self.segments)

    def self_collision(self) -> bool:
        """Check whether the head overlaps any tail segment."""
        head = self.head.position
        return any(seg.position == head for seg in self.tail)

    def to_dict(self) -> dict:
        """Serialize snake state to a dictionary."""
        return {
            "segments": [list(seg.position) for seg in self.segments],
            "velocity": list(self.velocity),
        }
