"""Grid geometry for the snake game."""

from __future__ import annotations

import enum
from collections.abc import Iterable
from typing import NamedTuple

import numpy as np


class Position(NamedTuple):
    """A grid cell as signed ``(x, y)`` coordinates."""

    x: int
    y: int


class WallMode(enum.Enum):
    """Defines behavior when the head leaves the playable rectangle."""

    DEATH = "death"
    WRAP = "wrap"


class GridBounds:
    """Inclusive playable rectangle ``[min_x, max_x] × [min_y, max_y]``.

    Coordinates are plain signed integers, so stepping past ``min_x`` or
    ``min_y`` yields an out-of-bounds value instead of wrapping around.
    """

    def __init__(self, min_x: int, max_x: int, min_y: int, max_y: int) -> None:
        if max_x < min_x or max_y < min_y:
            raise ValueError("Grid bounds must not be empty.")
        self.min_x = min_x
        self.max_x = max_x
        self.min_y = min_y
        self.max_y = max_y

    @classmethod
    def of_size(cls, width: int, height: int) -> GridBounds:
        """Bounds for a ``width × height`` grid anchored at the origin."""
        return cls(0, width - 1, 0, height - 1)

    @property
    def width(self) -> int:
        return self.max_x - self.min_x + 1

    @property
    def height(self) -> int:
        return self.max_y - self.min_y + 1

    @property
    def area(self) -> int:
        return self.width * self.height

    @property
    def center(self) -> Position:
        return Position(
            (self.min_x + self.max_x) // 2, (self.min_y + self.max_y) // 2,
        )

    def contains(self, pos: tuple[int, int]) -> bool:
        """Check whether a coordinate lies within the rectangle."""
        x, y = pos
        return self.min_x <= x <= self.max_x and self.min_y <= y <= self.max_y

    def wrap(self, pos: tuple[int, int]) -> Position:
        """Wrap coordinates around the rectangle edges."""
        x, y = pos
        return Position(
            self.min_x + (x - self.min_x) % self.width,
            self.min_y + (y - self.min_y) % self.height,
        )

    def occupancy(self, occupied: Iterable[tuple[int, int]]) -> np.ndarray:
        """Boolean ``(height, width)`` mask with occupied in-bounds cells set."""
        mask = np.zeros((self.height, self.width), dtype=bool)
        for pos in occupied:
            if self.contains(pos):
                mask[pos[1] - self.min_y, pos[0] - self.min_x] = True
        return mask

    def free_cells(self, occupied: Iterable[tuple[int, int]]) -> list[Position]:
        """Return every in-bounds cell not present in *occupied*."""
        rows, cols = np.where(~self.occupancy(occupied))
        return [
            Position(c + self.min_x, r + self.min_y)
            for r, c in zip(rows.tolist(), cols.tolist(), strict=True)
        ]

    def to_dict(self) -> dict:
        """Serialize bounds to a dictionary."""
        return {
            "min_x": self.min_x,
            "max_x": self.max_x,
            "min_y": self.min_y,
            "max_y": self.max_y,
        }

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, GridBounds):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    def __hash__(self) -> int:
        return hash((self.min_x, self.max_x, self.min_y, self.max_y))

    def __repr__(self) -> str:
        return (
            f"GridBounds(min_x={self.min_x}, max_x={self.max_x}, "
            f"min_y={self.min_y}, max_y={self.max_y})"
        )
