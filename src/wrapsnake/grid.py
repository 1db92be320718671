# grid.py
from __future__ import annotations
from dataclasses import dataclass

import numpy as np  # type: ignore

from .direction import Direction


@dataclass(frozen=True)
class GridPosition:
    x: int
    y: int

    def __iter__(self):
        yield self.x
        yield self.y


def normalize(value: int, size: int) -> int:
    """Wrap any integer into [0, size). Python's % is already Euclidean for size > 0."""
    return value % size


def move(pos: GridPosition, direction: Direction, width: int, height: int) -> GridPosition:
    """One cell along `direction`, wrapping around the grid edges."""
    dx, dy = direction.value
    return GridPosition(normalize(pos.x + dx, width), normalize(pos.y + dy, height))


def random_position(rng: np.random.Generator, width: int, height: int) -> GridPosition:
    """
    Uniform over all width * height cells. Cells under the snake are NOT
    excluded; food may spawn beneath the body.
    """
    return GridPosition(int(rng.integers(0, width)), int(rng.integers(0, height)))
