# direction.py
from __future__ import annotations
from enum import Enum
from typing import Optional


class Direction(Enum):
    # (dx, dy) in screen coordinates: y grows downwards
    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    def inverse(self) -> "Direction":
        return _INVERSE[self]

    @classmethod
    def from_input(cls, key) -> Optional["Direction"]:
        """
        Map a raw key to a Direction.

        Accepts the arrow-key names reported by `pygame.key.name` ("up",
        "down", "left", "right", any case). Anything else yields None and is
        meant to be ignored by the caller.
        """
        if not isinstance(key, str):
            return None
        return KEY_NAMES.get(key.strip().lower())


_INVERSE = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}

KEY_NAMES = {
    "up": Direction.UP,
    "down": Direction.DOWN,
    "left": Direction.LEFT,
    "right": Direction.RIGHT,
}
