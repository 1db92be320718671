# snake.py
from __future__ import annotations
from collections import deque
from dataclasses import dataclass
from enum import Enum
from typing import Deque, Iterable, List, Optional

from .direction import Direction
from .food import Food
from .grid import GridPosition, move, normalize


@dataclass(frozen=True)
class Segment:
    """One cell of the snake. Only a position for now; room for per-segment data later."""
    pos: GridPosition


class Ate(Enum):
    """What the head ran into on the last tick (None on Snake.ate means nothing)."""
    ITSELF = "itself"
    FOOD = "food"


class Snake:
    """
    Snake on a wrapped width x height grid.

    Attributes:
        head: current head segment (never part of `body`)
        body: deque of segments, front = cell the head just left, back = tail
        dir: direction used by the next update()
        last_update_dir: direction applied by the last completed update()
        next_dir: one buffered turn, applied on the tick after `dir` takes effect
        ate: outcome of the last update()
    """

    def __init__(
        self,
        pos: GridPosition,
        width: int,
        height: int,
        body: Optional[Iterable[GridPosition]] = None,
        direction: Direction = Direction.RIGHT,
    ):
        self.width = width
        self.height = height
        self.head = Segment(pos)
        if body is None:
            # single tail segment right behind the head
            body = [GridPosition(normalize(pos.x - 1, width), pos.y)]
        self.body: Deque[Segment] = deque(Segment(p) for p in body)
        self.dir = direction
        self.last_update_dir = direction
        self.next_dir: Optional[Direction] = None
        self.ate: Optional[Ate] = None

    def __len__(self) -> int:
        return len(self.body) + 1

    def positions(self) -> List[GridPosition]:
        """Head first, then body front to tail."""
        return [self.head.pos] + [seg.pos for seg in self.body]

    def eats(self, food: Food) -> bool:
        return self.head.pos == food.pos

    def eats_self(self) -> bool:
        return any(seg.pos == self.head.pos for seg in self.body)

    def steer(self, direction: Direction) -> bool:
        """
        Apply a key-press between ticks. Returns False if it was discarded.

        If a turn is already staged in `dir` for the coming tick, the new one
        is buffered in `next_dir` instead (unless it reverses the staged turn).
        Otherwise it replaces `dir` unless it reverses the last applied move.
        """
        if self.dir != self.last_update_dir and direction != self.dir.inverse():
            self.next_dir = direction
            return True
        if direction != self.last_update_dir.inverse():
            self.dir = direction
            return True
        return False

    def update(self, food: Food) -> Optional[Ate]:
        """Advance one cell, then record what the new head hit in `ate`."""
        # The buffered turn only takes once the previous turn has been applied
        if self.last_update_dir == self.dir and self.next_dir is not None:
            self.dir = self.next_dir
            self.next_dir = None

        new_head = Segment(move(self.head.pos, self.dir, self.width, self.height))
        self.body.appendleft(self.head)
        self.head = new_head

        # Body is checked before the tail moves away, so the tail cell still blocks
        if self.eats_self():
            self.ate = Ate.ITSELF
        elif self.eats(food):
            self.ate = Ate.FOOD
        else:
            self.ate = None

        # Growing is just not dropping the tail
        if self.ate is None:
            self.body.pop()

        self.last_update_dir = self.dir
        return self.ate
