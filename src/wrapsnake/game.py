# game.py
from __future__ import annotations
from dataclasses import dataclass
from typing import Optional, Tuple
import logging
import os

import numpy as np  # type: ignore

from .config import CFG, Config
from .direction import Direction
from .food import Food
from .grid import GridPosition, random_position
from .snake import Ate, Snake

logger = logging.getLogger(__name__)

# Cell codes of Snapshot.grid()
EMPTY, BODY, HEAD, FOOD = 0, 1, 2, 3


class SeedError(RuntimeError):
    """The OS entropy source could not provide a seed."""


def entropy_seed() -> int:
    """64-bit seed from the OS. Failing here is fatal; there is no fixed fallback."""
    try:
        raw = os.urandom(8)
    except (NotImplementedError, OSError) as e:
        raise SeedError("Could not create RNG seed") from e
    return int.from_bytes(raw, "little")


# ---------- Render query ----------
@dataclass(frozen=True)
class Snapshot:
    """Read-only view of the game for the renderer."""
    head: GridPosition
    body: Tuple[GridPosition, ...]   # front (next to head) first, tail last
    food: GridPosition
    gameover: bool
    score: int
    width: int
    height: int

    def grid(self) -> np.ndarray:
        """Occupancy array of shape (height, width), indexed [y, x]."""
        cells = np.full((self.height, self.width), EMPTY, dtype=np.int8)
        cells[self.food.y, self.food.x] = FOOD
        for pos in self.body:
            cells[pos.y, pos.x] = BODY
        cells[self.head.y, self.head.x] = HEAD
        return cells


# ---------- State ----------
class GameState:
    """
    One game session: a snake, a piece of food, the game-over flag and the RNG.

    The outside world talks to it through three calls only:
      advance(steps)          - run due simulation ticks
      on_direction_input(key) - a key-press, between ticks
      snapshot()              - what to draw
    """

    def __init__(self, config: Config = CFG, rng: Optional[np.random.Generator] = None):
        self.config = config
        if rng is None:
            seed = config.seed if config.seed is not None else entropy_seed()
            logger.debug("Seeding RNG with %d", seed)
            rng = np.random.default_rng(seed)
        self.rng = rng

        w, h = config.width, config.height
        self.snake = Snake(GridPosition(w // 4, h // 2), w, h)
        self.food = Food(random_position(self.rng, w, h))
        self.gameover = False
        self.score = 0
        self.ticks = 0

    # ---------- Tick drive ----------
    def step(self) -> Optional[Ate]:
        """One simulation tick. Does nothing once the game is over."""
        if self.gameover:
            return None

        ate = self.snake.update(self.food)
        self.ticks += 1

        if ate is Ate.FOOD:
            self.score += 1
            self.food.reposition(random_position(self.rng, self.config.width, self.config.height))
            logger.debug("Food eaten at tick %d, new food at %s", self.ticks, self.food.pos)
        elif ate is Ate.ITSELF:
            self.gameover = True
            logger.info("Game over after %d ticks, score %d", self.ticks, self.score)
        return ate

    def advance(self, steps: int = 1) -> int:
        """Run `steps` ticks back to back. Returns how many were actually simulated."""
        if steps < 0:
            raise ValueError(f"steps cannot be negative, got {steps}")
        done = 0
        for _ in range(steps):
            if self.gameover:
                break
            self.step()
            done += 1
        return done

    # ---------- Input ----------
    def on_direction_input(self, key) -> bool:
        """Map a raw key and hand it to the snake. False if unknown or refused."""
        direction = Direction.from_input(key)
        if direction is None:
            return False
        return self.snake.steer(direction)

    # ---------- Render query ----------
    def snapshot(self) -> Snapshot:
        return Snapshot(
            head=self.snake.head.pos,
            body=tuple(seg.pos for seg in self.snake.body),
            food=self.food.pos,
            gameover=self.gameover,
            score=self.score,
            width=self.config.width,
            height=self.config.height,
        )
