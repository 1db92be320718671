"""Snake on a wrapping grid: a fixed-tick game core plus a pygame front end."""

from .config import Config
from .direction import Direction
from .game import GameState, SeedError, Snapshot
from .grid import GridPosition
from .snake import Ate, Snake
from .ticker import TickClock

__all__ = [
    "Ate",
    "Config",
    "Direction",
    "GameState",
    "GridPosition",
    "SeedError",
    "Snake",
    "Snapshot",
    "TickClock",
]
