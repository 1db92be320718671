# food.py
from __future__ import annotations
from dataclasses import dataclass

from .grid import GridPosition


@dataclass
class Food:
    pos: GridPosition

    def reposition(self, pos: GridPosition) -> None:
        self.pos = pos
