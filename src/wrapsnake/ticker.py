# ticker.py
from __future__ import annotations


class TickClock:
    """
    Fixed-rate tick accumulator.

    The front end feeds it the wall-clock time of every frame with add();
    drain() then reports how many whole ticks have elapsed and keeps the
    remainder for the next frame. There is no upper bound: after
    a long stall drain() returns every tick that was missed.
    """

    def __init__(self, tick_rate: int):
        if tick_rate <= 0:
            raise ValueError(f"tick_rate must be positive, got {tick_rate}")
        self.tick_rate = tick_rate
        self.interval_ms = 1000.0 / tick_rate
        self.residual_ms = 0.0

    def add(self, elapsed_ms: float) -> None:
        if elapsed_ms < 0:
            raise ValueError(f"elapsed time cannot be negative, got {elapsed_ms}")
        self.residual_ms += elapsed_ms

    def check(self) -> bool:
        """Consume one tick if one is due."""
        if self.residual_ms >= self.interval_ms:
            self.residual_ms -= self.interval_ms
            return True
        return False

    def drain(self) -> int:
        """Consume and count every due tick."""
        ticks = 0
        while self.check():
            ticks += 1
        return ticks
