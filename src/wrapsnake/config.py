from dataclasses import dataclass
from typing import Optional, Tuple

# ----- Colors -----
BG         = (0, 0, 0)
BODY_COLOR = (77, 77, 0)
HEAD_COLOR = (255, 128, 0)
FOOD_COLOR = (0, 0, 255)
TEXT       = (220, 220, 230)

# ----- Tunables -----
@dataclass
class Config:
    """
    Settings of one game session.

      width      - grid columns
      height     - grid rows
      tick_rate  - logical updates per second, independent of the frame rate
      cell_size  - pixels per grid cell (rendering only)
      render_fps - frame cap of the pygame front end
      seed       - fixed RNG seed; None draws one from the OS entropy source
    """
    width: int = 40
    height: int = 30
    tick_rate: int = 8
    cell_size: int = 42
    render_fps: int = 60
    seed: Optional[int] = None

    def __post_init__(self):
        if self.width < 2 or self.height < 2:
            raise ValueError(f"grid must be at least 2x2, got {self.width}x{self.height}")
        if self.tick_rate <= 0:
            raise ValueError(f"tick_rate must be positive, got {self.tick_rate}")
        if self.cell_size <= 0:
            raise ValueError(f"cell_size must be positive, got {self.cell_size}")
        if self.render_fps <= 0:
            raise ValueError(f"render_fps must be positive, got {self.render_fps}")

    @property
    def screen_size(self) -> Tuple[int, int]:
        return self.width * self.cell_size, self.height * self.cell_size

CFG = Config()
