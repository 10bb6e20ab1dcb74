"""Startup configuration: defaults and the validated bundle built from them."""
from __future__ import annotations

from dataclasses import dataclass

# --- Configuration ---
WINDOW_WIDTH = 500.0
WINDOW_HEIGHT = 500.0
WINDOW_TITLE = "move towards!"
FPS = 60

GRID_SIZE = 50.0
CELL_X_COUNT = 10
CELL_Y_COUNT = 10

PLAYER_SPEED = 100.0
PLAYER_COLOR = (178, 178, 178)
PLAYER_SIZE = (GRID_SIZE, GRID_SIZE, 10.0)

# Colors
BG_COLOR = (0, 0, 0)
GRID_COLOR = (255, 255, 255)
HUD_COLOR = (200, 200, 220)


@dataclass(frozen=True)
class GameConfig:
    window_width: float = WINDOW_WIDTH
    window_height: float = WINDOW_HEIGHT
    cell_size: float = GRID_SIZE
    cells_x: int = CELL_X_COUNT
    cells_y: int = CELL_Y_COUNT
    speed: float = PLAYER_SPEED
    player_color: tuple[int, int, int] = PLAYER_COLOR
    player_size: tuple[float, float, float] = PLAYER_SIZE
    fps: int = FPS

    def __post_init__(self) -> None:
        if self.window_width <= 0 or self.window_height <= 0:
            raise ValueError("window dimensions must be positive")
        if self.cells_x <= 0 or self.cells_y <= 0:
            raise ValueError("cell counts must be positive")
        if self.cell_size <= 0:
            raise ValueError("cell_size must be positive")
        if self.speed <= 0:
            raise ValueError("speed must be positive")
        if self.fps <= 0:
            raise ValueError("fps must be positive")
