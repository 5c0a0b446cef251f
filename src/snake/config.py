from dataclasses import dataclass
from typing import Tuple

# ----- Window & grid -----
WIDTH, HEIGHT = 500, 500
TILE_SIZE = 25
GRID_W, GRID_H = WIDTH // TILE_SIZE, HEIGHT // TILE_SIZE

# ----- Colors -----
BG       = (30, 30, 30)
GRID     = (50, 50, 50)
HEAD     = (0, 255, 0)
BODY     = (255, 255, 0)
FOOD     = (255, 0, 0)
TEXT     = (255, 255, 255)
ALERT    = (255, 0, 0)
NOTICE   = (255, 255, 0)
PAUSE_BTN   = (0, 255, 255)
RESTART_BTN = (255, 255, 0)
BTN_TEXT    = (20, 20, 24)

# ----- Directions (dx, dy) -----
UP, DOWN, LEFT, RIGHT = (0, -1), (0, 1), (-1, 0), (1, 0)

# ----- Tunables -----
@dataclass
class Config:
    seed: int = 0
    tick_ms: int = 100          # simulation step interval
    countdown_ms: int = 1000    # time-limit decrement interval
    time_limit_s: int = 60
    start_cell: Tuple[int, int] = (5, 5)
    fps: int = 60

CFG = Config(seed=0)
