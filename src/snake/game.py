# game.py
from __future__ import annotations

import enum
import logging
import random
from dataclasses import dataclass
from typing import Iterable, List, Optional, Tuple

import numpy as np  # type: ignore

from . import config
from .config import CFG, Config

logger = logging.getLogger(__name__)

Cell = Tuple[int, int]

# Cell codes used by GameSnapshot.to_grid()
EMPTY, BODY, HEAD, FOOD = 0, 1, 2, 3
_GLYPHS = np.array([".", "o", "H", "*"])


# ---------- Errors ----------
class SnakeError(Exception):
    """Base class for errors raised by the snake core."""


class BoardFullError(SnakeError):
    """Raised when food has to be placed but the snake covers every cell."""


# ---------- Enums ----------
class Direction(enum.Enum):
    UP = config.UP
    DOWN = config.DOWN
    LEFT = config.LEFT
    RIGHT = config.RIGHT

    @property
    def dx(self) -> int:
        return self.value[0]

    @property
    def dy(self) -> int:
        return self.value[1]

    @property
    def opposite(self) -> "Direction":
        return Direction((-self.dx, -self.dy))


class Phase(enum.Enum):
    RUNNING = "running"
    PAUSED = "paused"
    OVER = "over"


class GameOverReason(enum.Enum):
    SELF = "self"
    WALL = "wall"
    TIMEOUT = "timeout"


# ---------- Helpers ----------
def in_bounds(cell: Cell, width: int, height: int) -> bool:
    x, y = cell
    return 0 <= x < width and 0 <= y < height


def spawn_food(occupied: Iterable[Cell], width: int, height: int, rng: random.Random) -> Cell:
    """
    Pick a uniformly random free cell by rejection sampling.
    Raises BoardFullError instead of spinning forever when nothing is free.
    """
    taken = set(occupied)
    if len(taken) >= width * height:
        raise BoardFullError(f"no free cell left on a {width}x{height} board")
    while True:
        fx = rng.randrange(width)
        fy = rng.randrange(height)
        if (fx, fy) not in taken:
            return (fx, fy)


# ---------- Snapshot ----------
@dataclass(frozen=True)
class GameSnapshot:
    """Immutable copy of everything a renderer needs for one frame."""
    grid_width: int
    grid_height: int
    head: Cell
    body: Tuple[Cell, ...]     # index 0 is next to the head
    food: Cell
    velocity: Direction
    phase: Phase
    score: int
    highest_score: int
    time_left: int
    game_over_reason: Optional[GameOverReason] = None

    def cells(self) -> Tuple[Cell, ...]:
        """Snake cells, head first."""
        return (self.head,) + self.body

    def to_grid(self) -> np.ndarray:
        """Board as an int8 array indexed [y, x] holding EMPTY/BODY/HEAD/FOOD."""
        grid = np.full((self.grid_height, self.grid_width), EMPTY, dtype=np.int8)
        fx, fy = self.food
        grid[fy, fx] = FOOD
        for x, y in self.body:
            grid[y, x] = BODY
        hx, hy = self.head
        grid[hy, hx] = HEAD
        return grid

    def render_text(self) -> str:
        rows = _GLYPHS[self.to_grid()]
        return "\n".join("".join(row) for row in rows)


# ---------- State ----------
class GameState:
    """
    Single-player snake on a fixed grid with a countdown.

    The owner drives it with two independent clocks: tick() on the
    simulation interval and countdown_tick() once per second. Everything
    else is a command from the input layer. Renderers should read
    snapshot() rather than the live object.
    """

    def __init__(
        self,
        grid_width: int = config.GRID_W,
        grid_height: int = config.GRID_H,
        *,
        cfg: Config = CFG,
        rng: Optional[random.Random] = None,
    ):
        if grid_width <= 0 or grid_height <= 0:
            raise ValueError(f"grid must be positive, got {grid_width}x{grid_height}")
        if not in_bounds(cfg.start_cell, grid_width, grid_height):
            raise ValueError(f"start cell {cfg.start_cell} is off the {grid_width}x{grid_height} grid")
        if cfg.time_limit_s <= 0:
            raise ValueError("time_limit_s must be positive")

        self.cfg = cfg
        self.rng = rng or random.Random(cfg.seed)
        self._width = grid_width
        self._height = grid_height
        self._highest_score = 0

        self._head: Cell = cfg.start_cell
        self._body: List[Cell] = []
        self._food: Cell = cfg.start_cell
        self._velocity = Direction.RIGHT
        self._phase = Phase.RUNNING
        self._reason: Optional[GameOverReason] = None
        self._score = 0
        self._time_left = cfg.time_limit_s
        self._reset()

    # ---------- Read-only accessors ----------
    @property
    def grid_width(self) -> int:
        return self._width

    @property
    def grid_height(self) -> int:
        return self._height

    @property
    def head(self) -> Cell:
        return self._head

    @property
    def body(self) -> Tuple[Cell, ...]:
        return tuple(self._body)

    @property
    def food(self) -> Cell:
        return self._food

    @property
    def velocity(self) -> Direction:
        return self._velocity

    @property
    def phase(self) -> Phase:
        return self._phase

    @property
    def score(self) -> int:
        return self._score

    @property
    def highest_score(self) -> int:
        return self._highest_score

    @property
    def time_left(self) -> int:
        return self._time_left

    @property
    def game_over_reason(self) -> Optional[GameOverReason]:
        return self._reason

    def occupied(self) -> List[Cell]:
        return [self._head] + self._body

    def snapshot(self) -> GameSnapshot:
        return GameSnapshot(
            grid_width=self._width,
            grid_height=self._height,
            head=self._head,
            body=tuple(self._body),
            food=self._food,
            velocity=self._velocity,
            phase=self._phase,
            score=self._score,
            highest_score=self._highest_score,
            time_left=self._time_left,
            game_over_reason=self._reason,
        )

    # ---------- Commands ----------
    def tick(self) -> None:
        """Advance the snake by one cell. Does nothing unless running."""
        if self._phase is not Phase.RUNNING:
            return

        hx, hy = self._head
        new_head = (hx + self._velocity.dx, hy + self._velocity.dy)

        # Terminal checks see the pre-move body, before anything mutates.
        if new_head in self._body:
            self._end(GameOverReason.SELF)
            return
        if not in_bounds(new_head, self._width, self._height):
            self._end(GameOverReason.WALL)
            return

        ate = new_head == self._food
        if ate and len(self._body) + 2 >= self._width * self._height:
            # Growing would leave no cell for the next food.
            raise BoardFullError(f"no free cell left on a {self._width}x{self._height} board")
        if ate:
            self._body.append(self._body[-1] if self._body else self._head)
            self._score += 1
            if self._score > self._highest_score:
                self._highest_score = self._score
                logger.info("New highest score: %d", self._highest_score)

        if self._body:
            self._body = [self._head] + self._body[:-1]
        self._head = new_head

        if ate:
            self.place_food()

    def countdown_tick(self) -> None:
        """Take one second off the clock while running."""
        if self._phase is not Phase.RUNNING:
            return
        self._time_left -= 1
        if self._time_left <= 0:
            self._end(GameOverReason.TIMEOUT)

    def set_direction(self, direction: Direction) -> None:
        """Steer for the next tick. Direct reversals are ignored."""
        if not isinstance(direction, Direction):
            raise TypeError(f"expected Direction, got {type(direction).__name__}")
        if direction is self._velocity.opposite:
            return
        if direction is not self._velocity:
            logger.debug("Direction %s -> %s", self._velocity.name, direction.name)
        self._velocity = direction

    def toggle_pause(self) -> None:
        if self._phase is Phase.RUNNING:
            self._phase = Phase.PAUSED
        elif self._phase is Phase.PAUSED:
            self._phase = Phase.RUNNING
        else:
            return
        logger.info("Game %s", self._phase.value)

    def restart(self) -> None:
        self._reset()
        logger.info("Game restarted (highest score %d)", self._highest_score)

    def place_food(self, cell: Optional[Cell] = None) -> Cell:
        """
        Move the food to `cell`, or to a random free cell when omitted.
        An explicit cell must be on the grid and off the snake.
        """
        occupied = self.occupied()
        if cell is None:
            cell = spawn_food(occupied, self._width, self._height, self.rng)
        else:
            cell = (int(cell[0]), int(cell[1]))
            if not in_bounds(cell, self._width, self._height):
                raise ValueError(f"food cell {cell} is off the grid")
            if cell in occupied:
                raise ValueError(f"food cell {cell} is occupied by the snake")
        self._food = cell
        logger.debug("Food placed at %s", cell)
        return cell

    # ---------- Internals ----------
    def _reset(self) -> None:
        self._head = self.cfg.start_cell
        self._body = []
        self._score = 0
        self._time_left = self.cfg.time_limit_s
        self._velocity = Direction.RIGHT
        self._phase = Phase.RUNNING
        self._reason = None
        self.place_food()

    def _end(self, reason: GameOverReason) -> None:
        self._phase = Phase.OVER
        self._reason = reason
        logger.info("Game over (%s), score %d", reason.value, self._score)
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("Final board:\n%s", self.snapshot().render_text())
