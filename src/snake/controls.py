# controls.py
from typing import Dict, Optional

import pygame  # type: ignore

from .game import Direction, GameState, Phase

KEY_DIRECTIONS: Dict[int, Direction] = {
    pygame.K_UP: Direction.UP,
    pygame.K_DOWN: Direction.DOWN,
    pygame.K_LEFT: Direction.LEFT,
    pygame.K_RIGHT: Direction.RIGHT,
}

PAUSE, RESTART, STEER = "pause", "restart", "steer"


def dispatch_key(state: GameState, key: int) -> Optional[str]:
    """
    Apply the command bound to a pygame key code.
    Returns the action taken (STEER / PAUSE / RESTART) or None if ignored.
    R only restarts once the game is over; the restart button covers the rest.
    """
    if key in KEY_DIRECTIONS:
        state.set_direction(KEY_DIRECTIONS[key])
        return STEER
    if key == pygame.K_p:
        state.toggle_pause()
        return PAUSE
    if key == pygame.K_r and state.phase is Phase.OVER:
        state.restart()
        return RESTART
    return None
