# src/snake/__init__.py
"""Timed single-player snake: game core, scheduler and pygame driver."""

from .game import (
    BoardFullError,
    Direction,
    GameOverReason,
    GameSnapshot,
    GameState,
    Phase,
    SnakeError,
)
from .scheduler import Scheduler

__all__ = [
    "BoardFullError",
    "Direction",
    "GameOverReason",
    "GameSnapshot",
    "GameState",
    "Phase",
    "Scheduler",
    "SnakeError",
]
