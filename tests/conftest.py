import random

import pytest

from snake.game import GameState

# Far corner, off every path the tests drive the snake along.
PARK = (19, 19)


@pytest.fixture
def park():
    return PARK


@pytest.fixture
def state():
    """20x20 board, head at (5, 5) heading right, food parked out of the way."""
    game = GameState(20, 20, rng=random.Random(1234))
    game.place_food(PARK)
    return game


@pytest.fixture
def feed():
    """Return a helper that puts food right ahead of the head and eats it."""
    def _feed(game, times=1):
        for _ in range(times):
            hx, hy = game.head
            game.place_food((hx + game.velocity.dx, hy + game.velocity.dy))
            game.tick()
            if PARK not in game.occupied():
                game.place_food(PARK)
    return _feed
