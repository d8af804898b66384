import os
import random

import pytest

# Renderer tests draw off-screen; never open a real window.
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

from snake.config import Direction  # noqa: E402
from snake.game import GameState  # noqa: E402


@pytest.fixture
def make_state():
    """Build a GameState with an explicit snake/food instead of the seeded start."""

    def _make(snake, direction=Direction.RIGHT, food=(0, 0), grid_size=20, seed=0, score=0):
        return GameState(
            grid_size=grid_size,
            initial_length=len(snake),
            snake=list(snake),
            direction=direction,
            food=food,
            score=score,
            rng=random.Random(seed),
        )

    return _make
