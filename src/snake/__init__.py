"""Grid snake: headless game state, a timer-driven loop, and a pygame renderer."""

from .config import ConfigError, Direction, GameConfig
from .game import (
    GameState,
    GridFullError,
    TickOutcome,
    advance_one_tick,
    new_game_state,
    place_food,
    request_direction_change,
)
from .loop import GameLoop, Phase, TickTimer

__all__ = [
    "ConfigError", "Direction", "GameConfig",
    "GameState", "GridFullError", "TickOutcome",
    "advance_one_tick", "new_game_state", "place_food", "request_direction_change",
    "GameLoop", "Phase", "TickTimer",
]
