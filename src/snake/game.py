# game.py
from collections import deque
from dataclasses import dataclass, field
from enum import Enum
from typing import Deque, List, Optional, Tuple
import logging
import random

import numpy as np  # type: ignore

from .config import Direction, GameConfig

logger = logging.getLogger(__name__)

Cell = Tuple[int, int]

# ----- Occupancy codes (see occupancy_grid) -----
EMPTY, BODY, HEAD, FOOD = 0, 1, 2, 3


class GridFullError(RuntimeError):
    """Raised when food has to be placed on a grid with no free cell."""


class TickOutcome(Enum):
    MOVED = "moved"
    ATE = "ate"
    HIT_WALL = "hit_wall"
    HIT_SELF = "hit_self"
    GRID_FULL = "grid_full"

    @property
    def is_terminal(self) -> bool:
        return self in (TickOutcome.HIT_WALL, TickOutcome.HIT_SELF, TickOutcome.GRID_FULL)


# ---------- Helpers ----------
def is_opposite(a: Direction, b: Direction) -> bool:
    return a.opposite is b


def in_bounds(cell: Cell, grid_size: int) -> bool:
    x, y = cell
    return 0 <= x < grid_size and 0 <= y < grid_size


def initial_snake(grid_size: int, length: int) -> List[Cell]:
    """Horizontal snake on the middle row, head at the middle cell, facing RIGHT."""
    mid = grid_size // 2
    return [(mid - i, mid) for i in range(length)]


# ---------- State ----------
@dataclass
class GameState:
    grid_size: int
    initial_length: int
    snake: List[Cell] = field(default_factory=list)   # head at index 0
    direction: Direction = Direction.RIGHT
    pending: Deque[Direction] = field(default_factory=deque)
    food: Optional[Cell] = None
    score: int = 0
    rng: random.Random = field(default_factory=random.Random, repr=False, compare=False)

    @property
    def head(self) -> Cell:
        return self.snake[0]

    @property
    def capacity(self) -> int:
        return self.grid_size * self.grid_size


def new_game_state(cfg: GameConfig, rng: Optional[random.Random] = None) -> GameState:
    state = GameState(
        grid_size=cfg.grid_size,
        initial_length=cfg.initial_snake_length,
        rng=rng if rng is not None else random.Random(cfg.seed),
    )
    reset_game_state(state)
    return state


def reset_game_state(state: GameState) -> None:
    """Re-seed snake, direction, queue, score and food in place."""
    state.snake = initial_snake(state.grid_size, state.initial_length)
    state.direction = Direction.RIGHT
    state.pending.clear()
    state.score = 0
    place_food(state)


# ---------- Food ----------
def place_food(state: GameState) -> Cell:
    """
    Put food on a uniformly random cell not covered by the snake.
    Rejection-samples; raises GridFullError rather than spinning forever
    when the snake covers the whole grid.
    """
    occupied = set(state.snake)
    if len(occupied) >= state.capacity:
        raise GridFullError(
            f"no free cell on a {state.grid_size}x{state.grid_size} grid"
        )
    while True:
        cell = (state.rng.randrange(state.grid_size), state.rng.randrange(state.grid_size))
        if cell not in occupied:
            state.food = cell
            logger.debug("food placed at %s", cell)
            return cell


# ---------- Input ----------
def request_direction_change(state: GameState, direction: Direction) -> bool:
    """
    Queue a turn for a later tick. Rejected when it matches the current
    direction, reverses it, or repeats the last queued turn.
    """
    if direction is state.direction or is_opposite(direction, state.direction):
        logger.debug("turn %s rejected while heading %s", direction.name, state.direction.name)
        return False
    if state.pending and state.pending[-1] is direction:
        return False
    state.pending.append(direction)
    return True


# ---------- Update ----------
def advance_one_tick(state: GameState) -> TickOutcome:
    """
    Advance the snake by one cell.

    At most one queued turn is consumed per tick. Collisions are checked
    wall first, then against the whole pre-move body (the tail cell that is
    about to be vacated counts). A terminal tick leaves snake, score and
    food as they were.
    """
    if state.pending:
        turn = state.pending.popleft()
        if not is_opposite(turn, state.direction):
            state.direction = turn
            logger.debug("heading %s", turn.name)

    hx, hy = state.head
    new_head = (hx + state.direction.dx, hy + state.direction.dy)

    # Wall collision
    if not in_bounds(new_head, state.grid_size):
        return TickOutcome.HIT_WALL

    # Self collision
    if new_head in state.snake:
        return TickOutcome.HIT_SELF

    # Move / grow
    state.snake.insert(0, new_head)
    if new_head != state.food:
        state.snake.pop()
        return TickOutcome.MOVED

    state.score += 1
    if len(state.snake) >= state.capacity:
        state.food = None
        return TickOutcome.GRID_FULL
    place_food(state)
    return TickOutcome.ATE


# ---------- Views ----------
def occupancy_grid(state: GameState) -> np.ndarray:
    """Grid of cell codes indexed [y, x]."""
    grid = np.full((state.grid_size, state.grid_size), EMPTY, dtype=np.int8)
    for x, y in state.snake[1:]:
        grid[y, x] = BODY
    if state.snake:
        hx, hy = state.head
        grid[hy, hx] = HEAD
    if state.food is not None:
        fx, fy = state.food
        grid[fy, fx] = FOOD
    return grid


def state_to_dict(state: GameState) -> dict:
    return {
        "grid_size": state.grid_size,
        "snake": [list(cell) for cell in state.snake],
        "direction": state.direction.name,
        "pending": [d.name for d in state.pending],
        "food": list(state.food) if state.food is not None else None,
        "score": state.score,
    }
