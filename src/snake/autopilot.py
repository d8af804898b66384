# autopilot.py
"""Greedy autopilot: steers toward the food through the same direction queue the keyboard uses."""
from typing import List

import numpy as np  # type: ignore

from .config import Direction
from .game import EMPTY, FOOD, GameState, occupancy_grid, request_direction_change


def rotate_left(direction: Direction) -> Direction:
    """Rotate direction 90° counter-clockwise (screen coordinates)."""
    return Direction((direction.dy, -direction.dx))


def rotate_right(direction: Direction) -> Direction:
    """Rotate direction 90° clockwise (screen coordinates)."""
    return Direction((-direction.dy, direction.dx))


def best_moves_toward_food(hx: int, hy: int, fx: int, fy: int) -> List[Direction]:
    """
    Returns a preference ordering of moves that reduce Manhattan distance to food,
    followed by the remaining moves. Does NOT check collisions.
    """
    prefs = []
    if fx < hx:
        prefs.append(Direction.LEFT)
    elif fx > hx:
        prefs.append(Direction.RIGHT)
    if fy < hy:
        prefs.append(Direction.UP)
    elif fy > hy:
        prefs.append(Direction.DOWN)
    for d in Direction:
        if d not in prefs:
            prefs.append(d)
    return prefs


def is_safe(grid: np.ndarray, hx: int, hy: int, direction: Direction) -> bool:
    """True if the next cell in 'direction' is inside the grid and free (or food)."""
    nx, ny = hx + direction.dx, hy + direction.dy
    size = grid.shape[0]
    if not (0 <= nx < size and 0 <= ny < size):
        return False
    return grid[ny, nx] in (EMPTY, FOOD)


def choose_direction(state: GameState) -> Direction:
    """
    Greedy on food distance with simple safety:
    - prefer safe moves that reduce Manhattan distance
    - otherwise any safe move (forward, left, right)
    - if boxed in, keep the current heading
    """
    grid = occupancy_grid(state)
    hx, hy = state.head
    back = state.direction.opposite

    if state.food is not None:
        fx, fy = state.food
        for d in best_moves_toward_food(hx, hy, fx, fy):
            if d is not back and is_safe(grid, hx, hy, d):
                return d

    for d in (state.direction, rotate_left(state.direction), rotate_right(state.direction)):
        if is_safe(grid, hx, hy, d):
            return d
    return state.direction


def steer(state: GameState) -> bool:
    """Queue the autopilot's move for the next tick if nothing is queued yet."""
    if state.pending:
        return False
    choice = choose_direction(state)
    if choice is state.direction:
        return False
    return request_direction_change(state, choice)
