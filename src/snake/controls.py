# controls.py
from typing import Iterable, Optional

import pygame  # type: ignore

from .config import Direction
from .loop import GameLoop

KEY_TO_DIRECTION = {
    pygame.K_LEFT: Direction.LEFT,
    pygame.K_a: Direction.LEFT,
    pygame.K_UP: Direction.UP,
    pygame.K_w: Direction.UP,
    pygame.K_RIGHT: Direction.RIGHT,
    pygame.K_d: Direction.RIGHT,
    pygame.K_DOWN: Direction.DOWN,
    pygame.K_s: Direction.DOWN,
}

START_KEYS = (pygame.K_SPACE, pygame.K_RETURN, pygame.K_r)


def direction_for_key(key: int) -> Optional[Direction]:
    return KEY_TO_DIRECTION.get(key)


def is_start_key(key: int) -> bool:
    return key in START_KEYS


def handle_events(events: Iterable[pygame.event.Event], loop: GameLoop, now_ms: int) -> bool:
    """Feed key events to the loop. Return False to quit."""
    for event in events:
        if event.type == pygame.QUIT:
            return False
        if event.type != pygame.KEYDOWN:
            continue
        if event.key == pygame.K_ESCAPE:
            return False
        direction = direction_for_key(event.key)
        if direction is not None:
            loop.request_direction_change(direction)
        elif is_start_key(event.key):
            loop.start(now_ms)
    return True
