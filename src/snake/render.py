# render.py
from typing import List, Optional, Tuple
import logging

import pygame  # type: ignore

from .config import (
    BG, TEXT,
    HEAD_INNER, HEAD_OUTER,
    BODY_INNER, BODY_OUTER,
    FOOD_INNER, FOOD_OUTER,
    EYE_WHITE, EYE_PUPIL,
    GameConfig,
)
from .game import GameState

logger = logging.getLogger(__name__)

Color = Tuple[int, int, int]

GRADIENT_STEPS = 6


# ---------- Helpers ----------
def lerp_color(a: Color, b: Color, t: float) -> Color:
    return (
        int(a[0] + (b[0] - a[0]) * t),
        int(a[1] + (b[1] - a[1]) * t),
        int(a[2] + (b[2] - a[2]) * t),
    )


def cell_point(gx: int, gy: int, fx: float, fy: float, cell_size: int) -> Tuple[int, int]:
    """Pixel position of the fractional offset (fx, fy) inside cell (gx, gy)."""
    return int((gx + fx) * cell_size), int((gy + fy) * cell_size)


def draw_radial_disc(
    surface: pygame.Surface,
    center: Tuple[int, int],
    radius: float,
    inner_radius: float,
    inner: Color,
    outer: Color,
) -> None:
    """Approximate a radial gradient with concentric discs, outer to inner."""
    for i in range(GRADIENT_STEPS + 1):
        t = i / GRADIENT_STEPS
        r = radius + (inner_radius - radius) * t
        pygame.draw.circle(surface, lerp_color(outer, inner, t), center, max(1, round(r)))


# ---------- Pieces ----------
def draw_head(surface: pygame.Surface, gx: int, gy: int, cs: int) -> None:
    center = cell_point(gx, gy, 0.5, 0.5, cs)
    draw_radial_disc(surface, center, cs * 0.5, cs * 0.2, HEAD_INNER, HEAD_OUTER)
    for ex in (0.68, 0.32):
        pygame.draw.circle(surface, EYE_WHITE, cell_point(gx, gy, ex, 0.38, cs), max(1, round(cs * 0.13)))
    for ex in (0.68, 0.32):
        pygame.draw.circle(surface, EYE_PUPIL, cell_point(gx, gy, ex, 0.41, cs), max(1, round(cs * 0.07)))


def draw_body_segment(surface: pygame.Surface, gx: int, gy: int, cs: int) -> None:
    center = cell_point(gx, gy, 0.5, 0.5, cs)
    draw_radial_disc(surface, center, cs * 0.45, cs * 0.1, BODY_INNER, BODY_OUTER)


def draw_food(surface: pygame.Surface, gx: int, gy: int, cs: int) -> None:
    center = cell_point(gx, gy, 0.5, 0.5, cs)
    draw_radial_disc(surface, center, cs * 0.38, cs * 0.1, FOOD_INNER, FOOD_OUTER)
    # highlight: white at 70% over the fruit
    shine = lerp_color(FOOD_INNER, EYE_WHITE, 0.7)
    pygame.draw.circle(surface, shine, cell_point(gx, gy, 0.65, 0.38, cs), max(1, round(cs * 0.11)))


# ---------- Frames ----------
def draw_game(surface: pygame.Surface, state: GameState, cfg: GameConfig) -> None:
    """Repaint the whole board from state. Reads state, writes only to surface."""
    cs = cfg.cell_size
    surface.fill(BG)
    # tail first so the head ends up on top
    for i in range(len(state.snake) - 1, -1, -1):
        x, y = state.snake[i]
        if i == 0:
            draw_head(surface, x, y, cs)
        else:
            draw_body_segment(surface, x, y, cs)
    if state.food is not None:
        draw_food(surface, state.food[0], state.food[1], cs)


TITLE = (240, 240, 250)
DIM_ALPHA = 140
LINE_GAP = 6


def game_over_lines(score: int) -> List[Tuple[str, Color]]:
    return [
        ("GAME OVER", TITLE),
        (f"Final score: {score}", TEXT),
        ("Press Space or R to restart", TEXT),
    ]


def blit_centered_lines(
    surface: pygame.Surface,
    font: pygame.font.Font,
    lines: List[Tuple[str, Color]],
    y_offset: int = 0,
) -> List[pygame.Rect]:
    """Stack text lines around the surface centre; returns the rects drawn."""
    width, height = surface.get_size()
    labels = [font.render(text, True, color) for text, color in lines]
    block = sum(label.get_height() for label in labels) + LINE_GAP * (len(labels) - 1)
    y = height // 2 - block // 2 + y_offset
    rects = []
    for label in labels:
        rect = label.get_rect(midtop=(width // 2, y))
        surface.blit(label, rect)
        rects.append(rect)
        y = rect.bottom + LINE_GAP
    return rects


def draw_game_over(surface: pygame.Surface, font: pygame.font.Font, score: int) -> List[pygame.Rect]:
    """Dim the final board and stack the result text on it."""
    shade = pygame.Surface(surface.get_size(), pygame.SRCALPHA)
    shade.fill((0, 0, 0, DIM_ALPHA))
    surface.blit(shade, (0, 0))
    return blit_centered_lines(surface, font, game_over_lines(score))


def draw_start_hint(surface: pygame.Surface, font: pygame.font.Font) -> List[pygame.Rect]:
    return blit_centered_lines(surface, font, [("Press Space to start", TEXT)], y_offset=40)


# ---------- Score readout ----------
class ScoreBoard:
    """Text readout of the score; the label is only re-rendered when the score changes."""

    def __init__(self, font: Optional[pygame.font.Font] = None):
        self.font = font
        self.score: Optional[int] = None
        self.text = ""
        self._label: Optional[pygame.Surface] = None

    def update(self, score: int) -> bool:
        if score == self.score:
            return False
        self.score = score
        self.text = f"Score: {score}"
        self._label = None
        logger.debug("score readout -> %s", self.text)
        return True

    def draw(self, surface: pygame.Surface, pos: Tuple[int, int] = (8, 6)) -> None:
        if self.font is None or not self.text:
            return
        if self._label is None:
            self._label = self.font.render(self.text, True, TEXT)
        surface.blit(self._label, pos)
