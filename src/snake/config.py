from dataclasses import dataclass
from enum import Enum
from typing import Optional


class ConfigError(ValueError):
    """Raised when a GameConfig describes a grid the game cannot run on."""


# ----- Directions (dx, dy), y grows downward -----
class Direction(Enum):
    LEFT = (-1, 0)
    UP = (0, -1)
    RIGHT = (1, 0)
    DOWN = (0, 1)

    @property
    def dx(self) -> int:
        return self.value[0]

    @property
    def dy(self) -> int:
        return self.value[1]

    @property
    def opposite(self) -> "Direction":
        return Direction((-self.dx, -self.dy))


# ----- Colors -----
BG = (17, 24, 39)
HEAD_INNER = (110, 231, 183)   # #6ee7b7
HEAD_OUTER = (56, 142, 60)     # #388e3c
BODY_INNER = (178, 247, 239)   # #b2f7ef
BODY_OUTER = (76, 175, 80)     # #4caf50
FOOD_INNER = (255, 241, 118)   # #fff176
FOOD_OUTER = (255, 111, 97)    # #ff6f61
EYE_WHITE = (255, 255, 255)
EYE_PUPIL = (34, 34, 34)
TEXT = (220, 220, 230)


# ----- Tunables -----
@dataclass(frozen=True)
class GameConfig:
    canvas_size: int = 400          # pixels, square
    cell_size: int = 20             # pixels per cell
    initial_snake_length: int = 3   # cells
    speed: int = 120                # ms between ticks
    seed: Optional[int] = None      # None -> nondeterministic food

    def __post_init__(self):
        if self.cell_size <= 0:
            raise ConfigError(f"cell_size must be positive, got {self.cell_size}")
        if self.canvas_size <= 0:
            raise ConfigError(f"canvas_size must be positive, got {self.canvas_size}")
        if self.canvas_size % self.cell_size != 0:
            raise ConfigError(
                f"canvas_size {self.canvas_size} is not divisible by cell_size {self.cell_size}"
            )
        if self.speed <= 0:
            raise ConfigError(f"speed must be a positive tick interval in ms, got {self.speed}")
        if self.initial_snake_length < 1:
            raise ConfigError(
                f"initial_snake_length must be at least 1, got {self.initial_snake_length}"
            )
        # The snake is seeded leftwards from the middle cell of the middle row.
        max_length = self.grid_size // 2 + 1
        if self.initial_snake_length > max_length:
            raise ConfigError(
                f"initial_snake_length {self.initial_snake_length} does not fit a "
                f"{self.grid_size}x{self.grid_size} grid (max {max_length})"
            )
        if self.initial_snake_length >= self.grid_size * self.grid_size:
            raise ConfigError(
                f"a {self.grid_size}x{self.grid_size} grid leaves no free cell for food"
            )

    @property
    def grid_size(self) -> int:
        return self.canvas_size // self.cell_size


DEFAULT_CONFIG = GameConfig()
