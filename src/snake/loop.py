# loop.py
from enum import Enum
from typing import Callable, Optional
import logging
import random

from .config import Direction, GameConfig
from .game import (
    GameState,
    TickOutcome,
    advance_one_tick,
    new_game_state,
    request_direction_change,
    reset_game_state,
)

logger = logging.getLogger(__name__)

RenderCallback = Callable[[GameState], None]
ScoreCallback = Callable[[int], None]
GameOverCallback = Callable[[int, TickOutcome], None]


class Phase(Enum):
    NOT_STARTED = "not_started"
    RUNNING = "running"
    GAME_OVER = "game_over"


class TickTimer:
    """
    One-shot timer on a caller-supplied millisecond clock.

    The owner re-arms it from inside each tick. Once cancelled it never
    reports due until scheduled again, and cancelling twice is harmless.
    """

    def __init__(self, interval_ms: int):
        self.interval_ms = interval_ms
        self.due_ms: Optional[int] = None

    @property
    def active(self) -> bool:
        return self.due_ms is not None

    def schedule(self, now_ms: int, delay_ms: Optional[int] = None) -> None:
        delay = self.interval_ms if delay_ms is None else delay_ms
        self.due_ms = now_ms + delay

    def cancel(self) -> None:
        self.due_ms = None

    def poll(self, now_ms: int) -> bool:
        """Return True (and disarm) if the timer has come due."""
        if self.due_ms is None or now_ms < self.due_ms:
            return False
        self.due_ms = None
        return True


class GameLoop:
    """
    Drives a GameState through NOT_STARTED -> RUNNING -> GAME_OVER.

    The host calls pump(now_ms) as often as it likes (e.g. once per frame);
    a tick runs only when the timer is due. Callbacks:
      on_render(state)             after every non-terminal tick
      on_score(score)              on start and whenever the score changes
      on_game_over(score, reason)  once, when a tick ends the game
    """

    def __init__(
        self,
        cfg: GameConfig,
        on_render: Optional[RenderCallback] = None,
        on_score: Optional[ScoreCallback] = None,
        on_game_over: Optional[GameOverCallback] = None,
        rng: Optional[random.Random] = None,
    ):
        self.cfg = cfg
        self.on_render = on_render
        self.on_score = on_score
        self.on_game_over = on_game_over
        self.state = new_game_state(cfg, rng)
        self.timer = TickTimer(cfg.speed)
        self.phase = Phase.NOT_STARTED
        self.ticks = 0
        self.last_outcome: Optional[TickOutcome] = None

    @property
    def running(self) -> bool:
        return self.phase is Phase.RUNNING

    # ---------- Lifecycle ----------
    def start(self, now_ms: int) -> bool:
        """Reset and run a fresh game. No-op (returns False) while running."""
        if self.running:
            return False
        reset_game_state(self.state)
        self.phase = Phase.RUNNING
        self.ticks = 0
        self.last_outcome = None
        logger.info(
            "game started: grid %dx%d, snake length %d, tick %d ms",
            self.state.grid_size, self.state.grid_size, len(self.state.snake), self.cfg.speed,
        )
        self._report_score()
        self.timer.schedule(now_ms, delay_ms=0)
        return True

    def stop(self) -> None:
        """
        Cancel any scheduled tick. A running game goes back to NOT_STARTED;
        a finished game stays GAME_OVER so its outcome can still be read.
        """
        self.timer.cancel()
        if self.running:
            logger.info("game stopped at score %d", self.state.score)
            self.phase = Phase.NOT_STARTED

    def _game_over(self, outcome: TickOutcome) -> None:
        self.timer.cancel()
        self.phase = Phase.GAME_OVER
        logger.info(
            "game over (%s) after %d ticks, final score %d",
            outcome.value, self.ticks, self.state.score,
        )
        if self.on_game_over is not None:
            self.on_game_over(self.state.score, outcome)

    # ---------- Ticking ----------
    def pump(self, now_ms: int) -> Optional[TickOutcome]:
        """Run the tick if one is due; returns its outcome, else None."""
        if not self.running or not self.timer.poll(now_ms):
            return None
        return self.tick(now_ms)

    def tick(self, now_ms: int) -> TickOutcome:
        score_before = self.state.score
        outcome = advance_one_tick(self.state)
        self.ticks += 1
        self.last_outcome = outcome

        if outcome.is_terminal:
            if self.state.score != score_before:
                self._report_score()
            self._game_over(outcome)
            return outcome

        if self.state.score != score_before:
            self._report_score()
        if self.on_render is not None:
            self.on_render(self.state)
        self.timer.schedule(now_ms)
        return outcome

    def _report_score(self) -> None:
        if self.on_score is not None:
            self.on_score(self.state.score)

    # ---------- Input ----------
    def request_direction_change(self, direction: Direction) -> bool:
        if not self.running:
            return False
        return request_direction_change(self.state, direction)
