# main.py
import argparse
import logging
from typing import List, Optional

from .config import DEFAULT_CONFIG, ConfigError, GameConfig
from .game import TickOutcome
from .loop import GameLoop, Phase
from . import autopilot

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="snake", description="Grid snake on a pygame canvas.")
    parser.add_argument("--canvas-size", type=int, default=DEFAULT_CONFIG.canvas_size,
                        help="canvas width/height in pixels (multiple of --cell-size)")
    parser.add_argument("--cell-size", type=int, default=DEFAULT_CONFIG.cell_size,
                        help="pixels per grid cell")
    parser.add_argument("--length", type=int, default=DEFAULT_CONFIG.initial_snake_length,
                        help="initial snake length in cells")
    parser.add_argument("--speed", type=int, default=DEFAULT_CONFIG.speed,
                        help="tick interval in milliseconds")
    parser.add_argument("--seed", type=int, default=None,
                        help="seed for food placement (reproducible games)")
    parser.add_argument("--autopilot", action="store_true",
                        help="let the greedy autopilot steer (windowed and headless)")
    parser.add_argument("--headless", action="store_true",
                        help="run one game without a window and print the result (add --autopilot to steer)")
    parser.add_argument("--max-ticks", type=int, default=10_000,
                        help="headless mode: stop after this many ticks")
    parser.add_argument("--log-level", type=str, default="WARNING",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return parser


def config_from_args(parser: argparse.ArgumentParser, args: argparse.Namespace) -> GameConfig:
    try:
        return GameConfig(
            canvas_size=args.canvas_size,
            cell_size=args.cell_size,
            initial_snake_length=args.length,
            speed=args.speed,
            seed=args.seed,
        )
    except ConfigError as exc:
        parser.error(str(exc))


# ---------- Headless ----------
def run_headless(cfg: GameConfig, max_ticks: int, use_autopilot: bool = True) -> GameLoop:
    """
    Play one game on a simulated clock: each iteration advances time by
    exactly one tick interval, so no window and no sleeping are needed.
    """
    logger.info("headless run: %s, max %d ticks", cfg, max_ticks)
    loop = GameLoop(cfg)
    now = 0
    loop.start(now)
    while loop.running and loop.ticks < max_ticks:
        if use_autopilot:
            autopilot.steer(loop.state)
        loop.pump(now)
        now += cfg.speed
    loop.stop()
    return loop


# ---------- Windowed ----------
def run_windowed(cfg: GameConfig, use_autopilot: bool = False) -> None:
    import pygame  # type: ignore

    from .controls import handle_events
    from .render import ScoreBoard, draw_game, draw_game_over, draw_start_hint

    logger.info("opening %dx%d window", cfg.canvas_size, cfg.canvas_size)
    pygame.init()
    font = pygame.font.SysFont(None, 24)
    screen = pygame.display.set_mode((cfg.canvas_size, cfg.canvas_size))
    clock = pygame.time.Clock()
    scoreboard = ScoreBoard(font)

    def on_score(score: int) -> None:
        if scoreboard.update(score):
            pygame.display.set_caption(f"Snake — {scoreboard.text}")

    def on_render(state) -> None:
        draw_game(screen, state, cfg)
        scoreboard.draw(screen)
        pygame.display.flip()

    def on_game_over(score: int, reason: TickOutcome) -> None:
        # final frame with overlay
        draw_game(screen, loop.state, cfg)
        draw_game_over(screen, font, score)
        pygame.display.flip()
        print(f"[GAME OVER] reason={reason.value}, score={score}")

    loop = GameLoop(cfg, on_render=on_render, on_score=on_score, on_game_over=on_game_over)
    on_score(0)
    draw_game(screen, loop.state, cfg)
    draw_start_hint(screen, font)
    pygame.display.flip()

    running = True
    while running:
        now = pygame.time.get_ticks()
        # 1) input
        running = handle_events(pygame.event.get(), loop, now)
        if not running:
            break
        # 2) update + render (only when a tick is due)
        if use_autopilot and loop.phase is Phase.RUNNING:
            autopilot.steer(loop.state)
        loop.pump(now)
        clock.tick(60)  # high FPS; movement gated by the loop's timer

    loop.stop()
    pygame.quit()


def main(argv: Optional[List[str]] = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    cfg = config_from_args(parser, args)

    if args.headless:
        loop = run_headless(cfg, args.max_ticks, use_autopilot=args.autopilot)
        reason = loop.last_outcome.value if loop.last_outcome is not None else "none"
        print(f"[HEADLESS] ticks={loop.ticks}, score={loop.state.score}, "
              f"length={len(loop.state.snake)}, last={reason}")
        return

    run_windowed(cfg, use_autopilot=args.autopilot)


if __name__ == "__main__":
    main()
