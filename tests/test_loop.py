from snake.config import Direction, GameConfig
from snake.game import TickOutcome
from snake.loop import GameLoop, Phase, TickTimer

SMALL = GameConfig(canvas_size=100, cell_size=20, initial_snake_length=3, speed=100, seed=3)


class Recorder:
    def __init__(self):
        self.renders = 0
        self.scores = []
        self.game_overs = []

    def on_render(self, state):
        self.renders += 1

    def on_score(self, score):
        self.scores.append(score)

    def on_game_over(self, score, outcome):
        self.game_overs.append((score, outcome))


def make_loop(cfg=SMALL):
    rec = Recorder()
    loop = GameLoop(cfg, on_render=rec.on_render, on_score=rec.on_score,
                    on_game_over=rec.on_game_over)
    return loop, rec


class TestTickTimer:
    def test_fires_once_when_due(self):
        timer = TickTimer(100)
        timer.schedule(1000)
        assert timer.active
        assert not timer.poll(1099)
        assert timer.poll(1100)
        assert not timer.poll(5000)
        assert not timer.active

    def test_zero_delay(self):
        timer = TickTimer(100)
        timer.schedule(50, delay_ms=0)
        assert timer.poll(50)

    def test_cancel_is_idempotent_and_final(self):
        timer = TickTimer(100)
        timer.schedule(0)
        timer.cancel()
        timer.cancel()
        assert not timer.active
        assert not timer.poll(10_000)


class TestLifecycle:
    def test_constructed_not_started(self):
        loop, rec = make_loop()
        assert loop.phase is Phase.NOT_STARTED
        assert loop.state.snake == [(2, 2), (1, 2), (0, 2)]
        assert loop.pump(0) is None
        assert rec.renders == 0

    def test_start_runs_first_tick_on_next_pump(self):
        loop, rec = make_loop()
        assert loop.start(0)
        assert loop.phase is Phase.RUNNING
        assert rec.scores == [0]
        assert loop.pump(0) is not None
        assert loop.ticks == 1
        assert rec.renders == 1

    def test_start_while_running_is_noop(self):
        loop, rec = make_loop()
        loop.start(0)
        loop.pump(0)
        snake = list(loop.state.snake)
        assert not loop.start(10)
        assert loop.state.snake == snake
        assert rec.scores == [0]

    def test_ticks_follow_interval(self):
        loop, _ = make_loop()
        loop.start(0)
        loop.pump(0)
        assert loop.pump(50) is None
        assert loop.pump(99) is None
        assert loop.pump(100) is not None
        assert loop.timer.due_ms == 200

    def test_wall_ends_game_and_cancels_timer(self):
        loop, rec = make_loop()
        loop.start(0)
        now = 0
        outcomes = []
        for _ in range(10):
            outcome = loop.pump(now)
            if outcome is not None:
                outcomes.append(outcome)
            now += SMALL.speed
        # head (2,2) heading right on a 5-wide grid: two moves, then the wall
        assert outcomes[-1] is TickOutcome.HIT_WALL
        assert len(outcomes) == 3
        assert loop.phase is Phase.GAME_OVER
        assert not loop.timer.active
        assert rec.renders == 2
        assert rec.game_overs == [(loop.state.score, TickOutcome.HIT_WALL)]

    def test_no_tick_after_game_over(self):
        loop, rec = make_loop()
        loop.start(0)
        now = 0
        while loop.running:
            loop.pump(now)
            now += SMALL.speed
        ticks = loop.ticks
        for t in range(now, now + 2000, 10):
            assert loop.pump(t) is None
        assert loop.ticks == ticks
        assert len(rec.game_overs) == 1

    def test_restart_after_game_over_resets_state(self):
        loop, rec = make_loop()
        loop.start(0)
        now = 0
        while loop.running:
            loop.pump(now)
            now += SMALL.speed
        assert loop.start(now)
        assert loop.phase is Phase.RUNNING
        assert loop.state.snake == [(2, 2), (1, 2), (0, 2)]
        assert loop.state.score == 0
        assert loop.ticks == 0
        assert rec.scores[-1] == 0

    def test_stop_prevents_scheduled_tick(self):
        loop, rec = make_loop()
        loop.start(0)
        loop.pump(0)
        assert loop.timer.active
        loop.stop()
        loop.stop()
        assert loop.phase is Phase.NOT_STARTED
        assert loop.pump(10_000) is None
        assert rec.renders == 1

    def test_stop_after_game_over_keeps_game_over(self):
        loop, rec = make_loop()
        loop.start(0)
        now = 0
        while loop.running:
            loop.pump(now)
            now += SMALL.speed
        loop.stop()
        assert loop.phase is Phase.GAME_OVER
        assert loop.last_outcome is TickOutcome.HIT_WALL
        assert not loop.timer.active
        assert loop.pump(now + 1000) is None
        assert len(rec.game_overs) == 1

    def test_eating_last_free_cell_reports_score_then_game_over(self):
        loop, rec = make_loop(GameConfig(canvas_size=40, cell_size=20,
                                         initial_snake_length=2, speed=100, seed=0))
        loop.start(0)
        loop.state.snake = [(0, 0), (1, 0), (1, 1)]
        loop.state.direction = Direction.DOWN
        loop.state.food = (0, 1)
        assert loop.pump(0) is TickOutcome.GRID_FULL
        assert rec.scores == [0, 1]
        assert rec.game_overs == [(1, TickOutcome.GRID_FULL)]
        assert rec.renders == 0
        assert loop.phase is Phase.GAME_OVER
        assert not loop.timer.active

    def test_score_reported_on_change(self):
        loop, rec = make_loop(GameConfig(seed=1))
        loop.start(0)
        loop.state.food = (11, 10)
        assert loop.pump(0) is TickOutcome.ATE
        assert rec.scores == [0, 1]
        assert loop.state.food not in loop.state.snake


class TestInput:
    def test_requests_ignored_unless_running(self):
        loop, _ = make_loop()
        assert not loop.request_direction_change(Direction.UP)
        assert not loop.state.pending

    def test_requests_feed_the_queue(self):
        loop, _ = make_loop()
        loop.start(0)
        assert loop.request_direction_change(Direction.UP)
        assert not loop.request_direction_change(Direction.LEFT)
        loop.pump(0)
        assert loop.state.direction is Direction.UP
        assert loop.state.head == (2, 1)

    def test_start_clears_stale_requests(self):
        loop, _ = make_loop()
        loop.start(0)
        loop.request_direction_change(Direction.UP)
        loop.stop()
        loop.start(100)
        assert not loop.state.pending
