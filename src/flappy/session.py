"""
session.py: The Idle -> Running -> Ended state machine that owns one game.
"""

import random
from enum import Enum
from typing import Callable, Optional

from .clock import CancelToken, FrameScheduler, SimulationClock
from .collision import check_collision
from .constants import SCREEN_WIDTH, SCREEN_HEIGHT
from .data_models import Bird, FrameSnapshot
from .levels import DEFAULT_LEVEL_ID, Level, get_level
from .physics_core import PhysicsCore
from .pipes import PipeField


class SessionState(Enum):
    IDLE = "idle"
    RUNNING = "running"
    ENDED = "ended"


class Session:
    """
    All mutable game state for one window. The UI shell drives it through
    start(), on_flap_input(), select_level() and on_resize(), and reads
    is_running / current_score / final_score / active_level_label.
    """

    def __init__(self,
                 scheduler: Optional[FrameScheduler] = None,
                 clock: Optional[SimulationClock] = None,
                 rng: Optional[random.Random] = None,
                 renderer=None,
                 width: int = SCREEN_WIDTH,
                 height: int = SCREEN_HEIGHT,
                 level_id: int = DEFAULT_LEVEL_ID,
                 on_game_over: Optional[Callable[[int], None]] = None):
        self.scheduler = scheduler or FrameScheduler()
        self.clock = clock or SimulationClock()
        self.rng = rng or random.Random()
        self.renderer = renderer
        self.on_game_over = on_game_over
        self.physics = PhysicsCore()

        self.width = width
        self.height = height
        self.pending_level: Level = get_level(level_id)
        self.active_level: Optional[Level] = None

        self.state = SessionState.IDLE
        self.bird = Bird()
        self.pipe_field = PipeField(rng=self.rng)
        self.score = 0
        self.frame_count = 0
        self.final_score: Optional[int] = None
        self._token: Optional[CancelToken] = None

    # ----- Observable state -----

    @property
    def is_running(self) -> bool:
        return self.state is SessionState.RUNNING

    @property
    def current_score(self) -> int:
        return self.score

    @property
    def pipes(self):
        return self.pipe_field.pipes

    @property
    def active_level_label(self) -> str:
        level = self.active_level if self.is_running else self.pending_level
        return level.label

    # ----- Inputs from the shell -----

    def select_level(self, level_id: int) -> Level:
        """
        Stores the level for the next start(). A running game keeps the level
        it started with. Unknown ids raise InvalidLevelError and change nothing.
        """
        self.pending_level = get_level(level_id)
        return self.pending_level

    def on_resize(self, width: int, height: int):
        if width <= 0 or height <= 0:
            raise ValueError(f"Surface size must be positive, got {width}x{height}")
        self.width = width
        self.height = height

    def on_flap_input(self):
        """The first input of a run both starts it and flaps."""
        if not self.is_running:
            self.start()
        self.physics.flap(self.bird, self.clock.now())

    def start(self) -> bool:
        """Begins a fresh run. Does nothing if one is already running."""
        if self.is_running:
            return False

        self.active_level = self.pending_level
        self.bird = Bird()
        self.pipe_field = PipeField(rng=self.rng)
        self.score = 0
        self.frame_count = 0
        self.final_score = None
        self.clock.reset()

        self.state = SessionState.RUNNING
        self._token = CancelToken()
        self.scheduler.request_frame(self.advance_frame, self._token)
        return True

    # ----- Frame loop -----

    def advance_frame(self):
        """
        One simulation step. Order matters: physics, pipes, collision, render.
        A no-op unless running.
        """
        if not self.is_running:
            return

        level = self.active_level
        dt = self.clock.tick()

        # 1. Bird
        self.physics.integrate(self.bird, level.gravity, dt)

        # 2. Spawn, scroll and score pipes
        self.pipe_field.maybe_spawn(self.frame_count, level, self.width, self.height)
        self.score += self.pipe_field.advance(level, self.bird.x)

        # 3. Collision
        collided = check_collision(self.bird, self.pipes, self.height)

        # 4. Paint, including the frame that ends the run
        if self.renderer is not None:
            self.renderer.draw(self.snapshot())

        if collided:
            self._end()
            return

        self.frame_count += 1
        self.scheduler.request_frame(self.advance_frame, self._token)

    def _end(self):
        self.state = SessionState.ENDED
        self.final_score = self.score
        if self._token is not None:
            self._token.cancel()
        if self.on_game_over is not None:
            self.on_game_over(self.final_score)

    def snapshot(self) -> FrameSnapshot:
        return FrameSnapshot.capture(
            self.bird, self.pipes,
            score=self.score,
            level_label=self.active_level_label,
            width=self.width,
            height=self.height,
            time=self.clock.now(),
            running=self.is_running,
        )
