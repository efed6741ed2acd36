"""
pipes.py: Spawning, scrolling and scoring of the pipe stream.

Pipes move a fixed number of pixels per frame rather than per second, so
horizontal speed follows the host's frame rate while the bird's fall does not.
Level tuning depends on this.
"""

import math
import random
from dataclasses import dataclass, field
from typing import List, Optional

from .constants import MIN_TOP_HEIGHT, PIPE_WIDTH
from .data_models import Pipe
from .levels import Level


@dataclass
class PipeField:
    """
    Owns the ordered pipe list for one run.
    Order is creation order, which is also left-to-right screen order.
    """
    rng: random.Random = field(default_factory=random.Random)
    pipes: List[Pipe] = field(default_factory=list)

    def random_top_height(self, height: float) -> float:
        """Uniform over [MIN_TOP_HEIGHT, height / 2 + MIN_TOP_HEIGHT)."""
        return float(MIN_TOP_HEIGHT + math.floor(self.rng.random() * (height / 2)))

    def maybe_spawn(self, frame: int, level: Level, width: float, height: float) -> Optional[Pipe]:
        """Appends a new pipe at the right edge when `frame` is a multiple of the spawn frequency."""
        if frame % level.frequency != 0:
            return None

        top_height = self.random_top_height(height)
        pipe = Pipe(x=float(width), top_height=top_height,
                    bottom_y=top_height + level.gap, width=PIPE_WIDTH)
        self.pipes.append(pipe)
        return pipe

    def advance(self, level: Level, bird_x: float) -> int:
        """
        Scrolls every pipe, drops the ones fully off-screen and scores the
        ones the bird has cleared. Returns the points earned this frame.
        """
        for pipe in self.pipes:
            pipe.x -= level.speed

        self.pipes = [p for p in self.pipes if p.trailing_edge >= 0]

        points = 0
        for pipe in self.pipes:
            if not pipe.passed and pipe.trailing_edge < bird_x:
                pipe.passed = True
                points += 1
        return points
