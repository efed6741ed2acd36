"""
data_models.py: Data structures for the game state.
"""

from dataclasses import dataclass, replace
from typing import Optional, Tuple

from .constants import (
    BIRD_X, BIRD_START_Y, BIRD_WIDTH, BIRD_HEIGHT, PIPE_WIDTH
)


@dataclass
class Bird:
    """The controlled entity. `y` is the centre of its bounding box."""
    x: float = BIRD_X
    y: float = BIRD_START_Y
    velocity: float = 0.0
    angle: float = 0.0                     # Tilt in degrees, cosmetic
    last_flap_time: Optional[float] = None # Clock time of the last flap, cosmetic
    width: float = BIRD_WIDTH
    height: float = BIRD_HEIGHT

    @property
    def top(self) -> float:
        return self.y - self.height / 2

    @property
    def bottom(self) -> float:
        return self.y + self.height / 2

    @property
    def left(self) -> float:
        return self.x - self.width / 2

    @property
    def right(self) -> float:
        return self.x + self.width / 2


@dataclass
class Pipe:
    """A top/bottom segment pair. `bottom_y` is fixed when the pipe is created."""
    x: float
    top_height: float
    bottom_y: float
    passed: bool = False
    width: float = PIPE_WIDTH

    @property
    def trailing_edge(self) -> float:
        return self.x + self.width

    @property
    def gap(self) -> float:
        return self.bottom_y - self.top_height


@dataclass(frozen=True)
class FrameSnapshot:
    """Read-only view of one frame, handed to the renderer."""
    bird: Bird
    pipes: Tuple[Pipe, ...]
    score: int
    level_label: str
    width: int
    height: int
    time: float
    running: bool = True

    @classmethod
    def capture(cls, bird: Bird, pipes, **kwargs) -> "FrameSnapshot":
        """Copies the mutable parts so later frames cannot alter this one."""
        return cls(
            bird=replace(bird),
            pipes=tuple(replace(p) for p in pipes),
            **kwargs
        )
