"""
levels.py: Difficulty tiers. A level is chosen before a run and never changes during it.
"""

from dataclasses import dataclass
from typing import Dict


class InvalidLevelError(ValueError):
    """Raised when a level id is not one of the known tiers."""


@dataclass(frozen=True)
class Level:
    id: int
    label: str
    gravity: float      # Multiplier on BASE_GRAVITY
    speed: float        # Pipe scroll speed (pixels/frame)
    gap: float          # Vertical opening between pipe segments (pixels)
    frequency: int      # Frames between pipe spawns


LEVELS: Dict[int, Level] = {
    1: Level(id=1, label="Easy", gravity=0.4, speed=2, gap=160, frequency=120),
    2: Level(id=2, label="Medium", gravity=0.6, speed=3, gap=140, frequency=90),
    3: Level(id=3, label="Hard", gravity=0.8, speed=4, gap=120, frequency=70),
}

DEFAULT_LEVEL_ID = 1


def get_level(level_id: int) -> Level:
    """Looks up a level, rejecting anything outside the table."""
    # bool is an int subclass; True would otherwise resolve to level 1
    if isinstance(level_id, bool) or level_id not in LEVELS:
        raise InvalidLevelError(
            f"Unknown level {level_id!r}; expected one of {sorted(LEVELS)}")
    return LEVELS[level_id]
