"""
Flappy: a single-player flap-and-dodge game built on pygame.
"""

from .levels import LEVELS, InvalidLevelError, Level, get_level
from .session import Session, SessionState

__all__ = [
    "LEVELS",
    "InvalidLevelError",
    "Level",
    "Session",
    "SessionState",
    "get_level",
]

__version__ = "0.1.0"
