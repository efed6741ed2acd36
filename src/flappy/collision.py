"""
collision.py: Overlap test between the bird, the surface bounds and the pipes.
"""

from typing import Iterable

from .data_models import Bird, Pipe


def overlaps_horizontally(bird: Bird, pipe: Pipe) -> bool:
    return bird.right > pipe.x and bird.left < pipe.trailing_edge


def hits_pipe(bird: Bird, pipe: Pipe) -> bool:
    """True if the bird touches either segment; the gap itself is safe."""
    if not overlaps_horizontally(bird, pipe):
        return False
    return bird.top < pipe.top_height or bird.bottom > pipe.bottom_y


def check_collision(bird: Bird, pipes: Iterable[Pipe], height: float) -> bool:
    """Checks for collisions with floor, ceiling, or pipes."""

    # 1. Floor/Ceiling Collision
    if bird.bottom >= height or bird.top <= 0:
        return True

    # 2. Pipe Collision
    return any(hits_pipe(bird, pipe) for pipe in pipes)
