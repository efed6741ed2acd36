"""
renderer.py: Paints a FrameSnapshot with pygame. Holds no game state.
"""

import math
from typing import Optional, Tuple

import pygame

from .constants import (
    SKY_COLOR, PIPE_COLOR, BIRD_COLOR, BEAK_COLOR, WING_COLOR, EYE_COLOR,
    TEXT_COLOR, FLAP_ANIM_DURATION
)
from .data_models import Bird, FrameSnapshot, Pipe

WING_REST_DEGREES = -10.0
WING_RAISED_DEGREES = -45.0


def wing_tilt(since_flap: Optional[float]) -> float:
    """Wing angle in degrees: snaps up on a flap, then eases back to rest."""
    if since_flap is None or since_flap < 0 or since_flap >= FLAP_ANIM_DURATION:
        return WING_REST_DEGREES
    t = since_flap / FLAP_ANIM_DURATION
    return WING_RAISED_DEGREES + (WING_REST_DEGREES - WING_RAISED_DEGREES) * t


def rotate_point(x: float, y: float, degrees: float) -> Tuple[float, float]:
    """Rotates (x, y) about the origin, clockwise on screen for positive angles."""
    rad = math.radians(degrees)
    return (x * math.cos(rad) - y * math.sin(rad),
            x * math.sin(rad) + y * math.cos(rad))


class PygameRenderer:
    """Draws pipes, the bird and the HUD onto `surface` each frame."""

    def __init__(self, surface: pygame.Surface):
        if not pygame.font.get_init():
            pygame.font.init()
        self.surface = surface
        self.font = pygame.font.Font(None, 32)
        self.small_font = pygame.font.Font(None, 22)

    def draw(self, snapshot: FrameSnapshot):
        # Previous frame is wiped first
        self.surface.fill(SKY_COLOR)
        for pipe in snapshot.pipes:
            self.draw_pipe(pipe, snapshot.height)
        self.draw_bird(snapshot.bird, snapshot.time)
        self.draw_hud(snapshot.score, snapshot.level_label)

    def draw_pipe(self, pipe: Pipe, height: int):
        pygame.draw.rect(self.surface, PIPE_COLOR,
                         (pipe.x, 0, pipe.width, pipe.top_height))
        pygame.draw.rect(self.surface, PIPE_COLOR,
                         (pipe.x, pipe.bottom_y, pipe.width, max(0, height - pipe.bottom_y)))

    def draw_bird(self, bird: Bird, now: float):
        size = int(bird.width * 2)
        centre = size // 2
        body = pygame.Surface((size, size), pygame.SRCALPHA)
        radius = int(bird.width // 2)

        pygame.draw.circle(body, BIRD_COLOR, (centre, centre), radius)
        pygame.draw.circle(body, EYE_COLOR, (centre + 8, centre - 6), 4)
        pygame.draw.polygon(body, BEAK_COLOR, [
            (centre + 16, centre),
            (centre + 24, centre - 6),
            (centre + 24, centre + 6),
        ])

        since_flap = None if bird.last_flap_time is None else now - bird.last_flap_time
        self._draw_wing(body, bird, centre, wing_tilt(since_flap))

        # pygame rotates counter-clockwise; screen tilt is clockwise-positive
        rotated = pygame.transform.rotate(body, -bird.angle)
        rect = rotated.get_rect(center=(int(bird.x), int(bird.y)))
        self.surface.blit(rotated, rect)

    def _draw_wing(self, body: pygame.Surface, bird: Bird, centre: int, tilt: float):
        wing_w = max(1, int(bird.width * 0.6))
        wing_h = max(1, int(bird.height * 0.5))
        wing = pygame.Surface((wing_w, wing_h), pygame.SRCALPHA)
        pygame.draw.ellipse(wing, WING_COLOR, (0, 0, wing_w, wing_h))
        wing = pygame.transform.rotate(wing, -tilt)

        # The wing hinges on the body centre, so its offset turns with it
        dx, dy = rotate_point(-4, 6, tilt)
        rect = wing.get_rect(center=(int(centre + dx), int(centre + dy)))
        body.blit(wing, rect)

    def draw_hud(self, score: int, level_label: str):
        score_text = self.font.render(f"Score: {score}", True, TEXT_COLOR)
        self.surface.blit(score_text, (20, 15))
        level_text = self.small_font.render(f"Level: {level_label}", True, TEXT_COLOR)
        self.surface.blit(level_text, (20, 45))
