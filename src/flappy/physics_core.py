"""
physics_core.py: Delta-time kinematics for the bird.
"""

from .constants import (
    BASE_GRAVITY, FLAP_IMPULSE, TERMINAL_VELOCITY, MAX_UPWARD_VELOCITY,
    MAX_TILT_DEGREES, TILT_SMOOTHING_RATE
)
from .data_models import Bird


def clamp(value: float, low: float, high: float) -> float:
    return max(low, min(value, high))


def step_velocity(velocity: float, gravity_multiplier: float, dt: float) -> float:
    """Applies gravity for `dt` seconds and clamps to the allowed range."""
    velocity += BASE_GRAVITY * gravity_multiplier * dt
    return clamp(velocity, MAX_UPWARD_VELOCITY, TERMINAL_VELOCITY)


def target_tilt(velocity: float) -> float:
    """Tilt the bird is easing towards: nose down when falling, up when rising."""
    return clamp((velocity / TERMINAL_VELOCITY) * MAX_TILT_DEGREES,
                 -MAX_TILT_DEGREES, MAX_TILT_DEGREES)


def smooth_tilt(angle: float, target: float, dt: float) -> float:
    # Blend factor scales with dt so the easing is frame-rate independent
    return angle + (target - angle) * min(1.0, TILT_SMOOTHING_RATE * dt)


class PhysicsCore:
    """
    Stateless physics used by the session each frame.
    """

    FLAP_IMPULSE = FLAP_IMPULSE

    def integrate(self, bird: Bird, gravity_multiplier: float, dt: float) -> Bird:
        """
        Advances the bird by one frame of `dt` seconds.
        Mutates and returns the bird.
        """
        bird.velocity = step_velocity(bird.velocity, gravity_multiplier, dt)
        bird.y += bird.velocity * dt
        bird.angle = smooth_tilt(bird.angle, target_tilt(bird.velocity), dt)
        return bird

    def flap(self, bird: Bird, now: float) -> Bird:
        """Sets the upward impulse, overriding whatever velocity the bird had."""
        bird.velocity = self.FLAP_IMPULSE
        bird.last_flap_time = now
        return bird
