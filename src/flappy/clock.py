"""
clock.py: Simulation time and the cancellable per-frame schedule.
"""

import time
from typing import Callable, Optional

from .constants import MIN_DELTA_TIME


class SimulationClock:
    """Measures real time between frames from an injectable time source."""

    def __init__(self, time_source: Callable[[], float] = time.perf_counter):
        self.time_source = time_source
        self.last_time = time_source()

    def now(self) -> float:
        return self.time_source()

    def reset(self) -> float:
        """Captures the reference time for a new run."""
        self.last_time = self.time_source()
        return self.last_time

    def tick(self) -> float:
        """Seconds since the previous tick, never less than MIN_DELTA_TIME."""
        now = self.time_source()
        dt = now - self.last_time
        self.last_time = now
        # NaN fails the comparison too and is replaced
        if not dt >= MIN_DELTA_TIME:
            dt = MIN_DELTA_TIME
        return dt


class CancelToken:
    """Guards one scheduled frame chain. Cancelling is permanent."""

    def __init__(self):
        self.cancelled = False

    def cancel(self) -> bool:
        """Returns True only for the call that actually cancelled."""
        if self.cancelled:
            return False
        self.cancelled = True
        return True


class FrameScheduler:
    """
    Holds at most one pending frame callback. The host calls run_pending()
    once per display refresh; nothing runs between those calls.
    """

    def __init__(self):
        self._pending: Optional[Callable[[], None]] = None
        self._token: Optional[CancelToken] = None

    @property
    def has_pending(self) -> bool:
        return (self._pending is not None
                and self._token is not None
                and not self._token.cancelled)

    def request_frame(self, callback: Callable[[], None], token: CancelToken):
        """Queues `callback` for the next refresh, replacing any earlier request."""
        self._pending = callback
        self._token = token

    def run_pending(self) -> bool:
        """Runs the queued frame if its token is still live. Returns whether it ran."""
        callback, token = self._pending, self._token
        self._pending = None
        self._token = None
        if callback is None or token is None or token.cancelled:
            return False
        callback()
        return True
