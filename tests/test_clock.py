import unittest

from flappy.clock import CancelToken, FrameScheduler, SimulationClock
from flappy.constants import MIN_DELTA_TIME

from .helpers import FakeTime


class TestSimulationClock(unittest.TestCase):

    def setUp(self):
        self.time = FakeTime()
        self.clock = SimulationClock(self.time)

    def test_tick_measures_elapsed_time(self):
        self.clock.reset()
        self.time.advance(0.02)
        self.assertAlmostEqual(self.clock.tick(), 0.02)
        self.time.advance(0.05)
        self.assertAlmostEqual(self.clock.tick(), 0.05)

    def test_zero_delta_is_clamped(self):
        self.clock.reset()
        self.assertEqual(self.clock.tick(), MIN_DELTA_TIME)

    def test_backwards_clock_is_clamped(self):
        self.clock.reset()
        self.time.advance(-3.0)
        self.assertEqual(self.clock.tick(), MIN_DELTA_TIME)

    def test_nan_is_clamped(self):
        self.clock.reset()
        self.time.now = float("nan")
        self.assertEqual(self.clock.tick(), MIN_DELTA_TIME)


class TestFrameScheduler(unittest.TestCase):

    def setUp(self):
        self.scheduler = FrameScheduler()
        self.calls = []

    def test_runs_pending_once(self):
        self.scheduler.request_frame(lambda: self.calls.append(1), CancelToken())
        self.assertTrue(self.scheduler.has_pending)
        self.assertTrue(self.scheduler.run_pending())
        self.assertFalse(self.scheduler.run_pending())
        self.assertEqual(self.calls, [1])

    def test_cancelled_token_never_runs(self):
        token = CancelToken()
        self.scheduler.request_frame(lambda: self.calls.append(1), token)
        self.assertTrue(token.cancel())
        self.assertFalse(self.scheduler.has_pending)
        self.assertFalse(self.scheduler.run_pending())
        self.assertEqual(self.calls, [])

    def test_cancel_is_effective_only_once(self):
        token = CancelToken()
        self.assertTrue(token.cancel())
        self.assertFalse(token.cancel())
        self.assertTrue(token.cancelled)

    def test_new_request_replaces_old(self):
        self.scheduler.request_frame(lambda: self.calls.append("old"), CancelToken())
        self.scheduler.request_frame(lambda: self.calls.append("new"), CancelToken())
        self.scheduler.run_pending()
        self.assertEqual(self.calls, ["new"])


if __name__ == "__main__":
    unittest.main()
