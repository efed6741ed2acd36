import random
import unittest

from flappy.constants import MIN_TOP_HEIGHT, PIPE_WIDTH
from flappy.data_models import Pipe
from flappy.levels import get_level
from flappy.pipes import PipeField

BIRD_X = 50


class TestPipeSpawning(unittest.TestCase):

    def setUp(self):
        self.field = PipeField(rng=random.Random(3))
        self.level = get_level(1)

    def test_spawns_only_on_frequency_multiples(self):
        spawned_on = []
        for frame in range(241):
            if self.field.maybe_spawn(frame, self.level, 480, 640) is not None:
                spawned_on.append(frame)
        self.assertEqual(spawned_on, [0, 120, 240])
        self.assertEqual(len(self.field.pipes), 3)

    def test_new_pipe_layout(self):
        pipe = self.field.maybe_spawn(0, self.level, 480, 640)
        self.assertEqual(pipe.x, 480.0)
        self.assertFalse(pipe.passed)
        self.assertEqual(pipe.bottom_y, pipe.top_height + self.level.gap)

    def test_top_height_range(self):
        for _ in range(1000):
            top = self.field.random_top_height(640)
            self.assertGreaterEqual(top, MIN_TOP_HEIGHT)
            self.assertLess(top, 640 / 2 + MIN_TOP_HEIGHT)

    def test_gap_is_fixed_at_creation(self):
        pipe = self.field.maybe_spawn(0, self.level, 480, 640)
        self.field.advance(get_level(3), BIRD_X)
        self.assertEqual(pipe.gap, get_level(1).gap)


class TestPipeAdvance(unittest.TestCase):

    def setUp(self):
        self.field = PipeField(rng=random.Random(0))
        self.level = get_level(1)

    def test_moves_by_level_speed(self):
        self.field.pipes = [Pipe(x=300.0, top_height=100.0, bottom_y=260.0)]
        self.field.advance(get_level(2), BIRD_X)
        self.assertEqual(self.field.pipes[0].x, 297.0)

    def test_scores_once(self):
        # Trailing edge 51 -> 49 crosses the bird
        self.field.pipes = [Pipe(x=51.0 - PIPE_WIDTH, top_height=100.0, bottom_y=260.0)]
        self.assertEqual(self.field.advance(self.level, BIRD_X), 1)
        self.assertTrue(self.field.pipes[0].passed)
        for _ in range(5):
            self.assertEqual(self.field.advance(self.level, BIRD_X), 0)

    def test_no_score_before_crossing(self):
        self.field.pipes = [Pipe(x=100.0, top_height=100.0, bottom_y=260.0)]
        self.assertEqual(self.field.advance(self.level, BIRD_X), 0)

    def test_eviction_only_below_zero(self):
        pipe = Pipe(x=2.0 - PIPE_WIDTH, top_height=100.0, bottom_y=260.0, passed=True)
        self.field.pipes = [pipe]

        self.field.advance(self.level, BIRD_X)
        self.assertEqual(pipe.trailing_edge, 0.0)
        self.assertEqual(self.field.pipes, [pipe])

        self.field.advance(self.level, BIRD_X)
        self.assertEqual(self.field.pipes, [])

    def test_eviction_keeps_order(self):
        gone = Pipe(x=-PIPE_WIDTH - 1.0, top_height=100.0, bottom_y=260.0, passed=True)
        first = Pipe(x=200.0, top_height=100.0, bottom_y=260.0)
        second = Pipe(x=400.0, top_height=120.0, bottom_y=280.0)
        self.field.pipes = [gone, first, second]
        self.field.advance(self.level, BIRD_X)
        self.assertEqual(self.field.pipes, [first, second])


if __name__ == "__main__":
    unittest.main()
