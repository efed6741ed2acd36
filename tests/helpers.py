"""
Shared fakes for the test suite.
"""


class FakeTime:
    """Manually advanced time source for SimulationClock."""

    def __init__(self, start: float = 100.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float):
        self.now += seconds


class RecordingRenderer:
    def __init__(self):
        self.snapshots = []

    def draw(self, snapshot):
        self.snapshots.append(snapshot)
