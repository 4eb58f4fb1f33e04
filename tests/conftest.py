import threading

import pytest

from engine import AnimationController, Renderer


class RecordingRenderer(Renderer):
    """Keeps every hook call so tests can inspect the order of events."""

    def __init__(self):
        self.calls = []
        self.stats = []
        self.draws = []

    def draw(self, values):
        self.draws.append(list(values))
        self.calls.append(("draw", list(values)))

    def mark(self, index, marker):
        self.calls.append(("mark", index, marker.value))

    def unmark(self, index, marker):
        self.calls.append(("unmark", index, marker.value))

    def clear_marks(self):
        self.calls.append(("clear",))

    def show_stats(self, stats):
        self.stats.append(dict(stats))

    def show_event(self, algo_key, event):
        self.calls.append(("event", event.kind.value, event.i, event.j))

    def set_controls_enabled(self, enabled):
        self.calls.append(("controls", enabled))


class FakeClock:
    def __init__(self, start=100.0, step=0.01):
        self.now = start
        self.step = step

    def __call__(self):
        self.now += self.step
        return self.now


@pytest.fixture
def renderer():
    return RecordingRenderer()


@pytest.fixture
def sleeps():
    return []


@pytest.fixture
def make_controller(renderer, sleeps):
    def factory(values=None, **kwargs):
        kwargs.setdefault("renderer", renderer)
        kwargs.setdefault("sleep", sleeps.append)
        kwargs.setdefault("clock", FakeClock())
        return AnimationController(values=values, **kwargs)
    return factory


@pytest.fixture
def gate():
    """A sleep function that blocks until the test opens the gate."""
    event = threading.Event()

    def blocking_sleep(_seconds):
        event.wait(timeout=5)

    blocking_sleep.open = event.set
    return blocking_sleep
