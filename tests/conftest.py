"""Shared pytest fixtures."""

import queue

import pytest

from clickpath.errors import InputSimulationError
from clickpath.session import SessionController


class FakeMouse:
    """Records every simulated action instead of touching the OS."""

    def __init__(self, pos=(0, 0)):
        self.pos = pos
        self.actions = []
        self.fail = False

    def position(self):
        if self.fail:
            raise InputSimulationError("no display")
        self.actions.append(("position",))
        return self.pos

    def click(self):
        if self.fail:
            raise InputSimulationError("no display")
        self.actions.append(("click",))

    def click_at(self, x, y):
        if self.fail:
            raise InputSimulationError("no display")
        self.actions.append(("click_at", x, y))


class FakeClock:
    """Monotonic nanosecond clock that only moves when told to."""

    def __init__(self, now=100_000_000_000):
        self.now = now

    def __call__(self):
        return self.now

    def advance(self, ms):
        self.now += round(ms * 1_000_000)


class FakeSleep:
    """Collects sleep durations; optionally runs a hook on each call."""

    def __init__(self, hook=None):
        self.calls = []
        self.hook = hook

    def __call__(self, seconds):
        self.calls.append(seconds)
        if self.hook is not None:
            self.hook(len(self.calls))


class FakeHotkeys:
    def __init__(self):
        self.stopped = False

    def stop(self):
        self.stopped = True


@pytest.fixture
def commands():
    return queue.Queue()


@pytest.fixture
def mouse():
    return FakeMouse(pos=(10, 20))


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def sleep():
    return FakeSleep()


@pytest.fixture
def make_sleep():
    """Factory for sleeps that run a hook with the call count after each call."""
    return FakeSleep


@pytest.fixture
def click_file(tmp_path):
    return str(tmp_path / "click_path.json")


@pytest.fixture
def controller(commands, mouse, clock, sleep, click_file):
    return SessionController(
        commands,
        mouse,
        file_path=click_file,
        hotkeys=FakeHotkeys(),
        clock=clock,
        sleep=sleep,
    )
