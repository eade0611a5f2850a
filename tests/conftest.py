"""Shared fixtures for debounced tests."""

import pytest
from loguru import logger

from debounced.config import DebounceConfig


class FakeHandle:
    __slots__ = ("args", "callback", "cancelled", "when")

    def __init__(self, when, callback, args):
        self.when = when
        self.callback = callback
        self.args = args
        self.cancelled = False

    def cancel(self):
        self.cancelled = True


class FakeLoop:
    """Virtual-time loop with ``time()`` and ``call_later()``."""

    def __init__(self):
        self.now = 0.0
        self.handles = []

    def time(self):
        return self.now

    def call_later(self, delay, callback, *args):
        handle = FakeHandle(self.now + delay, callback, args)
        self.handles.append(handle)
        return handle

    @property
    def pending(self):
        return [h for h in self.handles if not h.cancelled]

    def advance(self, seconds):
        """Move time forward, running due callbacks in order."""
        target = self.now + seconds
        while True:
            due = [h for h in self.pending if h.when <= target]
            if not due:
                break
            handle = min(due, key=lambda h: h.when)
            self.handles.remove(handle)
            self.now = handle.when
            handle.callback(*handle.args)
        self.now = target

    def advance_to(self, when):
        self.advance(when - self.now)


class Recorder:
    """Target stand-in that records its calls and the loop time."""

    def __init__(self, loop, result=None):
        self.loop = loop
        self.calls = []
        self.result = result

    def __call__(self, *args, **kwargs):
        self.calls.append((self.loop.time(), args, kwargs))
        if self.result is not None:
            return self.result(*args, **kwargs)
        return args

    @property
    def times(self):
        return [round(t, 6) for t, _, _ in self.calls]

    @property
    def args(self):
        return [a for _, a, _ in self.calls]


@pytest.fixture
def loop():
    return FakeLoop()


@pytest.fixture
def target(loop):
    return Recorder(loop)


@pytest.fixture
def default_config():
    return DebounceConfig()


@pytest.fixture
def log_records():
    records = []
    logger.enable("debounced")
    sink_id = logger.add(records.append, level="DEBUG", format="{message}")
    yield records
    logger.remove(sink_id)
    logger.disable("debounced")
