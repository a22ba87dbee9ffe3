"""
Shared pytest configuration for the harness tests.
Ensures project root is on sys.path and provides common fixtures.
"""
import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from arraybench.benchmarks.config import HarnessConfig
from arraybench.containers import SequenceAdapter


class FakeClock:
    """Monotonic clock that advances ``step_ns`` on every read."""

    def __init__(self, step_ns=1_000_000):
        self.step_ns = step_ns
        self.now = 0
        self.reads = 0

    def __call__(self):
        self.reads += 1
        self.now += self.step_ns
        return self.now


class SkippingList(SequenceAdapter):
    """Yields the last inserted value off by one, e.g. [0, 1, 3] for [0, 1, 2]."""

    def __init__(self):
        super().__init__(list)

    def __iter__(self):
        last = len(self) - 1
        for index, value in enumerate(self._items):
            yield value + 1 if index == last else value


class TruncatingList(SequenceAdapter):
    """Iteration stops one element early."""

    def __init__(self):
        super().__init__(list)

    def __iter__(self):
        return iter(self._items[:-1])


class CountingList(SequenceAdapter):
    """Records how many times pop() was called."""

    def __init__(self):
        super().__init__(list)
        self.pops = 0
        self.pop = self._counted_pop

    def _counted_pop(self):
        self.pops += 1
        return self._items.pop()


@pytest.fixture()
def fake_clock():
    return FakeClock()


@pytest.fixture()
def small_config():
    return HarnessConfig(size=200, trials=4)


class OverrunningList(SequenceAdapter):
    """Iteration yields one extra value that continues the sequence."""

    def __init__(self):
        super().__init__(list)

    def __iter__(self):
        yield from self._items
        yield len(self._items)
