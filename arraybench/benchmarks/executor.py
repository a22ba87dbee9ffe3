from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import Callable

from ..containers import SequenceContainer
from .errors import OrderingViolation
from .load import workload

LOGGER = logging.getLogger("arraybench.benchmark.executor")

NANOS_PER_MILLI = 1_000_000

Clock = Callable[[], int]


@dataclass(frozen=True)
class PhaseTimes:
    """Elapsed nanoseconds for the three phases of one trial."""

    create: int
    ordered: int
    pop_all: int

    def millis(self) -> dict[str, int]:
        return {
            "create": self.create // NANOS_PER_MILLI,
            "ordered": self.ordered // NANOS_PER_MILLI,
            "pop_all": self.pop_all // NANOS_PER_MILLI,
        }


def run_phases(
    container: SequenceContainer,
    size: int,
    *,
    clock: Clock = time.perf_counter_ns,
) -> PhaseTimes:
    """Drive an empty container through Create, Ordered-Scan and Drain.

    The container is left empty. Any value seen out of insertion order during
    the scan raises :class:`OrderingViolation`.
    """
    values = workload(size)

    push = container.push
    start = clock()
    for value in values:
        push(value)
    create = clock() - start

    # test sequenced access for entire collection
    start = clock()
    expected = 0
    for value in container:
        if value != expected:
            raise OrderingViolation(
                f"index {expected} holds {value!r}, expected {expected}",
                index=expected,
                value=value,
            )
        expected += 1
    ordered = clock() - start
    if expected != size:
        raise OrderingViolation(
            f"container yielded {expected} values, expected {size}",
            index=expected,
        )

    # test popping all elements from the container
    pop = container.pop
    is_empty = container.is_empty
    start = clock()
    while not is_empty():
        pop()
    pop_all = clock() - start

    LOGGER.debug(
        "phases for %d values: create=%dns ordered=%dns pop-all=%dns",
        size,
        create,
        ordered,
        pop_all,
    )
    return PhaseTimes(create=create, ordered=ordered, pop_all=pop_all)


__all__ = ["Clock", "NANOS_PER_MILLI", "PhaseTimes", "run_phases"]
