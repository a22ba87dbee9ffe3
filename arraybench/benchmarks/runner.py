from __future__ import annotations

import logging
import time

from .config import ContainerVariant, HarnessConfig
from .errors import BenchmarkError
from .executor import Clock, PhaseTimes, run_phases

LOGGER = logging.getLogger("arraybench.benchmark.runner")


class TrialRunner:
    """Repeats the phase protocol ``config.trials`` times for one variant."""

    def __init__(self, config: HarnessConfig, clock: Clock = time.perf_counter_ns) -> None:
        self._config = config
        self._clock = clock

    @property
    def config(self) -> HarnessConfig:
        return self._config

    def run(self, variant: ContainerVariant) -> list[PhaseTimes]:
        trials: list[PhaseTimes] = []
        container = None
        for trial in range(1, self._config.trials + 1):
            if container is None or not variant.reuse:
                # Release the drained instance before building the next one.
                container = None
                container = variant.factory()
            if not container.is_empty():
                raise BenchmarkError(
                    f"{variant.label} container is not empty at the start of trial {trial}"
                )

            times = run_phases(container, self._config.size, clock=self._clock)
            trials.append(times)
            millis = times.millis()
            LOGGER.info(
                "  Trial %d/%d for %s: create=%dms ordered=%dms pop-all=%dms",
                trial,
                self._config.trials,
                variant.label,
                millis["create"],
                millis["ordered"],
                millis["pop_all"],
            )
        return trials


__all__ = ["TrialRunner"]
