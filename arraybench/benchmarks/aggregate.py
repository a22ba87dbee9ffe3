"""Outlier-trimmed reduction of per-trial phase timings."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Sequence, TYPE_CHECKING

import pandas as pd

from .errors import ConfigurationError

if TYPE_CHECKING:
    from .executor import PhaseTimes

PHASES: tuple[str, ...] = ("create", "ordered", "pop_all")

# Lowest and highest samples dropped before averaging.
TRIM_LOW = 1
TRIM_HIGH = 2
# The historical divisor is ``count - 2`` although ``count - 3`` samples are
# summed. Kept as the default so reported numbers stay comparable.
DIVISOR_OFFSET = 2
CORRECTED_DIVISOR_OFFSET = TRIM_LOW + TRIM_HIGH
MIN_TRIALS = TRIM_LOW + TRIM_HIGH + 1


@dataclass(frozen=True)
class ReportRow:
    label: str
    create: int
    ordered: int
    pop_all: int


def trimmed_mean(durations_ms: Iterable[int], *, divisor_offset: int = DIVISOR_OFFSET) -> int:
    """Sort, drop ``TRIM_LOW`` low and ``TRIM_HIGH`` high values, average the rest.

    The sum of the kept values is integer-divided by ``count - divisor_offset``.
    """
    if divisor_offset not in (DIVISOR_OFFSET, CORRECTED_DIVISOR_OFFSET):
        raise ConfigurationError(
            f"divisor_offset must be {DIVISOR_OFFSET} or {CORRECTED_DIVISOR_OFFSET}, got {divisor_offset}"
        )
    column = pd.Series(list(durations_ms), dtype="int64").sort_values(ignore_index=True)
    count = len(column)
    if count < MIN_TRIALS:
        raise ConfigurationError(
            f"trimmed mean needs at least {MIN_TRIALS} values, got {count}"
        )
    kept = column.iloc[TRIM_LOW : count - TRIM_HIGH]
    return int(kept.sum()) // (count - divisor_offset)


def trial_frame(trials: Sequence[PhaseTimes]) -> pd.DataFrame:
    """One row per trial, one whole-millisecond column per phase."""
    return pd.DataFrame([trial.millis() for trial in trials], columns=list(PHASES))


def aggregate_trials(
    label: str,
    trials: Sequence[PhaseTimes],
    *,
    corrected_divisor: bool = False,
) -> ReportRow:
    offset = CORRECTED_DIVISOR_OFFSET if corrected_divisor else DIVISOR_OFFSET
    frame = trial_frame(trials)
    values = {phase: trimmed_mean(frame[phase], divisor_offset=offset) for phase in PHASES}
    return ReportRow(label=label, **values)


__all__ = [
    "CORRECTED_DIVISOR_OFFSET",
    "DIVISOR_OFFSET",
    "MIN_TRIALS",
    "PHASES",
    "ReportRow",
    "TRIM_HIGH",
    "TRIM_LOW",
    "aggregate_trials",
    "trial_frame",
    "trimmed_mean",
]
