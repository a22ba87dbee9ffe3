from __future__ import annotations

import array
import collections
import functools
from dataclasses import dataclass, field
from typing import Callable, Iterable, Iterator

from ..containers import NumpyVector, SegmentArray, SequenceAdapter, SequenceContainer
from .aggregate import MIN_TRIALS
from .errors import ConfigurationError

DEFAULT_SIZE = 100_000_000
DEFAULT_TRIALS = 7


@dataclass(frozen=True)
class HarnessConfig:
    """Run-wide settings shared by every variant so the timings stay comparable."""

    size: int = DEFAULT_SIZE
    trials: int = DEFAULT_TRIALS
    corrected_divisor: bool = False

    def __post_init__(self) -> None:
        if self.size < 0:
            raise ConfigurationError(f"workload size must be >= 0, got {self.size}")
        if self.trials < MIN_TRIALS:
            raise ConfigurationError(
                f"trimmed aggregation needs at least {MIN_TRIALS} trials, got {self.trials}"
            )


@dataclass(frozen=True)
class ContainerVariant:
    """One container design under comparison."""

    name: str
    label: str
    factory: Callable[[], SequenceContainer]
    reuse: bool = False
    notes: str | None = None


@dataclass
class BenchmarkPlan:
    """Ordered set of variants the harness will measure."""

    variants: list[ContainerVariant] = field(default_factory=list)

    def __iter__(self) -> Iterator[ContainerVariant]:
        return iter(self.variants)

    def __len__(self) -> int:
        return len(self.variants)

    def names(self) -> list[str]:
        return [variant.name for variant in self.variants]

    def select(self, names: Iterable[str]) -> BenchmarkPlan:
        wanted = list(dict.fromkeys(name for name in names if name))
        if not wanted:
            return self
        lookup = {variant.name: variant for variant in self.variants}
        unknown = [name for name in wanted if name not in lookup]
        if unknown:
            raise ConfigurationError(
                f"unknown variant(s) {', '.join(unknown)}; choose from {', '.join(lookup)}"
            )
        return BenchmarkPlan(variants=[lookup[name] for name in wanted])


def default_benchmark_plan() -> BenchmarkPlan:
    """Return the default suite of container variants."""

    variants = [
        ContainerVariant(
            name="list",
            label="builtins.list",
            factory=functools.partial(SequenceAdapter, list),
        ),
        ContainerVariant(
            name="deque",
            label="collections.deque",
            factory=functools.partial(SequenceAdapter, collections.deque),
        ),
        ContainerVariant(
            name="array",
            label="array.array('q')",
            factory=functools.partial(SequenceAdapter, functools.partial(array.array, "q")),
        ),
        ContainerVariant(
            name="numpy-vector",
            label="NumpyVector",
            factory=NumpyVector,
            reuse=True,
            notes="growth factor 2.0",
        ),
    ]
    variants.extend(
        ContainerVariant(
            name="segment-array" if radix == 2 else f"segment-array-r{radix}",
            label=f"SegmentArray (r={radix})",
            factory=functools.partial(SegmentArray, radix=radix),
            reuse=True,
        )
        for radix in (2, 3, 4)
    )
    return BenchmarkPlan(variants=variants)


def parse_variant_names(value: str | None) -> list[str]:
    if not value:
        return []
    return [item.strip() for item in value.split(",") if item.strip()]


__all__ = [
    "DEFAULT_SIZE",
    "DEFAULT_TRIALS",
    "BenchmarkPlan",
    "ContainerVariant",
    "HarnessConfig",
    "default_benchmark_plan",
    "parse_variant_names",
]
