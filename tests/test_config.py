import pytest

from arraybench.benchmarks.config import (
    DEFAULT_SIZE,
    DEFAULT_TRIALS,
    HarnessConfig,
    default_benchmark_plan,
    parse_variant_names,
)
from arraybench.benchmarks.errors import ConfigurationError


def test_defaults_match_the_reference_workload():
    config = HarnessConfig()
    assert (config.size, config.trials) == (DEFAULT_SIZE, DEFAULT_TRIALS)
    assert (DEFAULT_SIZE, DEFAULT_TRIALS) == (100_000_000, 7)
    assert config.corrected_divisor is False


@pytest.mark.parametrize("trials", [0, 1, 3])
def test_too_few_trials_are_rejected(trials):
    with pytest.raises(ConfigurationError):
        HarnessConfig(size=10, trials=trials)


def test_four_trials_are_accepted():
    assert HarnessConfig(size=10, trials=4).trials == 4


def test_negative_size_is_rejected():
    with pytest.raises(ConfigurationError):
        HarnessConfig(size=-5)


def test_default_plan_order_and_reuse():
    plan = default_benchmark_plan()
    assert plan.names() == [
        "list",
        "deque",
        "array",
        "numpy-vector",
        "segment-array",
        "segment-array-r3",
        "segment-array-r4",
    ]
    reused = {variant.name for variant in plan if variant.reuse}
    assert reused == {"numpy-vector", "segment-array", "segment-array-r3", "segment-array-r4"}


def test_radix_is_bound_into_the_factory():
    plan = default_benchmark_plan().select(["segment-array-r4"])
    (variant,) = list(plan)
    assert variant.label == "SegmentArray (r=4)"
    assert variant.factory().radix == 4


def test_select_keeps_requested_order():
    plan = default_benchmark_plan().select(["deque", "list"])
    assert plan.names() == ["deque", "list"]
    assert len(plan) == 2


def test_select_without_names_returns_everything():
    plan = default_benchmark_plan()
    assert plan.select([]) is plan


def test_select_unknown_variant_raises():
    with pytest.raises(ConfigurationError, match="unknown variant"):
        default_benchmark_plan().select(["list", "vec"])


def test_parse_variant_names():
    assert parse_variant_names(None) == []
    assert parse_variant_names(" list, ,deque ") == ["list", "deque"]


def test_select_drops_repeated_names():
    plan = default_benchmark_plan().select(["list", "deque", "list"])
    assert plan.names() == ["list", "deque"]
