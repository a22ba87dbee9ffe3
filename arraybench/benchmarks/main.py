from __future__ import annotations

import argparse
import gc
import logging
import os
import sys

from .aggregate import aggregate_trials
from .config import (
    DEFAULT_SIZE,
    DEFAULT_TRIALS,
    BenchmarkPlan,
    HarnessConfig,
    default_benchmark_plan,
    parse_variant_names,
)
from .errors import BenchmarkError, ConfigurationError
from .report import announce, emit
from .runner import TrialRunner

LOGGER = logging.getLogger("arraybench.benchmark")


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Sequence container benchmark harness")
    parser.add_argument(
        "--size",
        type=int,
        default=os.environ.get("ARRAYBENCH_SIZE", str(DEFAULT_SIZE)),
        help="Number of values pushed, scanned and popped per trial",
    )
    parser.add_argument(
        "--trials",
        type=int,
        default=os.environ.get("ARRAYBENCH_TRIALS", str(DEFAULT_TRIALS)),
        help="Trials per variant (at least 4 for the trimmed mean)",
    )
    parser.add_argument(
        "--variant",
        action="append",
        dest="variants",
        help="Variant name to measure; repeat to select several (default: all)",
    )
    parser.add_argument(
        "--corrected-divisor",
        action="store_true",
        help="Divide the trimmed sum by the number of kept trials instead of trials - 2",
    )
    parser.add_argument(
        "--list-variants",
        action="store_true",
        help="Print the available variant names and exit",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Only print the planned variants without measuring them",
    )
    parser.add_argument(
        "--log-level",
        default=os.environ.get("BENCHMARK_LOG_LEVEL", "INFO"),
        help="Logging level",
    )
    return parser.parse_args(argv)


def setup_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )


def load_plan(names: list[str] | None) -> BenchmarkPlan:
    if not names:
        names = parse_variant_names(os.environ.get("ARRAYBENCH_VARIANTS"))
    return default_benchmark_plan().select(names)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    setup_logging(args.log_level)

    if args.list_variants:
        for variant in default_benchmark_plan():
            print(f"{variant.name}: {variant.label}")
        return 0

    try:
        config = HarnessConfig(
            size=args.size,
            trials=args.trials,
            corrected_divisor=args.corrected_divisor,
        )
        plan = load_plan(args.variants)
    except ConfigurationError as exc:
        LOGGER.error("Invalid benchmark configuration: %s", exc)
        return 2

    LOGGER.info("Workload size: %d", config.size)
    LOGGER.info("Trials per variant: %d", config.trials)
    LOGGER.info("Variants: %s", ", ".join(plan.names()) or "<none>")

    if args.dry_run:
        _print_plan(plan, config)
        return 0

    try:
        run_plan(plan, config)
    except BenchmarkError:
        LOGGER.exception("Benchmark aborted")
        return 1
    return 0


def run_plan(plan: BenchmarkPlan, config: HarnessConfig) -> None:
    runner = TrialRunner(config)
    for variant in plan:
        LOGGER.info(
            "Executing variant %s (reuse=%s, size=%d, trials=%d)",
            variant.name,
            variant.reuse,
            config.size,
            config.trials,
        )
        announce(variant)
        trials = runner.run(variant)
        row = aggregate_trials(
            variant.label, trials, corrected_divisor=config.corrected_divisor
        )
        emit(row)
        # The drained container is unreachable now; reclaim it before the next variant.
        gc.collect()


def _print_plan(plan: BenchmarkPlan, config: HarnessConfig) -> None:
    divisor = "corrected" if config.corrected_divisor else "trials - 2"
    print(f"Plan: size={config.size} trials={config.trials} divisor={divisor}")
    for variant in plan:
        line = f"  - {variant.name}: {variant.label}, reuse={variant.reuse}"
        if variant.notes:
            line += f" ({variant.notes})"
        print(line)


if __name__ == "__main__":
    sys.exit(main())
