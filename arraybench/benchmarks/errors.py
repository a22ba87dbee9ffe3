from __future__ import annotations

from typing import Any


class BenchmarkError(Exception):
    """Raised when the benchmark run has to be aborted."""


class ConfigurationError(BenchmarkError):
    """Raised for settings that would make the measurement meaningless."""


class OrderingViolation(BenchmarkError):
    """Raised when a container yields a value out of insertion order during the scan."""

    def __init__(self, message: str, index: int, value: Any = None) -> None:
        super().__init__(message)
        self.index = index
        self.value = value


__all__ = ["BenchmarkError", "ConfigurationError", "OrderingViolation"]
