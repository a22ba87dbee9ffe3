from __future__ import annotations

from .errors import ConfigurationError


def workload(size: int) -> range:
    """Values pushed during the Create phase: ``0, 1, ..., size - 1``.

    A ``range`` is lazy and can be iterated again for every trial, so each
    variant receives the same logical input without materialising it.
    """
    if size < 0:
        raise ConfigurationError(f"workload size must be >= 0, got {size}")
    return range(size)


__all__ = ["workload"]
