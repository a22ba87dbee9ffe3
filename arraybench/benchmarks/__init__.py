"""
Benchmarking harness for growable sequence containers.

This package drives every container variant through the same append, ordered
scan and drain workload, repeats the measurement over several trials and
reports an outlier-trimmed millisecond figure per phase.
"""

from .main import main

__all__ = ["main"]
