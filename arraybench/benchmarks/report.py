from __future__ import annotations

from typing import TextIO

from .aggregate import ReportRow
from .config import ContainerVariant


def announce(variant: ContainerVariant, stream: TextIO | None = None) -> None:
    print(f"measuring {variant.label}...", file=stream)


def format_row(row: ReportRow) -> str:
    return f"create: {row.create}, ordered: {row.ordered}, pop-all: {row.pop_all}"


def emit(row: ReportRow, stream: TextIO | None = None) -> None:
    print(format_row(row), file=stream)


__all__ = ["announce", "emit", "format_row"]
