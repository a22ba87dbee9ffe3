from __future__ import annotations

import itertools
from typing import Any, Callable, Iterator, Protocol

import numpy as np


class SequenceContainer(Protocol):
    """Capability set every container under test must offer to the harness."""

    def push(self, value: Any) -> None: ...

    def pop(self) -> Any: ...

    def __iter__(self) -> Iterator[Any]: ...

    def is_empty(self) -> bool: ...


class SequenceAdapter:
    """Expose a builtin sequence (list, deque, array) through the push/pop contract."""

    def __init__(self, factory: Callable[[], Any]) -> None:
        self._items = factory()
        # Bound methods keep the adapter from adding a call layer per element.
        self.push = self._items.append
        self.pop = self._items.pop

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def is_empty(self) -> bool:
        return not self._items


class NumpyVector:
    """Growable int64 buffer backed by a numpy array."""

    def __init__(self, growth_factor: float = 2.0, initial_capacity: int = 16) -> None:
        if growth_factor <= 1.0:
            raise ValueError("NumpyVector growth_factor must be > 1")
        if initial_capacity <= 0:
            raise ValueError("NumpyVector initial_capacity must be > 0")
        self._growth_factor = growth_factor
        self._data = np.empty(initial_capacity, dtype=np.int64)
        self._length = 0

    @property
    def capacity(self) -> int:
        return int(self._data.shape[0])

    def push(self, value: int) -> None:
        if self._length == self._data.shape[0]:
            self._grow()
        self._data[self._length] = value
        self._length += 1

    def pop(self) -> int:
        if self._length == 0:
            raise IndexError("pop from empty NumpyVector")
        self._length -= 1
        return int(self._data[self._length])

    def __iter__(self) -> Iterator[int]:
        return iter(self._data[: self._length])

    def __len__(self) -> int:
        return self._length

    def is_empty(self) -> bool:
        return self._length == 0

    def _grow(self) -> None:
        current = self.capacity
        capacity = max(int(current * self._growth_factor), current + 1)
        data = np.empty(capacity, dtype=self._data.dtype)
        data[: self._length] = self._data[: self._length]
        self._data = data


class SegmentArray:
    """Array of preallocated segments whose capacities grow by ``radix``.

    Segment ``k`` holds ``first_segment * radix ** k`` slots. Every segment but
    the last is always full, so pushes never copy existing elements and pops
    release a segment as soon as it empties.
    """

    def __init__(self, radix: int = 2, first_segment: int = 64) -> None:
        if radix < 2:
            raise ValueError("SegmentArray radix must be >= 2")
        if first_segment <= 0:
            raise ValueError("SegmentArray first_segment must be > 0")
        self._radix = radix
        self._first_segment = first_segment
        self._segments: list[list[Any]] = []
        self._tail: list[Any] = []
        self._offset = 0
        self._length = 0

    @property
    def radix(self) -> int:
        return self._radix

    def push(self, value: Any) -> None:
        if self._offset == len(self._tail):
            self._tail = [None] * self._segment_capacity(len(self._segments))
            self._segments.append(self._tail)
            self._offset = 0
        self._tail[self._offset] = value
        self._offset += 1
        self._length += 1

    def pop(self) -> Any:
        if self._length == 0:
            raise IndexError("pop from empty SegmentArray")
        self._offset -= 1
        value = self._tail[self._offset]
        self._tail[self._offset] = None
        self._length -= 1
        if self._offset == 0:
            self._segments.pop()
            if self._segments:
                self._tail = self._segments[-1]
                self._offset = len(self._tail)
            else:
                self._tail = []
        return value

    def __iter__(self) -> Iterator[Any]:
        if not self._segments:
            return iter(())
        full = itertools.chain.from_iterable(self._segments[:-1])
        return itertools.chain(full, itertools.islice(self._tail, self._offset))

    def __len__(self) -> int:
        return self._length

    def is_empty(self) -> bool:
        return self._length == 0

    def _segment_capacity(self, index: int) -> int:
        return self._first_segment * self._radix**index


__all__ = [
    "NumpyVector",
    "SegmentArray",
    "SequenceAdapter",
    "SequenceContainer",
]
