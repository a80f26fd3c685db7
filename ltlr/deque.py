"""A growable double-ended queue backed by a circular buffer."""

from __future__ import annotations

from typing import Generic, Iterator, TypeVar

T = TypeVar("T")

_RESIZE_FACTOR = 2
DEFAULT_CAPACITY = 16


class Deque(Generic[T]):
    """Double-ended queue; index 0 is the back, the last index is the front.

    The buffer doubles its capacity when an element is pushed while it is full.
    """

    def __init__(self, initial_capacity: int = DEFAULT_CAPACITY) -> None:
        if initial_capacity < 1:
            raise ValueError("initial capacity must be at least 1")
        self._slots: list[T | None] = [None] * initial_capacity
        self._back = 0
        self._size = 0

    @property
    def capacity(self) -> int:
        """Number of elements the buffer holds before it has to grow."""
        return len(self._slots)

    def _slot(self, index: int) -> int:
        return (self._back + index) % len(self._slots)

    def _grow_if_full(self) -> None:
        if self._size < len(self._slots):
            return
        items = list(self)
        new_capacity = len(self._slots) * _RESIZE_FACTOR
        self._slots = items + [None] * (new_capacity - len(items))
        self._back = 0

    def push_front(self, value: T) -> None:
        self._grow_if_full()
        self._slots[self._slot(self._size)] = value
        self._size += 1

    def push_back(self, value: T) -> None:
        self._grow_if_full()
        self._back = (self._back - 1) % len(self._slots)
        self._slots[self._back] = value
        self._size += 1

    def _require_items(self) -> None:
        if self._size == 0:
            raise IndexError("deque is empty")

    def pop_front(self) -> T:
        self._require_items()
        position = self._slot(self._size - 1)
        value = self._slots[position]
        self._slots[position] = None
        self._size -= 1
        return value  # type: ignore[return-value]

    def pop_back(self) -> T:
        self._require_items()
        value = self._slots[self._back]
        self._slots[self._back] = None
        self._back = (self._back + 1) % len(self._slots)
        self._size -= 1
        return value  # type: ignore[return-value]

    def peek_front(self) -> T:
        self._require_items()
        return self._slots[self._slot(self._size - 1)]  # type: ignore[return-value]

    def peek_back(self) -> T:
        self._require_items()
        return self._slots[self._back]  # type: ignore[return-value]

    def _normalise(self, index: int) -> int:
        if index < 0:
            index += self._size
        if not 0 <= index < self._size:
            raise IndexError("deque index out of range")
        return index

    def __getitem__(self, index: int) -> T:
        return self._slots[self._slot(self._normalise(index))]  # type: ignore[return-value]

    def __setitem__(self, index: int, value: T) -> None:
        self._slots[self._slot(self._normalise(index))] = value

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[T]:
        for index in range(self._size):
            yield self._slots[self._slot(index)]  # type: ignore[misc]

    def clear(self) -> None:
        self._slots = [None] * len(self._slots)
        self._back = 0
        self._size = 0