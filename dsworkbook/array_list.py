"""A list stored in a fixed-capacity array, indexed from zero."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Generic, TypeVar

T = TypeVar("T")

DEFAULT_CAPACITY = 100


class ListFullError(Exception):
    """Raised when adding to a list that has reached its capacity."""


class ArrayList(Generic[T]):
    """A sequence of at most ``capacity`` items with shifting insert and delete."""

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self._capacity = capacity
        self._items: list[T] = []

    @property
    def capacity(self) -> int:
        return self._capacity

    def append(self, item: T) -> None:
        """Add ``item`` after the last element."""
        if self.is_full():
            raise ListFullError("list is full")
        self._items.append(item)

    def insert(self, pos: int, item: T) -> None:
        """Insert ``item`` at index ``pos``, shifting later items right."""
        if self.is_full():
            raise ListFullError("list is full")
        if not 0 <= pos <= len(self._items):
            raise IndexError(f"invalid position: {pos}")
        self._items.insert(pos, item)

    def delete(self, pos: int) -> T:
        """Remove and return the item at index ``pos``."""
        if not 0 <= pos < len(self._items):
            raise IndexError(f"invalid position: {pos}")
        return self._items.pop(pos)

    def is_empty(self) -> bool:
        return not self._items

    def is_full(self) -> bool:
        return len(self._items) == self._capacity

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __str__(self) -> str:
        return "".join(str(item) for item in self._items)