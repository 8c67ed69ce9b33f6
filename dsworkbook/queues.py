"""Bounded queues: a linear queue, a circular queue and a circular deque."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Generic, TypeVar

T = TypeVar("T")


class QueueFullError(Exception):
    """Raised when adding to a full queue."""


class QueueEmptyError(IndexError):
    """Raised when removing from an empty queue."""


def _check_capacity(capacity: int) -> None:
    if capacity < 1:
        raise ValueError("capacity must be at least 1")


class LinearQueue(Generic[T]):
    """A queue whose slots are never reused: once ``capacity`` items have
    been enqueued it stays full, even after items are dequeued."""

    def __init__(self, capacity: int = 100) -> None:
        _check_capacity(capacity)
        self._capacity = capacity
        self._slots: list[T] = []
        self._front = 0

    def enqueue(self, item: T) -> None:
        if self.is_full():
            raise QueueFullError("queue is full")
        self._slots.append(item)

    def dequeue(self) -> T:
        if self.is_empty():
            raise QueueEmptyError("dequeue from an empty queue")
        item = self._slots[self._front]
        self._front += 1
        return item

    def is_empty(self) -> bool:
        return self._front == len(self._slots)

    def is_full(self) -> bool:
        return len(self._slots) == self._capacity

    def __len__(self) -> int:
        return len(self._slots) - self._front

    def __iter__(self) -> Iterator[T]:
        """Iterate from front to rear."""
        return iter(self._slots[self._front:])


class _RingBuffer(Generic[T]):
    """Fixed array of ``capacity`` slots; one slot always stays free."""

    def __init__(self, capacity: int) -> None:
        _check_capacity(capacity)
        self._capacity = capacity
        self._slots: list[T | None] = [None] * capacity
        self._front = 0
        self._rear = 0

    def _step(self, index: int, delta: int) -> int:
        return (index + delta) % self._capacity

    def _ring_empty(self) -> bool:
        return self._front == self._rear

    def _ring_full(self) -> bool:
        return self._front == self._step(self._rear, 1)

    def _ring_len(self) -> int:
        return (self._rear - self._front) % self._capacity

    def _ring_iter(self) -> Iterator[T]:
        for offset in range(1, self._ring_len() + 1):
            yield self._slots[self._step(self._front, offset)]  # type: ignore[misc]

    def _push_rear(self, item: T) -> None:
        if self._ring_full():
            raise QueueFullError("queue is full")
        self._rear = self._step(self._rear, 1)
        self._slots[self._rear] = item

    def _pop_front(self) -> T:
        if self._ring_empty():
            raise QueueEmptyError("queue is empty")
        self._front = self._step(self._front, 1)
        item = self._slots[self._front]
        self._slots[self._front] = None
        return item  # type: ignore[return-value]


class CircularQueue(_RingBuffer[T]):
    """A circular queue holding up to ``capacity - 1`` items."""

    def __init__(self, capacity: int = 10) -> None:
        super().__init__(capacity)

    def enqueue(self, item: T) -> None:
        self._push_rear(item)

    def dequeue(self) -> T:
        return self._pop_front()

    def peek(self) -> T:
        if self.is_empty():
            raise QueueEmptyError("peek at an empty queue")
        return self._slots[self._step(self._front, 1)]  # type: ignore[return-value]

    def is_empty(self) -> bool:
        return self._ring_empty()

    def is_full(self) -> bool:
        return self._ring_full()

    def __len__(self) -> int:
        return self._ring_len()

    def __iter__(self) -> Iterator[T]:
        """Iterate from front to rear."""
        return self._ring_iter()


class CircularDeque(_RingBuffer[T]):
    """A double-ended queue on a ring of ``capacity`` slots."""

    def __init__(self, capacity: int = 10) -> None:
        super().__init__(capacity)

    def add_front(self, item: T) -> None:
        if self.is_full():
            raise QueueFullError("deque is full")
        self._slots[self._front] = item
        self._front = self._step(self._front, -1)

    def add_rear(self, item: T) -> None:
        self._push_rear(item)

    def delete_front(self) -> T:
        return self._pop_front()

    def delete_rear(self) -> T:
        if self.is_empty():
            raise QueueEmptyError("deque is empty")
        item = self._slots[self._rear]
        self._slots[self._rear] = None
        self._rear = self._step(self._rear, -1)
        return item  # type: ignore[return-value]

    def is_empty(self) -> bool:
        return self._ring_empty()

    def is_full(self) -> bool:
        return self._ring_full()

    def __len__(self) -> int:
        return self._ring_len()

    def __iter__(self) -> Iterator[T]:
        """Iterate from front to rear."""
        return self._ring_iter()


def deque_palindrome(text: str) -> bool:
    """Return True when ``text`` reads the same from both ends, exactly."""
    deque: CircularDeque[str] = CircularDeque(capacity=len(text) + 1)
    for ch in text:
        deque.add_rear(ch)
    while len(deque) > 1:
        if deque.delete_front() != deque.delete_rear():
            return False
    return True