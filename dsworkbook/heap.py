"""A bounded max-heap stored in a 1-based array."""

from __future__ import annotations

from collections.abc import Iterable

DEFAULT_CAPACITY = 99


class MaxHeap:
    """A priority queue that always removes its largest key first."""

    def __init__(self, keys: Iterable[int] = (), capacity: int = DEFAULT_CAPACITY) -> None:
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self._capacity = capacity
        self._heap: list[int] = [0]  # slot 0 is unused
        for key in keys:
            self.insert(key)

    @property
    def capacity(self) -> int:
        return self._capacity

    def _up_heap(self) -> None:
        heap = self._heap
        i = len(heap) - 1
        key = heap[i]
        while i != 1 and key > heap[i // 2]:
            heap[i] = heap[i // 2]
            i //= 2
        heap[i] = key

    def _down_heap(self) -> None:
        heap = self._heap
        size = len(heap) - 1
        key = heap[1]
        parent, child = 1, 2
        while child <= size:
            if child < size and heap[child + 1] > heap[child]:
                child += 1
            if key >= heap[child]:
                break
            heap[parent] = heap[child]
            parent = child
            child *= 2
        heap[parent] = key

    def insert(self, key: int) -> None:
        """Add ``key``; raise OverflowError when the heap is full."""
        if len(self) >= self._capacity:
            raise OverflowError("heap is full")
        self._heap.append(key)
        self._up_heap()

    def delete_max(self) -> int:
        """Remove and return the largest key."""
        if not self:
            raise IndexError("delete from an empty heap")
        top = self._heap[1]
        last = self._heap.pop()
        if self:
            self._heap[1] = last
            self._down_heap()
        return top

    def items(self) -> list[int]:
        """Return the keys in array order, root first."""
        return self._heap[1:]

    def __len__(self) -> int:
        return len(self._heap) - 1

    def __str__(self) -> str:
        return "".join(f"({key})" for key in self.items())