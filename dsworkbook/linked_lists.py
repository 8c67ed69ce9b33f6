"""Singly, circular and doubly linked lists with 1-based positions."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Generic, Optional, TypeVar

T = TypeVar("T")


class _Node(Generic[T]):
    __slots__ = ("data", "next")

    def __init__(self, data: T, next: Optional[_Node[T]] = None) -> None:
        self.data = data
        self.next = next


class _DNode(Generic[T]):
    __slots__ = ("data", "prev", "next")

    def __init__(self, data: Optional[T] = None) -> None:
        self.data = data
        self.prev: Optional[_DNode[T]] = None
        self.next: Optional[_DNode[T]] = None


def _empty_error() -> IndexError:
    return IndexError("no element")


def _position_error(pos: int) -> IndexError:
    return IndexError(f"invalid position: {pos}")


class SinglyLinkedList(Generic[T]):
    """A chain of nodes reachable from a head pointer."""

    def __init__(self, items: Iterable[T] = ()) -> None:
        self._head: Optional[_Node[T]] = None
        self._size = 0
        for item in items:
            self.insert_last(item)

    def insert_first(self, item: T) -> None:
        self._head = _Node(item, self._head)
        self._size += 1

    def insert_last(self, item: T) -> None:
        node = _Node(item)
        if self._head is None:
            self._head = node
        else:
            p = self._head
            while p.next is not None:
                p = p.next
            p.next = node
        self._size += 1

    def insert(self, pos: int, item: T) -> None:
        """Insert ``item`` so that it ends up at position ``pos`` (1-based)."""
        if not 1 <= pos <= self._size + 1:
            raise _position_error(pos)
        if pos == 1:
            self.insert_first(item)
            return
        p = self._head
        for _ in range(pos - 2):
            p = p.next
        p.next = _Node(item, p.next)
        self._size += 1

    def delete_first(self) -> T:
        if self._head is None:
            raise _empty_error()
        node = self._head
        self._head = node.next
        self._size -= 1
        return node.data

    def delete(self, pos: int) -> T:
        """Remove and return the item at position ``pos`` (1-based)."""
        if self._size == 0:
            raise _empty_error()
        if not 1 <= pos <= self._size:
            raise _position_error(pos)
        if pos == 1:
            return self.delete_first()
        prev = self._head
        for _ in range(pos - 2):
            prev = prev.next
        node = prev.next
        prev.next = node.next
        self._size -= 1
        return node.data

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[T]:
        p = self._head
        while p is not None:
            yield p.data
            p = p.next

    def __str__(self) -> str:
        return " -> ".join(str(item) for item in self)


class CircularLinkedList(Generic[T]):
    """A ring of nodes reached through a tail pointer; the head is tail.next."""

    def __init__(self, items: Iterable[T] = ()) -> None:
        self._tail: Optional[_Node[T]] = None
        self._size = 0
        for item in items:
            self.insert_last(item)

    def insert_first(self, item: T) -> None:
        node = _Node(item)
        if self._tail is None:
            node.next = node
            self._tail = node
        else:
            node.next = self._tail.next
            self._tail.next = node
        self._size += 1

    def insert_last(self, item: T) -> None:
        self.insert_first(item)
        self._tail = self._tail.next

    def insert(self, pos: int, item: T) -> None:
        """Insert ``item`` so that it ends up at position ``pos`` (1-based)."""
        if not 1 <= pos <= self._size + 1:
            raise _position_error(pos)
        if pos == 1:
            self.insert_first(item)
        elif pos == self._size + 1:
            self.insert_last(item)
        else:
            prev = self._tail
            for _ in range(pos - 1):
                prev = prev.next
            prev.next = _Node(item, prev.next)
            self._size += 1

    def delete_first(self) -> T:
        if self._tail is None:
            raise _empty_error()
        node = self._tail.next
        if node is self._tail:
            self._tail = None
        else:
            self._tail.next = node.next
        self._size -= 1
        return node.data

    def delete_last(self) -> T:
        if self._tail is None:
            raise _empty_error()
        node = self._tail
        if node.next is node:
            self._tail = None
        else:
            prev = node.next
            while prev.next is not node:
                prev = prev.next
            prev.next = node.next
            self._tail = prev
        self._size -= 1
        return node.data

    def delete(self, pos: int) -> T:
        """Remove and return the item at position ``pos`` (1-based)."""
        if self._size == 0:
            raise _empty_error()
        if not 1 <= pos <= self._size:
            raise _position_error(pos)
        if pos == 1:
            return self.delete_first()
        if pos == self._size:
            return self.delete_last()
        prev = self._tail.next
        for _ in range(pos - 2):
            prev = prev.next
        node = prev.next
        prev.next = node.next
        self._size -= 1
        return node.data

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[T]:
        if self._tail is None:
            return
        p = self._tail.next
        for _ in range(self._size):
            yield p.data
            p = p.next

    def __str__(self) -> str:
        return " -> ".join(str(item) for item in self)


class DoublyLinkedList(Generic[T]):
    """Nodes linked both ways between a header and a trailer sentinel."""

    def __init__(self, items: Iterable[T] = ()) -> None:
        self._header: _DNode[T] = _DNode()
        self._trailer: _DNode[T] = _DNode()
        self._header.next = self._trailer
        self._trailer.prev = self._header
        self._size = 0
        for item in items:
            self.insert_last(item)

    def _link_after(self, p: _DNode[T], item: T) -> None:
        node = _DNode(item)
        node.prev = p
        node.next = p.next
        p.next.prev = node
        p.next = node
        self._size += 1

    def _unlink(self, node: _DNode[T]) -> T:
        node.prev.next = node.next
        node.next.prev = node.prev
        self._size -= 1
        return node.data  # type: ignore[return-value]

    def insert_first(self, item: T) -> None:
        self._link_after(self._header, item)

    def insert_last(self, item: T) -> None:
        self._link_after(self._trailer.prev, item)

    def insert(self, pos: int, item: T) -> None:
        """Insert ``item`` so that it ends up at position ``pos`` (1-based)."""
        if not 1 <= pos <= self._size + 1:
            raise _position_error(pos)
        p = self._header
        for _ in range(pos - 1):
            p = p.next
        self._link_after(p, item)

    def delete_first(self) -> T:
        if self._size == 0:
            raise _empty_error()
        return self._unlink(self._header.next)

    def delete(self, pos: int) -> T:
        """Remove and return the item at position ``pos`` (1-based)."""
        if not 1 <= pos <= self._size:
            raise _position_error(pos)
        p = self._header
        for _ in range(pos):
            p = p.next
        return self._unlink(p)

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[T]:
        p = self._header.next
        while p is not self._trailer:
            yield p.data
            p = p.next

    def __reversed__(self) -> Iterator[T]:
        p = self._trailer.prev
        while p is not self._header:
            yield p.data
            p = p.prev

    def __str__(self) -> str:
        return " <=> ".join(f"[{item}]" for item in self)