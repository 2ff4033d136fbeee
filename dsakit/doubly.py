"""A doubly linked list with positional insertion and deletion."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any, Optional


@dataclass(eq=False)
class _Node:
    data: Any
    prev: Optional[_Node] = None
    next: Optional[_Node] = None


class DoublyLinkedList:
    """A doubly linked list with head and tail, addressed by zero-based positions."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._head: Optional[_Node] = None
        self._tail: Optional[_Node] = None
        for value in values:
            self.insert_end(value)

    def insert_start(self, value: Any) -> None:
        """Insert ``value`` before the first element."""
        new = _Node(value, None, self._head)
        if self._head is not None:
            self._head.prev = new
        self._head = new
        if self._tail is None:
            self._tail = new

    def insert_end(self, value: Any) -> None:
        """Append ``value`` after the last element."""
        new = _Node(value, self._tail, None)
        if self._tail is not None:
            self._tail.next = new
        self._tail = new
        if self._head is None:
            self._head = new

    def insert_at(self, value: Any, pos: int) -> None:
        """Insert ``value`` so that it ends up at position ``pos``."""
        if pos < 0:
            raise IndexError("position must not be negative")
        if pos == 0:
            self.insert_start(value)
            return
        node = self._head
        for _ in range(pos - 1):
            if node is None:
                break
            node = node.next
        if node is None:
            raise IndexError("position out of range")
        new = _Node(value, node, node.next)
        if node.next is not None:
            node.next.prev = new
        else:
            self._tail = new
        node.next = new

    def delete_start(self) -> Any:
        """Remove and return the first element."""
        if self._head is None:
            raise IndexError("delete from empty list")
        removed = self._head
        self._head = removed.next
        if self._head is not None:
            self._head.prev = None
        else:
            self._tail = None
        return removed.data

    def delete_end(self) -> Any:
        """Remove and return the last element."""
        if self._tail is None:
            raise IndexError("delete from empty list")
        removed = self._tail
        self._tail = removed.prev
        if self._tail is not None:
            self._tail.next = None
        else:
            self._head = None
        return removed.data

    def delete_at(self, pos: int) -> Any:
        """Remove and return the element at position ``pos``."""
        if self._head is None:
            raise IndexError("delete from empty list")
        if pos < 0:
            raise IndexError("position must not be negative")
        node = self._head
        for _ in range(pos):
            node = node.next
            if node is None:
                raise IndexError("position out of range")
        if node.prev is not None:
            node.prev.next = node.next
        else:
            self._head = node.next
        if node.next is not None:
            node.next.prev = node.prev
        else:
            self._tail = node.prev
        return node.data

    def __iter__(self) -> Iterator[Any]:
        node = self._head
        while node is not None:
            yield node.data
            node = node.next

    def __reversed__(self) -> Iterator[Any]:
        node = self._tail
        while node is not None:
            yield node.data
            node = node.prev

    def __contains__(self, value: object) -> bool:
        return any(item == value for item in self)

    def __len__(self) -> int:
        return sum(1 for _ in self)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"