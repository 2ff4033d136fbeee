"""A singly linked list with positional insertion and deletion."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any, Optional


@dataclass(eq=False)
class _Node:
    data: Any
    next: Optional[_Node] = None


class SinglyLinkedList:
    """A singly linked list addressed by zero-based positions."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._head: Optional[_Node] = None
        for value in values:
            self.insert_end(value)

    def insert_start(self, value: Any) -> None:
        """Insert ``value`` before the first element."""
        self._head = _Node(value, self._head)

    def insert_end(self, value: Any) -> None:
        """Append ``value`` after the last element."""
        new = _Node(value)
        if self._head is None:
            self._head = new
            return
        node = self._head
        while node.next is not None:
            node = node.next
        node.next = new

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
        node.next = _Node(value, node.next)

    def delete_start(self) -> Any:
        """Remove and return the first element."""
        if self._head is None:
            raise IndexError("delete from empty list")
        removed = self._head
        self._head = removed.next
        return removed.data

    def delete_end(self) -> Any:
        """Remove and return the last element."""
        if self._head is None:
            raise IndexError("delete from empty list")
        if self._head.next is None:
            return self.delete_start()
        previous = self._head
        while previous.next.next is not None:
            previous = previous.next
        removed = previous.next
        previous.next = None
        return removed.data

    def delete_at(self, pos: int) -> Any:
        """Remove and return the element at position ``pos``."""
        if self._head is None:
            raise IndexError("delete from empty list")
        if pos < 0:
            raise IndexError("position must not be negative")
        if pos == 0:
            return self.delete_start()
        previous = self._head
        for _ in range(pos - 1):
            if previous.next is None:
                raise IndexError("position out of range")
            previous = previous.next
        removed = previous.next
        if removed is None:
            raise IndexError("position out of range")
        previous.next = removed.next
        return removed.data

    def __iter__(self) -> Iterator[Any]:
        node = self._head
        while node is not None:
            yield node.data
            node = node.next

    def __contains__(self, value: object) -> bool:
        return any(item == value for item in self)

    def __len__(self) -> int:
        return sum(1 for _ in self)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"