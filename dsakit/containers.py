"""Stacks and queues: bounded, minimum-tracking and built from one another."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator
from itertools import islice
from typing import Any


class MinStack:
    """A stack that reports its smallest element in constant time."""

    def __init__(self) -> None:
        self._items: list[tuple[Any, Any]] = []

    def push(self, val: Any) -> None:
        """Push ``val`` onto the stack."""
        smallest = val if not self._items else min(val, self._items[-1][1])
        self._items.append((val, smallest))

    def pop(self) -> Any:
        """Remove and return the top element."""
        if not self._items:
            raise IndexError("pop from empty stack")
        return self._items.pop()[0]

    def top(self) -> Any:
        """Return the top element without removing it."""
        if not self._items:
            raise IndexError("top of empty stack")
        return self._items[-1][0]

    def get_min(self) -> Any:
        """Return the smallest element currently on the stack."""
        if not self._items:
            raise IndexError("minimum of empty stack")
        return self._items[-1][1]

    def __len__(self) -> int:
        return len(self._items)


class BoundedQueue:
    """A fixed-capacity queue whose slots are not reused after a dequeue.

    Once ``size`` values have been enqueued the queue stays full, even if
    some of them have since been dequeued.
    """

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError("size must not be negative")
        self._size = size
        self._slots: list[Any] = []
        self._front = 0

    def is_full(self) -> bool:
        """Tell whether no further value can be enqueued."""
        return len(self._slots) >= self._size

    def is_empty(self) -> bool:
        """Tell whether there is nothing left to dequeue."""
        return self._front >= len(self._slots)

    def enqueue(self, val: Any) -> None:
        """Add ``val`` at the rear."""
        if self.is_full():
            raise OverflowError("queue is full")
        self._slots.append(val)

    def dequeue(self) -> Any:
        """Remove and return the front value."""
        if self.is_empty():
            raise IndexError("queue is empty")
        value = self._slots[self._front]
        self._front += 1
        return value

    def peek(self) -> Any:
        """Return the front value without removing it."""
        if self.is_empty():
            raise IndexError("queue is empty")
        return self._slots[self._front]

    def __iter__(self) -> Iterator[Any]:
        return islice(self._slots, self._front, None)

    def __len__(self) -> int:
        return len(self._slots) - self._front


class QueueViaStacks:
    """A first-in first-out queue built from two stacks."""

    def __init__(self) -> None:
        self._inbox: list[Any] = []
        self._outbox: list[Any] = []

    def _refill(self) -> None:
        if not self._outbox:
            while self._inbox:
                self._outbox.append(self._inbox.pop())

    def push(self, x: Any) -> None:
        """Add ``x`` at the back."""
        self._inbox.append(x)

    def pop(self) -> Any:
        """Remove and return the front value."""
        self._refill()
        if not self._outbox:
            raise IndexError("pop from empty queue")
        return self._outbox.pop()

    def peek(self) -> Any:
        """Return the front value without removing it."""
        self._refill()
        if not self._outbox:
            raise IndexError("peek at empty queue")
        return self._outbox[-1]

    def is_empty(self) -> bool:
        """Tell whether the queue holds nothing."""
        return not self._inbox and not self._outbox


class BoundedStack:
    """A fixed-capacity stack."""

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError("size must not be negative")
        self._size = size
        self._items: list[Any] = []

    def push(self, val: Any) -> None:
        """Push ``val``; raise ``OverflowError`` when the stack is full."""
        if len(self._items) >= self._size:
            raise OverflowError("stack overflow")
        self._items.append(val)

    def pop(self) -> Any:
        """Remove and return the top value."""
        if not self._items:
            raise IndexError("stack underflow")
        return self._items.pop()

    def peek(self) -> Any:
        """Return the top value without removing it."""
        if not self._items:
            raise IndexError("stack underflow")
        return self._items[-1]

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        """Iterate from the top of the stack to the bottom."""
        return reversed(self._items)


class StackViaQueue:
    """A last-in first-out stack built from queues."""

    def __init__(self) -> None:
        self._queue: deque[Any] = deque()

    def push(self, x: Any) -> None:
        """Push ``x``, moving the older values behind it."""
        fresh: deque[Any] = deque([x])
        while self._queue:
            fresh.append(self._queue.popleft())
        self._queue = fresh

    def pop(self) -> Any:
        """Remove and return the top value."""
        if not self._queue:
            raise IndexError("pop from empty stack")
        return self._queue.popleft()

    def top(self) -> Any:
        """Return the top value without removing it."""
        if not self._queue:
            raise IndexError("top of empty stack")
        return self._queue[0]

    def is_empty(self) -> bool:
        """Tell whether the stack holds nothing."""
        return not self._queue