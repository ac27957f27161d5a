"""Fixed-capacity queue and stack, and a singly linked list."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any

DEFAULT_CAPACITY = 5


class ContainerFullError(OverflowError):
    """Raised when a value is pushed into a container with no room left."""


class ContainerEmptyError(IndexError):
    """Raised when a value is taken from an empty container."""


def _check_capacity(capacity: int) -> None:
    if capacity < 1:
        raise ValueError(f"capacity must be at least 1, got {capacity}")


class BoundedQueue:
    """A first-in first-out queue with a fixed number of slots.

    Slots are not reused as values leave: once ``capacity`` values have been
    pushed the queue stays full until it has been drained and a further
    ``pop`` on the empty queue resets it.
    """

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        _check_capacity(capacity)
        self.capacity = capacity
        self._items: deque[Any] = deque()
        self._slots_used = 0

    def push(self, value: Any) -> None:
        """Add ``value`` at the back of the queue."""
        if self._slots_used >= self.capacity:
            raise ContainerFullError("Queue is full!")
        self._items.append(value)
        self._slots_used += 1

    def pop(self) -> Any:
        """Remove and return the value at the front of the queue."""
        if not self._items:
            self._slots_used = 0
            raise ContainerEmptyError("Queue is empty!")
        return self._items.popleft()

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def __repr__(self) -> str:
        return f"BoundedQueue({list(self._items)!r}, capacity={self.capacity})"


class BoundedStack:
    """A last-in first-out stack holding at most ``capacity`` values."""

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        _check_capacity(capacity)
        self.capacity = capacity
        self._items: list[Any] = []

    def push(self, value: Any) -> None:
        """Put ``value`` on top of the stack."""
        if len(self._items) >= self.capacity:
            raise ContainerFullError("Stack overflow!")
        self._items.append(value)

    def pop(self) -> Any:
        """Remove and return the value on top of the stack."""
        if not self._items:
            raise ContainerEmptyError("Stack is empty!")
        return self._items.pop()

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        """Iterate from the bottom of the stack to the top."""
        return iter(self._items)

    def __repr__(self) -> str:
        return f"BoundedStack({self._items!r}, capacity={self.capacity})"


@dataclass
class _Node:
    data: Any
    next: _Node | None = None


class LinkedList:
    """A singly linked list that grows at either end."""

    def __init__(self) -> None:
        self._head: _Node | None = None
        self._tail: _Node | None = None
        self._size = 0

    def prepend(self, value: Any) -> None:
        """Insert ``value`` at the beginning of the list."""
        node = _Node(value, self._head)
        self._head = node
        if self._tail is None:
            self._tail = node
        self._size += 1

    def append(self, value: Any) -> None:
        """Insert ``value`` at the end of the list."""
        node = _Node(value)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1

    def __iter__(self) -> Iterator[Any]:
        node = self._head
        while node is not None:
            yield node.data
            node = node.next

    def __len__(self) -> int:
        return self._size

    def __str__(self) -> str:
        if self._head is None:
            return "Nothing Found"
        return "  ".join(str(value) for value in self)

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"