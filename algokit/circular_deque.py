"""A double-ended queue with a fixed capacity."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator

EMPTY = -1
"""Value reported by :meth:`CircularDeque.front` and :meth:`CircularDeque.rear` when empty."""


class CircularDeque:
    """Deque holding at most ``capacity`` integers.

    Insertions into a full deque and deletions from an empty one are refused
    and report ``False``.
    """

    def __init__(self, capacity: int) -> None:
        if capacity < 0:
            raise ValueError(f"capacity must be non-negative, got {capacity}")
        self._capacity = capacity
        self._items: deque[int] = deque()

    @property
    def capacity(self) -> int:
        """Maximum number of items the deque holds."""
        return self._capacity

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[int]:
        return iter(self._items)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(capacity={self._capacity}, items={list(self._items)})"

    def insert_front(self, value: int) -> bool:
        """Add ``value`` at the front; return False if the deque is full."""
        if self.is_full():
            return False
        self._items.appendleft(value)
        return True

    def insert_last(self, value: int) -> bool:
        """Add ``value`` at the rear; return False if the deque is full."""
        if self.is_full():
            return False
        self._items.append(value)
        return True

    def delete_front(self) -> bool:
        """Remove the front item; return False if the deque is empty."""
        if self.is_empty():
            return False
        self._items.popleft()
        return True

    def delete_last(self) -> bool:
        """Remove the rear item; return False if the deque is empty."""
        if self.is_empty():
            return False
        self._items.pop()
        return True

    def front(self) -> int:
        """Return the front item, or -1 when the deque is empty."""
        return self._items[0] if self._items else EMPTY

    def rear(self) -> int:
        """Return the rear item, or -1 when the deque is empty."""
        return self._items[-1] if self._items else EMPTY

    def is_empty(self) -> bool:
        """Return True if the deque holds no items."""
        return not self._items

    def is_full(self) -> bool:
        """Return True if the deque holds ``capacity`` items."""
        return len(self._items) == self._capacity