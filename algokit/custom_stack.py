"""A bounded stack that can add a value to its bottom elements in O(1)."""

from __future__ import annotations

EMPTY = -1
"""Value returned by :meth:`CustomStack.pop` when the stack is empty."""


class CustomStack:
    """Stack of at most ``max_size`` integers with lazy bottom-k increments."""

    def __init__(self, max_size: int) -> None:
        if max_size < 0:
            raise ValueError(f"max_size must be non-negative, got {max_size}")
        self._max_size = max_size
        self._values: list[int] = []
        self._pending: list[int] = []

    @property
    def max_size(self) -> int:
        """Maximum number of elements the stack holds."""
        return self._max_size

    def __len__(self) -> int:
        return len(self._values)

    def push(self, x: int) -> None:
        """Push ``x`` unless the stack is already full."""
        if len(self._values) < self._max_size:
            self._values.append(x)
            self._pending.append(0)

    def pop(self) -> int:
        """Remove and return the top element, or -1 when the stack is empty."""
        if not self._values:
            return EMPTY
        extra = self._pending.pop()
        if self._pending:
            self._pending[-1] += extra
        return self._values.pop() + extra

    def increment(self, k: int, val: int) -> None:
        """Add ``val`` to each of the bottom ``k`` elements."""
        top = min(k, len(self._values)) - 1
        if top >= 0:
            self._pending[top] += val