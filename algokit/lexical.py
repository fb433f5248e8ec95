"""Lexicographic ordering of integers and digit-prefix queries."""

from __future__ import annotations

from collections.abc import Iterable, Iterator


def _lexical_walk(n: int) -> Iterator[int]:
    """Yield 1..n in lexicographic order without recursion."""
    stack = list(range(9, 0, -1))
    while stack:
        current = stack.pop()
        if current > n:
            continue
        yield current
        stack.extend(current * 10 + digit for digit in range(9, -1, -1))


def lexical_order(n: int) -> list[int]:
    """Return the numbers 1..n sorted as strings would sort."""
    return list(_lexical_walk(n))


def _count_under_prefix(prefix: int, n: int) -> int:
    """Count the numbers in 1..n that start with the digits of ``prefix``."""
    count = 0
    low, high = prefix, prefix + 1
    while low <= n:
        count += min(n + 1, high) - low
        low *= 10
        high *= 10
    return count


def kth_lexical_number(n: int, k: int) -> int:
    """Return the k-th (1-based) number of 1..n in lexicographic order.

    Raises ValueError when ``k`` is outside 1..n.
    """
    if not 1 <= k <= n:
        raise ValueError(f"k must lie between 1 and {n}, got {k}")
    current = 1
    remaining = k - 1
    while remaining > 0:
        skipped = _count_under_prefix(current, n)
        if remaining >= skipped:
            remaining -= skipped
            current += 1
        else:
            current *= 10
            remaining -= 1
    return current


def _digit_prefixes(number: int) -> Iterator[str]:
    if number < 0:
        raise ValueError(f"numbers must be non-negative, got {number}")
    digits = str(number)
    return (digits[:end] for end in range(1, len(digits) + 1))


def longest_common_prefix(arr1: Iterable[int], arr2: Iterable[int]) -> int:
    """Return the length of the longest digit prefix shared by a number of each input.

    Raises ValueError for negative numbers.
    """
    known: set[str] = set()
    for number in arr1:
        known.update(_digit_prefixes(number))

    best = 0
    for number in arr2:
        shared = 0
        for prefix in _digit_prefixes(number):
            if prefix not in known:
                break
            shared = len(prefix)
        best = max(best, shared)
    return best