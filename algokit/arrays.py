"""Algorithms over integer sequences."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Sequence


def two_sum(nums: Sequence[int], target: int) -> tuple[int, int] | None:
    """Return the indices of two distinct elements that add up to ``target``.

    The first index belongs to the earliest occurrence of the complement.
    Returns ``None`` when no such pair exists.
    """
    seen: dict[int, int] = {}
    for index, value in enumerate(nums):
        complement = target - value
        if complement in seen:
            return seen[complement], index
        seen.setdefault(value, index)
    return None


def contains_duplicate(nums: Iterable[int]) -> bool:
    """Return True if any value appears at least twice."""
    seen: set[int] = set()
    for value in nums:
        if value in seen:
            return True
        seen.add(value)
    return False


def product_except_self(nums: Sequence[int]) -> list[int]:
    """Return a list whose i-th item is the product of every element but ``nums[i]``."""
    result: list[int] = []
    prefix = 1
    for value in nums:
        result.append(prefix)
        prefix *= value

    postfix = 1
    for index in reversed(range(len(nums))):
        result[index] *= postfix
        postfix *= nums[index]
    return result


def top_k_frequent(nums: Sequence[int], k: int) -> list[int]:
    """Return the most frequent elements, taken whole frequency bucket at a time.

    Buckets are visited from the highest frequency down until at least ``k``
    elements have been gathered, so ties in the last bucket may yield more
    than ``k`` elements.
    """
    if k <= 0:
        return []
    counts = Counter(nums)
    buckets: list[list[int]] = [[] for _ in range(len(nums) + 1)]
    for value, frequency in counts.items():
        buckets[frequency].append(value)

    result: list[int] = []
    for bucket in reversed(buckets):
        if len(result) >= k:
            break
        result.extend(bucket)
    return result


def construct_2d_array(original: Sequence[int], m: int, n: int) -> list[list[int]]:
    """Reshape ``original`` into ``m`` rows of ``n`` columns.

    Returns an empty list when the sizes do not match.
    """
    if len(original) != m * n:
        return []
    return [list(original[row * n:(row + 1) * n]) for row in range(m)]


def can_arrange(arr: Iterable[int], k: int) -> bool:
    """Return True if the elements can be paired so each pair's sum divides by ``k``."""
    if k <= 0:
        raise ValueError("k must be a positive integer")
    remainders = Counter(value % k for value in arr)
    if remainders[0] % 2:
        return False
    return all(remainders[rem] == remainders[k - rem] for rem in range(1, k // 2 + 1))