"""Algorithms over strings."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable


def _anagram_key(word: str) -> tuple[tuple[str, int], ...]:
    return tuple(sorted(Counter(word).items()))


def group_anagrams(strs: Iterable[str]) -> list[list[str]]:
    """Group words that are anagrams of one another, keeping input order within groups."""
    groups: dict[tuple[tuple[str, int], ...], list[str]] = {}
    for word in strs:
        groups.setdefault(_anagram_key(word), []).append(word)
    return list(groups.values())


def is_anagram(s: str, t: str) -> bool:
    """Return True if ``t`` uses exactly the letters of ``s``."""
    return len(s) == len(t) and Counter(s) == Counter(t)


def encode(strs: Iterable[str]) -> str:
    """Encode strings as ``<length>#<text>`` records joined together."""
    return "".join(f"{len(text)}#{text}" for text in strs)


def decode(s: str) -> list[str]:
    """Decode a string produced by :func:`encode`.

    Raises ValueError when a record's length prefix is missing or malformed.
    """
    result: list[str] = []
    position = 0
    while position < len(s):
        separator = s.find("#", position)
        if separator == -1:
            raise ValueError(f"missing '#' after position {position}")
        prefix = s[position:separator]
        try:
            length = int(prefix)
        except ValueError:
            raise ValueError(f"invalid length prefix {prefix!r}") from None
        if length < 0:
            raise ValueError(f"negative length prefix {prefix!r}")
        start = separator + 1
        result.append(s[start:start + length])
        position = start + length
    return result


def min_extra_chars(s: str, dictionary: Iterable[str]) -> int:
    """Return the fewest characters left over when ``s`` is split into dictionary words."""
    words = set(dictionary)
    size = len(s)
    best = [0] * (size + 1)
    for start in reversed(range(size)):
        candidate = 1 + best[start + 1]
        for end in range(start + 1, size + 1):
            if s[start:end] in words:
                candidate = min(candidate, best[end])
        best[start] = candidate
    return best[0]