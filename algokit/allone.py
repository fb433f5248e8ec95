"""A counter of string keys with constant-time min and max lookups."""

from __future__ import annotations


class _Bucket:
    __slots__ = ("count", "keys", "prev", "next")

    def __init__(self, count: int) -> None:
        self.count = count
        self.keys: dict[str, None] = {}
        self.prev: _Bucket | None = None
        self.next: _Bucket | None = None

    def newest(self) -> str:
        return next(reversed(self.keys))


class AllOne:
    """Count keys and report one with the highest or lowest count in O(1)."""

    def __init__(self) -> None:
        self._head = _Bucket(0)
        self._tail = self._head
        self._where: dict[str, _Bucket] = {}

    def __len__(self) -> int:
        return len(self._where)

    def __contains__(self, key: object) -> bool:
        return key in self._where

    def _insert_after(self, anchor: _Bucket, count: int) -> _Bucket:
        bucket = _Bucket(count)
        bucket.prev = anchor
        bucket.next = anchor.next
        if anchor.next is not None:
            anchor.next.prev = bucket
        anchor.next = bucket
        if self._tail is anchor:
            self._tail = bucket
        return bucket

    def _unlink(self, bucket: _Bucket) -> None:
        bucket.prev.next = bucket.next
        if bucket.next is not None:
            bucket.next.prev = bucket.prev
        if self._tail is bucket:
            self._tail = bucket.prev

    def inc(self, key: str) -> None:
        """Increase the count of ``key`` by one, adding it if absent."""
        current = self._where.get(key)
        if current is None:
            target = self._head.next
            if target is None or target.count != 1:
                target = self._insert_after(self._head, 1)
        else:
            target = current.next
            if target is None or target.count != current.count + 1:
                target = self._insert_after(current, current.count + 1)
        target.keys[key] = None
        self._where[key] = target
        if current is not None:
            del current.keys[key]
            if not current.keys:
                self._unlink(current)

    def dec(self, key: str) -> None:
        """Decrease the count of ``key`` by one, dropping it at zero.

        Raises KeyError if ``key`` is not present.
        """
        current = self._where.get(key)
        if current is None:
            raise KeyError(key)
        del current.keys[key]
        if current.count == 1:
            del self._where[key]
        else:
            target = current.prev
            if target is self._head or target.count != current.count - 1:
                target = self._insert_after(current.prev, current.count - 1)
            target.keys[key] = None
            self._where[key] = target
        if not current.keys:
            self._unlink(current)

    def max_key(self) -> str:
        """Return a key with the highest count, or "" when empty."""
        if self._tail is self._head:
            return ""
        return self._tail.newest()

    def min_key(self) -> str:
        """Return a key with the lowest count, or "" when empty."""
        first = self._head.next
        if first is None:
            return ""
        return first.newest()