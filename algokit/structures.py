"""Classic data structures: disjoint sets, Fenwick and segment trees, LRU cache."""

from __future__ import annotations

from collections import OrderedDict
from collections.abc import Hashable, Sequence
from typing import Any


class DisjointSet:
    """Union-find over the elements ``0 .. size - 1`` with path compression and union by rank."""

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError("size must not be negative")
        self._parent = list(range(size))
        self._rank = [0] * size

    def __len__(self) -> int:
        return len(self._parent)

    def find(self, x: int) -> int:
        """Return the representative of the set holding ``x``."""
        if not 0 <= x < len(self._parent):
            raise IndexError(f"element {x} out of range")
        root = x
        while self._parent[root] != root:
            root = self._parent[root]
        while self._parent[x] != root:
            self._parent[x], x = root, self._parent[x]
        return root

    def union(self, a: int, b: int) -> bool:
        """Merge the sets of ``a`` and ``b``; return False if they were already joined."""
        a, b = self.find(a), self.find(b)
        if a == b:
            return False
        if self._rank[a] < self._rank[b]:
            a, b = b, a
        self._parent[b] = a
        if self._rank[a] == self._rank[b]:
            self._rank[a] += 1
        return True


class FenwickTree:
    """Binary indexed tree over positions ``1 .. size`` for point updates and prefix sums."""

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError("size must not be negative")
        self._size = size
        self._tree = [0] * (size + 1)

    def __len__(self) -> int:
        return self._size

    def add(self, index: int, value: int) -> None:
        """Add ``value`` at the 1-based position ``index``."""
        if not 1 <= index <= self._size:
            raise IndexError(f"index {index} out of range 1..{self._size}")
        while index <= self._size:
            self._tree[index] += value
            index += index & -index

    def prefix_sum(self, index: int) -> int:
        """Return the sum of positions ``1 .. index``; zero for ``index <= 0``."""
        if index > self._size:
            raise IndexError(f"index {index} out of range 1..{self._size}")
        total = 0
        while index > 0:
            total += self._tree[index]
            index -= index & -index
        return total

    def range_sum(self, left: int, right: int) -> int:
        """Return the sum of positions ``left .. right`` inclusive."""
        return self.prefix_sum(right) - self.prefix_sum(left - 1)


class SegmentTree:
    """Range-sum segment tree over a fixed-length sequence, 0-based and inclusive."""

    def __init__(self, values: Sequence[int]) -> None:
        if not values:
            raise ValueError("a segment tree needs at least one value")
        self._size = len(values)
        self._tree = [0] * (4 * self._size)
        self._build(values, 1, 0, self._size - 1)

    def __len__(self) -> int:
        return self._size

    def _build(self, values: Sequence[int], node: int, lo: int, hi: int) -> None:
        if lo == hi:
            self._tree[node] = values[lo]
            return
        mid = (lo + hi) // 2
        self._build(values, 2 * node, lo, mid)
        self._build(values, 2 * node + 1, mid + 1, hi)
        self._tree[node] = self._tree[2 * node] + self._tree[2 * node + 1]

    def _query(self, node: int, lo: int, hi: int, left: int, right: int) -> int:
        if right < lo or hi < left:
            return 0
        if left <= lo and hi <= right:
            return self._tree[node]
        mid = (lo + hi) // 2
        return self._query(2 * node, lo, mid, left, right) + self._query(
            2 * node + 1, mid + 1, hi, left, right
        )

    def _update(self, node: int, lo: int, hi: int, index: int, value: int) -> None:
        if lo == hi:
            self._tree[node] = value
            return
        mid = (lo + hi) // 2
        if index <= mid:
            self._update(2 * node, lo, mid, index, value)
        else:
            self._update(2 * node + 1, mid + 1, hi, index, value)
        self._tree[node] = self._tree[2 * node] + self._tree[2 * node + 1]

    def query(self, left: int, right: int) -> int:
        """Return the sum of the values at ``left .. right``; zero for an empty range."""
        return self._query(1, 0, self._size - 1, left, right)

    def update(self, index: int, value: int) -> None:
        """Replace the value at ``index``."""
        if not 0 <= index < self._size:
            raise IndexError(f"index {index} out of range")
        self._update(1, 0, self._size - 1, index, value)


class LRUCache:
    """Fixed-capacity mapping that evicts the least recently used key."""

    def __init__(self, capacity: int) -> None:
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self.capacity = capacity
        self._entries: OrderedDict[Hashable, Any] = OrderedDict()

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: Hashable) -> bool:
        return key in self._entries

    def get(self, key: Hashable) -> Any | None:
        """Return the value for ``key`` and mark it as most recent, or None if absent."""
        if key not in self._entries:
            return None
        self._entries.move_to_end(key)
        return self._entries[key]

    def put(self, key: Hashable, value: Any) -> None:
        """Store ``value`` under ``key``, evicting the least recent key when full."""
        if key in self._entries:
            self._entries[key] = value
            self._entries.move_to_end(key)
            return
        if len(self._entries) == self.capacity:
            self._entries.popitem(last=False)
        self._entries[key] = value