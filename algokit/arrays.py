"""Array puzzles: subarray sums, squares, triples, profits, medians and more."""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence


def max_subarray_sum(items: Iterable[int]) -> int:
    """Return the largest sum of a non-empty contiguous run (Kadane's algorithm)."""
    best: int | None = None
    current = 0
    for value in items:
        current += value
        if best is None or current > best:
            best = current
        if current < 0:
            current = 0
    if best is None:
        raise ValueError("max_subarray_sum() needs at least one value")
    return best


def sorted_squares(items: Sequence[int]) -> list[int]:
    """Return the squares of an ascending sequence, in ascending order."""
    left, right = 0, len(items) - 1
    descending: list[int] = []
    while left <= right:
        left_sq = items[left] * items[left]
        right_sq = items[right] * items[right]
        if left_sq > right_sq:
            descending.append(left_sq)
            left += 1
        else:
            descending.append(right_sq)
            right -= 1
    descending.reverse()
    return descending


def three_sum(items: Iterable[int]) -> list[list[int]]:
    """Return every distinct ascending triple of values that sums to zero."""
    nums = sorted(items)
    n = len(nums)
    triples: list[list[int]] = []
    for i, first in enumerate(nums):
        if i > 0 and first == nums[i - 1]:
            continue
        j, k = i + 1, n - 1
        while j < k:
            total = first + nums[j] + nums[k]
            if total > 0:
                k -= 1
            elif total < 0:
                j += 1
            else:
                triples.append([first, nums[j], nums[k]])
                j += 1
                k -= 1
                while j < k and nums[j] == nums[j - 1]:
                    j += 1
                while j < k and nums[k] == nums[k + 1]:
                    k -= 1
    return triples


def max_profit(prices: Sequence[int]) -> int:
    """Return the best gain from one buy followed by one later sell, or 0."""
    best = 0
    buy: int | None = None
    for price in prices:
        if buy is not None and buy < price:
            best = max(best, price - buy)
        else:
            buy = price
    return best


def median_of_sorted_arrays(first: Sequence[int], second: Sequence[int]) -> float:
    """Return the median of two ascending sequences taken together."""
    a, b = list(first), list(second)
    if len(a) > len(b):
        a, b = b, a
    n1, n2 = len(a), len(b)
    total = n1 + n2
    if total == 0:
        raise ValueError("median of two empty sequences is undefined")
    left_size = (total + 1) // 2
    lo, hi = 0, n1
    while lo <= hi:
        cut_a = (lo + hi) // 2
        cut_b = left_size - cut_a
        l1 = a[cut_a - 1] if cut_a > 0 else -math.inf
        l2 = b[cut_b - 1] if cut_b > 0 else -math.inf
        r1 = a[cut_a] if cut_a < n1 else math.inf
        r2 = b[cut_b] if cut_b < n2 else math.inf
        if l1 <= r2 and l2 <= r1:
            if total % 2 == 1:
                return float(max(l1, l2))
            return (max(l1, l2) + min(r1, r2)) / 2
        if l1 > r2:
            hi = cut_a - 1
        else:
            lo = cut_a + 1
    raise ValueError("both sequences must be sorted in ascending order")


def longest_increasing_subsequence(items: Sequence[int]) -> list[int]:
    """Return one longest strictly increasing subsequence of ``items``."""
    if not items:
        return []
    lengths: list[int] = []
    for i, value in enumerate(items):
        best = 1
        for j in range(i):
            if value > items[j] and lengths[j] + 1 > best:
                best = lengths[j] + 1
        lengths.append(best)
    wanted = max(lengths)
    picked: list[int] = []
    for value, length in zip(reversed(items), reversed(lengths)):
        if length == wanted:
            picked.append(value)
            wanted -= 1
    picked.reverse()
    return picked


def _mountain_width(items: Sequence[int], peak: int) -> int:
    start = end = peak
    while start > 0 and items[start - 1] < items[start]:
        start -= 1
    while end < len(items) - 1 and items[end + 1] < items[end]:
        end += 1
    return end - start + 1


def longest_mountain(items: Sequence[int]) -> int:
    """Return the length of the longest strictly rising then falling run, or 0."""
    if len(items) < 3:
        return 0
    best = max(
        (
            _mountain_width(items, i)
            for i in range(1, len(items) - 1)
            if items[i - 1] < items[i] > items[i + 1]
        ),
        default=0,
    )
    return best if best >= 3 else 0


def minimum_abs_difference(items: Iterable[int]) -> list[list[int]]:
    """Return all ascending pairs of values whose difference is the smallest one."""
    values = sorted(items)
    pairs = list(zip(values, values[1:]))
    if not pairs:
        return []
    smallest = min(b - a for a, b in pairs)
    return [[a, b] for a, b in pairs if b - a == smallest]


def rotate_right(items: Sequence[int], k: int) -> list[int]:
    """Return ``items`` rotated ``k`` places to the right."""
    values = list(items)
    if not values:
        return values
    k %= len(values)
    return values[len(values) - k:] + values[:len(values) - k]