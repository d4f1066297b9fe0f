"""Problems solved with binary heaps."""

from __future__ import annotations

import heapq
from collections import Counter
from collections.abc import Iterable, Sequence
from itertools import chain


class MedianFinder:
    """Running median of a stream of numbers."""

    def __init__(self) -> None:
        self._low: list[int] = []  # max-heap of the lower half, stored negated
        self._high: list[int] = []  # min-heap of the upper half

    def add_num(self, num: int) -> None:
        """Add ``num`` to the stream."""
        if not self._low or -self._low[0] > num:
            heapq.heappush(self._low, -num)
        else:
            heapq.heappush(self._high, num)

        if len(self._high) + 1 < len(self._low):
            heapq.heappush(self._high, -heapq.heappop(self._low))
        if len(self._high) > 1 + len(self._low):
            heapq.heappush(self._low, -heapq.heappop(self._high))

    def find_median(self) -> float:
        """Return the median of the numbers added so far."""
        if not self._low and not self._high:
            raise ValueError("no numbers added")
        if len(self._low) > len(self._high):
            return float(-self._low[0])
        if len(self._low) < len(self._high):
            return float(self._high[0])
        return (self._high[0] - self._low[0]) / 2.0


def top_k_frequent(nums: Iterable[int], k: int) -> list[int]:
    """Return the ``k`` most frequent values, most frequent first."""
    counts = Counter(nums)
    ranked = heapq.nlargest(k, ((count, value) for value, count in counts.items()))
    return [value for _, value in ranked]


def find_kth_largest(nums: Sequence[int], k: int) -> int:
    """Return the k-th largest value."""
    if not nums:
        raise ValueError("nums must not be empty")
    if k < 1:
        raise ValueError("k must be at least 1")
    return heapq.nlargest(k, nums)[-1]


def max_sum_combinations(first: Sequence[int], second: Sequence[int], count: int) -> list[int]:
    """Return the ``count`` largest sums of one value from each sequence, largest first."""
    if count <= 0:
        return []
    if count > len(first) * len(second):
        raise ValueError("count exceeds the number of combinations")
    a = sorted(first, reverse=True)
    b = sorted(second, reverse=True)
    heap = [(-(a[0] + b[0]), 0, 0)]
    seen = {(0, 0)}
    sums: list[int] = []
    for _ in range(count):
        negative_sum, neg_i, neg_j = heapq.heappop(heap)
        i, j = -neg_i, -neg_j
        sums.append(-negative_sum)
        for ni, nj in ((i + 1, j), (i, j + 1)):
            if ni < len(a) and nj < len(b) and (ni, nj) not in seen:
                seen.add((ni, nj))
                heapq.heappush(heap, (-(a[ni] + b[nj]), -ni, -nj))
    return sums


def merge_k_sorted(arrays: Iterable[Iterable[int]]) -> list[int]:
    """Return every value from ``arrays`` in ascending order."""
    heap = list(chain.from_iterable(arrays))
    heapq.heapify(heap)
    return [heapq.heappop(heap) for _ in range(len(heap))]