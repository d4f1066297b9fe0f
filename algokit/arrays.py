"""Two-pointer and scanning problems on integer sequences."""

from __future__ import annotations

from collections.abc import Iterable, MutableSequence, Sequence
from itertools import groupby


def three_sum(nums: Iterable[int]) -> list[list[int]]:
    """Return every distinct triple, in ascending order, that sums to zero."""
    values = sorted(nums)
    n = len(values)
    triples: list[list[int]] = []
    i = 0
    while i < n:
        target = -values[i]
        lo, hi = i + 1, n - 1
        while lo < hi:
            pair = values[lo] + values[hi]
            if pair > target:
                hi -= 1
            elif pair < target:
                lo += 1
            else:
                triple = [values[i], values[lo], values[hi]]
                triples.append(triple)
                while lo < hi and values[lo] == triple[1]:
                    lo += 1
                while lo < hi and values[hi] == triple[2]:
                    hi -= 1
        while i + 1 < n and values[i] == values[i + 1]:
            i += 1
        i += 1
    return triples


def max_consecutive_ones(nums: Iterable[int]) -> int:
    """Return the length of the longest run of ones."""
    return max((sum(1 for _ in run) for value, run in groupby(nums) if value == 1), default=0)


def remove_duplicates(nums: MutableSequence[int]) -> int:
    """Compact a sorted list in place so its first ``k`` items are unique; return ``k``."""
    if not nums:
        return 0
    write = 0
    for value in list(nums[1:]):
        if value != nums[write]:
            write += 1
            nums[write] = value
    return write + 1


def trap(heights: Sequence[int]) -> int:
    """Return how much rain water the elevation profile holds."""
    left, right = 0, len(heights) - 1
    left_max = right_max = 0
    water = 0
    while left <= right:
        if heights[left] <= heights[right]:
            if heights[left] >= left_max:
                left_max = heights[left]
            else:
                water += left_max - heights[left]
            left += 1
        else:
            if heights[right] >= right_max:
                right_max = heights[right]
            else:
                water += right_max - heights[right]
            right -= 1
    return water