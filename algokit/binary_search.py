"""Problems solved by binary search over an index range or an answer range."""

from __future__ import annotations

from bisect import bisect_right
from collections.abc import Sequence

_NEG_INF = float("-inf")
_POS_INF = float("inf")


def largest_min_distance(positions: Sequence[int], cows: int) -> int:
    """Return the largest minimum gap achievable when placing ``cows`` at ``positions``."""
    if not positions:
        raise ValueError("positions must not be empty")
    ordered = sorted(positions)

    def can_place(min_gap: int) -> bool:
        placed = 1
        last = ordered[0]
        for position in ordered[1:]:
            if position - last >= min_gap:
                placed += 1
                last = position
        return placed >= cows

    low, high = 1, ordered[-1] - ordered[0]
    while low <= high:
        mid = (low + high) // 2
        if can_place(mid):
            low = mid + 1
        else:
            high = mid - 1
    return high


def allocate_books(pages: Sequence[int], students: int) -> int:
    """Return the smallest possible maximum of pages given to one student.

    Books are handed out in order, each student taking a contiguous run.
    """
    if students < 1:
        raise ValueError("students must be at least 1")
    if students > len(pages):
        raise ValueError("more students than books")

    def feasible(limit: int) -> bool:
        extra = 0
        running = 0
        for count in pages:
            if running + count > limit:
                extra += 1
                running = count
                if running > limit:
                    return False
            else:
                running += count
        return extra < students

    low, high = min(pages), sum(pages)
    while low <= high:
        mid = (low + high) // 2
        if feasible(mid):
            high = mid - 1
        else:
            low = mid + 1
    return low


def kth_element(first: Sequence[int], second: Sequence[int], k: int) -> int:
    """Return the k-th smallest element (1-based) of two sorted sequences."""
    if len(first) > len(second):
        first, second = second, first
    n, m = len(first), len(second)
    if not 1 <= k <= n + m:
        raise ValueError(f"k must be between 1 and {n + m}")
    low, high = max(0, k - m), min(k, n)
    while low <= high:
        cut1 = (low + high) // 2
        cut2 = k - cut1
        l1 = first[cut1 - 1] if cut1 else _NEG_INF
        l2 = second[cut2 - 1] if cut2 else _NEG_INF
        r1 = first[cut1] if cut1 < n else _POS_INF
        r2 = second[cut2] if cut2 < m else _POS_INF
        if l1 <= r2 and l2 <= r1:
            return max(l1, l2)
        if l1 > r2:
            high = cut1 - 1
        else:
            low = cut1 + 1
    raise ValueError("inputs must be sorted")


def median_of_sorted_arrays(first: Sequence[int], second: Sequence[int]) -> float:
    """Return the median of the union of two sorted sequences."""
    if len(first) > len(second):
        first, second = second, first
    n, m = len(first), len(second)
    if n + m == 0:
        raise ValueError("median of empty data")
    median_pos = (n + m + 1) // 2
    low, high = 0, n
    while low <= high:
        cut1 = (low + high) // 2
        cut2 = median_pos - cut1
        l1 = first[cut1 - 1] if cut1 else _NEG_INF
        l2 = second[cut2 - 1] if cut2 else _NEG_INF
        r1 = first[cut1] if cut1 < n else _POS_INF
        r2 = second[cut2] if cut2 < m else _POS_INF
        if l1 <= r2 and l2 <= r1:
            if (n + m) % 2:
                return float(max(l1, l2))
            return (max(l1, l2) + min(r1, r2)) / 2.0
        if l1 > r2:
            high = cut1 - 1
        else:
            low = cut1 + 1
    raise ValueError("inputs must be sorted")


def matrix_median(matrix: Sequence[Sequence[int]]) -> int:
    """Return the median of a matrix whose rows are sorted.

    Values are expected to lie between 1 and 10**9 and the element count to be odd.
    """
    if not matrix or not matrix[0]:
        raise ValueError("matrix must not be empty")
    half = len(matrix) * len(matrix[0]) // 2
    low, high = 1, 10**9
    while low <= high:
        mid = (low + high) // 2
        not_greater = sum(bisect_right(row, mid) for row in matrix)
        if not_greater <= half:
            low = mid + 1
        else:
            high = mid - 1
    return low


def nth_root(n: int, m: int) -> float:
    """Return the n-th root of ``m`` to within 1e-6, searching from 1 upwards."""
    low, high = 1.0, float(m)
    eps = 1e-6
    while high - low > eps:
        mid = (low + high) / 2.0
        if mid**n < m:
            low = mid
        else:
            high = mid
    return low


def search_rotated(nums: Sequence[int], target: int) -> int:
    """Return the index of ``target`` in a rotated sorted sequence, or -1."""
    low, high = 0, len(nums) - 1
    while low <= high:
        mid = (low + high) // 2
        if nums[mid] == target:
            return mid
        if nums[low] <= nums[mid]:
            if nums[low] <= target <= nums[mid]:
                high = mid - 1
            else:
                low = mid + 1
        elif nums[mid] <= target <= nums[high]:
            low = mid + 1
        else:
            high = mid - 1
    return -1


def single_non_duplicate(nums: Sequence[int]) -> int:
    """Return the one element that appears once in a sorted sequence of pairs."""
    if not nums:
        raise ValueError("nums must not be empty")
    low, high = 0, len(nums) - 2
    while low <= high:
        mid = (low + high) // 2
        pair_intact = nums[mid] == nums[mid + 1]
        if mid % 2 == 0:
            if pair_intact:
                low = mid + 1
            else:
                high = mid - 1
        elif pair_intact:
            high = mid - 1
        else:
            low = mid + 1
    return nums[low]