"""Backtracking and enumeration problems."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from math import factorial


def combination_sum(candidates: Sequence[int], target: int) -> list[list[int]]:
    """Return every combination of ``candidates`` summing to ``target``, reuse allowed.

    Combinations keep the order of ``candidates``; those that repeat the first
    candidate more often come first.
    """
    values = list(candidates)
    if any(value <= 0 for value in values):
        raise ValueError("candidates must be positive")
    found: list[list[int]] = []
    chosen: list[int] = []

    def search(index: int, remaining: int) -> None:
        if index == len(values):
            if remaining == 0:
                found.append(chosen.copy())
            return
        value = values[index]
        if value <= remaining:
            chosen.append(value)
            search(index, remaining - value)
            chosen.pop()
        search(index + 1, remaining)

    search(0, target)
    return found


def combination_sum2(candidates: Iterable[int], target: int) -> list[list[int]]:
    """Return each distinct combination summing to ``target``, every candidate used at most once."""
    values = sorted(candidates)
    found: list[list[int]] = []
    chosen: list[int] = []

    def search(start: int, remaining: int) -> None:
        if remaining == 0:
            found.append(chosen.copy())
            return
        for i in range(start, len(values)):
            value = values[i]
            if i > start and value == values[i - 1]:
                continue
            if value > remaining:
                break
            chosen.append(value)
            search(i + 1, remaining - value)
            chosen.pop()

    search(0, target)
    return found


def kth_permutation(n: int, k: int) -> str:
    """Return the k-th (1-based) lexicographic permutation of the digits 1..n."""
    if n < 1:
        raise ValueError("n must be at least 1")
    if not 1 <= k <= factorial(n):
        raise ValueError(f"k must be between 1 and {factorial(n)}")
    digits = list(range(1, n + 1))
    block = factorial(n - 1)
    k -= 1
    out: list[str] = []
    while digits:
        index, k = divmod(k, block)
        out.append(str(digits.pop(index)))
        if digits:
            block //= len(digits)
    return "".join(out)


def _is_palindrome(text: str) -> bool:
    return text == text[::-1]


def palindrome_partitions(text: str) -> list[list[str]]:
    """Return every way to split ``text`` into palindromic pieces."""
    found: list[list[str]] = []
    path: list[str] = []

    def search(start: int) -> None:
        if start == len(text):
            found.append(path.copy())
        for end in range(start + 1, len(text) + 1):
            piece = text[start:end]
            if _is_palindrome(piece):
                path.append(piece)
                search(end)
                path.pop()

    search(0)
    return found


def subsets_with_dup(nums: Iterable[int]) -> list[list[int]]:
    """Return every distinct subset of ``nums``, each in ascending order."""
    values = sorted(nums)
    found: list[list[int]] = []
    chosen: list[int] = []

    def search(start: int) -> None:
        found.append(chosen.copy())
        for i in range(start, len(values)):
            if i != start and values[i] == values[i - 1]:
                continue
            chosen.append(values[i])
            search(i + 1)
            chosen.pop()

    search(0)
    return found


def subset_sums(nums: Sequence[int]) -> list[int]:
    """Return the sum of every subset, taking each element before leaving it out."""
    sums: list[int] = []

    def search(index: int, total: int) -> None:
        if index == len(nums):
            sums.append(total)
            return
        search(index + 1, total + nums[index])
        search(index + 1, total)

    search(0, 0)
    return sums