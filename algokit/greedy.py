"""Greedy scheduling, packing and change-making."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

_DENOMINATIONS = (1000, 500, 100, 50, 20, 10, 5, 2, 1)


@dataclass(frozen=True)
class Item:
    """An item that can be taken whole or in part."""

    value: int
    weight: int


@dataclass(frozen=True)
class Job:
    """A unit-time job that must finish by ``deadline``."""

    id: int
    deadline: int
    profit: int


def fractional_knapsack(capacity: int, items: Sequence[Item]) -> float:
    """Return the highest value that fits in ``capacity``, splitting items if needed."""
    used = 0
    total = 0.0
    for item in sorted(items, key=lambda it: it.value / it.weight, reverse=True):
        if used + item.weight <= capacity:
            used += item.weight
            total += item.value
        else:
            total += item.value / item.weight * (capacity - used)
            break
    return total


def job_scheduling(jobs: Sequence[Job]) -> tuple[int, int]:
    """Return ``(jobs_done, total_profit)`` for the most profitable schedule."""
    if not jobs:
        return 0, 0
    ordered = sorted(jobs, key=lambda job: job.profit, reverse=True)
    latest = max(job.deadline for job in ordered)
    slots: list[Job | None] = [None] * (latest + 1)
    done = 0
    profit = 0
    for job in ordered:
        for slot in range(job.deadline, 0, -1):
            if slots[slot] is None:
                slots[slot] = job
                done += 1
                profit += job.profit
                break
    return done, profit


def min_coins(value: int) -> list[int]:
    """Return the coins, largest first, that make up ``value`` with the fewest coins."""
    coins: list[int] = []
    for coin in _DENOMINATIONS:
        count, value = divmod(value, coin) if value >= coin else (0, value)
        coins.extend([coin] * count)
    return coins


def min_platforms(arrivals: Sequence[int], departures: Sequence[int]) -> int:
    """Return how many platforms are needed so no train waits."""
    if len(arrivals) != len(departures):
        raise ValueError("arrivals and departures must have the same length")
    if not arrivals:
        return 0
    arr = sorted(arrivals)
    dep = sorted(departures)
    n = len(arr)
    best = count = 1
    i, j = 1, 0
    while i < n and j < n:
        if arr[i] <= dep[j]:
            count += 1
            i += 1
        else:
            count -= 1
            j += 1
        best = max(best, count)
    return best


def max_meetings(starts: Sequence[int], ends: Sequence[int]) -> int:
    """Return the most meetings one room can hold; a meeting must start after the last ends."""
    if len(starts) != len(ends):
        raise ValueError("starts and ends must have the same length")
    meetings = sorted(zip(starts, ends), key=lambda meeting: meeting[1])
    if not meetings:
        return 0
    held = 1
    last_end = meetings[0][1]
    for start, end in meetings[1:]:
        if start > last_end:
            last_end = end
            held += 1
    return held