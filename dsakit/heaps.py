"""Heap and counting based algorithms."""

from __future__ import annotations

import heapq
from collections import Counter
from collections.abc import Iterable, Sequence


def is_n_straight_hand(hand: Sequence[int], group_size: int) -> bool:
    """Tell whether ``hand`` splits into runs of ``group_size`` consecutive cards."""
    if group_size <= 0:
        raise ValueError("group_size must be positive")
    if len(hand) % group_size:
        return False
    counts = Counter(hand)
    for card in sorted(counts):
        needed = counts[card]
        if needed <= 0:
            continue
        for offset in range(group_size):
            if counts[card + offset] < needed:
                return False
            counts[card + offset] -= needed
    return True


def find_kth_largest(nums: Sequence[int], k: int) -> int:
    """Return the ``k``-th largest element of ``nums`` (counting duplicates)."""
    if not 1 <= k <= len(nums):
        raise ValueError("k is out of range")
    return heapq.nlargest(k, nums)[-1]


def least_interval(tasks: Iterable[str], n: int) -> int:
    """Return the fewest time units to run ``tasks`` with ``n`` idle units between repeats."""
    if n < 0:
        raise ValueError("n must not be negative")
    heap = [-count for count in Counter(tasks).values()]
    heapq.heapify(heap)
    total = 0
    while heap:
        remaining: list[int] = []
        for _ in range(n + 1):
            if not heap:
                break
            remaining.append(-heapq.heappop(heap) - 1)
        ran = len(remaining)
        for count in remaining:
            if count:
                heapq.heappush(heap, -count)
        total += ran if not heap else n + 1
    return total