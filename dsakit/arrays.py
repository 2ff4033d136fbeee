"""Algorithms on one-dimensional integer sequences."""

from __future__ import annotations

import heapq
from collections import Counter
from collections.abc import Iterable, Sequence
from itertools import groupby, pairwise


def _k_sum_pairs(values: list[int], lo: int, target: int) -> Iterable[tuple[int, int]]:
    """Yield distinct value pairs from the sorted ``values[lo:]`` summing to ``target``."""
    hi = len(values) - 1
    while lo < hi:
        total = values[lo] + values[hi]
        if total == target:
            yield values[lo], values[hi]
            while lo < hi and values[lo] == values[lo + 1]:
                lo += 1
            while lo < hi and values[hi] == values[hi - 1]:
                hi -= 1
            lo += 1
            hi -= 1
        elif total < target:
            lo += 1
        else:
            hi -= 1


def three_sum(nums: Sequence[int]) -> list[list[int]]:
    """Return every distinct sorted triplet of ``nums`` that sums to zero."""
    values = sorted(nums)
    result: list[list[int]] = []
    for i, first in enumerate(values[:-2]):
        if i and values[i - 1] == first:
            continue
        for second, third in _k_sum_pairs(values, i + 1, -first):
            result.append([first, second, third])
    return result


def four_sum(nums: Sequence[int], target: int) -> list[list[int]]:
    """Return every distinct sorted quadruplet of ``nums`` that sums to ``target``."""
    values = sorted(nums)
    result: list[list[int]] = []
    for i, first in enumerate(values[:-1]):
        if i and values[i - 1] == first:
            continue
        for j in range(i + 1, len(values) - 1):
            second = values[j]
            if j > i + 1 and values[j - 1] == second:
                continue
            for third, fourth in _k_sum_pairs(values, j + 1, target - first - second):
                result.append([first, second, third, fourth])
    return result


def is_sorted_rotated(nums: Sequence[int]) -> bool:
    """Tell whether ``nums`` is a non-decreasing sequence rotated some number of places."""
    if not nums:
        raise ValueError("sequence is empty")
    drops = sum(a > b for a, b in pairwise(nums))
    if nums[-1] > nums[0]:
        drops += 1
    return drops <= 1


def max_profit(prices: Iterable[int]) -> int:
    """Return the best profit from one buy followed by one sell, or 0."""
    best = 0
    lowest: int | None = None
    for price in prices:
        lowest = price if lowest is None else min(lowest, price)
        best = max(best, price - lowest)
    return best


def longest_consecutive(nums: Iterable[int]) -> int:
    """Return the length of the longest run of consecutive integers in ``nums``."""
    best = 0
    run = 0
    last: int | None = None
    for value in sorted(nums):
        if last is not None and value - 1 == last:
            run += 1
        elif value != last:
            run = 1
        last = value
        best = max(best, run)
    return best


def majority_element(nums: Sequence[int]) -> int:
    """Return the element appearing more than ``len(nums) // 2`` times."""
    counts = Counter(nums)
    for value in sorted(counts):
        if counts[value] > len(nums) // 2:
            return value
    raise ValueError("no majority element")


def majority_elements(nums: Sequence[int]) -> list[int]:
    """Return, ascending, the elements appearing more than ``len(nums) // 3`` times."""
    threshold = len(nums) // 3
    counts = Counter(nums)
    return [value for value in sorted(counts) if counts[value] > threshold]


def max_consecutive_ones(nums: Iterable[int]) -> int:
    """Return the length of the longest run of 1s."""
    return max((len(list(run)) for value, run in groupby(nums) if value == 1), default=0)


def max_product(nums: Sequence[int]) -> int:
    """Return the largest product of a contiguous non-empty subarray."""
    if not nums:
        raise ValueError("sequence is empty")
    best: int | None = None
    prefix = suffix = 1
    for front, back in zip(nums, reversed(nums)):
        prefix = (prefix or 1) * front
        suffix = (suffix or 1) * back
        candidate = max(prefix, suffix)
        best = candidate if best is None else max(best, candidate)
    return best


def max_subarray(nums: Iterable[int]) -> int:
    """Return the largest sum of a contiguous non-empty subarray."""
    best: int | None = None
    running = 0
    for value in nums:
        running += value
        if best is None or running > best:
            best = running
        if running < 0:
            running = 0
    if best is None:
        raise ValueError("sequence is empty")
    return best


def merge_intervals(intervals: Iterable[Sequence[int]]) -> list[list[int]]:
    """Merge overlapping ``[start, end]`` intervals; the result is sorted."""
    merged: list[list[int]] = []
    for interval in sorted(list(item) for item in intervals):
        if not merged or interval[0] > merged[-1][1]:
            merged.append(interval)
        else:
            merged[-1][1] = max(merged[-1][1], interval[1])
    return merged


def merge_sorted(nums1: list[int], m: int, nums2: Sequence[int], n: int) -> None:
    """Merge the first ``n`` of ``nums2`` into the first ``m`` of ``nums1``, in place."""
    nums1[: m + n] = list(heapq.merge(nums1[:m], nums2[:n]))


def missing_number(nums: Iterable[int]) -> int:
    """Return the first number of ``0..n`` missing from ``nums``."""
    values = sorted(nums)
    for expected, value in enumerate(values):
        if expected != value:
            return expected
    return len(values)


def move_zeroes(nums: list[int]) -> None:
    """Move all zeros to the end of ``nums`` in place, keeping the others' order."""
    kept = [value for value in nums if value != 0]
    nums[:] = kept + [0] * (len(nums) - len(kept))


def next_permutation(nums: list) -> None:
    """Rearrange ``nums`` in place into its next lexicographic permutation.

    The last permutation wraps around to the first (ascending order).
    """
    i = len(nums) - 2
    while i >= 0 and nums[i] >= nums[i + 1]:
        i -= 1
    if i >= 0:
        j = len(nums) - 1
        while nums[j] <= nums[i]:
            j -= 1
        nums[i], nums[j] = nums[j], nums[i]
    nums[i + 1 :] = nums[i + 1 :][::-1]


def pascal_triangle(num_rows: int) -> list[list[int]]:
    """Return the first ``num_rows`` rows of Pascal's triangle."""
    rows: list[list[int]] = []
    for _ in range(num_rows):
        if rows:
            previous = rows[-1]
            rows.append([1] + [a + b for a, b in pairwise(previous)] + [1])
        else:
            rows.append([1])
    return rows


def remove_element(nums: list[int], val: int) -> int:
    """Remove every ``val`` from ``nums`` in place and return the new length."""
    nums[:] = [value for value in nums if value != val]
    return len(nums)


def remove_duplicates(nums: list[int]) -> int:
    """Replace ``nums`` with its distinct values in ascending order; return their count."""
    nums[:] = sorted(set(nums))
    return len(nums)


def _sort_and_count(values: list[int]) -> tuple[list[int], int]:
    if len(values) <= 1:
        return values, 0
    mid = (len(values) + 1) // 2
    left, left_count = _sort_and_count(values[:mid])
    right, right_count = _sort_and_count(values[mid:])
    cross = 0
    hi = 0
    for value in left:
        while hi < len(right) and value > 2 * right[hi]:
            hi += 1
        cross += hi
    return list(heapq.merge(left, right)), left_count + right_count + cross


def reverse_pairs(nums: Sequence[int]) -> int:
    """Count pairs ``i < j`` with ``nums[i] > 2 * nums[j]``."""
    return _sort_and_count(list(nums))[1]


def rotate(nums: list, k: int) -> None:
    """Rotate ``nums`` to the right by ``k`` places, in place."""
    if k < 0:
        raise ValueError("k must not be negative")
    n = len(nums)
    if n < k:
        if n == 0:
            raise ValueError("cannot rotate an empty sequence")
        k %= n
    nums[:] = nums[n - k :] + nums[: n - k]


def single_number(nums: Iterable[int]) -> int:
    """Return the element that appears once when every other appears twice."""
    values = sorted(nums)
    if not values:
        raise ValueError("sequence is empty")
    for a, b in zip(values[::2], values[1::2]):
        if a != b:
            return a
    return values[-1]


def sort_colors(nums: list[int]) -> None:
    """Sort a list of 0s, 1s and 2s in place; any other value counts as 2."""
    zeros = nums.count(0)
    ones = nums.count(1)
    nums[:] = [0] * zeros + [1] * ones + [2] * (len(nums) - zeros - ones)


def subarray_sum(nums: Iterable[int], k: int) -> int:
    """Count the contiguous subarrays whose sum is ``k``."""
    seen: Counter[int] = Counter({0: 1})
    total = 0
    count = 0
    for value in nums:
        total += value
        count += seen[total - k]
        seen[total] += 1
    return count


def two_sum(nums: Sequence[int], target: int) -> list[int]:
    """Return the flattened index pairs ``i, j`` whose values sum to ``target``.

    For each ``i`` only the first matching ``j > i`` is taken.
    """
    result: list[int] = []
    for i, first in enumerate(nums):
        for j, second in enumerate(nums[i + 1 :], start=i + 1):
            if first + second == target:
                result.extend((i, j))
                break
    return result