"""Binary-search based algorithms."""

from __future__ import annotations

from bisect import bisect_left, bisect_right
from collections.abc import Callable, Sequence
from itertools import groupby


def _first_satisfying(lo: int, hi: int, ok: Callable[[int], bool]) -> int:
    """Return the smallest value in ``lo..hi+1`` for which a monotone ``ok`` holds."""
    while lo <= hi:
        mid = (lo + hi) // 2
        if ok(mid):
            hi = mid - 1
        else:
            lo = mid + 1
    return lo


def binary_search(nums: Sequence[int], target: int) -> int:
    """Return an index of ``target`` in the sorted ``nums``, or -1."""
    lo, hi = 0, len(nums) - 1
    while lo <= hi:
        mid = (lo + hi) // 2
        if nums[mid] == target:
            return mid
        if nums[mid] > target:
            hi = mid - 1
        else:
            lo = mid + 1
    return -1


def find_peak_element(nums: Sequence[int]) -> int:
    """Return the index of an element greater than its neighbours, or -1."""
    n = len(nums)
    if n == 0:
        raise ValueError("sequence is empty")
    if n == 1 or nums[0] > nums[1]:
        return 0
    if nums[-1] > nums[-2]:
        return n - 1
    lo, hi = 1, n - 2
    while lo <= hi:
        mid = (lo + hi) // 2
        if nums[mid] > nums[mid - 1] and nums[mid] > nums[mid + 1]:
            return mid
        if nums[mid] > nums[mid - 1]:
            lo = mid + 1
        else:
            hi = mid - 1
    return -1


def min_eating_speed(piles: Sequence[int], h: int) -> int:
    """Return the slowest eating speed that finishes all ``piles`` within ``h`` hours."""
    if not piles:
        raise ValueError("no piles")

    def hours(speed: int) -> int:
        return sum(-(-pile // speed) for pile in piles)

    return _first_satisfying(1, max(piles), lambda speed: hours(speed) <= h)


def find_kth_positive(arr: Sequence[int], k: int) -> int:
    """Return the ``k``-th positive integer missing from the sorted ``arr``."""
    lo, hi = 0, len(arr) - 1
    while lo <= hi:
        mid = (lo + hi) // 2
        if arr[mid] - (mid + 1) < k:
            lo = mid + 1
        else:
            hi = mid - 1
    return hi + 1 + k


def min_days(bloom_day: Sequence[int], m: int, k: int) -> int:
    """Return the fewest days to make ``m`` bouquets of ``k`` adjacent flowers, or -1."""
    if m * k > len(bloom_day):
        return -1
    if not bloom_day:
        raise ValueError("no flowers")

    def possible(day: int) -> bool:
        bouquets = sum(
            len(list(run)) // k
            for bloomed, run in groupby(bloom_day, key=lambda d: d <= day)
            if bloomed
        )
        return bouquets >= m

    return _first_satisfying(min(bloom_day), max(bloom_day), possible)


def find_min(nums: Sequence[int]) -> int:
    """Return the smallest element of ``nums``."""
    return min(nums)


def find_peak_grid(grid: Sequence[Sequence[int]]) -> tuple[int, int]:
    """Return ``(row, col)`` of a cell no smaller than its four neighbours.

    Each row's first such cell is taken, and the last row holding one wins.
    """
    if not grid or not grid[0]:
        raise ValueError("grid is empty")
    rows, cols = len(grid), len(grid[0])
    peak = (0, 0)
    for i, row in enumerate(grid):
        for j, value in enumerate(row):
            neighbours = ((i - 1, j), (i, j + 1), (i + 1, j), (i, j - 1))
            if all(
                value >= grid[a][b]
                for a, b in neighbours
                if 0 <= a < rows and 0 <= b < cols
            ):
                peak = (i, j)
                break
    return peak


def search_sorted_matrix(matrix: Sequence[Sequence[int]], target: int) -> bool:
    """Tell whether ``target`` is in a matrix sorted along its rows and columns."""
    if not matrix or not matrix[0]:
        return False
    i, j = 0, len(matrix[0]) - 1
    while i < len(matrix) and j >= 0:
        value = matrix[i][j]
        if value == target:
            return True
        if value > target:
            j -= 1
        else:
            i += 1
    return False


def search_range(nums: Sequence[int], target: int) -> list[int]:
    """Return ``[first, last]`` indices of ``target`` in the sorted ``nums``, or ``[-1, -1]``."""
    first = bisect_left(nums, target)
    if first == len(nums) or nums[first] != target:
        return [-1, -1]
    return [first, bisect_right(nums, target) - 1]


def search_insert(nums: Sequence[int], target: int) -> int:
    """Return the index where ``target`` is or would be inserted in the sorted ``nums``."""
    return bisect_left(nums, target)


def search_rotated(nums: Sequence[int], target: int) -> int:
    """Return the index of ``target`` in a rotated sorted list of distinct values, or -1."""
    lo, hi = 0, len(nums) - 1
    while lo <= hi:
        mid = (lo + hi) // 2
        if nums[mid] == target:
            return mid
        if nums[lo] <= nums[mid]:
            if nums[lo] <= target <= nums[mid]:
                hi = mid - 1
            else:
                lo = mid + 1
        elif nums[mid] <= target <= nums[hi]:
            lo = mid + 1
        else:
            hi = mid - 1
    return -1


def search_rotated_with_duplicates(nums: Sequence[int], target: int) -> bool:
    """Tell whether ``target`` is in a rotated sorted list that may hold duplicates."""
    return target in nums


def ship_within_days(weights: Sequence[int], days: int) -> int:
    """Return the least ship capacity that carries ``weights`` in order within ``days``."""
    if not weights:
        raise ValueError("no packages")

    def days_needed(capacity: int) -> int:
        needed, load = 1, 0
        for weight in weights:
            if load + weight > capacity:
                needed += 1
                load = weight
            else:
                load += weight
        return needed

    return _first_satisfying(
        max(weights), sum(weights), lambda capacity: days_needed(capacity) <= days
    )


def single_non_duplicate(nums: Sequence[int]) -> int:
    """Return the one element of a sorted list in which every other element is paired."""
    n = len(nums)
    if n == 0:
        raise ValueError("sequence is empty")
    if n == 1 or nums[0] != nums[1]:
        return nums[0]
    if nums[-1] != nums[-2]:
        return nums[-1]
    lo, hi = 1, n - 2
    while lo <= hi:
        mid = (lo + hi) // 2
        if nums[mid] != nums[mid + 1] and nums[mid] != nums[mid - 1]:
            return nums[mid]
        if (mid % 2 == 1 and nums[mid] == nums[mid - 1]) or (
            mid % 2 == 0 and nums[mid] == nums[mid + 1]
        ):
            lo = mid + 1
        else:
            hi = mid - 1
    return -1


def smallest_divisor(nums: Sequence[int], threshold: int) -> int:
    """Return the smallest divisor whose rounded-up quotients sum to at most ``threshold``."""
    if not nums:
        raise ValueError("sequence is empty")
    return _first_satisfying(
        1, max(nums), lambda div: sum(-(-value // div) for value in nums) <= threshold
    )