"""Bit-manipulation algorithms on 32-bit integers."""

from __future__ import annotations

from collections.abc import Sequence
from functools import reduce
from operator import xor

INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1


def divide(dividend: int, divisor: int) -> int:
    """Divide with truncation toward zero using shifts, clamped to the 32-bit range."""
    if divisor == 0:
        raise ZeroDivisionError("division by zero")
    if dividend == divisor:
        return 1
    if dividend == INT32_MIN and divisor == -1:
        return INT32_MAX
    if dividend == INT32_MIN and divisor == 1:
        return INT32_MIN
    negative = (dividend < 0) != (divisor < 0)
    remaining, step = abs(dividend), abs(divisor)
    quotient = 0
    while remaining >= step:
        chunk, count = step, 1
        while chunk <= remaining - chunk:
            chunk += chunk
            count += count
        quotient += count
        remaining -= chunk
    result = -quotient if negative else quotient
    return max(INT32_MIN, min(INT32_MAX, result))


def min_bit_flips(start: int, goal: int) -> int:
    """Return how many of the low 32 bits differ between ``start`` and ``goal``."""
    return ((start ^ goal) & 0xFFFFFFFF).bit_count()


def is_power_of_two(n: int) -> bool:
    """Tell whether ``n`` is a positive power of two."""
    return n > 0 and not n & (n - 1)


def single_number(nums: Sequence[int]) -> int:
    """Return the element that appears once when every other appears twice."""
    if not nums:
        raise ValueError("sequence is empty")
    return reduce(xor, nums)


def single_number_thrice(nums: Sequence[int]) -> int:
    """Return the element that appears once when every other appears three times."""
    result = 0
    for bit in range(32):
        if sum((value >> bit) & 1 for value in nums) % 3 == 1:
            result |= 1 << bit
    if result > INT32_MAX:
        result -= 1 << 32
    return result


def single_numbers_pair(nums: Sequence[int]) -> list[int]:
    """Return the two elements that appear once when every other appears twice.

    The first returned value is the one holding the lowest bit in which they differ.
    """
    if not nums:
        raise ValueError("sequence is empty")
    combined = reduce(xor, nums)
    lowest = combined & -combined
    with_bit = reduce(xor, (value for value in nums if value & lowest), 0)
    without_bit = reduce(xor, (value for value in nums if not value & lowest), 0)
    return [with_bit, without_bit]


def subsets(nums: Sequence[int]) -> list[list[int]]:
    """Return all subsets of ``nums``, ordered by the bitmask that selects them."""
    return [
        [value for i, value in enumerate(nums) if mask >> i & 1]
        for mask in range(1 << len(nums))
    ]