"""Algorithms that rely on stacks or two-pointer scans."""

from __future__ import annotations

from collections.abc import Sequence

_OPENERS = "([{"
_MATCHING = {")": "(", "]": "[", "}": "{"}


def next_greater_element(nums1: Sequence[int], nums2: Sequence[int]) -> list[int]:
    """For each value of ``nums1``, return the first greater value after it in ``nums2``, or -1."""
    result: list[int] = []
    for value in nums1:
        found = -1
        for j, candidate in enumerate(nums2):
            if candidate == value:
                greater = next((later for later in nums2[j + 1 :] if later > value), None)
                if greater is not None:
                    found = greater
        result.append(found)
    return result


def next_greater_circular(nums: Sequence[int]) -> list[int]:
    """Return each element's next greater value, wrapping around the end, or -1."""
    n = len(nums)
    result = [-1] * n
    stack: list[int] = []
    for i in reversed(range(2 * n)):
        value = nums[i % n]
        while stack and stack[-1] <= value:
            stack.pop()
        if i < n and stack:
            result[i] = stack[-1]
        stack.append(value)
    return result


def is_valid_parentheses(s: str) -> bool:
    """Tell whether ``s`` consists only of correctly nested ``()``, ``[]`` and ``{}``."""
    stack: list[str] = []
    for ch in s:
        if ch in _OPENERS:
            stack.append(ch)
        elif not stack or stack.pop() != _MATCHING.get(ch):
            return False
    return not stack


def trap(height: Sequence[int]) -> int:
    """Return how much rain water the elevation map ``height`` holds."""
    left, right = 0, len(height) - 1
    left_max = right_max = 0
    water = 0
    while left <= right:
        if height[left] <= height[right]:
            if height[left] >= left_max:
                left_max = height[left]
            else:
                water += left_max - height[left]
            left += 1
        else:
            if height[right] >= right_max:
                right_max = height[right]
            else:
                water += right_max - height[right]
            right -= 1
    return water