import pytest

from dsakit.stackalgos import (
    is_valid_parentheses,
    next_greater_circular,
    next_greater_element,
    trap,
)


def test_next_greater_element_example():
    assert next_greater_element([4, 1, 2], [1, 3, 4, 2]) == [-1, 3, -1]


@pytest.mark.parametrize(
    "nums1, nums2",
    [([2, 4], [1, 2, 3, 4]), ([5, 1, 7], [7, 1, 5, 9, 2]), ([], [1, 2])],
)
def test_next_greater_element_invariants(nums1, nums2):
    result = next_greater_element(nums1, nums2)
    assert len(result) == len(nums1)
    for value, greater in zip(nums1, result):
        if greater != -1:
            position = nums2.index(value)
            assert greater > value
            assert greater in nums2[position + 1 :]


def test_next_greater_element_last_position_has_none():
    nums2 = [3, 1, 2]
    assert next_greater_element([nums2[-1]], nums2) == [-1]


def test_next_greater_circular_example():
    assert next_greater_circular([1, 2, 1]) == [2, -1, 2]


@pytest.mark.parametrize("nums", [[5, 4, 3, 2, 1], [1, 5, 3, 6, 8], [2, 2, 2]])
def test_next_greater_circular_invariants(nums):
    result = next_greater_circular(nums)
    assert len(result) == len(nums)
    for value, greater in zip(nums, result):
        if greater == -1:
            assert value == max(nums)
        else:
            assert greater > value and greater in nums


def test_next_greater_circular_empty():
    assert next_greater_circular([]) == []


@pytest.mark.parametrize("text", ["[()]{}{[()()]()}", "", "()", "{[]}"])
def test_valid_parentheses(text):
    assert is_valid_parentheses(text) is True


@pytest.mark.parametrize("text", ["(]", "([)]", "(((", ")", "(a)"])
def test_invalid_parentheses(text):
    assert is_valid_parentheses(text) is False


def test_valid_parentheses_is_independent_between_calls():
    assert is_valid_parentheses("((") is False
    assert is_valid_parentheses("()") is True


def test_trap_example():
    assert trap([4, 2, 0, 3, 2, 5]) == 9


@pytest.mark.parametrize("height", [[0, 1, 0, 2, 1, 0, 1, 3, 2, 1, 2, 1], [3, 0, 2], [1]])
def test_trap_is_symmetric(height):
    assert trap(height) == trap(height[::-1])


def test_trap_monotonic_holds_nothing():
    assert trap([1, 2, 3, 4]) == trap([])
    assert trap([4, 3, 2, 1]) == trap([])