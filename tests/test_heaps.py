import pytest

from dsakit.heaps import find_kth_largest, is_n_straight_hand, least_interval


def test_straight_hand_example():
    assert is_n_straight_hand([1, 2, 3, 6, 2, 3, 4, 7, 8], 3) is True


def test_straight_hand_not_divisible():
    assert is_n_straight_hand([1, 2, 3, 4, 5], 4) is False


def test_straight_hand_group_of_one():
    assert is_n_straight_hand([9, 1, 1, 5], 1) is True


def test_straight_hand_bad_group_size():
    with pytest.raises(ValueError):
        is_n_straight_hand([1, 2], 0)


def test_kth_largest_example():
    assert find_kth_largest([3, 2, 1, 5, 6, 4], 2) == 5


def test_kth_largest_bounds():
    nums = [7, 3, 9, 3, 1]
    assert find_kth_largest(nums, 1) == max(nums)
    assert find_kth_largest(nums, len(nums)) == min(nums)


def test_kth_largest_matches_sorted_order():
    nums = [3, 2, 3, 1, 2, 4, 5, 5, 6]
    ordered = sorted(nums, reverse=True)
    for k in range(1, len(nums) + 1):
        assert find_kth_largest(nums, k) == ordered[k - 1]


@pytest.mark.parametrize("k", [0, 4])
def test_kth_largest_out_of_range(k):
    with pytest.raises(ValueError):
        find_kth_largest([1, 2, 3], k)


def test_least_interval_example():
    assert least_interval(list("AAABBB"), 2) == 8


def test_least_interval_no_cooldown():
    tasks = list("AAABBC")
    assert least_interval(tasks, 0) == len(tasks)


def test_least_interval_at_least_task_count():
    tasks = list("AABBCCDDE")
    for n in range(4):
        assert least_interval(tasks, n) >= len(tasks)


def test_least_interval_empty():
    assert least_interval([], 3) == 0


def test_least_interval_negative_raises():
    with pytest.raises(ValueError):
        least_interval(["A"], -1)