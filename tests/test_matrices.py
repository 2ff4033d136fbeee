import copy

import pytest

from dsakit.matrices import rotate_image, search_matrix, set_zeroes, spiral_order


def test_rotate_image_example():
    matrix = [[1, 2, 3], [4, 5, 6], [7, 8, 9]]
    rotate_image(matrix)
    assert matrix == [[7, 4, 1], [8, 5, 2], [9, 6, 3]]


def test_rotate_image_four_times_is_identity():
    matrix = [[1, 2, 3, 4], [5, 6, 7, 8], [9, 10, 11, 12], [13, 14, 15, 16]]
    original = copy.deepcopy(matrix)
    rotate_image(matrix)
    assert matrix != original
    for _ in range(3):
        rotate_image(matrix)
    assert matrix == original


def test_rotate_image_keeps_row_objects():
    matrix = [[1, 2], [3, 4]]
    first_row = matrix[0]
    rotate_image(matrix)
    assert matrix[0] is first_row
    assert first_row == [3, 1]


def test_rotate_image_non_square():
    with pytest.raises(ValueError):
        rotate_image([[1, 2, 3], [4, 5, 6]])


def test_search_matrix():
    matrix = [[1, 3, 5, 7], [10, 11, 16, 20], [23, 30, 34, 60]]
    assert search_matrix(matrix, 30)
    assert search_matrix(matrix, 1)
    assert not search_matrix(matrix, 13)
    assert not search_matrix([], 1)


def test_set_zeroes_example():
    matrix = [[1, 1, 1], [1, 0, 1], [1, 1, 1]]
    set_zeroes(matrix)
    assert matrix == [[1, 0, 1], [0, 0, 0], [1, 0, 1]]


def test_set_zeroes_corners():
    matrix = [[0, 1, 2, 0], [3, 4, 5, 2], [1, 3, 1, 5]]
    set_zeroes(matrix)
    assert matrix == [[0, 0, 0, 0], [0, 4, 5, 0], [0, 3, 1, 0]]


def test_set_zeroes_without_zero_is_unchanged():
    matrix = [[1, 2], [3, 4]]
    set_zeroes(matrix)
    assert matrix == [[1, 2], [3, 4]]


def test_spiral_square():
    matrix = [[1, 2, 3], [4, 5, 6], [7, 8, 9]]
    assert spiral_order(matrix) == [1, 2, 3, 6, 9, 8, 7, 4, 5]


def test_spiral_rectangle():
    matrix = [[1, 2, 3, 4], [5, 6, 7, 8], [9, 10, 11, 12]]
    result = spiral_order(matrix)
    assert result == [1, 2, 3, 4, 8, 12, 11, 10, 9, 5, 6, 7]
    assert sorted(result) == sorted(v for row in matrix for v in row)


def test_spiral_single_column_and_row():
    assert spiral_order([[1], [2], [3]]) == [1, 2, 3]
    assert spiral_order([[4, 5, 6]]) == [4, 5, 6]
    assert spiral_order([]) == []