import pytest

from dsakit.listops import (
    RandomNode,
    copy_random_list,
    delete_node,
    merge_k_lists,
    odd_even_list,
    reverse_k_group,
    sort_list,
)
from dsakit.lists import build_list, to_list


def _random_list(values, random_indices):
    nodes = [RandomNode(value) for value in values]
    for node, following in zip(nodes, nodes[1:]):
        node.next = following
    for node, index in zip(nodes, random_indices):
        node.random = nodes[index] if index is not None else None
    return nodes


def test_reverse_k_group_pairs():
    assert to_list(reverse_k_group(build_list([1, 2, 3, 4, 5]), 2)) == [2, 1, 4, 3, 5]


def test_reverse_k_group_one_is_identity():
    values = [5, 3, 8, 1]
    assert to_list(reverse_k_group(build_list(values), 1)) == values


def test_reverse_k_group_whole_length_reverses():
    values = [1, 2, 3, 4, 5]
    assert to_list(reverse_k_group(build_list(values), len(values))) == values[::-1]


def test_reverse_k_group_longer_than_list_keeps_order():
    values = [1, 2, 3]
    assert to_list(reverse_k_group(build_list(values), 4)) == values


def test_reverse_k_group_empty():
    assert reverse_k_group(None, 3) is None


def test_reverse_k_group_rejects_non_positive_k():
    with pytest.raises(ValueError):
        reverse_k_group(build_list([1, 2]), 0)


def test_odd_even_list_example():
    values = [2, 1, 3, 5, 6, 4, 7]
    result = to_list(odd_even_list(build_list(values)))
    assert result[:4] == [2, 3, 6, 7]
    assert result[4:] == [1, 5, 4]


def test_odd_even_list_keeps_all_values():
    values = [9, 8, 7, 6, 5, 4]
    assert sorted(to_list(odd_even_list(build_list(values)))) == sorted(values)


def test_odd_even_list_short_lists():
    assert odd_even_list(None) is None
    assert to_list(odd_even_list(build_list([7]))) == [7]


def test_sort_list_sorts_values():
    values = [5, 3, 2, 4, 1]
    assert to_list(sort_list(build_list(values))) == sorted(values)


def test_sort_list_keeps_nodes():
    head = build_list([3, 1, 2])
    second = head.next
    result = sort_list(head)
    assert result is head
    assert head.next is second


def test_delete_node_removes_value():
    head = build_list([3, 5, 6, 10])
    delete_node(head.next)
    assert to_list(head) == [3, 6, 10]


def test_delete_node_rejects_tail():
    head = build_list([1, 2])
    with pytest.raises(ValueError):
        delete_node(head.next)


def test_copy_random_list_preserves_structure():
    nodes = _random_list([7, 13, 11, 10, 1], [None, 0, 4, 2, 0])
    copy = copy_random_list(nodes[0])
    copies = []
    node = copy
    while node is not None:
        copies.append(node)
        node = node.next
    assert [c.val for c in copies] == [n.val for n in nodes]
    for original, duplicate in zip(nodes, copies):
        assert duplicate is not original
        if original.random is None:
            assert duplicate.random is None
        else:
            assert copies.index(duplicate.random) == nodes.index(original.random)


def test_copy_random_list_is_independent():
    nodes = _random_list([1, 2], [1, 1])
    copy = copy_random_list(nodes[0])
    nodes[0].val = 99
    assert copy.val == 1


def test_copy_random_list_empty():
    assert copy_random_list(None) is None


def test_merge_k_lists_example():
    lists = [build_list([1, 4, 5]), build_list([1, 3, 4]), build_list([2, 6])]
    assert to_list(merge_k_lists(lists)) == [1, 1, 2, 3, 4, 4, 5, 6]


def test_merge_k_lists_with_empty_entries():
    assert merge_k_lists([]) is None
    assert to_list(merge_k_lists([None, build_list([2, 1])])) == [1, 2]