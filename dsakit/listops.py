"""Further singly linked list algorithms, including lists with random pointers."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from itertools import chain, pairwise
from typing import Optional

from dsakit.lists import ListNode, build_list, to_list


@dataclass(eq=False)
class RandomNode:
    """A linked list node that also points at an arbitrary node of its list."""

    val: int = 0
    next: Optional[RandomNode] = None
    random: Optional[RandomNode] = None


def _nodes(head: Optional[ListNode]) -> Iterator[ListNode]:
    node = head
    while node is not None:
        yield node
        node = node.next


def _link(nodes: list[ListNode]) -> Optional[ListNode]:
    """Chain ``nodes`` in the given order and return the first, or ``None``."""
    if not nodes:
        return None
    for node, following in pairwise(nodes):
        node.next = following
    nodes[-1].next = None
    return nodes[0]


def reverse_k_group(head: Optional[ListNode], k: int) -> Optional[ListNode]:
    """Reverse each full group of ``k`` nodes in place; a shorter tail is kept as is."""
    if k < 1:
        raise ValueError("k must be positive")
    nodes = list(_nodes(head))
    full = len(nodes) - len(nodes) % k
    ordered: list[ListNode] = []
    for start in range(0, full, k):
        ordered.extend(reversed(nodes[start : start + k]))
    ordered.extend(nodes[full:])
    return _link(ordered)


def odd_even_list(head: Optional[ListNode]) -> Optional[ListNode]:
    """Relink the nodes at odd positions first, then those at even positions."""
    nodes = list(_nodes(head))
    return _link(nodes[::2] + nodes[1::2])


def sort_list(head: Optional[ListNode]) -> Optional[ListNode]:
    """Sort the list's values in ascending order, keeping its nodes in place."""
    nodes = list(_nodes(head))
    for node, value in zip(nodes, sorted(node.val for node in nodes)):
        node.val = value
    return head


def delete_node(node: ListNode) -> None:
    """Remove ``node`` from its list by taking over its successor's value and link."""
    following = node.next
    if following is None:
        raise ValueError("cannot delete the last node this way")
    node.val = following.val
    node.next = following.next


def copy_random_list(head: Optional[RandomNode]) -> Optional[RandomNode]:
    """Return a deep copy of a list whose nodes carry ``random`` pointers."""
    originals: list[RandomNode] = []
    node = head
    while node is not None:
        originals.append(node)
        node = node.next
    copies = {id(original): RandomNode(original.val) for original in originals}
    for original in originals:
        copy = copies[id(original)]
        if original.next is not None:
            copy.next = copies[id(original.next)]
        if original.random is not None:
            copy.random = copies[id(original.random)]
    return copies[id(head)] if head is not None else None


def merge_k_lists(lists: Iterable[Optional[ListNode]]) -> Optional[ListNode]:
    """Return a new ascending list holding every value of every given list."""
    return build_list(sorted(chain.from_iterable(to_list(head) for head in lists)))