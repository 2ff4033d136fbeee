"""Singly linked lists: construction and classic list algorithms."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from itertools import zip_longest
from typing import Optional


@dataclass(eq=False)
class ListNode:
    """A singly linked list node."""

    val: int = 0
    next: Optional[ListNode] = None


def _nodes(head: Optional[ListNode]) -> Iterator[ListNode]:
    node = head
    while node is not None:
        yield node
        node = node.next


def build_list(values: Iterable[int]) -> Optional[ListNode]:
    """Build a linked list holding ``values`` in order; empty input gives ``None``."""
    dummy = ListNode()
    tail = dummy
    for value in values:
        tail.next = ListNode(value)
        tail = tail.next
    return dummy.next


def to_list(head: Optional[ListNode]) -> list[int]:
    """Return the values of an acyclic linked list in order."""
    return [node.val for node in _nodes(head)]


def add_two_numbers(
    l1: Optional[ListNode], l2: Optional[ListNode]
) -> Optional[ListNode]:
    """Add two numbers stored as digit lists, least significant digit first."""
    dummy = ListNode()
    tail = dummy
    carry = 0
    for a, b in zip_longest(_nodes(l1), _nodes(l2)):
        total = carry + (a.val if a else 0) + (b.val if b else 0)
        carry, digit = divmod(total, 10)
        tail.next = ListNode(digit)
        tail = tail.next
    if carry:
        tail.next = ListNode(carry)
    return dummy.next


def has_cycle(head: Optional[ListNode]) -> bool:
    """Tell whether following ``next`` from ``head`` ever loops."""
    slow = fast = head
    while fast is not None and fast.next is not None:
        slow = slow.next
        fast = fast.next.next
        if slow is fast:
            return True
    return False


def detect_cycle(head: Optional[ListNode]) -> Optional[ListNode]:
    """Return the node where a cycle begins, or ``None`` if there is none."""
    if head is None or head.next is None:
        return None
    seen: set[int] = set()
    node = head
    while node is not None:
        if id(node) in seen:
            return node
        seen.add(id(node))
        node = node.next
    return None


def delete_middle(head: Optional[ListNode]) -> Optional[ListNode]:
    """Unlink the node at index ``len // 2``; a list shorter than two becomes empty."""
    nodes = list(_nodes(head))
    if len(nodes) < 2:
        return None
    middle = len(nodes) // 2
    nodes[middle - 1].next = nodes[middle].next
    return head


def remove_nth_from_end(head: Optional[ListNode], n: int) -> Optional[ListNode]:
    """Unlink the ``n``-th node counted from the end (1 is the last)."""
    nodes = list(_nodes(head))
    if not 1 <= n <= len(nodes):
        raise ValueError("n is out of range")
    index = len(nodes) - n
    if index == 0:
        return head.next
    nodes[index - 1].next = nodes[index].next
    return head


def get_intersection_node(
    head_a: Optional[ListNode], head_b: Optional[ListNode]
) -> Optional[ListNode]:
    """Return the first node shared by both lists, or ``None``."""
    in_a = {id(node) for node in _nodes(head_a)}
    return next((node for node in _nodes(head_b) if id(node) in in_a), None)


def middle_node(head: Optional[ListNode]) -> Optional[ListNode]:
    """Return the middle node; for even lengths, the second of the two middles."""
    nodes = list(_nodes(head))
    return nodes[len(nodes) // 2] if nodes else None


def is_palindrome(head: Optional[ListNode]) -> bool:
    """Tell whether the list's values read the same both ways."""
    values = to_list(head)
    return values == values[::-1]


def reverse_list(head: Optional[ListNode]) -> Optional[ListNode]:
    """Reverse the list in place and return its new head."""
    previous: Optional[ListNode] = None
    node = head
    while node is not None:
        node.next, previous, node = previous, node, node.next
    return previous


def rotate_right(head: Optional[ListNode], k: int) -> Optional[ListNode]:
    """Rotate the list to the right by ``k`` places, in place."""
    if head is None or head.next is None or k == 0:
        return head
    nodes = list(_nodes(head))
    shift = k % len(nodes)
    if shift == 0:
        return head
    new_head = nodes[-shift]
    nodes[-1].next = head
    nodes[-shift - 1].next = None
    return new_head