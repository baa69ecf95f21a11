"""Linked list algorithms."""

from __future__ import annotations

import math
from collections.abc import Iterator
from itertools import pairwise, zip_longest

from algoset.listnode import ListNode


def _nodes(head: ListNode | None) -> Iterator[ListNode]:
    while head is not None:
        yield head
        head = head.next


def add_two_numbers(l1: ListNode | None, l2: ListNode | None) -> ListNode | None:
    """Add two numbers stored as digit lists, least significant digit first."""
    dummy = ListNode()
    tail = dummy
    carry = 0
    while l1 is not None or l2 is not None or carry:
        total = carry
        if l1 is not None:
            total += l1.val
            l1 = l1.next
        if l2 is not None:
            total += l2.val
            l2 = l2.next
        carry, digit = divmod(total, 10)
        tail.next = ListNode(digit)
        tail = tail.next
    return dummy.next


def remove_nth_from_end(head: ListNode | None, n: int) -> ListNode | None:
    """Unlink the ``n``-th node counted from the end and return the new head."""
    length = sum(1 for _ in _nodes(head))
    if not 1 <= n <= length:
        raise ValueError(f"n must be between 1 and {length}, got {n}")
    index = length - n
    if index == 0:
        new_head = head.next
        head.next = None
        return new_head
    previous = head
    for _ in range(index - 1):
        previous = previous.next
    removed = previous.next
    previous.next = removed.next
    removed.next = None
    return head


def swap_pairs(head: ListNode | None) -> ListNode | None:
    """Swap every two adjacent nodes and return the new head."""
    dummy = ListNode(0, head)
    previous = dummy
    while previous.next is not None and previous.next.next is not None:
        first = previous.next
        second = first.next
        first.next = second.next
        second.next = first
        previous.next = second
        previous = first
    return dummy.next


def detect_cycle(head: ListNode | None) -> ListNode | None:
    """Return the node where a cycle begins, or None if the list ends."""
    slow = fast = head
    while fast is not None and fast.next is not None:
        slow = slow.next
        fast = fast.next.next
        if slow is fast:
            while head is not slow:
                head = head.next
                slow = slow.next
            return head
    return None


def reorder_list(head: ListNode | None) -> None:
    """Relink ``L0, L1, ..., Ln`` in place as ``L0, Ln, L1, Ln-1, ...``."""
    nodes = list(_nodes(head))
    if len(nodes) < 3:
        return
    half = (len(nodes) + 1) // 2
    order = [
        node
        for pair in zip_longest(nodes[:half], reversed(nodes[half:]))
        for node in pair
        if node is not None
    ]
    for current, following in pairwise(order):
        current.next = following
    order[-1].next = None


def insert_greatest_common_divisors(head: ListNode | None) -> ListNode | None:
    """Insert between each pair of neighbours a node holding their gcd."""
    current = head
    while current is not None and current.next is not None:
        following = current.next
        current.next = ListNode(math.gcd(current.val, following.val), following)
        current = following
    return head