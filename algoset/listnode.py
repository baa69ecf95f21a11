"""Singly linked list nodes and helpers to build, parse and print them."""

from __future__ import annotations

import re
from collections.abc import Iterable, Iterator
from dataclasses import dataclass

_NUMBER = re.compile(r"[0-9]+")


@dataclass(eq=False, repr=False)
class ListNode:
    """One node of a singly linked list."""

    val: int = 0
    next: ListNode | None = None

    def __repr__(self) -> str:
        return f"ListNode({self.val!r})"


def _nodes(head: ListNode | None) -> Iterator[ListNode]:
    while head is not None:
        yield head
        head = head.next


def build_list(values: Iterable[int]) -> ListNode | None:
    """Build a linked list holding ``values`` in order; None when empty."""
    head = None
    for value in reversed(list(values)):
        head = ListNode(value, head)
    return head


def parse_list(text: str) -> ListNode | None:
    """Build a list from every run of decimal digits found in ``text``."""
    return build_list(int(match) for match in _NUMBER.findall(text))


def list_values(head: ListNode | None) -> list[int]:
    """Return the values of the list starting at ``head``."""
    return [node.val for node in _nodes(head)]


def format_list(head: ListNode | None) -> str:
    """Render a list as ``[1, 2, 3]``; an empty list is ``[]``."""
    return "[" + ", ".join(str(value) for value in list_values(head)) + "]"