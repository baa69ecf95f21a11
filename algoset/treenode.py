"""Binary tree nodes with level-order building, parsing and printing."""

from __future__ import annotations

import re
from collections import deque
from collections.abc import Iterable
from dataclasses import dataclass
from itertools import groupby

_LEADING_INT = re.compile(r"[+-]?[0-9]+")
_END = object()


@dataclass(eq=False, repr=False)
class TreeNode:
    """One node of a binary tree."""

    val: int = 0
    left: TreeNode | None = None
    right: TreeNode | None = None

    def __repr__(self) -> str:
        return f"TreeNode({self.val!r})"


def build_tree(values: Iterable[int | None]) -> TreeNode | None:
    """Build a tree from level-order values where None marks a missing node."""
    items = list(values)
    if not items or items[0] is None:
        return None
    root = TreeNode(items[0])
    pending = deque([root])
    rest = iter(items[1:])
    while pending:
        parent = pending.popleft()
        value = next(rest, _END)
        if value is _END:
            break
        if value is not None:
            parent.left = TreeNode(value)
            pending.append(parent.left)
        value = next(rest, _END)
        if value is _END:
            break
        if value is not None:
            parent.right = TreeNode(value)
            pending.append(parent.right)
    return root


def _is_token_char(ch: str) -> bool:
    return ch in "+-" or (ch >= "0" and ch not in "[]")


def _leading_int(token: str) -> int:
    match = _LEADING_INT.match(token)
    return int(match.group()) if match else 0


def parse_tree(text: str) -> TreeNode | None:
    """Parse text such as ``[1,null,2]`` into a tree.

    Any token starting with a letter stands for a missing node.
    """
    values: list[int | None] = []
    for is_token, chars in groupby(text, key=_is_token_char):
        if not is_token:
            continue
        token = "".join(chars)
        values.append(None if token[0] > "9" else _leading_int(token))
    return build_tree(values)


def level_order_values(root: TreeNode | None) -> list[int | None]:
    """Return the level-order values of a tree, trailing Nones removed."""
    values: list[int | None] = []
    queue: deque[TreeNode | None] = deque([root] if root is not None else [])
    while queue:
        node = queue.popleft()
        if node is None:
            values.append(None)
            continue
        values.append(node.val)
        queue.append(node.left)
        queue.append(node.right)
    while values and values[-1] is None:
        values.pop()
    return values


def format_tree(root: TreeNode | None) -> str:
    """Render a tree as ``[1, null, 2]``; an empty tree is ``[]``."""
    parts = ("null" if value is None else str(value) for value in level_order_values(root))
    return "[" + ", ".join(parts) + "]"