"""Binary tree algorithms."""

from __future__ import annotations

from collections.abc import Iterable

from algoset.treenode import TreeNode


def construct_maximum_binary_tree(nums: Iterable[int]) -> TreeNode | None:
    """Build the maximum binary tree of ``nums``.

    The root holds the largest value; the parts left and right of it form
    the left and right subtrees in the same way.  Of equal values the later
    one goes below the earlier, to its right.
    """
    stack: list[TreeNode] = []
    for num in nums:
        node = TreeNode(num)
        while stack and stack[-1].val < num:
            node.left = stack.pop()
        if stack:
            stack[-1].right = node
        stack.append(node)
    return stack[0] if stack else None