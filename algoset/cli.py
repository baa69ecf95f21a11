"""Command that parses a level-order binary tree and prints it back."""

from __future__ import annotations

import argparse
from collections.abc import Sequence

from algoset.treenode import format_tree, parse_tree

DEFAULT_TREE = (
    "4,-7,-3,null,null,-9,-3,9,-7,-4,null,6,null,-6,-6,null,null,0,6,5,"
    "null,9,null,null,-1,-4,null,null,null,-2"
)


def main(argv: Sequence[str] | None = None) -> int:
    """Parse a tree given in level order and print its canonical form."""
    parser = argparse.ArgumentParser(
        prog="algoset",
        description="Parse a level-order binary tree and print it back.",
    )
    parser.add_argument(
        "tree",
        nargs="?",
        default=DEFAULT_TREE,
        help="level-order values, with null for a missing node",
    )
    args = parser.parse_args(argv)
    print(format_tree(parse_tree(args.tree)))
    return 0