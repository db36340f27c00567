"""Plain-text dumps of an AVLTree, for debugging and demos."""

import sys
from typing import Any, List, Optional, TextIO, Tuple

from avltree.node import Node
from avltree.tree import AVLTree

INDENT = "    "


def print_tree(tree: AVLTree[Any], file: Optional[TextIO] = None) -> None:
    """Write every value on its own line, smallest first."""
    out = file if file is not None else sys.stdout
    for value in tree:
        print(value, file=out)


def render_tree(tree: AVLTree[Any]) -> str:
    """Draw the tree sideways: right subtree above, left subtree below.

    Each line holds one node, indented by its depth, as ``value (h=height)``.
    """
    if tree.root is None:
        return "<empty>"

    lines: List[str] = []
    # Reverse in-order (right, node, left) so the drawing reads top-down.
    stack: List[Tuple[Node[Any], int]] = []
    node: Optional[Node[Any]] = tree.root
    depth = 0
    while stack or node is not None:
        while node is not None:
            stack.append((node, depth))
            node = node.right
            depth += 1
        node, depth = stack.pop()
        lines.append(f"{INDENT * depth}{node.value!r} (h={node.height})")
        node = node.left
        depth += 1
    return "\n".join(lines)
