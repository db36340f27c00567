"""Self-balancing (AVL) binary search tree."""

from avltree.config import TreeConfig
from avltree.dump import print_tree, render_tree
from avltree.errors import AVLTreeError, EmptyTreeError, TreeInvariantError
from avltree.iterator import AVLTreeIterator
from avltree.node import Node
from avltree.tree import AVLTree

__version__ = "0.1.0"

__all__ = [
    "AVLTree",
    "AVLTreeIterator",
    "AVLTreeError",
    "EmptyTreeError",
    "Node",
    "TreeConfig",
    "TreeInvariantError",
    "print_tree",
    "render_tree",
]
