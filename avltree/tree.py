import dataclasses
import logging
from typing import TypeVar, Generic, Iterable, List, Iterator, Optional

from avltree.config import TreeConfig
from avltree.errors import EmptyTreeError, TreeInvariantError
from avltree.iterator import AVLTreeIterator
from avltree.node import Node, height_of

logger = logging.getLogger(__name__)

T = TypeVar('T')


class AVLTree(Generic[T]):
    """Height-balanced binary search tree over any totally ordered type.

    Values smaller than a node go to its left subtree, all others (equal
    values included) go right, so duplicates are kept as separate nodes.
    ``contains`` and ``remove`` act on the first equal node met on the way
    down from the root.

    Not thread-safe.
    """

    def __init__(self, values: Optional[Iterable[T]] = None,
                 config: Optional[TreeConfig] = None) -> None:
        self._root: Optional[Node[T]] = None
        self._size: int = 0
        self.config: TreeConfig = config if config is not None else TreeConfig()
        if values is not None:
            for value in values:
                self.add(value)

    @property
    def root(self) -> Optional[Node[T]]:
        return self._root

    # Structural primitives

    def _replace_child(self, parent: Optional[Node[T]], child: Node[T],
                       replacement: Optional[Node[T]]) -> None:
        if parent is None:
            self._root = replacement
            if replacement is not None:
                replacement.parent = None
            return

        if parent.left is child:
            parent.left = replacement
        else:
            parent.right = replacement

    def _rotate(self, node: Node[T], direction: str) -> Node[T]:
        if self.config.log_rotations:
            logger.debug("rotate %s at %r", direction, node.value)
        if direction == "left":
            return node.rotate_left()
        return node.rotate_right()

    def _rebalance(self, node: Node[T]) -> None:
        balance = node.balance_factor()
        if abs(balance) <= 1:
            node.update_height()
            return

        parent = node.parent

        if balance < -1:
            left = node.left
            assert left is not None
            if left.balance_factor() > 0:
                node.left = self._rotate(left, "left")
            subtree_root = self._rotate(node, "right")
        else:
            right = node.right
            assert right is not None
            if right.balance_factor() < 0:
                node.right = self._rotate(right, "right")
            subtree_root = self._rotate(node, "left")

        subtree_root.parent = parent
        self._replace_child(parent, node, subtree_root)

    def _rebalance_upward(self, node: Optional[Node[T]]) -> None:
        while node is not None:
            # A rotation moves node below its replacement; keep climbing from
            # the original parent.
            parent = node.parent
            self._rebalance(node)
            node = parent

    def _after_mutation(self) -> None:
        if self.config.validate:
            self.validate()

    # Mutations

    def _insert_node(self, value: T) -> Optional[Node[T]]:
        new_node: Node[T] = Node(value)
        if self._root is None:
            self._root = new_node
            return None

        parent = self._root
        node: Optional[Node[T]] = self._root
        while node is not None:
            parent = node
            if value < node.value:
                node = node.left
            else:
                node = node.right

        if value < parent.value:
            parent.left = new_node
        else:
            parent.right = new_node
        new_node.parent = parent
        return parent

    def add(self, value: T) -> None:
        parent = self._insert_node(value)
        self._rebalance_upward(parent)
        self._size += 1
        self._after_mutation()

    insert = add

    def _find_node(self, value: T) -> Optional[Node[T]]:
        node = self._root
        while node is not None:
            if value == node.value:
                return node
            if value < node.value:
                node = node.left
            else:
                node = node.right
        return None

    def remove(self, value: T) -> bool:
        """Remove one occurrence of ``value``.

        Returns True if a node was removed, False if the value was absent
        (the tree is left untouched).
        """
        node = self._find_node(value)
        if node is None:
            logger.debug("remove: %r not found", value)
            return False

        parent = node.parent
        replacement: Optional[Node[T]]

        if node.left is not None and node.right is not None:
            successor = node.right
            while successor.left is not None:
                successor = successor.left

            if successor is node.right:
                start = successor
            else:
                start = successor.parent
                assert start is not None
                start.left = successor.right
                if successor.right is not None:
                    successor.right.parent = start
                successor.right = node.right
                node.right.parent = successor

            successor.left = node.left
            node.left.parent = successor
            replacement = successor
        else:
            replacement = node.left if node.left is not None else node.right
            start = parent

        self._replace_child(parent, node, replacement)
        if replacement is not None:
            replacement.parent = parent
        node.detach()

        self._rebalance_upward(start)
        self._size -= 1
        self._after_mutation()
        return True

    def clear(self) -> None:
        logger.debug("clear: dropping %d nodes", self._size)
        self._root = None
        self._size = 0
        self._after_mutation()

    # Queries

    def contains(self, value: T) -> bool:
        return self._find_node(value) is not None

    def min_node(self) -> Optional[Node[T]]:
        node = self._root
        while node is not None and node.left is not None:
            node = node.left
        return node

    def max_node(self) -> Optional[Node[T]]:
        node = self._root
        while node is not None and node.right is not None:
            node = node.right
        return node

    def min(self) -> T:
        node = self.min_node()
        if node is None:
            raise EmptyTreeError("min")
        return node.value

    def max(self) -> T:
        node = self.max_node()
        if node is None:
            raise EmptyTreeError("max")
        return node.value

    def size(self) -> int:
        return self._size

    def is_empty(self) -> bool:
        return self._root is None

    def height(self) -> int:
        return height_of(self._root)

    # Traversals

    def in_order(self) -> List[T]:
        result: List[T] = []
        stack: List[Node[T]] = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            result.append(node.value)
            node = node.right
        return result

    def pre_order(self) -> List[T]:
        result: List[T] = []
        if self._root is None:
            return result
        stack: List[Node[T]] = [self._root]
        while stack:
            node = stack.pop()
            result.append(node.value)
            if node.right is not None:
                stack.append(node.right)
            if node.left is not None:
                stack.append(node.left)
        return result

    def post_order(self) -> List[T]:
        result: List[T] = []
        if self._root is None:
            return result
        stack: List[Node[T]] = [self._root]
        while stack:
            node = stack.pop()
            result.append(node.value)
            if node.left is not None:
                stack.append(node.left)
            if node.right is not None:
                stack.append(node.right)
        result.reverse()
        return result

    def iterator(self) -> AVLTreeIterator[T]:
        return AVLTreeIterator(self)

    def copy(self) -> 'AVLTree[T]':
        clone: AVLTree[T] = AVLTree(config=dataclasses.replace(self.config))
        for value in self.pre_order():
            clone.add(value)
        return clone

    # Invariants

    def is_balanced(self) -> bool:
        if self._root is None:
            return True
        stack: List[Node[T]] = [self._root]
        while stack:
            node = stack.pop()
            if abs(node.balance_factor()) > 1:
                return False
            if node.left is not None:
                stack.append(node.left)
            if node.right is not None:
                stack.append(node.right)
        return True

    def validate(self) -> None:
        """Check every structural invariant, raising TreeInvariantError.

        Checked per node: cached height, balance factor, and that each
        child's parent link points back at the node. Checked for the
        whole tree: the root has no parent, the in-order sequence never
        decreases, and the node count matches ``size()``.
        """
        if self._root is not None and self._root.parent is not None:
            raise TreeInvariantError(f"root {self._root.value!r} has a parent")

        count = 0
        previous: Optional[Node[T]] = None
        stack: List[Node[T]] = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            count += 1

            for child in (node.left, node.right):
                if child is not None and child.parent is not node:
                    raise TreeInvariantError(
                        f"child {child.value!r} does not point back at {node.value!r}")

            expected = 1 + max(height_of(node.left), height_of(node.right))
            if node.height != expected:
                raise TreeInvariantError(
                    f"node {node.value!r} caches height {node.height}, expected {expected}")

            if abs(node.balance_factor()) > 1:
                raise TreeInvariantError(
                    f"node {node.value!r} has balance factor {node.balance_factor()}")

            if previous is not None and node.value < previous.value:
                raise TreeInvariantError(
                    f"{node.value!r} follows {previous.value!r} in order")
            previous = node
            node = node.right

        if count != self._size:
            raise TreeInvariantError(f"size is {self._size} but {count} nodes are reachable")

    def __len__(self) -> int:
        return self._size

    def __contains__(self, value: object) -> bool:
        return self.contains(value)  # type: ignore[arg-type]

    def __iter__(self) -> Iterator[T]:
        return iter(self.iterator())

    def __repr__(self) -> str:
        return f"AVLTree({self.in_order()})"

    def __str__(self) -> str:
        return f"AVLTree(size={self._size}, height={self.height()})"
