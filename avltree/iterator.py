from typing import TYPE_CHECKING, TypeVar, Generic, List, Optional, Tuple

from avltree.node import Node

if TYPE_CHECKING:
    from avltree.tree import AVLTree

T = TypeVar('T')


class AVLTreeIterator(Generic[T]):
    """Ascending in-order walk over an AVLTree using an explicit stack.

    ``next()`` returns ``(value, index)`` where ``index`` is the 0-based
    position of ``value`` in ascending order, or ``(None, -1)`` once every
    element has been produced. The iterator also follows Python's iterator
    protocol and yields bare values.

    The iterator is not a live view of the tree: adding or removing values
    while iterating gives unspecified results. Ask the tree for a new
    iterator to start over.
    """

    def __init__(self, tree: 'AVLTree[T]') -> None:
        self._tree = tree
        self._stack: List[Node[T]] = []
        self._index: int = 0

    def _push_left_spine(self, node: Optional[Node[T]]) -> None:
        while node is not None:
            self._stack.append(node)
            node = node.left

    def next(self) -> Tuple[Optional[T], int]:
        if self._index == 0:
            if self._tree.root is None:
                return None, -1
            if not self._stack:
                self._push_left_spine(self._tree.root)

        if self._index >= self._tree.size() or not self._stack:
            return None, -1

        node = self._stack.pop()
        self._push_left_spine(node.right)

        index = self._index
        self._index += 1
        return node.value, index

    def __iter__(self) -> 'AVLTreeIterator[T]':
        return self

    def __next__(self) -> T:
        value, index = self.next()
        if index == -1:
            raise StopIteration
        return value  # type: ignore[return-value]
