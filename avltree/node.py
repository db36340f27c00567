import weakref
from typing import TypeVar, Generic, Optional

T = TypeVar('T')


def height_of(node: Optional['Node']) -> int:
    if node is None:
        return -1
    return node.height


class Node(Generic[T]):
    def __init__(self, value: T) -> None:
        self.value: T = value
        self.left: Optional[Node[T]] = None
        self.right: Optional[Node[T]] = None
        self.height: int = 0
        self._parent: Optional['weakref.ReferenceType[Node[T]]'] = None

    @property
    def parent(self) -> Optional['Node[T]']:
        # Children own their subtrees; the parent link never keeps a node alive.
        if self._parent is None:
            return None
        return self._parent()

    @parent.setter
    def parent(self, node: Optional['Node[T]']) -> None:
        self._parent = weakref.ref(node) if node is not None else None

    def balance_factor(self) -> int:
        return height_of(self.right) - height_of(self.left)

    def update_height(self) -> None:
        self.height = 1 + max(height_of(self.left), height_of(self.right))

    def rotate_left(self) -> 'Node[T]':
        child = self.right
        assert child is not None
        self.right = child.left
        if self.right is not None:
            self.right.parent = self

        child.parent = self.parent
        child.left = self
        self.parent = child

        self.update_height()
        child.update_height()

        return child

    def rotate_right(self) -> 'Node[T]':
        child = self.left
        assert child is not None
        self.left = child.right
        if self.left is not None:
            self.left.parent = self

        child.parent = self.parent
        child.right = self
        self.parent = child

        self.update_height()
        child.update_height()

        return child

    def detach(self) -> None:
        self.left = None
        self.right = None
        self.parent = None

    def __repr__(self) -> str:
        return f"Node({self.value!r}, height={self.height})"
