"""Exceptions raised by the avltree package."""


class AVLTreeError(Exception):
    """Base class for every error raised by this package."""


class EmptyTreeError(AVLTreeError, ValueError):
    """Raised when min or max is requested from a tree with no elements."""

    def __init__(self, operation: str) -> None:
        super().__init__(f"{operation} from empty tree")
        self.operation = operation


class TreeInvariantError(AVLTreeError, AssertionError):
    """Raised by validation when the tree structure is inconsistent.

    Never raised by normal use; seeing one means the balancing code has
    a bug or the tree was mutated from outside its public API.
    """
