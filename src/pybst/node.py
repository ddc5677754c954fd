"""
Binary search tree node.

Each node owns its children exclusively and keeps no reference to its parent.
The comparator is not stored on the node; the owning tree passes it into every
operation that has to order values, so nodes carry only structural state.
"""

from typing import Callable, Generic, Optional, TypeVar

from .ordering import Comparator

T = TypeVar("T")


class BSTNode(Generic[T]):
    """
    A single node of a binary search tree.

    Values comparing strictly less than ``value`` live in the left subtree,
    everything else (duplicates included) in the right subtree.
    """

    def __init__(self, value: T):
        self.value = value
        self.left: Optional[BSTNode[T]] = None
        self.right: Optional[BSTNode[T]] = None

    def __repr__(self) -> str:
        return f"BSTNode({self.value!r})"

    def __str__(self) -> str:
        """String representation for debugging."""
        return self.to_string(str)

    def to_string(self, selector: Callable[[T], str]) -> str:
        """
        Convert the subtree to a parenthesised string.

        Args:
            selector: Function to convert a value to a string

        Returns:
            ``value(left,right)`` with empty slots rendered as ``-``
        """
        if not self.has_left() and not self.has_right():
            return selector(self.value)
        left = self.left.to_string(selector) if self.has_left() else "-"
        right = self.right.to_string(selector) if self.has_right() else "-"
        return f"{selector(self.value)}({left},{right})"

    def has_left(self) -> bool:
        return self.left is not None

    def has_right(self) -> bool:
        return self.right is not None

    def left_child(self) -> Optional["BSTNode[T]"]:
        return self.left

    def right_child(self) -> Optional["BSTNode[T]"]:
        return self.right

    def prune(self) -> None:
        """Drop both children of this node."""
        self.left = None
        self.right = None

    def goes_left(self, value: T, compare: Comparator) -> bool:
        """Check whether ``value`` belongs in the left subtree of this node."""
        return compare(value, self.value) < 0

    def add(self, value: T, compare: Comparator) -> "BSTNode[T]":
        """
        Insert a value below this node.

        Descends by repeated comparison and attaches a new leaf at the first
        empty slot on the path.

        Args:
            value: Value to insert
            compare: Three-way comparator

        Returns:
            The newly created leaf
        """
        if self.goes_left(value, compare):
            if self.left is None:
                self.left = BSTNode(value)
                return self.left
            return self.left.add(value, compare)

        if self.right is None:
            self.right = BSTNode(value)
            return self.right
        return self.right.add(value, compare)

    def locate(self, value: T, compare: Comparator) -> Optional["BSTNode[T]"]:
        """
        Find the first node on the descent path holding ``value``.

        Args:
            value: Value to search for
            compare: Three-way comparator

        Returns:
            Matching node, or None if the path ends without a match
        """
        comparison = compare(value, self.value)
        if comparison == 0:
            return self
        if comparison < 0:
            return self.left.locate(value, compare) if self.has_left() else None
        return self.right.locate(value, compare) if self.has_right() else None

    def size(self) -> int:
        """Return the number of nodes in this subtree."""
        count = 1
        if self.has_left():
            count += self.left.size()
        if self.has_right():
            count += self.right.size()
        return count

    def height(self) -> int:
        """Return the number of levels in this subtree."""
        left = self.left.height() if self.has_left() else 0
        right = self.right.height() if self.has_right() else 0
        return 1 + max(left, right)

    def values(self) -> list[T]:
        """Collect the values of this subtree in preorder."""
        collected: list[T] = []
        self._collect(collected)
        return collected

    def _collect(self, collected: list[T]) -> None:
        collected.append(self.value)
        if self.has_left():
            self.left._collect(collected)
        if self.has_right():
            self.right._collect(collected)

    def is_bst(self, compare: Comparator) -> bool:
        """
        Verify the ordering invariant holds for this subtree.

        Args:
            compare: Comparator the tree was built with

        Returns:
            True if every left descendant compares strictly less and every
            right descendant compares greater or equal, at every node
        """
        if self.has_left():
            if any(compare(v, self.value) >= 0 for v in self.left.values()):
                return False
            if not self.left.is_bst(compare):
                return False
        if self.has_right():
            if any(compare(v, self.value) < 0 for v in self.right.values()):
                return False
            if not self.right.is_bst(compare):
                return False
        return True
