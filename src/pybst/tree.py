"""
Binary search tree balanced by periodic reconstruction.

Instead of rotating nodes locally, every mutation collects the full contents
of the tree, sorts them and rebuilds the structure from scratch by inserting
range midpoints first. A single add or remove therefore costs O(n log n), but
the tree can never degenerate into a chain: after each rebuild a tree of n
distinct values has height ceil(log2(n + 1)). Batch operations pay for one
rebuild per batch.

Node references returned by ``locate`` and ``root`` are only valid until the
next mutation, which replaces every node.
"""

import logging
from typing import Generic, Iterable, Optional, TypeVar

from .node import BSTNode
from .ordering import Comparator, natural_order, sort_values

T = TypeVar("T")

logger = logging.getLogger(__name__)


class OrderingNotRestoredError(RuntimeError):
    """Raised when an unpickled tree is used before its comparator is re-supplied."""


class BinarySearchTree(Generic[T]):
    """
    Binary search tree rebuilt into balanced shape after every mutation.

    The comparator is excluded from pickled state. Trees using the default
    natural ordering get it back automatically; trees built with a custom
    comparator must call ``restore_ordering`` after unpickling.
    """

    def __init__(
        self,
        compare: Optional[Comparator] = None,
        values: Optional[Iterable[T]] = None,
    ):
        """
        Initialize tree.

        Args:
            compare: Comparison function returning negative, zero, or positive.
                Defaults to the values' natural ordering.
            values: Optional initial contents, loaded with a single rebuild
        """
        self._natural = compare is None or compare is natural_order
        self._compare: Optional[Comparator] = natural_order if compare is None else compare
        self._root: Optional[BSTNode[T]] = None
        if values is not None:
            self.add_all(values)

    def __getstate__(self) -> dict:
        return {"root": self._root, "natural": self._natural}

    def __setstate__(self, state: dict) -> None:
        self._root = state["root"]
        self._natural = state["natural"]
        self._compare = natural_order if self._natural else None

    def __len__(self) -> int:
        return self.size()

    def __contains__(self, value: T) -> bool:
        return self.locate(value) is not None

    def __repr__(self) -> str:
        return f"BinarySearchTree({self.values()!r})"

    @property
    def compare(self) -> Optional[Comparator]:
        """The comparator in use, or None if it still has to be restored."""
        return self._compare

    def _ordering(self) -> Comparator:
        if self._compare is None:
            raise OrderingNotRestoredError(
                "Must call restore_ordering() before using an unpickled tree "
                "that was built with a custom comparator"
            )
        return self._compare

    def restore_ordering(self, compare: Comparator) -> None:
        """
        Re-supply the comparator after unpickling and rebuild the tree.

        Args:
            compare: Comparator to install
        """
        self._compare = compare
        self._natural = compare is natural_order
        logger.debug("Restored ordering %r", compare)
        self._rebuild(self.values())

    def root(self) -> Optional[BSTNode[T]]:
        """Get the current root node (None for an empty tree)."""
        return self._root

    def add(self, value: T) -> None:
        """Insert a value and rebalance."""
        compare = self._ordering()
        if self._root is None:
            self._root = BSTNode(value)
        else:
            self._root.add(value, compare)
        self._rebuild(self.values())

    def add_all(self, values: Iterable[T]) -> None:
        """
        Insert every value in ``values`` with a single rebalance.

        Args:
            values: Values to insert
        """
        self._ordering()
        merged = list(values)
        if self._root is not None:
            merged.extend(self._root.values())
        self._rebuild(merged)

    def remove(self, value: T) -> bool:
        """
        Remove the first stored value equal to ``value``.

        Equality is the values' own ``==``, not the comparator.

        Args:
            value: Value to remove

        Returns:
            True if a value was found and removed
        """
        if self._root is None:
            return False
        self._ordering()

        values = self._root.values()
        try:
            values.remove(value)
        except ValueError:
            return False

        self._rebuild(values)
        return True

    def remove_all(self, values: Iterable[T]) -> bool:
        """
        Remove every stored value equal to any member of ``values``.

        Args:
            values: Values to remove

        Returns:
            True if at least one value was removed
        """
        if self._root is None:
            return False
        self._ordering()

        targets = list(values)
        current = self._root.values()
        remaining = [v for v in current if v not in targets]
        if len(remaining) == len(current):
            return False

        self._rebuild(remaining)
        return True

    def locate(self, value: T) -> Optional[BSTNode[T]]:
        """
        Find the first node on the search path comparing equal to ``value``.

        Args:
            value: Value to search for

        Returns:
            Matching node, or None if not found
        """
        compare = self._ordering()
        return None if self._root is None else self._root.locate(value, compare)

    def size(self) -> int:
        """Get number of values in tree."""
        return 0 if self._root is None else self._root.size()

    def height(self) -> int:
        """Get number of levels in tree."""
        return 0 if self._root is None else self._root.height()

    def is_empty(self) -> bool:
        """Check if tree is empty."""
        return self._root is None

    def values(self) -> list[T]:
        """Get the values in preorder (node, left subtree, right subtree)."""
        return [] if self._root is None else self._root.values()

    def is_valid(self) -> bool:
        """
        Verify the ordering invariant (for testing).

        Returns:
            True if the tree is a valid binary search tree
        """
        compare = self._ordering()
        return self._root is None or self._root.is_bst(compare)

    def _rebuild(self, values: list[T]) -> None:
        """Rebuild the structure from ``values`` and swap it in once complete."""
        ordered = sort_values(values, self._compare)
        self._root = self._insert_range(None, 0, len(ordered), ordered)
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("Rebuilt tree with %d values, height %d", len(ordered), self.height())

    def _insert_range(
        self, root: Optional[BSTNode[T]], low: int, high: int, ordered: list[T]
    ) -> Optional[BSTNode[T]]:
        if low == high:
            return root

        mid = (low + high) // 2
        pivot = ordered[mid]
        if root is None:
            root = BSTNode(pivot)
        else:
            root.add(pivot, self._compare)

        root = self._insert_range(root, mid + 1, high, ordered)
        return self._insert_range(root, low, mid, ordered)
