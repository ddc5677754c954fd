"""
PyBST: binary search tree balanced by periodic reconstruction.
"""

__version__ = "0.1.0"

from .node import BSTNode
from .ordering import Comparator, by_key, natural_order, reverse_order
from .tree import BinarySearchTree, OrderingNotRestoredError

__all__ = [
    "BSTNode",
    "BinarySearchTree",
    "Comparator",
    "OrderingNotRestoredError",
    "by_key",
    "natural_order",
    "reverse_order",
]
