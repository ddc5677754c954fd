"""
Ordering capabilities for the binary search tree.

A comparator is a three-way function returning a negative number, zero, or a
positive number when its first argument sorts before, together with, or after
its second argument.
"""

from functools import cmp_to_key
from typing import Any, Callable, Iterable, TypeVar

from sortedcontainers import SortedList

T = TypeVar("T")
K = TypeVar("K")

Comparator = Callable[[T, T], float]


def natural_order(a: Any, b: Any) -> int:
    """Compare two values using their own ``<`` and ``>`` operators."""
    return (a > b) - (a < b)


def reverse_order(compare: Comparator) -> Comparator:
    """
    Invert a comparator.

    Args:
        compare: Comparator to invert

    Returns:
        Comparator that sorts in the opposite direction
    """
    def reversed_compare(a, b):
        return -compare(a, b)

    return reversed_compare


def by_key(key: Callable[[T], K], compare: Comparator = natural_order) -> Comparator:
    """
    Build a comparator that orders values by a derived key.

    Args:
        key: Function extracting the sort key from a value
        compare: Comparator applied to the extracted keys

    Returns:
        Comparator over the values themselves
    """
    def keyed_compare(a, b):
        return compare(key(a), key(b))

    return keyed_compare


def sort_values(values: Iterable[T], compare: Comparator) -> list[T]:
    """Return ``values`` as a new list sorted by ``compare``."""
    # SortedList expects a key function, so we wrap the comparator
    return list(SortedList(values, key=cmp_to_key(compare)))
