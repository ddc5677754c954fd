"""Tests for binary search tree node."""

import pytest
from pybst.node import BSTNode
from pybst.ordering import natural_order, reverse_order


def build(*values, compare=natural_order):
    """Insert values in the given order without rebalancing."""
    root = BSTNode(values[0])
    for v in values[1:]:
        root.add(v, compare)
    return root


class TestBSTNode:
    """Test cases for BSTNode class."""

    def test_create_leaf(self):
        """Test creating a single node."""
        node = BSTNode(5)
        assert node.value == 5
        assert not node.has_left()
        assert not node.has_right()
        assert node.left_child() is None
        assert node.right_child() is None
        assert node.size() == 1
        assert node.height() == 1

    def test_add_smaller_goes_left(self):
        """Test that strictly smaller values attach on the left."""
        root = build(5, 3)
        assert root.has_left()
        assert root.left_child().value == 3
        assert not root.has_right()

    def test_add_larger_goes_right(self):
        """Test that larger values attach on the right."""
        root = build(5, 8)
        assert root.has_right()
        assert root.right_child().value == 8

    def test_duplicates_go_right(self):
        """Test that equal values route to the right subtree."""
        root = build(5, 5, 5)
        assert not root.has_left()
        assert root.right_child().value == 5
        assert root.right_child().right_child().value == 5

    def test_add_returns_new_leaf(self):
        """Test that add returns the attached node."""
        root = build(5, 3)
        leaf = root.add(4, natural_order)
        assert leaf.value == 4
        assert root.left_child().right_child() is leaf

    def test_add_attaches_at_first_empty_slot(self):
        """Test descent through existing nodes."""
        root = build(10, 5, 15, 3, 7, 12, 20)
        root.add(6, natural_order)
        assert root.left_child().right_child().left_child().value == 6

    def test_custom_comparator(self):
        """Test that a reversed comparator mirrors the structure."""
        root = build(5, 3, 8, compare=reverse_order(natural_order))
        assert root.left_child().value == 8
        assert root.right_child().value == 3

    def test_values_preorder(self):
        """Test that values are collected node, left, right."""
        root = build(5, 3, 8, 1, 4, 7, 9)
        assert root.values() == [5, 3, 1, 4, 8, 7, 9]

    def test_size(self):
        """Test recursive size."""
        root = build(5, 3, 8, 1, 4, 7, 9)
        assert root.size() == 7

    def test_height_of_chain(self):
        """Test height of a degenerate chain."""
        root = build(1, 2, 3, 4)
        assert root.height() == 4

    def test_prune(self):
        """Test that prune removes only this node's children."""
        root = build(5, 3, 8, 1)
        left = root.left_child()
        root.prune()
        assert not root.has_left()
        assert not root.has_right()
        assert root.size() == 1
        # The detached subtree is untouched
        assert left.left_child().value == 1

    def test_to_string(self):
        """Test string representation."""
        root = build(5, 3, 8, 9)
        assert root.to_string(str) == "5(3,8(-,9))"
        assert str(BSTNode(7)) == "7"


class TestLocate:
    """Test cases for BSTNode.locate."""

    def test_locate_root(self):
        """Test finding the root value."""
        root = build(5, 3, 8)
        assert root.locate(5, natural_order) is root

    def test_locate_left_and_right(self):
        """Test finding values in both subtrees."""
        root = build(5, 3, 8, 1, 4, 7, 9)
        assert root.locate(4, natural_order).value == 4
        assert root.locate(9, natural_order).value == 9

    def test_locate_missing(self):
        """Test searching for values that are not stored."""
        root = build(5, 3, 8)
        assert root.locate(6, natural_order) is None
        assert root.locate(0, natural_order) is None
        assert root.locate(100, natural_order) is None

    def test_locate_uses_sign_not_magnitude(self):
        """Test descent with comparators returning magnitudes other than 1."""
        def difference(a, b):
            return a - b

        root = build(50, 20, 80, 10, 30, compare=difference)
        assert root.locate(10, difference).value == 10
        assert root.locate(30, difference).value == 30
        assert root.locate(80, difference).value == 80

    def test_locate_first_duplicate(self):
        """Test that the first match on the descent path is returned."""
        root = build(5, 5)
        assert root.locate(5, natural_order) is root


class TestIsBST:
    """Test cases for ordering invariant verification."""

    def test_valid_tree(self):
        """Test a tree built by insertion is valid."""
        root = build(5, 3, 8, 1, 4, 7, 9, 8)
        assert root.is_bst(natural_order)

    def test_left_violation(self):
        """Test detecting a larger value on the left."""
        root = build(5, 3)
        root.left.value = 6
        assert not root.is_bst(natural_order)

    def test_equal_on_left_is_violation(self):
        """Test detecting an equal value on the left."""
        root = build(5, 3)
        root.left.value = 5
        assert not root.is_bst(natural_order)

    def test_deep_violation(self):
        """Test a grandchild breaking the root's bound."""
        root = build(10, 5, 7)
        root.left.right.value = 12
        assert not root.is_bst(natural_order)

    def test_comparator_propagates_errors(self):
        """Test that comparator failures are not swallowed."""
        def broken(a, b):
            raise TypeError("cannot compare")

        root = BSTNode(1)
        with pytest.raises(TypeError):
            root.add(2, broken)
