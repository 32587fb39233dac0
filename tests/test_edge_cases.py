"""Unit tests for edge cases in OrderTreeLib.

Tests unusual scenarios and boundary cases: degenerate trees, foreign
element types, and the recursion limit.
"""

import sys
import unittest
from pathlib import Path

import pytest

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from ordertreelib import OrderedTree, TreeConfig, TraversalMode, render_display
from ordertreelib.records import IntegerRecord
from ordertreelib.testing import TreeTestHelper


class TestDegenerateTrees(unittest.TestCase):
    """Unbalanced trees built from sorted input."""

    def test_ascending_chain_iterative(self):
        """Iterative mode handles a chain far deeper than the recursion limit."""
        depth = sys.getrecursionlimit() * 2
        tree = OrderedTree()
        for value in range(depth):
            self.assertTrue(tree.insert(value))

        self.assertEqual(tree.retrieve(depth - 1), (True, depth - 1))
        self.assertEqual(tree.retrieve(depth), (False, None))
        self.assertEqual(TreeTestHelper(tree).height(), depth)

        tree.clear()
        self.assertTrue(tree.is_empty())

    def test_descending_chain_display(self):
        tree = OrderedTree()
        for value in range(50, 0, -1):
            tree.insert(value)

        expected = "".join(f"{v}  " for v in range(1, 51))
        self.assertEqual(render_display(tree), expected)

    def test_recursive_mode_hits_recursion_limit(self):
        """Recursive mode is bounded by the interpreter; no silent rebalancing."""
        tree = OrderedTree(config=TreeConfig.recursive())
        with self.assertRaises(RecursionError):
            for value in range(sys.getrecursionlimit() * 2):
                tree.insert(value)


class TestForeignElements(unittest.TestCase):
    """The tree only needs comparisons and str() outside of bulk builds."""

    def test_strings(self):
        tree = OrderedTree()
        for word in ("delta", "alpha", "charlie", "bravo"):
            tree.insert(word)
        self.assertEqual(render_display(tree), "alpha  bravo  charlie  delta  ")

    def test_tuples(self):
        tree = OrderedTree()
        tree.insert((2, "b"))
        tree.insert((1, "z"))
        self.assertTrue(tree.retrieve((1, "z"))[0])
        self.assertFalse(tree.insert((2, "b")))

    def test_floats_and_ints_compare_equal(self):
        tree = OrderedTree()
        tree.insert(1)
        self.assertFalse(tree.insert(1.0))

    def test_repr(self):
        tree = OrderedTree()
        self.assertEqual(repr(tree), "OrderedTree(empty, mode=iterative)")
        tree.insert(IntegerRecord(3))
        self.assertEqual(repr(tree),
                         "OrderedTree(root=IntegerRecord(key=3), mode=iterative)")


@pytest.mark.slow
def test_large_sorted_build():
    """Loading a large sorted file produces a full-depth chain."""
    from ordertreelib import build_tree_from_text

    count = 3000
    text = "\n".join(str(i) for i in range(count))

    tree = build_tree_from_text(text, IntegerRecord, TreeConfig(mode=TraversalMode.ITERATIVE))

    helper = TreeTestHelper(tree)
    assert helper.node_count() == count
    assert helper.height() == count
