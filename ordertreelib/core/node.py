"""Node structure for OrderTreeLib.

A Node is the internal unit of an OrderedTree. It is deliberately kept
simple: it owns one element and up to two child subtrees. All ordering
logic lives in the tree itself.
"""

from typing import Any, Optional


class Node:
    """Internal tree node owning one element and its two child slots.

    Each node exclusively owns its children, so the structure can never
    share subtrees or form cycles.
    """

    __slots__ = ("element", "left", "right")

    def __init__(self, element: Any,
                 left: Optional["Node"] = None,
                 right: Optional["Node"] = None):
        """Initialize a node.

        Args:
            element: The element this node owns
            left: Left subtree (elements ordered before this one)
            right: Right subtree (elements ordered after this one)
        """
        self.element = element
        self.left = left
        self.right = right

    def is_leaf(self) -> bool:
        """Check if this node has no children."""
        return self.left is None and self.right is None

    def detach(self) -> None:
        """Drop all references held by this node."""
        self.element = None
        self.left = None
        self.right = None

    def __repr__(self) -> str:
        """Detailed representation for debugging."""
        return f"{self.__class__.__name__}(element={self.element!r})"
