"""Tree traversal strategies for OrderTreeLib.

Traversers walk the nodes of an OrderedTree in a fixed order. Each
strategy comes in two flavours selected by TraversalMode: plain
generator recursion, or an explicit stack. Both yield nodes in exactly
the same order; the explicit stack keeps deep (degenerate) trees from
hitting the interpreter's recursion limit.
"""

from abc import ABC, abstractmethod
from typing import Iterator, List, Optional, Tuple

from ..config import TraversalMode
from .node import Node


class NodeTraverser(ABC):
    """Abstract base class for node traversal strategies."""

    def __init__(self, mode: TraversalMode = TraversalMode.ITERATIVE):
        """Initialize traverser.

        Args:
            mode: Recursive or explicit-stack traversal
        """
        self.mode = mode

    def traverse(self, root: Optional[Node]) -> Iterator[Node]:
        """Traverse the subtree rooted at root.

        Args:
            root: Starting node (None yields nothing)

        Yields:
            Nodes in this strategy's order
        """
        if root is None:
            return
        if self.mode is TraversalMode.RECURSIVE:
            yield from self._traverse_recursive(root)
        else:
            yield from self._traverse_iterative(root)

    @abstractmethod
    def _traverse_recursive(self, node: Node) -> Iterator[Node]:
        pass

    @abstractmethod
    def _traverse_iterative(self, root: Node) -> Iterator[Node]:
        pass


class InOrderTraverser(NodeTraverser):
    """In-order traversal: left subtree, node, right subtree.

    Yields elements of a valid search tree in ascending order.
    """

    def _traverse_recursive(self, node: Node) -> Iterator[Node]:
        if node.left is not None:
            yield from self._traverse_recursive(node.left)
        yield node
        if node.right is not None:
            yield from self._traverse_recursive(node.right)

    def _traverse_iterative(self, root: Node) -> Iterator[Node]:
        stack: List[Node] = []
        current: Optional[Node] = root

        while stack or current is not None:
            # Walk as far left as possible
            while current is not None:
                stack.append(current)
                current = current.left
            node = stack.pop()
            yield node
            current = node.right


class ReverseFirstPostOrderTraverser(NodeTraverser):
    """Post-order traversal visiting the right subtree first.

    Order is right subtree, left subtree, node. Used for teardown: a node
    is only yielded after both of its subtrees have been fully visited,
    so the caller may release it immediately.
    """

    def _traverse_recursive(self, node: Node) -> Iterator[Node]:
        if node.right is not None:
            yield from self._traverse_recursive(node.right)
        if node.left is not None:
            yield from self._traverse_recursive(node.left)
        yield node

    def _traverse_iterative(self, root: Node) -> Iterator[Node]:
        # Stack holds (node, children_pushed) pairs
        stack: List[Tuple[Node, bool]] = [(root, False)]

        while stack:
            node, expanded = stack.pop()
            if expanded:
                yield node
                continue
            stack.append((node, True))
            # Pushed last is visited first, so left goes on before right
            if node.left is not None:
                stack.append((node.left, False))
            if node.right is not None:
                stack.append((node.right, False))


def create_traverser(strategy: str,
                     mode: TraversalMode = TraversalMode.ITERATIVE) -> NodeTraverser:
    """Create a traverser instance by strategy name.

    Args:
        strategy: Name of traversal strategy (in_order, post_order)
        mode: Recursive or explicit-stack traversal

    Returns:
        NodeTraverser instance

    Raises:
        ValueError: If strategy name is not recognized
    """
    strategies = {
        'in_order': InOrderTraverser,
        'inorder': InOrderTraverser,
        'post_order': ReverseFirstPostOrderTraverser,
        'postorder': ReverseFirstPostOrderTraverser,
        'teardown': ReverseFirstPostOrderTraverser,
    }

    strategy_lower = strategy.lower()
    if strategy_lower not in strategies:
        raise ValueError(
            f"Unknown traversal strategy: {strategy}. "
            f"Choose from: {', '.join(strategies.keys())}"
        )

    return strategies[strategy_lower](mode)
