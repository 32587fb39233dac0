"""Test fixtures for OrderTreeLib consumers.

These fixtures provide controlled access to internal state for testing
purposes without exposing implementation details as part of the public
API.
"""

from typing import Any, List, Optional

from ..core.element import TreeElement
from ..core.node import Node
from ..core.stream import RecordStream
from ..core.traverser import InOrderTraverser
from ..tree import OrderedTree


class TreeTestHelper:
    """Public test fixture for tree structure verification.

    Gives read-only access to the node structure of an OrderedTree, which
    the tree itself deliberately does not expose.

    Example:
        tree = OrderedTree()
        for value in (5, 3, 8):
            tree.insert(value)
        helper = TreeTestHelper(tree)
        assert helper.shape() == (5, (3, None, None), (8, None, None))
    """

    def __init__(self, tree: OrderedTree):
        """Initialize with the tree under test.

        Args:
            tree: OrderedTree to inspect
        """
        self._tree = tree

    @property
    def root(self) -> Optional[Node]:
        return self._tree._root

    def elements(self) -> List[Any]:
        """Return stored elements in ascending (in-order) order."""
        return [node.element for node in InOrderTraverser().traverse(self.root)]

    def node_count(self) -> int:
        """Return the number of nodes in the tree."""
        return sum(1 for _ in InOrderTraverser().traverse(self.root))

    def leaf_count(self) -> int:
        """Return the number of nodes without children."""
        return sum(1 for node in InOrderTraverser().traverse(self.root)
                   if node.is_leaf())

    def height(self) -> int:
        """Return the number of levels (0 for an empty tree)."""
        height = 0
        level = [self.root] if self.root is not None else []
        while level:
            height += 1
            level = [child for node in level
                     for child in (node.left, node.right) if child is not None]
        return height

    def shape(self) -> Any:
        """Return the structure as nested (element, left, right) tuples.

        Intended for small trees; recursion depth equals tree height.
        """
        def _shape(node: Optional[Node]) -> Any:
            if node is None:
                return None
            return (node.element, _shape(node.left), _shape(node.right))

        return _shape(self.root)

    def is_valid_search_tree(self) -> bool:
        """Check ordering and uniqueness over the in-order sequence."""
        elements = self.elements()
        return all(a < b for a, b in zip(elements, elements[1:]))


class ReleaseTracker:
    """Records which elements were released and in what order.

    Example:
        tracker = ReleaseTracker()
        tree = OrderedTree(tracker.factory)
        ...
        tree.clear()
        assert tracker.released_count == tracker.created_count
    """

    def __init__(self):
        self.created: List['TrackedElement'] = []
        self.released: List['TrackedElement'] = []

    def factory(self) -> 'TrackedElement':
        """Element factory producing empty tracked candidates."""
        return self.make(None)

    def make(self, value: Optional[int]) -> 'TrackedElement':
        """Create a tracked element holding value."""
        element = TrackedElement(value, self)
        self.created.append(element)
        return element

    @property
    def created_count(self) -> int:
        return len(self.created)

    @property
    def released_count(self) -> int:
        return len(self.released)

    def released_values(self) -> List[Optional[int]]:
        return [element.value for element in self.released]

    def live(self) -> List['TrackedElement']:
        """Elements created but not yet released."""
        return [element for element in self.created if not element.is_released]


class TrackedElement(TreeElement):
    """Integer element that reports its release to a ReleaseTracker.

    Parses one integer token per record. Releasing an element twice
    raises, so double releases show up as test failures.
    """

    def __init__(self, value: Optional[int], tracker: ReleaseTracker):
        self.value = value
        self.is_released = False
        self._tracker = tracker

    def sort_key(self) -> Optional[int]:
        return self.value

    def parse_record(self, stream: RecordStream) -> bool:
        token = stream.read_token()
        if token is None:
            return False
        try:
            self.value = int(token)
        except ValueError:
            return False
        return True

    def release(self) -> None:
        if self.is_released:
            raise AssertionError(f"{self!r} released twice")
        self.is_released = True
        self._tracker.released.append(self)
