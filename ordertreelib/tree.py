"""OrderedTree: a generic, unbalanced binary search tree.

The tree stores elements supplied by the caller and orders them purely
through their comparison operators. It supports insertion, lookup,
in-order display, teardown, and bulk construction from a RecordStream.

Ownership is explicit: an element handed to a successful insert()
belongs to the tree until clear() releases it. A rejected element stays
with the caller. Elements may define a release() hook (TreeElement does)
which the tree calls whenever it gives an element up.

The tree never rebalances. Inserting sorted input produces a linear
chain, so the default configuration walks the tree with an explicit
stack rather than recursion.
"""

import sys
from typing import Any, Callable, Generic, Optional, TextIO, Tuple, TypeVar, Union

from .config import RejectReason, TraversalMode, TreeConfig
from .core.node import Node
from .core.stream import RecordStream
from .core.traverser import InOrderTraverser, ReverseFirstPostOrderTraverser
from .error_policies import RejectionPolicy
from .planning import BuildPlan, validate_config

T = TypeVar("T")


def _release(element: Any) -> None:
    """Call an element's release() hook if it has one."""
    release = getattr(element, "release", None)
    if callable(release):
        release()


class OrderedTree(Generic[T]):
    """Binary search tree rejecting duplicate elements.

    An element e goes into the left subtree of node n when n's element
    is greater than e, otherwise into the right subtree. Elements equal
    to one already stored are rejected, so ties never occur.

    Example:
        >>> tree = OrderedTree()
        >>> for value in (5, 3, 8, 1, 4):
        ...     tree.insert(value)
        >>> tree.display()
        1  3  4  5  8  
    """

    def __init__(self, element_factory: Optional[Callable[[], T]] = None,
                 config: Optional[TreeConfig] = None):
        """Create an empty tree.

        Args:
            element_factory: Callable returning a fresh, empty element;
                used by build_tree() when no factory is passed to it
            config: Tree configuration (default TreeConfig())

        Raises:
            CapabilityMismatchError: If config is invalid
        """
        self.config = config if config is not None else TreeConfig()
        validate_config(self.config)

        self.element_factory = element_factory
        self.last_build_policy: Optional[RejectionPolicy] = None
        self._root: Optional[Node] = None

    @property
    def _recursive(self) -> bool:
        return self.config.mode is TraversalMode.RECURSIVE

    def insert(self, element: Optional[T]) -> bool:
        """Insert an element, taking ownership of it on success.

        Args:
            element: Element to insert

        Returns:
            True if a new leaf was added; False if element is None or an
            equal element is already stored (caller keeps ownership)
        """
        if element is None:
            return False

        found, _ = self.retrieve(element)
        if found:
            return False

        if self._recursive:
            self._root = self._insert_recursive(self._root, element)
        else:
            self._insert_iterative(element)
        return True

    def retrieve(self, target: Optional[T]) -> Tuple[bool, Optional[T]]:
        """Look up the stored element equal to target.

        Args:
            target: Element to search for (only compared, never stored)

        Returns:
            (True, stored_element) if found, else (False, None). The
            stored element still belongs to the tree.
        """
        if target is None:
            return False, None
        if self._recursive:
            return self._retrieve_recursive(self._root, target)
        return self._retrieve_iterative(target)

    def display(self, file: Optional[TextIO] = None) -> None:
        """Write every element in ascending order.

        Each element's str() is followed by the configured separator;
        the configured end string follows the last one. Nothing at all
        is written for an empty tree.

        Args:
            file: Stream to write to (default config.display.output,
                then sys.stdout)
        """
        if self.is_empty():
            return

        display = self.config.display
        out = file or display.output or sys.stdout
        traverser = InOrderTraverser(self.config.mode)

        for node in traverser.traverse(self._root):
            out.write(f"{node.element}{display.separator}")
        if display.end:
            out.write(display.end)

    def clear(self) -> None:
        """Release every node and element; the tree becomes empty.

        Nodes are released right subtree first, then left subtree, then
        the node itself.
        """
        if self.is_empty():
            return

        traverser = ReverseFirstPostOrderTraverser(self.config.mode)
        for node in traverser.traverse(self._root):
            _release(node.element)
            node.detach()
        self._root = None

    def is_empty(self) -> bool:
        """Check if the tree holds no elements."""
        return self._root is None

    def build_tree(self, stream: Union[RecordStream, TextIO],
                   element_factory: Optional[Callable[[], T]] = None,
                   policy: Optional[RejectionPolicy] = None) -> None:
        """Insert every valid record from a stream.

        Repeatedly creates a candidate element and lets it parse the next
        record. The loop stops as soon as the stream reports end-of-input,
        even if the parser claimed success. Malformed and duplicate
        records are released and reported to the rejection policy;
        with the default policy the build simply carries on.

        Args:
            stream: RecordStream or text file object to read from
            element_factory: Candidate factory (default self.element_factory)
            policy: Rejection policy (default from config.build)

        Raises:
            CapabilityMismatchError: If there is no usable element factory
            RecordRejectedError: Only from strict policies
            Exception: Whatever parse_record() raised, if it raised without
                consuming any input
        """
        plan = BuildPlan(self.config, element_factory or self.element_factory, policy)
        self.last_build_policy = plan.policy

        if not isinstance(stream, RecordStream):
            stream = RecordStream(stream)

        while True:
            candidate = plan.new_candidate()
            start = stream.position

            try:
                is_valid = candidate.parse_record(stream)
            except Exception as e:
                _release(candidate)
                plan.policy.handle(RejectReason.PARSE_ERROR, candidate, e,
                                   stream.line_number)
                if stream.eof:
                    break
                # Retrying would fail the same way on the same input forever
                if stream.position == start:
                    raise
                continue

            if stream.eof:
                _release(candidate)
                break

            if is_valid:
                if not self.insert(candidate):
                    _release(candidate)
                    plan.policy.handle(RejectReason.DUPLICATE, candidate,
                                       line_number=stream.line_number)
            else:
                _release(candidate)
                plan.policy.handle(RejectReason.PARSE_FAILED, candidate,
                                   line_number=stream.line_number)

    # Descent helpers

    def _insert_recursive(self, node: Optional[Node], element: T) -> Node:
        if node is None:
            return Node(element)
        if node.element > element:
            node.left = self._insert_recursive(node.left, element)
        else:
            node.right = self._insert_recursive(node.right, element)
        return node

    def _insert_iterative(self, element: T) -> None:
        if self._root is None:
            self._root = Node(element)
            return

        current = self._root
        while True:
            if current.element > element:
                if current.left is None:
                    current.left = Node(element)
                    return
                current = current.left
            else:
                if current.right is None:
                    current.right = Node(element)
                    return
                current = current.right

    def _retrieve_recursive(self, node: Optional[Node],
                            target: T) -> Tuple[bool, Optional[T]]:
        if node is None:
            return False, None
        if target == node.element:
            return True, node.element
        if node.element < target:
            return self._retrieve_recursive(node.right, target)
        return self._retrieve_recursive(node.left, target)

    def _retrieve_iterative(self, target: T) -> Tuple[bool, Optional[T]]:
        current = self._root
        while current is not None:
            if target == current.element:
                return True, current.element
            current = current.right if current.element < target else current.left
        return False, None

    def __enter__(self) -> "OrderedTree[T]":
        """Enter context manager."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Exit context manager, releasing every owned element."""
        self.clear()
        return None

    def __repr__(self) -> str:
        """Detailed representation for debugging."""
        state = "empty" if self.is_empty() else f"root={self._root.element!r}"
        return f"{self.__class__.__name__}({state}, mode={self.config.mode.value})"
