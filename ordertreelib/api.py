"""High-level API for OrderTreeLib.

This module provides simple, functional interfaces for common tree
operations. These functions wrap the object-oriented API for ease of use
in simple cases.
"""

import io
from pathlib import Path
from typing import Any, Callable, Iterable, List, Optional, Union

from .config import TreeConfig
from .core.stream import RecordStream
from .error_policies import RejectionPolicy
from .tree import OrderedTree


def build_tree_from_text(
    text: str,
    element_factory: Callable[[], Any],
    config: Optional[TreeConfig] = None,
    policy: Optional[RejectionPolicy] = None,
) -> OrderedTree:
    """Build a tree from records held in a string.

    Args:
        text: Record data
        element_factory: Callable returning a fresh, empty element
        config: Tree configuration
        policy: Rejection policy for the build

    Returns:
        The populated OrderedTree

    Example:
        >>> tree = build_tree_from_text("7 3 7 2", IntegerRecord)
        >>> render_display(tree)
        '2  3  7  '
    """
    tree = OrderedTree(element_factory, config)
    tree.build_tree(RecordStream.from_text(text), policy=policy)
    return tree


def build_tree_from_file(
    path: Union[str, Path],
    element_factory: Callable[[], Any],
    config: Optional[TreeConfig] = None,
    policy: Optional[RejectionPolicy] = None,
    encoding: str = "utf-8",
) -> OrderedTree:
    """Build a tree from records in a text file.

    Args:
        path: File to read
        element_factory: Callable returning a fresh, empty element
        config: Tree configuration
        policy: Rejection policy for the build
        encoding: File encoding

    Returns:
        The populated OrderedTree
    """
    tree = OrderedTree(element_factory, config)
    with open(path, "r", encoding=encoding) as handle:
        tree.build_tree(RecordStream(handle), policy=policy)
    return tree


def insert_all(tree: OrderedTree, elements: Iterable[Any]) -> List[Any]:
    """Insert every element, collecting the ones the tree refused.

    Args:
        tree: Tree to insert into
        elements: Elements to insert, in order

    Returns:
        Rejected elements (None or duplicates); the caller still owns them
    """
    rejected = []
    for element in elements:
        if not tree.insert(element):
            rejected.append(element)
    return rejected


def render_display(tree: OrderedTree) -> str:
    """Return exactly what tree.display() would write.

    Args:
        tree: Tree to render

    Returns:
        Display text ('' for an empty tree)
    """
    buffer = io.StringIO()
    tree.display(file=buffer)
    return buffer.getvalue()
