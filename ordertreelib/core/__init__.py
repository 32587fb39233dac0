"""Core abstractions for OrderTreeLib.

This package contains the building blocks the OrderedTree is made of:
the element contract, the node structure, the record stream and the
traversal strategies.
"""

from .node import Node
from .element import TreeElement
from .stream import RecordStream
from .traverser import (
    NodeTraverser,
    InOrderTraverser,
    ReverseFirstPostOrderTraverser,
    create_traverser,
)

__all__ = [
    "Node",
    "TreeElement",
    "RecordStream",
    "NodeTraverser",
    "InOrderTraverser",
    "ReverseFirstPostOrderTraverser",
    "create_traverser",
]
