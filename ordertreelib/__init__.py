"""OrderTreeLib - Generic Ordered Tree Container.

OrderTreeLib provides an unbalanced binary search tree over any element
type that supports comparison, plus the pieces needed to bulk-load it
from text records.

Typical use:
━━━━━━━━━━━━
    from ordertreelib import OrderedTree, RecordStream
    from ordertreelib.records import IntegerRecord

    tree = OrderedTree(IntegerRecord)
    tree.build_tree(RecordStream.from_text("7 3 7 2"))
    tree.display()          # 2  3  7
━━━━━━━━━━━━
"""

__version__ = "0.1.0"

from .config import (
    TreeConfig,
    DisplayConfig,
    BuildConfig,
    TraversalMode,
    RejectReason,
)
from .core import (
    Node,
    TreeElement,
    RecordStream,
    InOrderTraverser,
    ReverseFirstPostOrderTraverser,
    create_traverser,
)
from .error_policies import (
    RejectionPolicy,
    FailFastPolicy,
    CollectRejectionsPolicy,
    ContinueOnRejectionsPolicy,
    ThresholdPolicy,
    RecordRejectedError,
    create_rejection_policy,
)
from .planning import BuildPlan, CapabilityMismatchError
from .tree import OrderedTree
from .api import (
    build_tree_from_text,
    build_tree_from_file,
    insert_all,
    render_display,
)
from . import records

__all__ = [
    "__version__",
    # Tree
    "OrderedTree",
    # Core
    "Node",
    "TreeElement",
    "RecordStream",
    "InOrderTraverser",
    "ReverseFirstPostOrderTraverser",
    "create_traverser",
    # Config
    "TreeConfig",
    "DisplayConfig",
    "BuildConfig",
    "TraversalMode",
    "RejectReason",
    # Errors
    "RejectionPolicy",
    "FailFastPolicy",
    "CollectRejectionsPolicy",
    "ContinueOnRejectionsPolicy",
    "ThresholdPolicy",
    "RecordRejectedError",
    "create_rejection_policy",
    "BuildPlan",
    "CapabilityMismatchError",
    # API
    "build_tree_from_text",
    "build_tree_from_file",
    "insert_all",
    "render_display",
    "records",
]
