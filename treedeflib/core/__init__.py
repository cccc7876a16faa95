"""Core abstractions for TreeDefLib.

This package contains the tree definitions, the traversal iterables and
streams, the query functions, and the general-purpose TreeNode.
"""

from . import query, stream
from .tree_def import TreeDef, ParentedTreeDef
from .iterable import (
    TreeIterable,
    ToParentIterable,
    BreadthFirstIterable,
    DepthFirstIterable,
    create_iterable,
)
from .node import TreeNode

__all__ = [
    "TreeDef",
    "ParentedTreeDef",
    "TreeIterable",
    "ToParentIterable",
    "BreadthFirstIterable",
    "DepthFirstIterable",
    "create_iterable",
    "TreeNode",
    "query",
    "stream",
]
