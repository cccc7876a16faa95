"""TreeDefLib - Tree Definitions, Traversals and Queries.

TreeDefLib works on trees it doesn't own. You describe a tree with a TreeDef
(how to get a node's children) or a ParentedTreeDef (children and parent),
and TreeDefLib walks and queries it - filesystem, parsed documents, object
graphs, or anything else.

Quick tour:
━━━━━━━━━━━━━━━━━━━━━━━━━━
Describe:
    tree_def = ParentedTreeDef.of(children_func, parent_func)

Walk:
    for node in breadth_first(tree_def, root): ...

Ask:
    query.lowest_common_ancestor(tree_def, a, b)
    query.path(tree_def, node)
━━━━━━━━━━━━━━━━━━━━━━━━━━
"""

__version__ = "0.1.0"

from .core import (
    TreeDef,
    ParentedTreeDef,
    TreeIterable,
    ToParentIterable,
    BreadthFirstIterable,
    DepthFirstIterable,
    create_iterable,
    TreeNode,
    query,
    stream,
)
from .core.iterable import to_parent, breadth_first, depth_first
from ._common.config import TraversalConfig, TraversalStrategy, RenderConfig
from ._common.filtering import filtered_list
from .errors import TreeDefLibError, InvalidAncestorError, CapabilityMismatchError
from .adapters.filesystem import FileSystemTreeDef
from .api import (
    traverse_tree,
    count_nodes,
    find_nodes,
    get_leaf_nodes,
    get_tree_stats,
    render_path,
    render_tree,
)

__all__ = [
    "__version__",
    # Core
    "TreeDef",
    "ParentedTreeDef",
    "TreeIterable",
    "ToParentIterable",
    "BreadthFirstIterable",
    "DepthFirstIterable",
    "create_iterable",
    "to_parent",
    "breadth_first",
    "depth_first",
    "TreeNode",
    "query",
    "stream",
    "filtered_list",
    # Config
    "TraversalConfig",
    "TraversalStrategy",
    "RenderConfig",
    # Errors
    "TreeDefLibError",
    "InvalidAncestorError",
    "CapabilityMismatchError",
    # Adapters
    "FileSystemTreeDef",
    # API
    "traverse_tree",
    "count_nodes",
    "find_nodes",
    "get_leaf_nodes",
    "get_tree_stats",
    "render_path",
    "render_tree",
]
