"""High-level API for TreeDefLib.

This module provides simple, functional interfaces for common tree
operations. These functions wrap the iterables, queries and configuration
objects for ease of use in simple cases.
"""

import logging
from collections import deque
from typing import Any, Callable, Deque, Dict, Iterator, Optional, Tuple, TypeVar, Union

from ._common.config import RenderConfig, TraversalConfig, TraversalStrategy, parse_strategy
from .core import query
from .core.iterable import create_iterable
from .core.tree_def import ParentedTreeDef, TreeDef
from .errors import CapabilityMismatchError

logger = logging.getLogger(__name__)

T = TypeVar("T")


def traverse_tree(
    tree_def: TreeDef[T],
    node: T,
    strategy: Union[TraversalStrategy, str] = TraversalStrategy.BREADTH_FIRST,
    max_nodes: Optional[int] = None,
    include_filter: Optional[Callable[[T], bool]] = None,
    config: Optional[TraversalConfig] = None,
) -> Iterator[T]:
    """Simple interface for tree traversal.

    This is the primary high-level function for traversing trees. It handles
    the common case of wanting to iterate over nodes without picking an
    iterable class by hand.

    Args:
        tree_def: TreeDef describing the tree
        node: Starting node for traversal
        strategy: Traversal strategy (bfs, dfs, to_parent)
        max_nodes: Stop after yielding this many nodes
        include_filter: Only yield nodes for which this returns True
        config: Complete configuration; overrides the other options

    Yields:
        Nodes in traversal order which match the criteria

    Raises:
        CapabilityMismatchError: If the configuration is invalid, or asks for
            an ascent over a TreeDef which doesn't know parents

    Example:
        >>> fs = FileSystemTreeDef()
        >>> for path in traverse_tree(fs, Path("/home/user"), max_nodes=10):
        ...     print(path)
    """
    if config is None:
        config = TraversalConfig(
            strategy=parse_strategy(strategy),
            max_nodes=max_nodes,
            include_filter=include_filter,
        )

    config_errors = config.validate()
    if config_errors:
        raise CapabilityMismatchError(
            f"Invalid configuration: {'; '.join(config_errors)}"
        )

    traversal = create_iterable(config.strategy, tree_def, node)
    logger.debug("Starting %r with %s", traversal, config.strategy.value)

    yielded = 0
    for current in traversal:
        if not config.should_include(current):
            continue
        yield current
        yielded += 1
        if config.max_nodes is not None and yielded >= config.max_nodes:
            return


def count_nodes(tree_def: TreeDef[T], node: T, **kwargs) -> int:
    """Count nodes that match criteria.

    Args:
        tree_def: TreeDef describing the tree
        node: Starting node for traversal
        **kwargs: Traversal options (see traverse_tree)

    Returns:
        Number of nodes that match criteria
    """
    count = 0
    for _ in traverse_tree(tree_def, node, **kwargs):
        count += 1
    return count


def find_nodes(tree_def: TreeDef[T],
               node: T,
               predicate: Callable[[T], bool],
               **kwargs) -> Iterator[T]:
    """Find nodes that match a predicate.

    Example:
        >>> # Find all python files
        >>> for path in find_nodes(fs, root, lambda p: p.suffix == ".py"):
        ...     print(path)
    """
    kwargs['include_filter'] = predicate
    yield from traverse_tree(tree_def, node, **kwargs)


def get_leaf_nodes(tree_def: TreeDef[T], node: T, **kwargs) -> Iterator[T]:
    """Get all leaf nodes (nodes with no children) under ``node``."""
    for current in traverse_tree(tree_def, node, **kwargs):
        if not tree_def.children_of(current):
            yield current


def get_tree_stats(tree_def: TreeDef[T], node: T) -> Dict[str, Any]:
    """Get statistics about the tree under ``node``.

    Returns:
        Dictionary with keys:
        - total_nodes, leaf_nodes, internal_nodes
        - max_depth: deepest level, with ``node`` at depth 0
        - depths: {depth: number of nodes at that depth}
        - average_branching: mean number of children per internal node

    Example:
        >>> stats = get_tree_stats(TreeNode.tree_def(), root)
        >>> print(f"Leaf nodes: {stats['leaf_nodes']}")
    """
    stats: Dict[str, Any] = {
        'total_nodes': 0,
        'leaf_nodes': 0,
        'max_depth': 0,
        'depths': {},
    }

    for _, depth, num_children in _walk_with_depth(tree_def, node):
        stats['total_nodes'] += 1
        if num_children == 0:
            stats['leaf_nodes'] += 1
        stats['max_depth'] = max(stats['max_depth'], depth)
        stats['depths'][depth] = stats['depths'].get(depth, 0) + 1

    stats['internal_nodes'] = stats['total_nodes'] - stats['leaf_nodes']
    # Every node but the starting one is somebody's child
    stats['average_branching'] = (
        (stats['total_nodes'] - 1) / stats['internal_nodes']
        if stats['internal_nodes'] > 0 else 0
    )
    return stats


def render_path(tree_def: ParentedTreeDef[T],
                node: T,
                config: Optional[RenderConfig] = None) -> str:
    """Render the root-to-node path of ``node`` using a RenderConfig."""
    config = _checked_render_config(config)
    return query.path(tree_def, node, config.label, config.delimiter)


def render_tree(tree_def: TreeDef[T],
                root: T,
                config: Optional[RenderConfig] = None) -> str:
    """Render the whole tree under ``root`` using a RenderConfig."""
    config = _checked_render_config(config)
    return query.to_string(tree_def, root, config.label, config.indent)


# Helper functions

def _checked_render_config(config: Optional[RenderConfig]) -> RenderConfig:
    if config is None:
        return RenderConfig()
    config_errors = config.validate()
    if config_errors:
        raise CapabilityMismatchError(
            f"Invalid configuration: {'; '.join(config_errors)}"
        )
    return config


def _walk_with_depth(tree_def: TreeDef[T], node: T) -> Iterator[Tuple[T, int, int]]:
    """Breadth-first walk yielding (node, depth, number of children)."""
    queue: Deque[Tuple[T, int]] = deque([(node, 0)])
    while queue:
        current, depth = queue.popleft()
        children = tree_def.children_of(current)
        yield current, depth, len(children)
        for child in children:
            queue.append((child, depth + 1))
