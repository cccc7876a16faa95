"""Configuration system for TreeDefLib.

This module defines how users specify traversal and rendering requirements:
which order to walk a tree in, how many nodes they want, which nodes they
care about, and how nodes are turned into text.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, List, Optional, Union


class TraversalStrategy(Enum):
    """How to traverse the tree.

    BREADTH_FIRST and DEPTH_FIRST_PRE walk down from a node and work with any
    TreeDef. TO_PARENT walks up to the root and needs a ParentedTreeDef.
    """
    BREADTH_FIRST = "bfs"           # Level by level
    DEPTH_FIRST_PRE = "dfs_pre"     # Parent before children
    TO_PARENT = "to_parent"         # Node, its parent, ..., root


_STRATEGY_ALIASES = {
    'bfs': TraversalStrategy.BREADTH_FIRST,
    'breadth_first': TraversalStrategy.BREADTH_FIRST,
    'dfs': TraversalStrategy.DEPTH_FIRST_PRE,
    'dfs_pre': TraversalStrategy.DEPTH_FIRST_PRE,
    'depth_first': TraversalStrategy.DEPTH_FIRST_PRE,
    'depth_first_pre': TraversalStrategy.DEPTH_FIRST_PRE,
    'to_parent': TraversalStrategy.TO_PARENT,
    'to_root': TraversalStrategy.TO_PARENT,
    'ancestors': TraversalStrategy.TO_PARENT,
}


def parse_strategy(strategy: Union[TraversalStrategy, str]) -> TraversalStrategy:
    """Parse strategy from string or enum.

    Args:
        strategy: Strategy as enum or string alias

    Returns:
        TraversalStrategy enum value

    Raises:
        ValueError: If strategy name is not recognized
    """
    if isinstance(strategy, TraversalStrategy):
        return strategy

    strategy_lower = strategy.lower() if isinstance(strategy, str) else str(strategy)
    if strategy_lower in _STRATEGY_ALIASES:
        return _STRATEGY_ALIASES[strategy_lower]

    raise ValueError(
        f"Unknown traversal strategy: {strategy}. "
        f"Choose from: {', '.join(_STRATEGY_ALIASES.keys())}"
    )


@dataclass
class RenderConfig:
    """How nodes are rendered by ``path`` and ``to_string``."""

    delimiter: str = "/"                  # Separator between path segments
    indent: str = " "                     # Repeated once per depth level
    label: Callable[[Any], str] = str     # Node -> text

    def validate(self) -> List[str]:
        """Validate configuration for consistency.

        Returns:
            List of validation errors (empty if valid)
        """
        errors = []
        if not isinstance(self.delimiter, str):
            errors.append("delimiter must be a string")
        if not isinstance(self.indent, str):
            errors.append("indent must be a string")
        if not callable(self.label):
            errors.append("label must be callable")
        return errors


@dataclass
class TraversalConfig:
    """Complete configuration for a tree traversal.

    This is the primary way users of the high-level API specify what they
    want from a traversal.
    """

    # Traversal algorithm
    strategy: TraversalStrategy = TraversalStrategy.BREADTH_FIRST

    # Stop after yielding this many nodes (None = whole tree)
    max_nodes: Optional[int] = None

    # Only yield nodes passing this predicate. Children of rejected nodes are
    # still explored.
    include_filter: Optional[Callable[[Any], bool]] = None

    def should_include(self, node: Any) -> bool:
        """Check if a node should be yielded based on the include filter."""
        if self.include_filter is None:
            return True
        return self.include_filter(node)

    @classmethod
    def ancestors(cls) -> 'TraversalConfig':
        """Create config for walking from a node up to its root."""
        return cls(strategy=TraversalStrategy.TO_PARENT)

    def validate(self) -> List[str]:
        """Validate configuration for consistency.

        Returns:
            List of validation errors (empty if valid)
        """
        errors = []

        if not isinstance(self.strategy, TraversalStrategy):
            errors.append(f"strategy must be a TraversalStrategy, got {self.strategy!r}")

        if self.max_nodes is not None and self.max_nodes <= 0:
            errors.append("max_nodes must be positive")

        if self.include_filter is not None and not callable(self.include_filter):
            errors.append("include_filter must be callable")

        return errors
