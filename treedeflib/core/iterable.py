"""Tree traversal iterables for TreeDefLib.

Each iterable walks a tree described by a TreeDef in one particular order.
They are restartable: every call to ``iter()`` starts a brand new traversal
with its own frontier, so the same iterable can be looped over many times.
Nodes are produced one at a time as the consumer pulls them.
"""

from abc import ABC, abstractmethod
from collections import deque
from typing import Deque, Generic, Iterator, TypeVar, Union

from .._common.config import TraversalStrategy, parse_strategy
from ..errors import CapabilityMismatchError
from .tree_def import ParentedTreeDef, TreeDef

T = TypeVar("T")


class TreeIterable(ABC, Generic[T]):
    """Abstract base class for tree traversal orders.

    Like the TreeDef it wraps, a TreeIterable holds no traversal state of its
    own. The state lives in the iterator returned by ``__iter__``.
    """

    def __init__(self, tree_def: TreeDef[T], node: T):
        """Initialize the iterable.

        Args:
            tree_def: TreeDef describing the tree
            node: Starting node for the traversal
        """
        self.tree_def = tree_def
        self.node = node

    @abstractmethod
    def __iter__(self) -> Iterator[T]:
        """Start a new traversal from ``self.node``."""
        pass

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(node={self.node!r})"


class ToParentIterable(TreeIterable[T]):
    """Ascent from a node to its root, inclusive of both.

    Terminates when ``parent_of`` returns None.
    """

    tree_def: ParentedTreeDef[T]

    def __iter__(self) -> Iterator[T]:
        tip = self.node
        while tip is not None:
            yield tip
            tip = self.tree_def.parent_of(tip)


class BreadthFirstIterable(TreeIterable[T]):
    """Breadth-first (level-order) traversal.

    Visits all nodes at depth N before visiting nodes at depth N+1, and
    siblings in the order ``children_of`` returns them.
    """

    def __iter__(self) -> Iterator[T]:
        queue: Deque[T] = deque([self.node])

        while queue:
            node = queue.popleft()
            yield node
            queue.extend(self.tree_def.children_of(node))


class DepthFirstIterable(TreeIterable[T]):
    """Depth-first pre-order traversal.

    Visits parent before children and siblings left to right. Uses an
    explicit stack rather than recursion, so deep trees don't hit the
    recursion limit.
    """

    def __iter__(self) -> Iterator[T]:
        stack: Deque[T] = deque([self.node])

        while stack:
            node = stack.pop()
            yield node
            # Reversed so that the first child is popped next
            stack.extend(reversed(self.tree_def.children_of(node)))


def to_parent(tree_def: ParentedTreeDef[T], node: T) -> ToParentIterable[T]:
    """Create an iterable that starts at ``node`` and ends at its root parent."""
    return ToParentIterable(tree_def, node)


def breadth_first(tree_def: TreeDef[T], node: T) -> BreadthFirstIterable[T]:
    """Create an iterable that starts at ``node`` and goes deeper in breadth-first order."""
    return BreadthFirstIterable(tree_def, node)


def depth_first(tree_def: TreeDef[T], node: T) -> DepthFirstIterable[T]:
    """Create an iterable that starts at ``node`` and goes deeper in depth-first order."""
    return DepthFirstIterable(tree_def, node)


def create_iterable(strategy: Union[TraversalStrategy, str],
                    tree_def: TreeDef[T],
                    node: T) -> TreeIterable[T]:
    """Create a traversal iterable by strategy.

    Args:
        strategy: TraversalStrategy or one of its string aliases
            (bfs, dfs, dfs_pre, to_parent, ancestors, ...)
        tree_def: TreeDef describing the tree
        node: Starting node

    Returns:
        TreeIterable instance

    Raises:
        ValueError: If strategy name is not recognized
        CapabilityMismatchError: If TO_PARENT is requested for a TreeDef
            which doesn't know parents
    """
    strategy = parse_strategy(strategy)

    if strategy == TraversalStrategy.TO_PARENT:
        if not isinstance(tree_def, ParentedTreeDef):
            raise CapabilityMismatchError(
                f"{strategy.value} traversal needs a ParentedTreeDef, "
                f"got {tree_def.__class__.__name__}"
            )
        return ToParentIterable(tree_def, node)

    if strategy == TraversalStrategy.DEPTH_FIRST_PRE:
        return DepthFirstIterable(tree_def, node)
    return BreadthFirstIterable(tree_def, node)
