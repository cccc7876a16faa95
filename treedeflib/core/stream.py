"""Stream-style access to tree traversals.

Where ``treedeflib.core.iterable`` hands back restartable iterables, these
functions hand back a single lazy iterator, ready to be fed into ``map``,
``filter``, ``itertools`` or a comprehension. Order and termination are
exactly those of the matching iterable.

Example:
    >>> from itertools import islice
    >>> names = map(str, stream.breadth_first(tree_def, root))
    >>> first_three = list(islice(names, 3))
"""

from typing import Iterator, TypeVar

from . import iterable
from .tree_def import ParentedTreeDef, TreeDef

T = TypeVar("T")


def to_parent(tree_def: ParentedTreeDef[T], node: T) -> Iterator[T]:
    """Stream that starts at ``node`` and ends at its root parent."""
    return iter(iterable.to_parent(tree_def, node))


def breadth_first(tree_def: TreeDef[T], node: T) -> Iterator[T]:
    """Stream that starts at ``node`` and goes deeper in breadth-first order."""
    return iter(iterable.breadth_first(tree_def, node))


def depth_first(tree_def: TreeDef[T], node: T) -> Iterator[T]:
    """Stream that starts at ``node`` and goes deeper in depth-first order."""
    return iter(iterable.depth_first(tree_def, node))
