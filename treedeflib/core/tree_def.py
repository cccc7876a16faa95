"""TreeDef abstraction for TreeDefLib.

A TreeDef is what makes TreeDefLib universal. It doesn't hold a tree, it
*describes* one: given a node, it knows the node's children, and for a
ParentedTreeDef, the node's parent as well. The same data can be described by
many TreeDefs, and the traversals and queries work with all of them.
"""

from abc import ABC, abstractmethod
from typing import Callable, Generic, Iterator, Optional, Sequence, TypeVar

from .._common.filtering import filtered_list

T = TypeVar("T")


class TreeDef(ABC, Generic[T]):
    """Defines a "singly-linked" tree, where nodes know their children.

    Subclasses only need to implement ``children_of``. The returned sequence
    must be ordered - that order is the traversal order - and calling it twice
    on the same node should return an equivalent sequence.

    Example:
        >>> tree = {"root": ["a", "b"], "a": ["c"]}
        >>> tree_def = TreeDef.of(lambda node: tree.get(node, []))
        >>> list(tree_def.children_of("root"))
        ['a', 'b']
    """

    @abstractmethod
    def children_of(self, node: T) -> Sequence[T]:
        """Return the children of the given node, in order.

        Args:
            node: The parent node

        Returns:
            Sequence of child nodes (empty for leaves)
        """
        pass

    def filter(self, predicate: Callable[[T], bool]) -> "TreeDef[T]":
        """Create a TreeDef whose ``children_of`` only returns children passing ``predicate``.

        A child which fails the predicate is pruned along with its whole
        subtree.

        Args:
            predicate: Function returning True for nodes to keep

        Returns:
            A new, filtered TreeDef
        """
        return TreeDef.of(lambda node: filtered_list(self.children_of(node), predicate))

    @staticmethod
    def of(children_func: Callable[[T], Sequence[T]]) -> "TreeDef[T]":
        """Create a TreeDef which is implemented by the given function."""
        return _FunctionTreeDef(children_func)


class ParentedTreeDef(TreeDef[T]):
    """Defines a "doubly-linked" tree, where nodes know both their parent and their children.

    It is critical that a ParentedTreeDef is consistent: if ``parent_of(x)``
    is ``p``, then ``x`` must appear in ``children_of(p)``. This is not
    checked. An inconsistent or cyclic definition makes the algorithms which
    rely on it fail in unexpected ways, possibly by never terminating.
    """

    @abstractmethod
    def parent_of(self, node: T) -> Optional[T]:
        """Return the parent of the given node.

        Args:
            node: The child node

        Returns:
            Parent node, or None if node is a root
        """
        pass

    def depth_of(self, node: T) -> int:
        """Calculate the depth of a node by walking up to its root.

        Args:
            node: The node to get depth for

        Returns:
            Depth where root = 0
        """
        depth = 0
        current = self.parent_of(node)
        while current is not None:
            depth += 1
            current = self.parent_of(current)
        return depth

    def siblings_of(self, node: T) -> Iterator[T]:
        """Get siblings of the given node (excluding the node itself).

        Args:
            node: The node to get siblings for

        Yields:
            Sibling nodes in their parent's child order
        """
        parent = self.parent_of(node)
        if parent is None:
            return  # Root has no siblings

        for child in self.children_of(parent):
            if child != node:
                yield child

    def filter(self, predicate: Callable[[T], bool]) -> "ParentedTreeDef[T]":
        """Create a ParentedTreeDef whose children and parents are filtered by ``predicate``.

        Children failing the predicate are dropped, and a node which fails the
        predicate reports no parent.
        """
        def parent_func(node: T) -> Optional[T]:
            if predicate(node):
                return self.parent_of(node)
            return None

        return ParentedTreeDef.of(
            lambda node: filtered_list(self.children_of(node), predicate),
            parent_func,
        )

    @staticmethod
    def of(children_func: Callable[[T], Sequence[T]],
           parent_func: Callable[[T], Optional[T]]) -> "ParentedTreeDef[T]":
        """Create a ParentedTreeDef which is implemented by the two given functions."""
        return _FunctionParentedTreeDef(children_func, parent_func)


class _FunctionTreeDef(TreeDef[T]):
    """TreeDef backed by a plain function."""

    def __init__(self, children_func: Callable[[T], Sequence[T]]):
        self._children_func = children_func

    def children_of(self, node: T) -> Sequence[T]:
        return self._children_func(node)


class _FunctionParentedTreeDef(ParentedTreeDef[T]):
    """ParentedTreeDef backed by a pair of plain functions."""

    def __init__(self,
                 children_func: Callable[[T], Sequence[T]],
                 parent_func: Callable[[T], Optional[T]]):
        self._children_func = children_func
        self._parent_func = parent_func

    def children_of(self, node: T) -> Sequence[T]:
        return self._children_func(node)

    def parent_of(self, node: T) -> Optional[T]:
        return self._parent_func(node)
