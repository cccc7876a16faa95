"""Queries against trees described by a TreeDef.

Ancestor chains, lowest common ancestor, paths, whole-tree rendering, and
copying a tree into another tree type. Queries which look upward need a
ParentedTreeDef; those which only look down work with any TreeDef.

None of these functions guard against cyclic or inconsistent tree
definitions. On such input they may raise, return garbage or never return.
"""

import logging
from typing import (Any, Callable, Iterable, List, Optional, Sequence, Set,
                    TypeVar)

from ..errors import InvalidAncestorError
from .tree_def import ParentedTreeDef, TreeDef

logger = logging.getLogger(__name__)

T = TypeVar("T")
R = TypeVar("R")


def to_root(tree_def: ParentedTreeDef[T], node: T) -> List[T]:
    """Create a list whose first element is ``node`` and last element is its root parent."""
    chain = []
    tip = node
    while tip is not None:
        chain.append(tip)
        tip = tree_def.parent_of(tip)
    return chain


def root(tree_def: ParentedTreeDef[T], node: T) -> T:
    """Return the root of the tree which contains ``node``."""
    tip = node
    parent = tree_def.parent_of(tip)
    while parent is not None:
        tip = parent
        parent = tree_def.parent_of(tip)
    return tip


def to_parent(tree_def: ParentedTreeDef[T], node: T, parent: T) -> List[T]:
    """Create a list whose first element is ``node`` and last element is ``parent``.

    ``node`` itself is never compared against ``parent``: the search starts
    at the first parent of ``node``.

    Args:
        tree_def: ParentedTreeDef describing the tree
        node: Node to start the ascent from
        parent: An ancestor of ``node``

    Returns:
        Ancestor chain from ``node`` to ``parent``, both inclusive

    Raises:
        InvalidAncestorError: If the root is passed without meeting ``parent``
    """
    chain = [node]
    tip = tree_def.parent_of(node)
    while tip is not None:
        chain.append(tip)
        if tip == parent:
            return chain
        tip = tree_def.parent_of(tip)

    logger.debug("Ascent from %r reached root %r without meeting %r", node, chain[-1], parent)
    raise InvalidAncestorError(node, parent)


def is_descendant_of(tree_def: ParentedTreeDef[T], child: T, parent: T) -> bool:
    """Return True if ``parent`` is a strict ancestor of ``child``."""
    tip = tree_def.parent_of(child)
    while tip is not None:
        if tip == parent:
            return True
        tip = tree_def.parent_of(tip)
    return False


def is_descendant_of_or_equal_to(tree_def: ParentedTreeDef[T], child: T, parent: T) -> bool:
    """Return True if ``child`` equals ``parent`` or descends from it."""
    return child == parent or is_descendant_of(tree_def, child, parent)


class _AncestorSearch:
    """One upward cursor of the lowest-common-ancestor search."""

    def __init__(self, tree_def: ParentedTreeDef, start: Any):
        self.tree_def = tree_def
        self.tip = start
        self.visited: Set[Any] = set()

    def has_more(self) -> bool:
        return self.tip is not None

    def march(self, other: "_AncestorSearch") -> Optional[Any]:
        """Take one step up, unless ``other`` has already been where we are.

        Returns:
            The current node if ``other`` visited it, otherwise None
        """
        if self.tip in other.visited:
            return self.tip
        self.visited.add(self.tip)
        self.tip = self.tree_def.parent_of(self.tip)
        return None


def _pairwise_lca(tree_def: ParentedTreeDef[T], node_a: T, node_b: T) -> Optional[T]:
    """Lowest common ancestor of two nodes.

    Both cursors climb in lockstep, each checking the other's trail, so the
    answer is found after O(depth(a) + depth(b)) steps without computing
    either depth first.
    """
    search_a = _AncestorSearch(tree_def, node_a)
    search_b = _AncestorSearch(tree_def, node_b)

    common = search_b.march(search_a)
    while search_a.has_more() and search_b.has_more():
        common = search_a.march(search_b)
        if common is not None:
            return common
        common = search_b.march(search_a)
        if common is not None:
            return common

    # One cursor hit its root, the other may still climb into its trail
    while search_a.has_more() and common is None:
        common = search_a.march(search_b)
    while search_b.has_more() and common is None:
        common = search_b.march(search_a)
    return common


def lowest_common_ancestor(tree_def: ParentedTreeDef[T], *nodes: T) -> Optional[T]:
    """Return the deepest node which is an ancestor of (or equal to) every given node.

    Example:
        >>> lowest_common_ancestor(tree_def, matrix_java, array_java)
        TreeNode[math]

    Returns:
        The common ancestor, or None if ``nodes`` is empty or the nodes
        don't share a root
    """
    return lowest_common_ancestor_of(tree_def, nodes)


def lowest_common_ancestor_of(tree_def: ParentedTreeDef[T], nodes: Iterable[T]) -> Optional[T]:
    """Same as ``lowest_common_ancestor``, but takes any iterable of nodes."""
    so_far: Optional[T] = None
    for index, node in enumerate(nodes):
        if index == 0:
            so_far = node
        else:
            so_far = _pairwise_lca(tree_def, so_far, node)
        if so_far is None:
            return None
    return so_far


def path(tree_def: ParentedTreeDef[T],
         node: T,
         to_str: Callable[[T], str] = str,
         delimiter: str = "/") -> str:
    """Return the path from the root of the tree down to ``node``.

    Args:
        tree_def: ParentedTreeDef describing the tree
        node: Last node of the path
        to_str: Maps each node to its path segment
        delimiter: Path separator

    Example:
        >>> path(tree_def, b_node)
        'root/a/b'
    """
    segments = [to_str(segment) for segment in reversed(to_root(tree_def, node))]
    return delimiter.join(segments)


def to_string(tree_def: TreeDef[T],
              root: T,
              to_str: Callable[[T], str] = str,
              indent: str = " ") -> str:
    """Convert the entire tree under ``root`` into a string.

    Each node goes on its own line, indented by ``indent`` once per level
    below ``root``, in depth-first pre-order. Every line ends with a newline.

    Args:
        tree_def: TreeDef describing the tree
        root: The root of the tree
        to_str: Generates the text for each node
        indent: String used for each level of indentation
    """
    lines = [to_str(root), "\n"]
    _to_string_helper(tree_def, root, to_str, indent, lines, indent)
    return "".join(lines)


def _to_string_helper(tree_def: TreeDef[T],
                      node: T,
                      to_str: Callable[[T], str],
                      indent: str,
                      lines: List[str],
                      prefix: str) -> None:
    for child in tree_def.children_of(node):
        lines.append(prefix)
        lines.append(to_str(child))
        lines.append("\n")
        _to_string_helper(tree_def, child, to_str, indent, lines, prefix + indent)


def find_by_path(tree_def: TreeDef[T],
                 root: T,
                 segments: Sequence[Any],
                 equality: Callable[[T, Any], bool]) -> Optional[T]:
    """Find the node reached by following ``segments`` down from ``root``.

    At each level the first child for which ``equality(child, segment)``
    holds is taken. An empty ``segments`` returns ``root``.

    Returns:
        The matching node, or None if some segment has no matching child
    """
    tip = root
    for segment in segments:
        for child in tree_def.children_of(tip):
            if equality(child, segment):
                tip = child
                break
        else:
            return None
    return tip


def copy_leaves_in(tree_def: TreeDef[T],
                   root: T,
                   map_func: Callable[[T, List[R]], R]) -> R:
    """Copy a tree by building the leaves first, then their parents.

    Suits destination types that take their children at construction time.

    Args:
        tree_def: TreeDef describing the source tree
        root: Root of the source tree
        map_func: ``(old_node, copied_children) -> new_node``

    Returns:
        Root of the copied tree
    """
    children = [copy_leaves_in(tree_def, child, map_func)
                for child in tree_def.children_of(root)]
    return map_func(root, children)


def copy_root_out(tree_def: TreeDef[T],
                  root: T,
                  map_func: Callable[[T, Optional[R]], R]) -> R:
    """Copy a tree by building the root first, then its children.

    Suits destination types that attach themselves to their parent at
    construction time.

    Args:
        tree_def: TreeDef describing the source tree
        root: Root of the source tree
        map_func: ``(old_node, new_parent) -> new_node``; ``new_parent`` is
            None for the root

    Returns:
        Root of the copied tree
    """
    copy_root = map_func(root, None)
    _copy_root_out_helper(tree_def, root, copy_root, map_func)
    return copy_root


def _copy_root_out_helper(tree_def: TreeDef[T],
                          source: T,
                          copy: R,
                          map_func: Callable[[T, Optional[R]], R]) -> None:
    for child in tree_def.children_of(source):
        _copy_root_out_helper(tree_def, child, map_func(child, copy), map_func)
