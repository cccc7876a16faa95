"""TreeNode - a general-purpose doubly-linked tree for TreeDefLib.

Most trees handled by TreeDefLib already exist somewhere (a filesystem, a
parsed document, an object graph) and are only *described* by a TreeDef.
TreeNode is for the other cases: building a tree by hand, copying the shape
of an existing tree, or writing easy-to-read test data.
"""

from typing import Any, Generic, List, Optional, Sequence, Tuple, TypeVar

from . import query
from .iterable import breadth_first
from .tree_def import ParentedTreeDef, TreeDef

T = TypeVar("T")


class TreeNode(Generic[T]):
    """A node holding ``content``, which knows its parent and its children.

    Creating a TreeNode with a parent automatically appends it to that
    parent's children. Nodes compare by identity, so two nodes with equal
    content are still different nodes.

    Example:
        >>> root = TreeNode(None, "root")
        >>> child = TreeNode(root, "child")
        >>> root.children
        (TreeNode[child],)
    """

    def __init__(self, parent: Optional["TreeNode[T]"], content: T):
        """Initialize a node and attach it to ``parent``.

        Args:
            parent: Parent node (None for root)
            content: Object held by this node
        """
        self._parent = parent
        self._content = content
        self._children: List["TreeNode[T]"] = []
        if parent is not None:
            parent._children.append(self)

    @property
    def content(self) -> T:
        """The object which is encapsulated by this TreeNode."""
        return self._content

    @content.setter
    def content(self, content: T) -> None:
        self._content = content

    @property
    def parent(self) -> Optional["TreeNode[T]"]:
        """The parent of this TreeNode, or None for a root."""
        return self._parent

    @property
    def children(self) -> Tuple["TreeNode[T]", ...]:
        """The children of this TreeNode, as a read-only snapshot."""
        return tuple(self._children)

    def add_child(self, content: T) -> "TreeNode[T]":
        """Create a new child holding ``content`` and return it."""
        return TreeNode(self, content)

    def remove_from_parent(self) -> None:
        """Detach this node (and its subtree) from its parent, making it a root."""
        if self._parent is not None:
            self._parent._children.remove(self)
            self._parent = None

    def find_by_content(self, content: T) -> "TreeNode[T]":
        """Search breadth-first for the first node under this one holding ``content``.

        Raises:
            ValueError: If no node holds ``content``
        """
        for node in breadth_first(TreeNode.tree_def(), self):
            if node.content == content:
                return node
        raise ValueError(f"{self!r} has no child with content {content!r}")

    def find_by_path(self, *path: T) -> "TreeNode[T]":
        """Find the node reached by following children whose content matches ``path``.

        Raises:
            ValueError: If some segment of ``path`` has no matching child
        """
        result = query.find_by_path(
            TreeNode.tree_def(), self, path,
            lambda node, segment: node.content == segment,
        )
        if result is None:
            raise ValueError(f"{self!r} has no element with path {list(path)!r}")
        return result

    def to_string_deep(self) -> str:
        """Render this node's whole subtree, one content per line, one space per level."""
        return query.to_string(TreeNode.tree_def(), self, lambda node: str(node.content))

    def __repr__(self) -> str:
        return f"TreeNode[{self._content}]"

    @staticmethod
    def tree_def() -> ParentedTreeDef["TreeNode[Any]"]:
        """ParentedTreeDef for TreeNodes."""
        return _TREE_NODE_DEF

    @staticmethod
    def copy(tree_def: TreeDef[T], root: T) -> "TreeNode[T]":
        """Create a hierarchy of TreeNodes that copies the structure and content of the given tree.

        Args:
            tree_def: TreeDef describing the source tree
            root: Root of the source tree; each source node becomes the
                ``content`` of its copy

        Returns:
            Root TreeNode of the copy
        """
        return query.copy_root_out(tree_def, root, lambda node, parent: TreeNode(parent, node))

    @staticmethod
    def create_test_data(*lines: str) -> "TreeNode[str]":
        """Create a tree of string TreeNodes from an indented outline.

        Each line holds one node's content. Its number of leading spaces is
        its depth, so children are indented one space more than their parent.

        Example:
            >>> root = TreeNode.create_test_data(
            ...     "root",
            ...     " middle",
            ...     "  child",
            ...     " middle",
            ...     "  child")

        Raises:
            ValueError: If there are no lines, the first line is indented, a
                later line is unindented (a second root), or a line is
                indented more than one level below its predecessor
        """
        if not lines:
            raise ValueError("Test data needs at least a root line")

        # ancestors[depth] is the most recent node seen at that depth
        ancestors: List[TreeNode[str]] = []
        for line in lines:
            depth = _leading_spaces(line)
            if depth == 0 and ancestors:
                raise ValueError(f"Line {line!r} would be a second root")
            if depth > len(ancestors):
                raise ValueError(f"Line {line!r} is indented to depth {depth}, "
                                 f"but the deepest possible depth is {len(ancestors)}")
            parent = ancestors[depth - 1] if depth > 0 else None
            node = TreeNode(parent, line[depth:])
            del ancestors[depth:]
            ancestors.append(node)
        return ancestors[0]


def _leading_spaces(line: str) -> int:
    return len(line) - len(line.lstrip(" "))


def _children_of(node: TreeNode) -> Sequence[TreeNode]:
    return node.children


def _parent_of(node: TreeNode) -> Optional[TreeNode]:
    return node.parent


_TREE_NODE_DEF: ParentedTreeDef[TreeNode] = ParentedTreeDef.of(_children_of, _parent_of)
