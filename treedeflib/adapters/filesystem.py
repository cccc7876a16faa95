"""Filesystem tree definition for TreeDefLib.

Describes a directory hierarchy as a tree of ``pathlib.Path`` objects.
Nothing is cached: every call reads the filesystem as it is right now.
"""

import logging
from pathlib import Path
from typing import List, Optional, Union

from ..core.tree_def import ParentedTreeDef

logger = logging.getLogger(__name__)


class FileSystemTreeDef(ParentedTreeDef[Path]):
    """ParentedTreeDef where nodes are paths and children are directory entries.

    Children are sorted by name so traversals are deterministic. Files have
    no children.

    Example:
        >>> fs = FileSystemTreeDef(root="/home/user/project")
        >>> query.path(fs, Path("/home/user/project/src/main.py"), lambda p: p.name)
        'project/src/main.py'
    """

    def __init__(self,
                 root: Optional[Union[str, Path]] = None,
                 follow_symlinks: bool = False,
                 include_hidden: bool = True):
        """Initialize filesystem tree definition.

        Args:
            root: Treat this directory as the root of the tree (its parent is
                None). Defaults to the filesystem root.
            follow_symlinks: Whether symbolic links appear as children and are
                descended into
            include_hidden: Whether entries starting with '.' appear as children
        """
        self.root = Path(root) if root is not None else None
        self.follow_symlinks = follow_symlinks
        self.include_hidden = include_hidden

    def children_of(self, node: Path) -> List[Path]:
        """List directory entries of ``node``, sorted by name.

        Unless ``follow_symlinks`` is set, a symlinked directory is a leaf
        even when it is the node the traversal started from.
        """
        if not self.follow_symlinks and node.is_symlink():
            return []
        if not node.is_dir():
            return []  # No children for files

        try:
            entries = sorted(node.iterdir())
        except PermissionError:
            logger.warning("Permission denied listing %s, treating it as a leaf", node)
            return []

        children = []
        for child_path in entries:
            if not self.include_hidden and child_path.name.startswith('.'):
                continue
            if not self.follow_symlinks and child_path.is_symlink():
                continue
            children.append(child_path)
        return children

    def parent_of(self, node: Path) -> Optional[Path]:
        """Return the parent directory, or None at the tree's root."""
        if self.root is not None and node == self.root:
            return None

        parent_path = node.parent
        if parent_path == node:
            return None  # Filesystem root
        return parent_path

    def __repr__(self) -> str:
        return f"FileSystemTreeDef(root={self.root!r})"
