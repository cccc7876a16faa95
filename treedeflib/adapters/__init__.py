"""Tree definitions for specific tree structures.

Each module here implements TreeDef/ParentedTreeDef for one kind of tree,
so the traversals and queries work on it out of the box.
"""

from .filesystem import FileSystemTreeDef

__all__ = [
    "FileSystemTreeDef",
]
