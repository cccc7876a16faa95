"""Exceptions raised by TreeDefLib.

Errors raised by a caller's own ``children_of``/``parent_of`` are never
wrapped - they propagate to whoever started the traversal or query.
"""

from typing import Any


class TreeDefLibError(Exception):
    """Base class for all TreeDefLib errors."""
    pass


class InvalidAncestorError(TreeDefLibError, ValueError):
    """Raised when a node's ascent reaches the root without meeting the expected ancestor.

    Attributes:
        node: The node the ascent started from
        ancestor: The node which was expected to be one of its ancestors
    """

    def __init__(self, node: Any, ancestor: Any):
        self.node = node
        self.ancestor = ancestor
        # args must match the constructor so the error survives pickling
        super().__init__(node, ancestor)

    def __str__(self) -> str:
        return f"{self.ancestor!r} is not a parent of {self.node!r}"


class CapabilityMismatchError(TreeDefLibError):
    """Raised when a configuration asks for something the tree definition can't provide."""
    pass
