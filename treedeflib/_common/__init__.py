"""Common components shared across TreeDefLib.

This internal package contains pure computation with no knowledge of any
particular tree. It should NOT be imported directly by users.

Components here include:
- Configuration classes (TraversalConfig, RenderConfig)
- The filtered_list helper

Important: This package must NEVER import from core to avoid circular
dependencies.
"""

from .config import (
    TraversalConfig,
    TraversalStrategy,
    RenderConfig,
    parse_strategy,
)
from .filtering import filtered_list

__all__ = [
    'TraversalConfig',
    'TraversalStrategy',
    'RenderConfig',
    'parse_strategy',
    'filtered_list',
]
