"""Contracts shared between layers.

Protocols here let the application and web layers depend on behaviour
rather than on concrete reorderer classes.
"""

from .strategies import WallReorderer

__all__ = [
    "WallReorderer",
]
