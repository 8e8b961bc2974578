"""Wall reordering strategies.

This package implements the Strategy pattern for wall reordering, one
strategy per upstream wall generator.

Available Strategies:
    - FixedWidthReorderer: walls from the classic fixed-width generator
    - AdaptiveWidthReorderer: walls from the arachne variable-width generator

Factory:
    - WallReordererFactory: Returns the strategy for a wall generator

Protocol:
    - WallReorderer: Protocol defining the strategy interface (from contracts)

Example:
    ```python
    from perimeters.application.strategies import WallReordererFactory

    reorderer = WallReordererFactory().create_reorderer(WallGenerator.CLASSIC)
    ordered = reorderer.reorder(walls, WallSequence.OUTER_INNER)
    ```
"""

from .adaptive_width import AdaptiveWidthReorderer, contours_first
from .base import WallReorderer, bucket_by_depth, emit_in_order
from .factory import WallReordererFactory
from .fixed_width import FixedWidthReorderer

__all__ = [
    # Protocol and helpers
    "WallReorderer",
    "bucket_by_depth",
    "contours_first",
    "emit_in_order",
    # Factory
    "WallReordererFactory",
    # Strategies
    "AdaptiveWidthReorderer",
    "FixedWidthReorderer",
]
