"""Factory for creating wall reorderers.

The WallReordererFactory keeps the generator-to-reorderer mapping in one
place, so callers only state which wall generator produced their walls.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from perimeters.domain.value_objects import WallGenerator

from .adaptive_width import AdaptiveWidthReorderer
from .fixed_width import FixedWidthReorderer

if TYPE_CHECKING:
    from perimeters.contracts.strategies import WallReorderer


class WallReordererFactory:
    """Factory for wall reorderer instances.

    Reorderers are stateless, so the factory hands out shared instances.

    Example:
        ```python
        factory = WallReordererFactory()
        reorderer = factory.create_reorderer(WallGenerator.ARACHNE)
        ordered = reorderer.reorder(walls, WallSequence.MIDDLE_OUT_OUTER_INNER)
        ```
    """

    def __init__(self) -> None:
        self._reorderers: dict[WallGenerator, "WallReorderer"] = {
            WallGenerator.CLASSIC: FixedWidthReorderer(),
            WallGenerator.ARACHNE: AdaptiveWidthReorderer(),
        }

    def create_reorderer(self, generator: WallGenerator) -> "WallReorderer":
        """Return the reorderer for walls from the given generator.

        Args:
            generator: The wall generator that produced the walls.

        Returns:
            FixedWidthReorderer for the classic generator,
            AdaptiveWidthReorderer for arachne.
        """
        return self._reorderers[WallGenerator(generator)]


__all__ = [
    "WallReordererFactory",
]
