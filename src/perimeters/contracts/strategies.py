"""Strategy protocols for wall reordering.

This module defines the contract shared by the wall reorderers. Each
upstream wall generator (fixed width, adaptive width) has its own
reorderer; the slicing pipeline only depends on this protocol and picks
the implementation through WallReordererFactory.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, Sequence, runtime_checkable

if TYPE_CHECKING:
    from perimeters.domain.value_objects import WallEntity, WallSequence


@runtime_checkable
class WallReorderer(Protocol):
    """Protocol for rearranging one island's walls into print order.

    Implementations:
    - FixedWidthReorderer: walls from a fixed-width generator
    - AdaptiveWidthReorderer: walls from a variable-width generator,
      including contour flags and transition geometry

    Implementations must be stateless: the same instance may be shared
    by any number of workers.

    Example:
        ```python
        class FixedWidthReorderer:
            def reorder(
                self,
                entities: Sequence[WallEntity],
                policy: WallSequence,
            ) -> list[WallEntity]:
                ...
        ```
    """

    def reorder(
        self,
        entities: Sequence["WallEntity"],
        policy: "WallSequence",
    ) -> list["WallEntity"]:
        """Return the entities in print order for the given policy.

        Args:
            entities: All wall entities of one island on one layer, in
                the order the wall generator produced them.
            policy: The wall sequence policy to apply.

        Returns:
            The same entities (no copies, none added or dropped) grouped
            by depth in print order, keeping the input order within each
            depth.
        """
        ...


__all__ = [
    "WallReorderer",
]
