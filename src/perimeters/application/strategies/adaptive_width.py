"""Reorderer for walls from a variable-width wall generator.

Variable-width generation can interleave outer contours with transition
geometry between walls of different widths. Before grouping, every
outer-contour entity is moved to the front of the sequence so each depth
bucket starts from the same normalized order the fixed-width path sees.
Transition entities are bucketed with the wall they transition into.
"""

from __future__ import annotations

import logging
from typing import Sequence

from perimeters.domain.value_objects import WallEntity, WallSequence

from .base import bucket_by_depth, emit_in_order

logger = logging.getLogger(__name__)


def contours_first(entities: Sequence[WallEntity]) -> list[WallEntity]:
    """Stable partition with outer-contour entities in front.

    Outer contours are depth-0 entities and any entity flagged as a
    primary contour. Both partitions keep their relative order.

    Example:
        depths [2, 0, 1, 0] become [0, 0, 2, 1]; the two depth-0
        entities keep their relative order, as do the other two.
    """
    contours = [entity for entity in entities if entity.is_outer_contour]
    others = [entity for entity in entities if not entity.is_outer_contour]
    return contours + others


class AdaptiveWidthReorderer:
    """Strategy for reordering variable-width walls.

    Same contract as FixedWidthReorderer. Accepts AdaptiveWallEntity
    instances; plain WallEntity instances are treated as closed,
    non-transition walls.

    This strategy is selected for the arachne wall generator.
    """

    def reorder(
        self,
        entities: Sequence[WallEntity],
        policy: WallSequence,
    ) -> list[WallEntity]:
        """Return the entities in print order.

        Args:
            entities: One island's wall entities as generated, possibly
                with contours and transitions interleaved.
            policy: The wall sequence policy to apply.

        Returns:
            A new list holding the same entities, grouped by bucket depth
            in print order. Transition geometry stays with its wall.
        """
        if len(entities) < 2:
            return list(entities)

        normalized = contours_first(entities)
        buckets = bucket_by_depth(normalized)
        logger.debug(
            f"Reordering {len(entities)} variable-width walls "
            f"over {len(buckets)} depths with {policy.label}"
        )
        return emit_in_order(buckets, policy)


__all__ = [
    "AdaptiveWidthReorderer",
    "contours_first",
]
