"""Reorderer for walls from a fixed-width wall generator.

Every wall entity is a plain depth-tagged loop, so reordering is a
straight group-by-depth followed by emission in planner order.
"""

from __future__ import annotations

import logging
from typing import Sequence

from perimeters.domain.value_objects import WallEntity, WallSequence

from .base import bucket_by_depth, emit_in_order

logger = logging.getLogger(__name__)


class FixedWidthReorderer:
    """Strategy for reordering fixed-width walls.

    The wall count is inferred per call from the deepest wall seen, since
    islands on the same layer can have different numbers of walls.

    This strategy is selected for the classic wall generator.
    """

    def reorder(
        self,
        entities: Sequence[WallEntity],
        policy: WallSequence,
    ) -> list[WallEntity]:
        """Return the entities in print order.

        Args:
            entities: One island's wall entities as generated.
            policy: The wall sequence policy to apply.

        Returns:
            A new list holding the same entities, grouped by depth in
            print order with input order kept inside each depth.
        """
        if len(entities) < 2:
            return list(entities)

        buckets = bucket_by_depth(entities)
        logger.debug(
            f"Reordering {len(entities)} fixed-width walls "
            f"over {len(buckets)} depths with {policy.label}"
        )
        return emit_in_order(buckets, policy)


__all__ = [
    "FixedWidthReorderer",
]
