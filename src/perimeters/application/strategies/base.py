"""Shared grouping and emission for wall reorderers.

Re-exports the WallReorderer protocol and provides the depth bucketing
used by both reorderer implementations. Depths form a small dense range,
so buckets are a list of lists indexed directly by depth.
"""

from __future__ import annotations

from typing import Sequence, TypeVar

from perimeters.contracts.strategies import WallReorderer
from perimeters.domain.sequence_planner import generate_depth_order
from perimeters.domain.value_objects import WallEntity, WallSequence

E = TypeVar("E", bound=WallEntity)


def bucket_by_depth(entities: Sequence[E]) -> list[list[E]]:
    """Group entities into per-depth buckets.

    The bucket index is each entity's ``bucket_depth``; the number of
    buckets is the deepest bucket depth plus one. Entities keep their
    input order inside a bucket. Depths with no entities get an empty
    bucket.
    """
    if not entities:
        return []
    wall_count = max(entity.bucket_depth for entity in entities) + 1
    buckets: list[list[E]] = [[] for _ in range(wall_count)]
    for entity in entities:
        buckets[entity.bucket_depth].append(entity)
    return buckets


def emit_in_order(buckets: list[list[E]], policy: WallSequence) -> list[E]:
    """Concatenate buckets in the print order of the given policy.

    Empty buckets are skipped. This happens when an island has no wall
    at some depth, for example a depth only a sibling island reaches.
    """
    ordered: list[E] = []
    for depth in generate_depth_order(len(buckets), policy):
        ordered.extend(buckets[depth])
    return ordered


__all__ = [
    "WallReorderer",
    "bucket_by_depth",
    "emit_in_order",
]
