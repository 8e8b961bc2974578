"""Unit tests for the wall reordering strategies.

This module tests the Strategy pattern classes used for wall reordering:
- WallReordererFactory: Selects the reorderer for a wall generator
- FixedWidthReorderer: Group-by-depth reordering of fixed-width walls
- AdaptiveWidthReorderer: Contour normalization plus group-by-depth
"""

from __future__ import annotations

from collections import Counter

import pytest

from perimeters.application.strategies import (
    AdaptiveWidthReorderer,
    FixedWidthReorderer,
    WallReordererFactory,
    bucket_by_depth,
    contours_first,
)
from perimeters.contracts.strategies import WallReorderer
from perimeters.domain import AdaptiveWallEntity, WallEntity, WallGenerator, WallSequence


def _geometries(walls: list[WallEntity]) -> list[str]:
    return [w.geometry for w in walls]


def _by_depth(walls: list[WallEntity]) -> dict[int, Counter]:
    groups: dict[int, Counter] = {}
    for w in walls:
        groups.setdefault(w.bucket_depth, Counter())[id(w)] += 1
    return groups


# =============================================================================
# WallReordererFactory Tests
# =============================================================================


class TestWallReordererFactory:
    """Tests for WallReordererFactory."""

    def test_classic_gets_fixed_width(self) -> None:
        reorderer = WallReordererFactory().create_reorderer(WallGenerator.CLASSIC)

        assert isinstance(reorderer, FixedWidthReorderer)

    def test_arachne_gets_adaptive_width(self) -> None:
        reorderer = WallReordererFactory().create_reorderer(WallGenerator.ARACHNE)

        assert isinstance(reorderer, AdaptiveWidthReorderer)

    def test_accepts_generator_value(self) -> None:
        reorderer = WallReordererFactory().create_reorderer("arachne")  # type: ignore[arg-type]

        assert isinstance(reorderer, AdaptiveWidthReorderer)

    @pytest.mark.parametrize("reorderer", [FixedWidthReorderer(), AdaptiveWidthReorderer()])
    def test_strategies_satisfy_protocol(self, reorderer: WallReorderer) -> None:
        assert isinstance(reorderer, WallReorderer)


# =============================================================================
# bucket_by_depth Tests
# =============================================================================


class TestBucketByDepth:
    def test_empty(self) -> None:
        assert bucket_by_depth([]) == []

    def test_missing_depth_gets_empty_bucket(self) -> None:
        walls = [WallEntity("a", 2), WallEntity("b", 0)]

        buckets = bucket_by_depth(walls)

        assert [len(b) for b in buckets] == [1, 0, 1]

    def test_keeps_input_order_in_bucket(self, split_island_walls: list[WallEntity]) -> None:
        buckets = bucket_by_depth(split_island_walls)

        assert _geometries(buckets[1]) == ["first-a", "first-b"]
        assert _geometries(buckets[2]) == ["second-a", "second-b"]


# =============================================================================
# FixedWidthReorderer Tests
# =============================================================================


class TestFixedWidthReorderer:
    """Tests for FixedWidthReorderer."""

    def test_middle_out_outer_inner(self, five_walls: list[WallEntity]) -> None:
        result = FixedWidthReorderer().reorder(five_walls, WallSequence.MIDDLE_OUT_OUTER_INNER)

        assert _geometries(result) == ["loop-2", "loop-3", "loop-4", "loop-0", "loop-1"]

    def test_middle_out_inner_outer(self, five_walls: list[WallEntity]) -> None:
        result = FixedWidthReorderer().reorder(five_walls, WallSequence.MIDDLE_OUT_INNER_OUTER)

        assert _geometries(result) == ["loop-2", "loop-3", "loop-4", "loop-1", "loop-0"]

    def test_inner_outer(self, five_walls: list[WallEntity]) -> None:
        result = FixedWidthReorderer().reorder(five_walls, WallSequence.INNER_OUTER)

        assert _geometries(result) == ["loop-4", "loop-3", "loop-2", "loop-1", "loop-0"]

    def test_groups_split_walls_by_depth(self, split_island_walls: list[WallEntity]) -> None:
        result = FixedWidthReorderer().reorder(split_island_walls, WallSequence.INNER_OUTER)

        assert _geometries(result) == ["second-a", "second-b", "first-a", "first-b", "outer"]

    def test_same_entities_returned(
        self, split_island_walls: list[WallEntity], any_sequence: WallSequence
    ) -> None:
        result = FixedWidthReorderer().reorder(split_island_walls, any_sequence)

        assert Counter(map(id, result)) == Counter(map(id, split_island_walls))

    def test_intra_depth_order_kept(
        self, split_island_walls: list[WallEntity], any_sequence: WallSequence
    ) -> None:
        result = FixedWidthReorderer().reorder(split_island_walls, any_sequence)
        geometries = _geometries(result)

        assert geometries.index("first-a") < geometries.index("first-b")
        assert geometries.index("second-a") < geometries.index("second-b")

    def test_depth_groups_unchanged(
        self, split_island_walls: list[WallEntity], any_sequence: WallSequence
    ) -> None:
        result = FixedWidthReorderer().reorder(split_island_walls, any_sequence)

        assert _by_depth(result) == _by_depth(split_island_walls)

    def test_missing_depth_is_skipped(self, any_sequence: WallSequence) -> None:
        walls = [WallEntity("outer", 0), WallEntity("third", 2)]

        result = FixedWidthReorderer().reorder(walls, any_sequence)

        assert sorted(_geometries(result)) == ["outer", "third"]

    def test_missing_depth_middle_out_order(self) -> None:
        walls = [WallEntity("outer", 0), WallEntity("third", 2)]

        result = FixedWidthReorderer().reorder(walls, WallSequence.MIDDLE_OUT_OUTER_INNER)

        assert _geometries(result) == ["third", "outer"]

    @pytest.mark.parametrize("count", [0, 1])
    def test_fewer_than_two_unchanged(self, count: int) -> None:
        walls = [WallEntity("only", 3)][:count]

        result = FixedWidthReorderer().reorder(walls, WallSequence.OUTER_INNER)

        assert result == walls
        assert result is not walls

    def test_does_not_mutate_input(self, five_walls: list[WallEntity]) -> None:
        before = list(five_walls)

        FixedWidthReorderer().reorder(five_walls, WallSequence.INNER_OUTER)

        assert five_walls == before

    def test_accepts_tuple(self, five_walls: list[WallEntity]) -> None:
        result = FixedWidthReorderer().reorder(tuple(five_walls), WallSequence.OUTER_INNER)

        assert result == five_walls


# =============================================================================
# AdaptiveWidthReorderer Tests
# =============================================================================


class TestContoursFirst:
    def test_moves_contours_to_front(self, arachne_walls: list[AdaptiveWallEntity]) -> None:
        assert _geometries(contours_first(arachne_walls)) == ["w0", "w1", "t12", "w2", "w3"]

    def test_flagged_contour_moves_to_front(self) -> None:
        walls = [
            AdaptiveWallEntity("inner", 1),
            AdaptiveWallEntity("hole", 1, is_contour=True),
            AdaptiveWallEntity("outer", 0),
        ]

        assert _geometries(contours_first(walls)) == ["hole", "outer", "inner"]


class TestAdaptiveWidthReorderer:
    """Tests for AdaptiveWidthReorderer."""

    def test_middle_out_with_transition(self, arachne_walls: list[AdaptiveWallEntity]) -> None:
        result = AdaptiveWidthReorderer().reorder(
            arachne_walls, WallSequence.MIDDLE_OUT_OUTER_INNER
        )

        assert _geometries(result) == ["t12", "w2", "w3", "w0", "w1"]

    def test_transition_stays_with_target_wall(
        self, arachne_walls: list[AdaptiveWallEntity], any_sequence: WallSequence
    ) -> None:
        result = AdaptiveWidthReorderer().reorder(arachne_walls, any_sequence)
        geometries = _geometries(result)

        assert geometries.index("w2") == geometries.index("t12") + 1

    def test_same_entities_returned(
        self, arachne_walls: list[AdaptiveWallEntity], any_sequence: WallSequence
    ) -> None:
        result = AdaptiveWidthReorderer().reorder(arachne_walls, any_sequence)

        assert Counter(map(id, result)) == Counter(map(id, arachne_walls))
        assert _by_depth(result) == _by_depth(arachne_walls)

    def test_flagged_contour_leads_its_depth(self) -> None:
        walls = [
            AdaptiveWallEntity("inner", 1),
            AdaptiveWallEntity("outer", 0),
            AdaptiveWallEntity("hole", 1, is_contour=True),
        ]

        result = AdaptiveWidthReorderer().reorder(walls, WallSequence.INNER_OUTER)

        assert _geometries(result) == ["hole", "inner", "outer"]

    def test_matches_fixed_width_for_plain_loops(
        self, split_island_walls: list[WallEntity], any_sequence: WallSequence
    ) -> None:
        adaptive = [AdaptiveWallEntity(w.geometry, w.depth) for w in split_island_walls]

        fixed_result = FixedWidthReorderer().reorder(split_island_walls, any_sequence)
        adaptive_result = AdaptiveWidthReorderer().reorder(adaptive, any_sequence)

        assert _geometries(adaptive_result) == _geometries(fixed_result)

    def test_accepts_plain_wall_entities(self, five_walls: list[WallEntity]) -> None:
        result = AdaptiveWidthReorderer().reorder(five_walls, WallSequence.INNER_OUTER_INNER)

        assert _geometries(result) == ["loop-4", "loop-3", "loop-2", "loop-0", "loop-1"]

    def test_single_entity_unchanged(self) -> None:
        walls = [AdaptiveWallEntity("only", 0)]

        assert AdaptiveWidthReorderer().reorder(walls, WallSequence.INNER_OUTER) == walls
