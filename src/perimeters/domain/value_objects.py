"""Value objects for the perimeter ordering domain.

This module provides the immutable data types shared by the sequence
planner and the wall reorderers:

- WallSequence: the closed set of wall printing policies
- WallGenerator: the upstream wall generator an entity set came from
- WallEntity / AdaptiveWallEntity: depth-tagged wall geometry
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any


# 1-based wall indices, a permutation of 1..N
Order = list[int]


class WallSequence(str, Enum):
    """Wall printing order policies.

    Values are the keys persisted in configuration and project files.
    Each member also has a stable legacy integer code (see ``code``);
    the middle-out policies were appended after the original three and
    must never shift their codes.

    Attributes:
        INNER_OUTER: Innermost wall first, outer wall last.
        OUTER_INNER: Outer wall first, innermost wall last.
        INNER_OUTER_INNER: Inner walls (third and beyond), then the outer
            wall, then the first inner wall.
        MIDDLE_OUT_OUTER_INNER: Third wall inward to the innermost, then
            the outer wall, then the first inner wall.
        MIDDLE_OUT_INNER_OUTER: Third wall inward to the innermost, then
            the first inner wall, then the outer wall.
    """

    INNER_OUTER = "inner wall/outer wall"
    OUTER_INNER = "outer wall/inner wall"
    INNER_OUTER_INNER = "inner-outer-inner wall"
    MIDDLE_OUT_OUTER_INNER = "middle-out/outer-inner"
    MIDDLE_OUT_INNER_OUTER = "middle-out/inner-outer"

    @property
    def code(self) -> int:
        """Legacy integer code used by older saved configurations."""
        return _SEQUENCE_CODES[self]

    @property
    def label(self) -> str:
        """Human-readable name for presentation layers."""
        return _SEQUENCE_LABELS[self]

    @property
    def is_middle_out(self) -> bool:
        return self in (
            WallSequence.MIDDLE_OUT_OUTER_INNER,
            WallSequence.MIDDLE_OUT_INNER_OUTER,
        )

    @classmethod
    def from_code(cls, code: int) -> WallSequence:
        """Look up a policy by its legacy integer code.

        Raises:
            ValueError: If no policy has the given code.
        """
        for sequence, sequence_code in _SEQUENCE_CODES.items():
            if sequence_code == code:
                return sequence
        raise ValueError(
            f"Unknown wall sequence code {code!r}. "
            f"Valid codes: {sorted(_SEQUENCE_CODES.values())}"
        )

    @classmethod
    def from_key(cls, key: str) -> WallSequence:
        """Look up a policy by its configuration key.

        Raises:
            ValueError: If the key is not a known policy key.
        """
        try:
            return cls(key)
        except ValueError:
            valid = ", ".join(repr(s.value) for s in cls)
            raise ValueError(
                f"Unknown wall sequence {key!r}. Valid values: {valid}"
            ) from None


_SEQUENCE_CODES: dict[WallSequence, int] = {
    WallSequence.INNER_OUTER: 0,
    WallSequence.OUTER_INNER: 1,
    WallSequence.INNER_OUTER_INNER: 2,
    WallSequence.MIDDLE_OUT_OUTER_INNER: 3,
    WallSequence.MIDDLE_OUT_INNER_OUTER: 4,
}

_SEQUENCE_LABELS: dict[WallSequence, str] = {
    WallSequence.INNER_OUTER: "Inner/Outer",
    WallSequence.OUTER_INNER: "Outer/Inner",
    WallSequence.INNER_OUTER_INNER: "Inner/Outer/Inner",
    WallSequence.MIDDLE_OUT_OUTER_INNER: "Middle-Out/Outer-Inner",
    WallSequence.MIDDLE_OUT_INNER_OUTER: "Middle-Out/Inner-Outer",
}


class WallGenerator(str, Enum):
    """Upstream wall generator that produced a set of wall entities.

    Attributes:
        CLASSIC: Fixed extrusion width per wall.
        ARACHNE: Variable extrusion width; walls may merge or split and
            carry transition geometry between depths.
    """

    CLASSIC = "classic"
    ARACHNE = "arachne"


@dataclass(frozen=True)
class WallEntity:
    """A single wall path tagged with its depth.

    The geometry is opaque: it is carried through reordering untouched
    and never inspected. Position among entities of the same depth is
    the order in which they appear in the input sequence.

    Attributes:
        geometry: The wall path as produced by the wall generator.
        depth: 0 for the outermost wall, N-1 for the innermost.
    """

    geometry: Any
    depth: int

    def __post_init__(self) -> None:
        if self.depth < 0:
            raise ValueError(f"Wall depth cannot be negative (got {self.depth})")

    @property
    def bucket_depth(self) -> int:
        """Depth whose bucket this entity is emitted with."""
        return self.depth

    @property
    def is_outer_contour(self) -> bool:
        return self.depth == 0


@dataclass(frozen=True)
class AdaptiveWallEntity(WallEntity):
    """A wall path from a variable-width wall generator.

    Attributes:
        is_contour: Flagged as a primary contour by the generator.
        is_closed: True for closed wall loops, False for open lines such
            as gap fill or width transitions.
        transition_depth: For transition geometry, the depth of the wall
            it transitions into. Such entities are always emitted with
            that wall's bucket.
    """

    is_contour: bool = False
    is_closed: bool = True
    transition_depth: int | None = None

    def __post_init__(self) -> None:
        super().__post_init__()
        if self.transition_depth is not None and self.transition_depth < 0:
            raise ValueError(
                f"Transition depth cannot be negative (got {self.transition_depth})"
            )

    @property
    def bucket_depth(self) -> int:
        if self.transition_depth is not None:
            return self.transition_depth
        return self.depth

    @property
    def is_outer_contour(self) -> bool:
        return self.depth == 0 or self.is_contour

    @property
    def is_transition(self) -> bool:
        return self.transition_depth is not None
