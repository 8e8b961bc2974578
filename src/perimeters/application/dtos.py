"""Data Transfer Objects for the application layer."""

from __future__ import annotations

from dataclasses import dataclass, field

from perimeters.domain import Order, WallEntity


@dataclass
class LayerInput:
    """Input DTO for one layer: the wall entities of each island."""

    islands: list[list[WallEntity]] = field(default_factory=list)
    layer: int | None = None

    def validate(self) -> list[str]:
        """Validate input and return list of error messages."""
        errors: list[str] = []
        if self.layer is not None and self.layer < 0:
            errors.append("Layer index cannot be negative")
        for i, island in enumerate(self.islands):
            for j, entity in enumerate(island):
                if not isinstance(entity, WallEntity):
                    errors.append(
                        f"Island {i} wall {j} is not a wall entity "
                        f"(got {type(entity).__name__})"
                    )
        return errors


@dataclass
class IslandOrder:
    """Reordered walls of one island.

    Attributes:
        walls: The island's wall entities in print order.
        order: The 1-based wall order used to produce ``walls``.
    """

    walls: list[WallEntity]
    order: Order

    @property
    def wall_count(self) -> int:
        return len(self.order)


@dataclass
class LayerOrderOutput:
    """Output DTO for a reordered layer."""

    islands: list[IslandOrder] = field(default_factory=list)
    layer: int | None = None
    errors: list[str] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        """Check if the layer was reordered without errors."""
        return len(self.errors) == 0
