"""Pydantic configuration schema models for perimeter ordering.

This module defines the schema for JSON configuration files and for the
layer payloads accepted by the CLI and REST API. It uses Pydantic v2 for
validation and serialization.

The WallSequence and WallGenerator enums are reused from the domain layer
so configuration keys and domain values cannot drift apart.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from perimeters.domain.value_objects import (
    AdaptiveWallEntity,
    WallEntity,
    WallGenerator,
    WallSequence,
)

# Supported schema versions for configuration files
# Version 1.0: Inner/outer, outer/inner and inner-outer-inner sequences
# Version 1.1: Added middle-out sequences and the wall generator selection
SUPPORTED_VERSIONS: frozenset[str] = frozenset({"1.0", "1.1"})

# Upper bound on wall counts and depths accepted from files and requests
MAX_WALLS = 1000


class WallsConfig(BaseModel):
    """Wall ordering configuration.

    Attributes:
        sequence: Wall printing order policy. Accepts a configuration key
            such as "middle-out/outer-inner" or a legacy integer code.
        generator: Wall generator whose output is being reordered.
        wall_count: Optional wall count, used when printing an order
            without any wall geometry.
    """

    model_config = ConfigDict(extra="forbid")

    sequence: WallSequence = Field(
        default=WallSequence.INNER_OUTER, description="Wall printing order"
    )
    generator: WallGenerator = Field(
        default=WallGenerator.CLASSIC, description="Wall generator (classic or arachne)"
    )
    wall_count: int | None = Field(
        default=None, ge=0, le=MAX_WALLS, description="Number of walls (optional)"
    )

    @field_validator("sequence", mode="before")
    @classmethod
    def accept_legacy_code(cls, v: Any) -> Any:
        """Map legacy integer codes to their sequence.

        Older project files stored the sequence as an integer. Booleans
        are left alone so they fail validation instead of mapping to 0/1.
        """
        if isinstance(v, int) and not isinstance(v, bool):
            return WallSequence.from_code(v)
        return v


class PerimeterConfiguration(BaseModel):
    """Root configuration model.

    Attributes:
        schema_version: Version string in format "major.minor" (e.g., "1.1")
        walls: Wall ordering configuration

    Example:
        >>> config = PerimeterConfiguration(
        ...     schema_version="1.1",
        ...     walls=WallsConfig(sequence=WallSequence.MIDDLE_OUT_INNER_OUTER),
        ... )
    """

    model_config = ConfigDict(extra="forbid")

    schema_version: str = Field(..., pattern=r"^\d+\.\d+$")
    walls: WallsConfig = Field(default_factory=WallsConfig)

    @field_validator("schema_version")
    @classmethod
    def validate_supported_version(cls, v: str) -> str:
        """Validate that schema version is supported.

        Newer minor versions within a supported major version are accepted
        for forward compatibility.
        """
        if v in SUPPORTED_VERSIONS:
            return v

        major_version = int(v.split(".")[0])
        supported_majors = {int(sv.split(".")[0]) for sv in SUPPORTED_VERSIONS}
        if major_version in supported_majors:
            return v

        raise ValueError(
            f"Unsupported schema version '{v}'. "
            f"Supported versions: {sorted(SUPPORTED_VERSIONS)}"
        )

    @model_validator(mode="after")
    def validate_version_features(self) -> "PerimeterConfiguration":
        """Reject middle-out sequences in 1.0 files."""
        if self.schema_version == "1.0" and self.walls.sequence.is_middle_out:
            raise ValueError(
                f"Wall sequence '{self.walls.sequence.value}' requires "
                "schema_version 1.1 or later"
            )
        return self


# =============================================================================
# Layer payloads
# =============================================================================


class WallPayload(BaseModel):
    """One wall entity in a layer payload.

    Attributes:
        depth: 0 for the outermost wall.
        geometry: Opaque path data, passed through unchanged.
        is_contour: Primary contour flag (variable-width walls only).
        is_closed: False for open lines such as gap fill.
        transition_depth: Depth of the wall a transition line belongs to.
    """

    model_config = ConfigDict(extra="forbid")

    depth: int = Field(..., ge=0, lt=MAX_WALLS)
    geometry: Any = Field(default=None, description="Wall path data")
    is_contour: bool = False
    is_closed: bool = True
    transition_depth: int | None = Field(default=None, ge=0, lt=MAX_WALLS)

    def to_entity(self, generator: WallGenerator) -> WallEntity:
        """Build the domain entity for the given wall generator."""
        if generator == WallGenerator.ARACHNE:
            return AdaptiveWallEntity(
                geometry=self.geometry,
                depth=self.depth,
                is_contour=self.is_contour,
                is_closed=self.is_closed,
                transition_depth=self.transition_depth,
            )
        return WallEntity(geometry=self.geometry, depth=self.depth)

    @classmethod
    def from_entity(cls, entity: WallEntity) -> "WallPayload":
        if isinstance(entity, AdaptiveWallEntity):
            return cls(
                depth=entity.depth,
                geometry=entity.geometry,
                is_contour=entity.is_contour,
                is_closed=entity.is_closed,
                transition_depth=entity.transition_depth,
            )
        return cls(depth=entity.depth, geometry=entity.geometry)


class IslandPayload(BaseModel):
    """All walls of one island."""

    model_config = ConfigDict(extra="forbid")

    walls: list[WallPayload] = Field(default_factory=list)

    def to_entities(self, generator: WallGenerator) -> list[WallEntity]:
        return [wall.to_entity(generator) for wall in self.walls]


class LayerPayload(BaseModel):
    """All islands of one layer.

    Attributes:
        layer: Optional layer index, echoed back unchanged.
        islands: Islands on the layer, each reordered independently.
    """

    model_config = ConfigDict(extra="forbid")

    layer: int | None = Field(default=None, ge=0)
    islands: list[IslandPayload] = Field(default_factory=list)
