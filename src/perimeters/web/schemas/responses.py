"""Pydantic response schemas for the REST API."""

from typing import Any

from pydantic import BaseModel, Field

from perimeters.application.config.schema import WallPayload


class SequenceSchema(BaseModel):
    """One available wall sequence."""

    key: str = Field(..., description="Configuration key")
    code: int = Field(..., description="Legacy integer code")
    label: str = Field(..., description="Display name")


class OrderSchema(BaseModel):
    """Response for order generation."""

    sequence: str = Field(..., description="Wall sequence key used")
    wall_count: int = Field(..., description="Number of walls")
    order: list[int] = Field(..., description="1-based wall indices in print order")


class IslandOrderSchema(BaseModel):
    """Reordered walls of one island."""

    order: list[int] = Field(..., description="1-based wall indices in print order")
    walls: list[WallPayload] = Field(..., description="Walls in print order")


class LayerOrderSchema(BaseModel):
    """Response for layer reordering."""

    is_valid: bool = Field(..., description="Whether reordering succeeded")
    errors: list[str] = Field(default_factory=list, description="Error messages")
    layer: int | None = Field(default=None, description="Layer index, if given")
    islands: list[IslandOrderSchema] = Field(
        default_factory=list, description="Islands in input order"
    )


class ValidationResultSchema(BaseModel):
    """Configuration validation result."""

    is_valid: bool = Field(..., description="Whether configuration is valid")
    errors: list[dict[str, Any]] = Field(
        default_factory=list, description="Validation errors"
    )

