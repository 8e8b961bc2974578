"""Pydantic request schemas for the REST API."""

from typing import Any

from pydantic import BaseModel, Field, StrictInt, StrictStr, model_validator

from perimeters.application.config.schema import MAX_WALLS, LayerPayload, WallsConfig


class OrderRequest(BaseModel):
    """Request for the print order of a wall count."""

    wall_count: int = Field(..., ge=0, le=MAX_WALLS, description="Number of walls")
    sequence: StrictStr | StrictInt = Field(
        default="inner wall/outer wall",
        description="Wall sequence key or legacy integer code",
    )


class ReorderRequest(BaseModel):
    """Request for reordering the walls of a layer.

    Wall ordering comes either from ``walls`` or from a full perimeter
    configuration in ``config``, not both.
    """

    walls: WallsConfig | None = Field(
        default=None, description="Wall ordering configuration"
    )
    config: dict[str, Any] | None = Field(
        default=None, description="Full perimeter configuration JSON"
    )
    layer: LayerPayload = Field(..., description="Islands and their walls")

    @model_validator(mode="after")
    def validate_single_source(self) -> "ReorderRequest":
        """Reject requests that give both walls and config."""
        if self.walls is not None and self.config is not None:
            raise ValueError("Specify either walls or config, not both")
        return self


class ConfigValidateRequest(BaseModel):
    """Request for validating a configuration."""

    config: dict[str, Any] = Field(..., description="Perimeter configuration JSON")
