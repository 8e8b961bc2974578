"""Pydantic schemas for the REST API."""

from perimeters.web.schemas.requests import (
    ConfigValidateRequest,
    OrderRequest,
    ReorderRequest,
)
from perimeters.web.schemas.responses import (
    IslandOrderSchema,
    LayerOrderSchema,
    OrderSchema,
    SequenceSchema,
    ValidationResultSchema,
)

__all__ = [
    # Requests
    "ConfigValidateRequest",
    "OrderRequest",
    "ReorderRequest",
    # Responses
    "IslandOrderSchema",
    "LayerOrderSchema",
    "OrderSchema",
    "SequenceSchema",
    "ValidationResultSchema",
]
