"""Application layer - use cases and orchestration."""

from .commands import OrderLayerCommand
from .dtos import IslandOrder, LayerInput, LayerOrderOutput

__all__ = [
    "IslandOrder",
    "LayerInput",
    "LayerOrderOutput",
    "OrderLayerCommand",
]
