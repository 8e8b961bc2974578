"""Domain layer - wall sequence policies and print-order planning."""

from .sequence_planner import generate_depth_order, generate_order, is_valid_order
from .value_objects import (
    AdaptiveWallEntity,
    Order,
    WallEntity,
    WallGenerator,
    WallSequence,
)

__all__ = [
    "AdaptiveWallEntity",
    "Order",
    "WallEntity",
    "WallGenerator",
    "WallSequence",
    "generate_depth_order",
    "generate_order",
    "is_valid_order",
]
