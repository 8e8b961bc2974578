"""Application commands (use cases) for wall ordering."""

from __future__ import annotations

import logging

from perimeters.application.config.schema import WallsConfig
from perimeters.application.strategies import WallReordererFactory
from perimeters.domain import generate_order

from .dtos import IslandOrder, LayerInput, LayerOrderOutput

logger = logging.getLogger(__name__)


class OrderLayerCommand:
    """Command to put every island of a layer into wall print order.

    Each island is reordered independently with its own wall count,
    inferred from the deepest wall it contains. The command holds no
    per-call state, so one instance can serve many layers concurrently.
    """

    def __init__(self, reorderer_factory: WallReordererFactory | None = None) -> None:
        self.reorderer_factory = reorderer_factory or WallReordererFactory()

    def execute(self, layer_input: LayerInput, config: WallsConfig) -> LayerOrderOutput:
        """Execute the ordering command.

        Args:
            layer_input: Wall entities of each island on the layer.
            config: Wall ordering configuration (sequence and generator).

        Returns:
            LayerOrderOutput with one IslandOrder per input island, in
            input order, or the validation errors if the input is invalid.
        """
        errors = layer_input.validate()
        if errors:
            logger.warning(f"Rejected layer {layer_input.layer}: {len(errors)} errors")
            return LayerOrderOutput(layer=layer_input.layer, errors=errors)

        reorderer = self.reorderer_factory.create_reorderer(config.generator)
        islands: list[IslandOrder] = []
        for island in layer_input.islands:
            wall_count = max((e.bucket_depth for e in island), default=-1) + 1
            walls = reorderer.reorder(island, config.sequence)
            islands.append(
                IslandOrder(walls=walls, order=generate_order(wall_count, config.sequence))
            )

        logger.debug(
            f"Ordered {len(islands)} islands on layer {layer_input.layer} "
            f"with {config.sequence.label} ({config.generator.value})"
        )
        return LayerOrderOutput(islands=islands, layer=layer_input.layer)
