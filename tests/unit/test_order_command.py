"""Unit tests for OrderLayerCommand."""

from __future__ import annotations

from unittest.mock import Mock

import pytest

from perimeters.application import LayerInput, OrderLayerCommand
from perimeters.application.config import WallsConfig
from perimeters.application.strategies import FixedWidthReorderer, WallReordererFactory
from perimeters.domain import AdaptiveWallEntity, WallEntity, WallGenerator, WallSequence


@pytest.fixture
def command() -> OrderLayerCommand:
    return OrderLayerCommand()


class TestOrderLayerCommand:
    """Tests for layer-wide ordering."""

    def test_each_island_uses_own_wall_count(self, command: OrderLayerCommand) -> None:
        island_a = [WallEntity(f"a{d}", d) for d in range(5)]
        island_b = [WallEntity("b1", 1), WallEntity("b0", 0)]
        config = WallsConfig(sequence=WallSequence.MIDDLE_OUT_OUTER_INNER)

        result = command.execute(LayerInput(islands=[island_a, island_b], layer=7), config)

        assert result.is_valid
        assert result.layer == 7
        assert result.islands[0].order == [3, 4, 5, 1, 2]
        assert result.islands[0].wall_count == 5
        assert [w.geometry for w in result.islands[0].walls] == ["a2", "a3", "a4", "a0", "a1"]
        assert result.islands[1].order == [2, 1]
        assert [w.geometry for w in result.islands[1].walls] == ["b1", "b0"]

    def test_empty_island(self, command: OrderLayerCommand) -> None:
        result = command.execute(LayerInput(islands=[[]]), WallsConfig())

        assert result.is_valid
        assert result.islands[0].walls == []
        assert result.islands[0].order == []

    def test_arachne_uses_transition_depth(self, command: OrderLayerCommand) -> None:
        island = [
            AdaptiveWallEntity("w0", 0),
            AdaptiveWallEntity("t", 0, is_closed=False, transition_depth=3),
        ]
        config = WallsConfig(generator=WallGenerator.ARACHNE, sequence=WallSequence.OUTER_INNER)

        result = command.execute(LayerInput(islands=[island]), config)

        assert result.islands[0].order == [1, 2, 3, 4]
        assert [w.geometry for w in result.islands[0].walls] == ["w0", "t"]

    def test_invalid_entity_reported(self, command: OrderLayerCommand) -> None:
        layer = LayerInput(islands=[[WallEntity("ok", 0), "not-a-wall"]])  # type: ignore[list-item]

        result = command.execute(layer, WallsConfig())

        assert not result.is_valid
        assert "Island 0 wall 1" in result.errors[0]
        assert result.islands == []

    def test_negative_layer_reported(self, command: OrderLayerCommand) -> None:
        result = command.execute(LayerInput(layer=-1), WallsConfig())

        assert result.errors == ["Layer index cannot be negative"]

    def test_uses_factory_for_generator(self) -> None:
        factory = Mock(spec=WallReordererFactory)
        factory.create_reorderer.return_value = FixedWidthReorderer()
        command = OrderLayerCommand(reorderer_factory=factory)

        command.execute(
            LayerInput(islands=[[WallEntity("w", 0)]]),
            WallsConfig(generator=WallGenerator.ARACHNE),
        )

        factory.create_reorderer.assert_called_once_with(WallGenerator.ARACHNE)
