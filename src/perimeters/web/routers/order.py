"""Wall ordering endpoints."""

from fastapi import APIRouter

from perimeters.application import LayerInput
from perimeters.application.config import WallPayload, WallsConfig, load_config_from_dict
from perimeters.domain import WallSequence, generate_order
from perimeters.web.dependencies import OrderCommandDep
from perimeters.web.exceptions import LayerOrderError, UnknownSequenceError
from perimeters.web.schemas.requests import OrderRequest, ReorderRequest
from perimeters.web.schemas.responses import (
    IslandOrderSchema,
    LayerOrderSchema,
    OrderSchema,
    SequenceSchema,
)

router = APIRouter(tags=["order"])


def _resolve_sequence(value: str | int) -> WallSequence:
    try:
        if isinstance(value, int):
            return WallSequence.from_code(value)
        return WallSequence.from_key(value)
    except ValueError as e:
        raise UnknownSequenceError(value, [s.value for s in WallSequence]) from e


@router.get("/sequences", response_model=list[SequenceSchema])
async def list_sequences() -> list[SequenceSchema]:
    """List all wall sequences with their keys, codes and labels."""
    return [
        SequenceSchema(key=seq.value, code=seq.code, label=seq.label)
        for seq in WallSequence
    ]


@router.post("/order", response_model=OrderSchema)
async def order_walls(request: OrderRequest) -> OrderSchema:
    """Return the print order for a wall count.

    Raises:
        UnknownSequenceError: If the sequence is not a known key or code.
    """
    sequence = _resolve_sequence(request.sequence)
    return OrderSchema(
        sequence=sequence.value,
        wall_count=request.wall_count,
        order=generate_order(request.wall_count, sequence),
    )


@router.post("/reorder", response_model=LayerOrderSchema)
def reorder_layer(request: ReorderRequest, command: OrderCommandDep) -> LayerOrderSchema:
    """Reorder the walls of every island in a layer.

    Declared without async so FastAPI runs it in its worker threadpool.

    Raises:
        ConfigError: If the supplied configuration fails validation.
        LayerOrderError: If the layer input fails validation.
    """
    if request.config is not None:
        walls = load_config_from_dict(request.config).walls
    else:
        walls = request.walls or WallsConfig()
    generator = walls.generator
    layer_input = LayerInput(
        islands=[island.to_entities(generator) for island in request.layer.islands],
        layer=request.layer.layer,
    )
    result = command.execute(layer_input, walls)
    if not result.is_valid:
        raise LayerOrderError(result.errors)

    return LayerOrderSchema(
        is_valid=True,
        layer=result.layer,
        islands=[
            IslandOrderSchema(
                order=island.order,
                walls=[WallPayload.from_entity(wall) for wall in island.walls],
            )
            for island in result.islands
        ],
    )
