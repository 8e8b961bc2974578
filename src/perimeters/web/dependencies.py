"""FastAPI dependency injection for ordering services."""

from functools import lru_cache
from typing import Annotated

from fastapi import Depends

from perimeters.application.commands import OrderLayerCommand


@lru_cache(maxsize=1)
def get_order_command() -> OrderLayerCommand:
    """Shared OrderLayerCommand; it keeps no per-request state."""
    return OrderLayerCommand()


OrderCommandDep = Annotated[OrderLayerCommand, Depends(get_order_command)]
