"""API routers for the REST API."""

from perimeters.web.routers.order import router as order_router
from perimeters.web.routers.validate import router as validate_router

__all__ = [
    "order_router",
    "validate_router",
]
