"""Custom exceptions and error handlers for the REST API."""

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from perimeters.application.config import ConfigError


class UnknownSequenceError(Exception):
    """Raised when a request names a wall sequence that does not exist."""

    def __init__(self, sequence: str | int, available: list[str]) -> None:
        self.sequence = sequence
        self.available = available
        super().__init__(
            f"Unknown wall sequence: {sequence!r}. Available: {', '.join(available)}"
        )


class LayerOrderError(Exception):
    """Raised when a layer cannot be reordered."""

    def __init__(self, errors: list[str]) -> None:
        self.errors = errors
        super().__init__(f"Reordering failed: {errors}")


def register_exception_handlers(app: FastAPI) -> None:
    """Register custom exception handlers with the FastAPI app."""

    @app.exception_handler(ConfigError)
    async def config_error_handler(request: Request, exc: ConfigError) -> JSONResponse:
        return JSONResponse(
            status_code=422,
            content={
                "error": exc.message,
                "error_type": exc.error_type,
                "details": exc.details,
            },
        )

    @app.exception_handler(UnknownSequenceError)
    async def unknown_sequence_handler(
        request: Request, exc: UnknownSequenceError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=422,
            content={
                "error": str(exc),
                "error_type": "unknown_sequence",
                "details": {"sequence": exc.sequence, "available": exc.available},
            },
        )

    @app.exception_handler(LayerOrderError)
    async def layer_order_error_handler(
        request: Request, exc: LayerOrderError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=422,
            content={
                "error": "Layer reordering failed",
                "error_type": "reorder",
                "details": [{"message": e} for e in exc.errors],
            },
        )
