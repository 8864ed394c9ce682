"""Custom exceptions and error handlers for the REST API."""

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from renobudget.application.config import ConfigError
from renobudget.domain.exceptions import InvalidGeometry, InvalidOptions
from renobudget.infrastructure.pricing_client import PriceSourceError


class EstimationFailedError(Exception):
    """Raised when an estimate cannot be produced for a room."""

    def __init__(self, errors: list[str]) -> None:
        self.errors = errors
        super().__init__(f"Estimate failed: {errors}")


def register_exception_handlers(app: FastAPI) -> None:
    """Register custom exception handlers with the FastAPI app."""

    @app.exception_handler(ConfigError)
    async def config_error_handler(request: Request, exc: ConfigError) -> JSONResponse:
        return JSONResponse(
            status_code=422,
            content={
                "error": exc.message,
                "error_type": exc.error_type,
                "details": exc.details or None,
            },
        )

    @app.exception_handler(InvalidGeometry)
    async def invalid_geometry_handler(
        request: Request, exc: InvalidGeometry
    ) -> JSONResponse:
        return JSONResponse(
            status_code=422,
            content={
                "error": str(exc),
                "error_type": "invalid_geometry",
                "details": None,
            },
        )

    @app.exception_handler(InvalidOptions)
    async def invalid_options_handler(
        request: Request, exc: InvalidOptions
    ) -> JSONResponse:
        return JSONResponse(
            status_code=422,
            content={
                "error": str(exc),
                "error_type": "invalid_options",
                "details": None,
            },
        )

    @app.exception_handler(EstimationFailedError)
    async def estimation_failed_handler(
        request: Request, exc: EstimationFailedError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=422,
            content={
                "error": "Estimate failed",
                "error_type": "estimation",
                "details": [{"message": e} for e in exc.errors],
            },
        )

    @app.exception_handler(PriceSourceError)
    async def price_source_error_handler(
        request: Request, exc: PriceSourceError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=502,
            content={
                "error": exc.message,
                "error_type": "price_source",
                "details": (
                    {"status_code": exc.status_code}
                    if exc.status_code is not None
                    else None
                ),
            },
        )
