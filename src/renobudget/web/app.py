"""FastAPI application factory."""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from renobudget.web.exceptions import register_exception_handlers
from renobudget.web.routers import (
    estimate_router,
    prices_router,
    validate_router,
    walls_router,
)


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    app = FastAPI(
        title="Renovation Budget API",
        description="REST API for renovation material and cost estimates",
        version="1.0.0",
        docs_url="/docs",
        redoc_url="/redoc",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    app.include_router(estimate_router, prefix="/api/v1")
    app.include_router(walls_router, prefix="/api/v1")
    app.include_router(validate_router, prefix="/api/v1")
    app.include_router(prices_router, prefix="/api/v1")

    @app.get("/health")
    async def health_check() -> dict[str, str]:
        """Health check endpoint."""
        return {"status": "healthy"}

    return app


# Application instance for ASGI servers (uvicorn)
app = create_app()
