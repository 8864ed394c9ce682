"""API routers for the REST API."""

from renobudget.web.routers.estimate import router as estimate_router
from renobudget.web.routers.prices import router as prices_router
from renobudget.web.routers.validate import router as validate_router
from renobudget.web.routers.walls import router as walls_router

__all__ = [
    "estimate_router",
    "prices_router",
    "validate_router",
    "walls_router",
]
