"""Pydantic schemas for the REST API."""

from renobudget.web.schemas.common import (
    MeasurementsSchema,
    PointSchema,
    WallSchema,
)
from renobudget.web.schemas.requests import ConfigRequest, EstimateRequest
from renobudget.web.schemas.responses import (
    ErrorResponseSchema,
    EstimateResponseSchema,
    MaterialLineSchema,
    PriceListSchema,
    PriceSchema,
    ValidationResultSchema,
    WallListSchema,
)

__all__ = [
    # Common
    "MeasurementsSchema",
    "PointSchema",
    "WallSchema",
    # Requests
    "ConfigRequest",
    "EstimateRequest",
    # Responses
    "ErrorResponseSchema",
    "EstimateResponseSchema",
    "MaterialLineSchema",
    "PriceListSchema",
    "PriceSchema",
    "ValidationResultSchema",
    "WallListSchema",
]
