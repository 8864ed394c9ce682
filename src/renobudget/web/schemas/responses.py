"""Pydantic response schemas for the REST API."""

from typing import Any

from pydantic import BaseModel, Field

from renobudget.web.schemas.common import MeasurementsSchema, WallSchema


class MaterialLineSchema(BaseModel):
    """One line of a bill of materials."""

    key: str = Field(..., description="Material key, e.g. floorPanels")
    name: str = Field(..., description="Material display name")
    category: str = Field(..., description="floor, walls, ceiling or electrical")
    quantity: float = Field(..., description="Quantity in the material's unit")
    unit: str = Field(..., description="Unit of measure")
    unit_price: float = Field(..., description="Price per unit")
    cost: float = Field(..., description="Line cost")


class EstimateResponseSchema(BaseModel):
    """Response for a room estimate."""

    room: str = Field(..., description="Room name")
    currency: str = Field(..., description="Currency of all costs")
    walls: list[WallSchema] = Field(default_factory=list, description="Resolved walls")
    measurements: MeasurementsSchema | None = Field(
        default=None, description="Derived room measurements"
    )
    materials: list[MaterialLineSchema] = Field(
        default_factory=list, description="Bill of materials in catalog order"
    )
    cost_by_category: dict[str, float] = Field(
        default_factory=dict, description="Line costs summed per category"
    )
    total_cost: float = Field(..., description="Total cost")
    cost_per_area: float | None = Field(
        default=None, description="Total cost per m² of floor"
    )


class WallListSchema(BaseModel):
    """Response for wall resolution."""

    shape: str = Field(..., description="Room shape")
    walls: list[WallSchema] = Field(..., description="Walls in clockwise order")
    perimeter: float = Field(..., description="Perimeter in meters")
    floor_area: float = Field(..., description="Floor area in m²")


class ValidationResultSchema(BaseModel):
    """Response for configuration validation."""

    is_valid: bool = Field(..., description="Whether configuration is valid")
    errors: list[dict[str, Any]] = Field(
        default_factory=list, description="Validation errors"
    )
    warnings: list[dict[str, Any]] = Field(
        default_factory=list, description="Validation warnings"
    )


class PriceSchema(BaseModel):
    """Unit price of a material."""

    key: str = Field(..., description="Material key")
    name: str = Field(..., description="Material display name")
    unit: str = Field(..., description="Unit of measure")
    price: float = Field(..., description="Price per unit")


class PriceListSchema(BaseModel):
    """Response for the price listing."""

    tier: str = Field(..., description="Price tier")
    source: str = Field(..., description="defaults or price_source")
    currency: str = Field(..., description="Currency of all prices")
    prices: list[PriceSchema] = Field(..., description="Prices in catalog order")


class ErrorResponseSchema(BaseModel):
    """Standard error response."""

    error: str = Field(..., description="Error message")
    error_type: str = Field(..., description="Error category")
    details: Any = Field(default=None, description="Additional error details")
