"""Pydantic request schemas for the REST API."""

from typing import Any

from pydantic import BaseModel, Field


class EstimateRequest(BaseModel):
    """Request for estimating a room from a full configuration."""

    config: dict[str, Any] = Field(..., description="Room estimate configuration JSON")
    fetch_prices: bool = Field(
        default=False,
        description="Fetch prices for the configured tier from the price source",
    )


class ConfigRequest(BaseModel):
    """Request carrying a room estimate configuration."""

    config: dict[str, Any] = Field(..., description="Room estimate configuration JSON")
