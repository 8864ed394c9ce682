"""Root configuration schema.

This module contains the root EstimateConfiguration model which represents
a complete room estimate file.
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator

from renobudget.application.config.schemas.base import SUPPORTED_VERSIONS
from renobudget.application.config.schemas.estimate_schema import (
    OptionsConfig,
    PricingConfig,
)
from renobudget.application.config.schemas.room_schema import RoomConfig


class EstimateConfiguration(BaseModel):
    """Root configuration model for a room estimate.

    Attributes:
        schema_version: Version string in format "major.minor" (e.g., "1.0")
        room: Room geometry and openings
        options: Construction options and fixture counts
        pricing: Price tier and overrides
    """

    model_config = ConfigDict(extra="forbid")

    schema_version: str = Field(..., pattern=r"^\d+\.\d+$")
    room: RoomConfig
    options: OptionsConfig = Field(default_factory=OptionsConfig)
    pricing: PricingConfig = Field(default_factory=PricingConfig)

    @field_validator("schema_version")
    @classmethod
    def validate_schema_version(cls, v: str) -> str:
        """Ensure the schema version is supported."""
        if v not in SUPPORTED_VERSIONS:
            supported = ", ".join(sorted(SUPPORTED_VERSIONS))
            raise ValueError(
                f"Unsupported schema version: {v}. Supported versions: {supported}"
            )
        return v
