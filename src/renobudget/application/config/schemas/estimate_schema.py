"""Calculation option and pricing configuration schemas."""

from pydantic import BaseModel, ConfigDict, Field, field_validator

from renobudget.application.config.schemas.base import PricingTierConfig
from renobudget.domain.value_objects import MaterialKey


class OptionsConfig(BaseModel):
    """Construction options for the estimate.

    Attributes:
        use_osb_floor: Lay an OSB subfloor with baseboards
        use_suspended_ceiling: Build a suspended drywall ceiling
        socket_count: Number of electrical sockets
        switch_count: Number of light switches
    """

    model_config = ConfigDict(extra="forbid")

    use_osb_floor: bool = False
    use_suspended_ceiling: bool = False
    socket_count: int = Field(default=0, ge=0, le=200)
    switch_count: int = Field(default=0, ge=0, le=200)


class PricingConfig(BaseModel):
    """Pricing configuration.

    Attributes:
        tier: Price tier used when prices are fetched from a price source
        currency: Currency label shown in reports
        overrides: Unit prices that replace default and tier prices,
            keyed by material name (e.g. "floorPanels")
    """

    model_config = ConfigDict(extra="forbid")

    tier: PricingTierConfig = PricingTierConfig.MID_RANGE
    currency: str = Field(default="PLN", min_length=1, max_length=8)
    overrides: dict[str, float] = Field(default_factory=dict)

    @field_validator("overrides")
    @classmethod
    def validate_overrides(cls, v: dict[str, float]) -> dict[str, float]:
        """Override keys must be known materials with non-negative prices."""
        for key, price in v.items():
            MaterialKey.parse(key)
            if price < 0:
                raise ValueError(f"Price for {key} cannot be negative")
        return v
