"""Application layer - use cases and orchestration."""

from .commands import EstimateRoomCommand, SummarizeProjectCommand
from .dtos import EstimateOutput, ProjectOutput
from .factory import ServiceFactory, get_factory, reset_factory, set_factory
from .pricing import (
    MATERIAL_CODE_MAPPING,
    PricingTier,
    resolve_price_table,
    select_tier_prices,
)

__all__ = [
    "EstimateOutput",
    "EstimateRoomCommand",
    "MATERIAL_CODE_MAPPING",
    "PricingTier",
    "ProjectOutput",
    "ServiceFactory",
    "SummarizeProjectCommand",
    "get_factory",
    "reset_factory",
    "set_factory",
    "resolve_price_table",
    "select_tier_prices",
]
