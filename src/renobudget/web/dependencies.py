"""FastAPI dependency injection for estimate services."""

from functools import lru_cache
from typing import Annotated

from fastapi import Depends

from renobudget.application.commands import EstimateRoomCommand
from renobudget.application.factory import ServiceFactory, get_factory
from renobudget.application.pricing import PricingTier
from renobudget.infrastructure.pricing_client import PriceSourceError


@lru_cache(maxsize=1)
def get_service_factory() -> ServiceFactory:
    """Get cached ServiceFactory instance."""
    return get_factory()


def get_estimate_command(
    factory: Annotated[ServiceFactory, Depends(get_service_factory)],
) -> EstimateRoomCommand:
    """Dependency for EstimateRoomCommand."""
    return factory.create_estimate_command()


async def fetch_tier_prices(
    factory: ServiceFactory, tier: PricingTier | str
) -> dict[str, float]:
    """Fetch tier prices from the factory's price source.

    Raises:
        PriceSourceError: If no price source is configured or fetching fails.
    """
    source = factory.get_price_source()
    if source is None:
        raise PriceSourceError("No price source configured")
    return await source.fetch_tier_prices(tier)


# Type aliases for cleaner endpoint signatures
ServiceFactoryDep = Annotated[ServiceFactory, Depends(get_service_factory)]
EstimateCommandDep = Annotated[EstimateRoomCommand, Depends(get_estimate_command)]
