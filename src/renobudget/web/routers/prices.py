"""Price listing endpoints."""

from fastapi import APIRouter

from renobudget.application.pricing import PricingTier, resolve_price_table
from renobudget.domain.catalog import DEFAULT_CURRENCY, material_info
from renobudget.web.dependencies import ServiceFactoryDep, fetch_tier_prices
from renobudget.web.schemas.responses import PriceListSchema, PriceSchema

router = APIRouter(prefix="/prices", tags=["prices"])


@router.get("", response_model=PriceListSchema)
async def list_prices(
    factory: ServiceFactoryDep,
    tier: PricingTier = PricingTier.MID_RANGE,
    fetch: bool = False,
) -> PriceListSchema:
    """List unit prices for every material.

    Without ``fetch`` the built-in default prices are returned.
    """
    tier_prices = await fetch_tier_prices(factory, tier) if fetch else None
    table = resolve_price_table(tier_prices)
    return PriceListSchema(
        tier=tier.value,
        source="price_source" if fetch else "defaults",
        currency=DEFAULT_CURRENCY,
        prices=[
            PriceSchema(
                key=key.value,
                name=material_info(key).name,
                unit=material_info(key).unit.value,
                price=price,
            )
            for key, price in table.prices.items()
        ],
    )
