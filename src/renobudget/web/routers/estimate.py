"""Room estimate endpoints."""

from fastapi import APIRouter

from renobudget.application.config import load_config_from_dict
from renobudget.application.dtos import EstimateOutput
from renobudget.domain.catalog import material_info
from renobudget.domain.entities import Wall
from renobudget.web.dependencies import (
    EstimateCommandDep,
    ServiceFactoryDep,
    fetch_tier_prices,
)
from renobudget.web.exceptions import EstimationFailedError
from renobudget.web.schemas.common import MeasurementsSchema, PointSchema, WallSchema
from renobudget.web.schemas.requests import EstimateRequest
from renobudget.web.schemas.responses import (
    EstimateResponseSchema,
    MaterialLineSchema,
)

router = APIRouter(prefix="/estimate", tags=["estimate"])


def wall_to_schema(wall: Wall) -> WallSchema:
    """Convert a domain wall to its response schema."""
    return WallSchema(
        id=wall.id,
        name=wall.name,
        length=wall.length,
        direction=wall.direction.value,
        start=PointSchema(x=wall.start.x, y=wall.start.y),
        end=PointSchema(x=wall.end.x, y=wall.end.y),
    )


def _estimate_to_schema(output: EstimateOutput) -> EstimateResponseSchema:
    assert output.ledger is not None and output.breakdown is not None

    measurements = None
    if output.ledger.measurements is not None:
        m = output.ledger.measurements
        measurements = MeasurementsSchema(
            floor_area=m.floor_area,
            perimeter=m.perimeter,
            gross_wall_area=m.gross_wall_area,
            net_wall_area=m.net_wall_area,
        )

    materials = []
    for key, quantity in output.ledger.items():
        info = material_info(key)
        materials.append(
            MaterialLineSchema(
                key=key.value,
                name=info.name,
                category=info.category.value,
                quantity=quantity,
                unit=info.unit.value,
                unit_price=output.price_table.get(key) if output.price_table else 0.0,
                cost=output.breakdown.per_material_cost.get(key, 0.0),
            )
        )

    return EstimateResponseSchema(
        room=output.room.name if output.room is not None else "Room",
        currency=output.currency,
        walls=[wall_to_schema(wall) for wall in output.walls],
        measurements=measurements,
        materials=materials,
        cost_by_category={
            category.value: cost
            for category, cost in output.breakdown.by_category().items()
        },
        total_cost=output.breakdown.total_cost,
        cost_per_area=output.cost_per_area,
    )


@router.post("", response_model=EstimateResponseSchema)
async def estimate_room(
    request: EstimateRequest,
    command: EstimateCommandDep,
    factory: ServiceFactoryDep,
) -> EstimateResponseSchema:
    """Estimate materials and costs for a room configuration.

    Raises:
        ConfigError: If the configuration fails schema validation (422).
        EstimationFailedError: If the room cannot be estimated (422).
        PriceSourceError: If prices were requested and cannot be fetched (502).
    """
    config = load_config_from_dict(request.config)

    tier_prices = None
    if request.fetch_prices:
        tier_prices = await fetch_tier_prices(factory, config.pricing.tier)

    output = command.execute_config(config, tier_prices)
    if not output.is_valid:
        raise EstimationFailedError(output.errors)
    return _estimate_to_schema(output)
