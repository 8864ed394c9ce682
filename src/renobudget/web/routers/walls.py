"""Wall resolution endpoints."""

from fastapi import APIRouter

from renobudget.application.config import config_to_geometry, load_config_from_dict
from renobudget.domain.services.geometry import (
    compute_floor_area,
    compute_perimeter,
    resolve_room_walls,
)
from renobudget.web.routers.estimate import wall_to_schema
from renobudget.web.schemas.requests import ConfigRequest
from renobudget.web.schemas.responses import WallListSchema

router = APIRouter(prefix="/walls", tags=["walls"])


@router.post("", response_model=WallListSchema)
async def resolve_room_walls_endpoint(request: ConfigRequest) -> WallListSchema:
    """Resolve the walls of the configured room.

    Raises:
        ConfigError: If the configuration fails schema validation (422).
        InvalidGeometry: If the dimensions cannot form the outline (422).
    """
    config = load_config_from_dict(request.config)
    geometry = config_to_geometry(config.room)
    walls = resolve_room_walls(geometry)
    return WallListSchema(
        shape=geometry.shape.value,
        walls=[wall_to_schema(wall) for wall in walls],
        perimeter=compute_perimeter(geometry.shape, geometry.dimensions, geometry.corner),
        floor_area=compute_floor_area(geometry.shape, geometry.dimensions),
    )
