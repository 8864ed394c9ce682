"""Adapter to convert EstimateConfiguration into domain objects.

Lengths in a configuration are in the room's ``unit``. Conversion to meters
happens here and nowhere else, so the domain only ever sees meters.
"""

from renobudget.application.config.schemas import (
    EstimateConfiguration,
    LengthUnit,
    OpeningConfig,
    OptionsConfig,
    RoomConfig,
)
from renobudget.domain.entities import Opening, Room, RoomGeometry, Wall
from renobudget.domain.services.geometry import (
    find_wall,
    position_from_percent,
    resolve_room_walls,
)
from renobudget.domain.value_objects import (
    EstimateOptions,
    Meters,
    RoomDimensions,
    RoomShape,
    to_meters,
)


def config_to_geometry(room: RoomConfig) -> RoomGeometry:
    """Convert a room configuration to ``RoomGeometry`` in meters.

    Secondary dimensions and corner are dropped for rectangles.

    Raises:
        InvalidGeometry: If the dimensions cannot form the room outline.
    """
    is_l_shape = room.shape == RoomShape.L_SHAPE
    dimensions = RoomDimensions(
        main_width=_length(room.main_width, room.unit),
        main_length=_length(room.main_length, room.unit),
        height=_length(room.height, room.unit),
        secondary_width=(
            _length(room.secondary_width, room.unit)
            if is_l_shape and room.secondary_width is not None
            else None
        ),
        secondary_length=(
            _length(room.secondary_length, room.unit)
            if is_l_shape and room.secondary_length is not None
            else None
        ),
    )
    return RoomGeometry(
        shape=RoomShape(room.shape),
        dimensions=dimensions,
        corner=room.corner if is_l_shape else None,
    )


def config_to_openings(room: RoomConfig, walls: list[Wall]) -> list[Opening]:
    """Convert opening configurations to domain openings bound to ``walls``.

    Raises:
        InvalidGeometry: If an opening placed by percent references a wall
            the room does not have.
    """
    return [config_to_opening(opening, room.unit, walls) for opening in room.openings]


def config_to_room(config: EstimateConfiguration) -> Room:
    """Convert the configuration's room section to a ``Room`` entity."""
    geometry = config_to_geometry(config.room)
    walls = resolve_room_walls(geometry)
    return Room(
        name=config.room.name,
        geometry=geometry,
        openings=config_to_openings(config.room, walls),
    )


def config_to_options(options: OptionsConfig) -> EstimateOptions:
    """Convert option configuration to ``EstimateOptions``."""
    return EstimateOptions(
        use_osb_floor=options.use_osb_floor,
        use_suspended_ceiling=options.use_suspended_ceiling,
        socket_count=options.socket_count,
        switch_count=options.switch_count,
    )


def config_to_opening(
    opening: OpeningConfig, unit: LengthUnit, walls: list[Wall]
) -> Opening:
    """Convert one opening configuration to a domain ``Opening``.

    Raises:
        InvalidGeometry: If the opening is placed by percent on a wall the
            room does not have.
    """
    width = _length(opening.width, unit)
    if opening.position_percent is not None:
        wall = find_wall(walls, opening.wall)
        position = position_from_percent(wall, opening.position_percent, width)
    elif opening.position is not None:
        position = _length(opening.position, unit)
    else:
        position = Meters(0.0)
    return Opening(
        type=opening.type,
        width=width,
        height=_length(opening.height, unit),
        wall_id=opening.wall,
        position_along_wall=position,
    )


def _length(value: float, unit: LengthUnit) -> Meters:
    if unit == LengthUnit.CENTIMETERS:
        return to_meters(value)
    return Meters(float(value))
