"""Domain entities for rooms, walls and openings."""

from __future__ import annotations

from dataclasses import dataclass, field

from .exceptions import InvalidGeometry
from .value_objects import (
    LShapeCorner,
    Meters,
    OpeningType,
    Point2D,
    RoomDimensions,
    RoomShape,
    WallDirection,
)


@dataclass(frozen=True)
class Wall:
    """One straight edge of a room outline.

    Attributes:
        id: Index into the shape's canonical wall ordering (clockwise).
        name: Human-readable label, e.g. "North (left)".
        length: Wall length in meters.
        start: Plan coordinate where the wall begins.
        end: Plan coordinate where the wall ends; equals the next wall's start.
        direction: Axis the wall runs along.
    """

    id: int
    name: str
    length: Meters
    start: Point2D
    end: Point2D
    direction: WallDirection

    def __post_init__(self) -> None:
        if self.length <= 0:
            raise InvalidGeometry(f"Wall {self.id} must have positive length")


@dataclass(frozen=True)
class Opening:
    """A door or window cut into a wall.

    Attributes:
        type: Door or window.
        width: Opening width in meters.
        height: Opening height in meters.
        wall_id: Id of the wall the opening sits in.
        position_along_wall: Distance in meters from the wall's start to the
            opening's near edge.
    """

    type: OpeningType
    width: Meters
    height: Meters
    wall_id: int
    position_along_wall: Meters = Meters(0.0)

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise InvalidGeometry("Opening width and height must be positive")
        if self.wall_id < 0:
            raise InvalidGeometry(f"Opening wall id must be non-negative, got {self.wall_id}")
        if self.position_along_wall < 0:
            raise InvalidGeometry("Opening position along wall must be non-negative")

    @property
    def area(self) -> float:
        """Opening area in square meters."""
        return self.width * self.height

    @property
    def is_door(self) -> bool:
        return self.type == OpeningType.DOOR


@dataclass(frozen=True)
class RoomGeometry:
    """Shape, dimensions and orientation of a room.

    ``corner`` is required for L-shapes and ignored for rectangles, as are
    any secondary dimensions given for a rectangle.
    """

    shape: RoomShape
    dimensions: RoomDimensions
    corner: LShapeCorner | None = None

    def __post_init__(self) -> None:
        if self.shape == RoomShape.L_SHAPE:
            if not self.dimensions.has_extension:
                raise InvalidGeometry(
                    "L-shaped rooms require secondary_width and secondary_length"
                )
            if self.corner is None:
                raise InvalidGeometry("L-shaped rooms require a corner")

    @property
    def is_l_shape(self) -> bool:
        return self.shape == RoomShape.L_SHAPE

    @property
    def height(self) -> Meters:
        return self.dimensions.height


@dataclass
class Room:
    """A named room as held by the surrounding application.

    Attributes:
        name: Display name of the room.
        geometry: Room outline.
        openings: Doors and windows bound to the room's walls.
    """

    name: str
    geometry: RoomGeometry
    openings: list[Opening] = field(default_factory=list)

    @property
    def doors(self) -> list[Opening]:
        return [o for o in self.openings if o.type == OpeningType.DOOR]

    @property
    def windows(self) -> list[Opening]:
        return [o for o in self.openings if o.type == OpeningType.WINDOW]
