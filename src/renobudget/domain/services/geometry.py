"""Room outline resolution.

Turns a room's shape, dimensions and (for L-shapes) corner into an ordered
list of walls, and maps openings onto those walls.

Plan coordinates put the origin at the north-west corner of the bounding box
with ``x`` growing east and ``y`` growing south. Walls are listed clockwise
and each wall ends where the next one starts.

Rectangle walls (ids 0-3): top, right, bottom, left. The top and bottom walls
run along ``main_length``; the right and left walls along ``main_width``.

L-shapes combine the main rectangle with an extension placed east or west of
it, flush with its north or south edge according to the corner. The edge the
two rectangles share in full is split at the junction, which gives seven
walls (ids 0-6) for every corner.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterable

from ..entities import Opening, RoomGeometry, Wall
from ..exceptions import InvalidGeometry
from ..value_objects import (
    LShapeCorner,
    Meters,
    Point2D,
    RoomDimensions,
    RoomShape,
    WallDirection,
)

__all__ = [
    "FitCheck",
    "OpeningPlacement",
    "check_opening_fits",
    "compute_floor_area",
    "compute_perimeter",
    "find_wall",
    "place_opening",
    "position_from_percent",
    "resolve_room_walls",
    "resolve_walls",
    "validate_openings",
]

RECTANGLE_WALL_NAMES = ("Top", "Right", "Bottom", "Left")

# Wall names in clockwise order, per corner.
L_SHAPE_WALL_NAMES: dict[LShapeCorner, tuple[str, ...]] = {
    LShapeCorner.TOP_RIGHT: (
        "North (left)",
        "North (right)",
        "East",
        "Inner horizontal",
        "Inner vertical",
        "South",
        "West",
    ),
    LShapeCorner.TOP_LEFT: (
        "North (left)",
        "North (right)",
        "East",
        "South",
        "Inner vertical",
        "Inner horizontal",
        "West",
    ),
    LShapeCorner.BOTTOM_RIGHT: (
        "North",
        "Inner vertical",
        "Inner horizontal",
        "East",
        "South (right)",
        "South (left)",
        "West",
    ),
    LShapeCorner.BOTTOM_LEFT: (
        "North",
        "East",
        "South (right)",
        "South (left)",
        "West",
        "Inner horizontal",
        "Inner vertical",
    ),
}

# Tolerance for comparing lengths along a wall, in meters.
FIT_TOLERANCE = 1e-9


@dataclass(frozen=True)
class OpeningPlacement:
    """Where an opening sits in plan coordinates.

    Attributes:
        start: Near edge of the opening.
        end: Far edge of the opening.
        rotation: 0 for openings in horizontal walls, 90 for vertical walls.
    """

    start: Point2D
    end: Point2D
    rotation: int


@dataclass(frozen=True)
class FitCheck:
    """Result of checking whether an opening fits within its wall."""

    valid: bool
    message: str | None = None


def resolve_walls(
    shape: RoomShape | str,
    dimensions: RoomDimensions,
    corner: LShapeCorner | str | None = None,
) -> list[Wall]:
    """Resolve the ordered walls of a room.

    Args:
        shape: Room outline.
        dimensions: Room dimensions in meters.
        corner: Corner occupied by the extension. Required for L-shapes,
            ignored for rectangles.

    Returns:
        Four walls for a rectangle, seven for an L-shape, ids in order.

    Raises:
        InvalidGeometry: If the shape or corner is unknown or missing, or the
            dimensions cannot form the requested outline.
    """
    room_shape = _coerce_shape(shape)
    if not isinstance(dimensions, RoomDimensions):
        raise InvalidGeometry("Room dimensions are required")

    if room_shape == RoomShape.RECTANGLE:
        return _rectangle_walls(dimensions)

    if corner is None:
        raise InvalidGeometry("L-shaped rooms require a corner")
    if not dimensions.has_extension:
        raise InvalidGeometry(
            "L-shaped rooms require secondary_width and secondary_length"
        )
    return _l_shape_walls(dimensions, _coerce_corner(corner))


def resolve_room_walls(geometry: RoomGeometry) -> list[Wall]:
    """Resolve walls for a ``RoomGeometry``."""
    return resolve_walls(geometry.shape, geometry.dimensions, geometry.corner)


def compute_floor_area(shape: RoomShape | str, dimensions: RoomDimensions) -> float:
    """Floor area in square meters.

    The extension of an L-shape never overlaps the main rectangle, so its
    area is simply added.
    """
    room_shape = _coerce_shape(shape)
    area = dimensions.main_width * dimensions.main_length
    if room_shape == RoomShape.L_SHAPE:
        if not dimensions.has_extension:
            raise InvalidGeometry(
                "L-shaped rooms require secondary_width and secondary_length"
            )
        area += dimensions.secondary_width * dimensions.secondary_length
    return area


def compute_perimeter(
    shape: RoomShape | str,
    dimensions: RoomDimensions,
    corner: LShapeCorner | str | None = None,
) -> float:
    """Perimeter in meters.

    For L-shapes this is the sum of the seven wall lengths. Every corner
    yields the same set of lengths, so the total does not depend on the
    corner.
    """
    room_shape = _coerce_shape(shape)
    if room_shape == RoomShape.RECTANGLE:
        return 2 * (dimensions.main_width + dimensions.main_length)
    walls = resolve_walls(room_shape, dimensions, corner)
    return math.fsum(wall.length for wall in walls)


def find_wall(walls: Iterable[Wall], wall_id: int) -> Wall:
    """Return the wall with ``wall_id``.

    Raises:
        InvalidGeometry: If no wall has that id.
    """
    for wall in walls:
        if wall.id == wall_id:
            return wall
    raise InvalidGeometry(f"Wall {wall_id} does not exist for this room")


def validate_openings(walls: list[Wall], openings: Iterable[Opening]) -> None:
    """Check that every opening is bound to an existing wall.

    Openings are only used for area subtraction, so overlap between openings
    is not checked.

    Raises:
        InvalidGeometry: If an opening references an unknown wall or starts
            beyond the end of its wall.
    """
    for opening in openings:
        wall = find_wall(walls, opening.wall_id)
        if opening.position_along_wall >= wall.length:
            raise InvalidGeometry(
                f"Opening position {opening.position_along_wall:.2f} m is outside "
                f"wall {wall.id} ({wall.name}, {wall.length:.2f} m)"
            )


def place_opening(wall: Wall, opening: Opening) -> OpeningPlacement:
    """Compute the plan coordinates of an opening along its wall."""
    dx = (wall.end.x - wall.start.x) / wall.length
    dy = (wall.end.y - wall.start.y) / wall.length
    near = opening.position_along_wall
    far = near + opening.width
    return OpeningPlacement(
        start=Point2D(wall.start.x + dx * near, wall.start.y + dy * near),
        end=Point2D(wall.start.x + dx * far, wall.start.y + dy * far),
        rotation=0 if wall.direction == WallDirection.HORIZONTAL else 90,
    )


def check_opening_fits(wall: Wall, opening: Opening) -> FitCheck:
    """Check whether an opening lies entirely within its wall."""
    if opening.width > wall.length + FIT_TOLERANCE:
        return FitCheck(
            valid=False,
            message=(
                f"Opening ({opening.width:.2f} m) is wider than wall "
                f"{wall.name} ({wall.length:.2f} m)"
            ),
        )
    if opening.position_along_wall + opening.width > wall.length + FIT_TOLERANCE:
        return FitCheck(
            valid=False,
            message=f"Opening does not fit at this position on wall {wall.name}",
        )
    return FitCheck(valid=True)


def position_from_percent(wall: Wall, percent: float, width: float) -> Meters:
    """Convert a centre position given in percent of the wall to a near-edge distance.

    The result is snapped so that the opening stays on the wall.

    Raises:
        InvalidGeometry: If ``percent`` is outside 0-100.
    """
    if not 0 <= percent <= 100:
        raise InvalidGeometry(f"Position percent must be between 0 and 100, got {percent}")
    centre = wall.length * percent / 100
    near_edge = centre - width / 2
    return Meters(min(max(near_edge, 0.0), max(wall.length - width, 0.0)))


def _rectangle_walls(dimensions: RoomDimensions) -> list[Wall]:
    x = dimensions.main_length
    y = dimensions.main_width
    vertices = [(0.0, 0.0), (x, 0.0), (x, y), (0.0, y)]
    lengths = [x, y, x, y]
    return _build_walls(RECTANGLE_WALL_NAMES, vertices, lengths)


def _l_shape_walls(dimensions: RoomDimensions, corner: LShapeCorner) -> list[Wall]:
    mx = dimensions.main_length
    my = dimensions.main_width
    ex = dimensions.secondary_length
    ey = dimensions.secondary_width
    assert ex is not None and ey is not None

    if math.isclose(my, ey):
        raise InvalidGeometry(
            "L-shape extension must differ in width from the main rectangle; "
            "use a rectangle instead"
        )

    inner = abs(my - ey)
    depth = max(my, ey)

    if corner == LShapeCorner.TOP_RIGHT:
        vertices = [
            (0.0, 0.0), (mx, 0.0), (mx + ex, 0.0), (mx + ex, ey),
            (mx, ey), (mx, my), (0.0, my),
        ]
        lengths = [mx, ex, ey, ex, inner, mx, my]
    elif corner == LShapeCorner.TOP_LEFT:
        vertices = [
            (0.0, 0.0), (ex, 0.0), (ex + mx, 0.0), (ex + mx, my),
            (ex, my), (ex, ey), (0.0, ey),
        ]
        lengths = [ex, mx, my, mx, inner, ex, ey]
    elif corner == LShapeCorner.BOTTOM_RIGHT:
        top = depth - my
        vertices = [
            (0.0, top), (mx, top), (mx, depth - ey), (mx + ex, depth - ey),
            (mx + ex, depth), (mx, depth), (0.0, depth),
        ]
        lengths = [mx, inner, ex, ey, ex, mx, my]
    else:
        top = depth - my
        vertices = [
            (ex, top), (ex + mx, top), (ex + mx, depth), (ex, depth),
            (0.0, depth), (0.0, depth - ey), (ex, depth - ey),
        ]
        lengths = [mx, my, mx, ex, ey, ex, inner]

    return _build_walls(L_SHAPE_WALL_NAMES[corner], vertices, lengths)


def _build_walls(
    names: tuple[str, ...],
    vertices: list[tuple[float, float]],
    lengths: list[float],
) -> list[Wall]:
    walls: list[Wall] = []
    count = len(vertices)
    for index, (name, length) in enumerate(zip(names, lengths)):
        sx, sy = vertices[index]
        tx, ty = vertices[(index + 1) % count]
        direction = (
            WallDirection.HORIZONTAL if math.isclose(sy, ty) else WallDirection.VERTICAL
        )
        walls.append(
            Wall(
                id=index,
                name=name,
                length=Meters(length),
                start=Point2D(sx, sy),
                end=Point2D(tx, ty),
                direction=direction,
            )
        )
    return walls


def _coerce_shape(shape: RoomShape | str) -> RoomShape:
    try:
        return RoomShape(shape)
    except ValueError:
        raise InvalidGeometry(f"Unknown room shape: {shape!r}") from None


def _coerce_corner(corner: LShapeCorner | str) -> LShapeCorner:
    try:
        return LShapeCorner(corner)
    except ValueError:
        raise InvalidGeometry(f"Unknown L-shape corner: {corner!r}") from None
