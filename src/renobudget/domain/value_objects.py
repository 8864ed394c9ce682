"""Value objects for room geometry and materials.

Lengths are meters throughout the core. The host application stores room
dimensions in centimeters; use ``RoomDimensions.from_centimeters`` at the
boundary so raw centimeter values never reach the formulas.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import NewType

from .exceptions import InvalidGeometry, InvalidOptions

Meters = NewType("Meters", float)

CENTIMETERS_PER_METER = 100.0


class RoomShape(str, Enum):
    """Supported room outlines."""

    RECTANGLE = "rectangle"
    L_SHAPE = "l_shape"


class LShapeCorner(str, Enum):
    """Corner of the main rectangle that the L-shape extension occupies."""

    TOP_LEFT = "top_left"
    TOP_RIGHT = "top_right"
    BOTTOM_LEFT = "bottom_left"
    BOTTOM_RIGHT = "bottom_right"

    @property
    def is_top(self) -> bool:
        return self in (LShapeCorner.TOP_LEFT, LShapeCorner.TOP_RIGHT)

    @property
    def is_left(self) -> bool:
        return self in (LShapeCorner.TOP_LEFT, LShapeCorner.BOTTOM_LEFT)


class OpeningType(str, Enum):
    """Kinds of wall openings."""

    DOOR = "door"
    WINDOW = "window"


class WallDirection(str, Enum):
    """Axis a wall runs along in plan view."""

    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"


class MaterialCategory(str, Enum):
    """Groups used to present a bill of materials."""

    FLOOR = "floor"
    WALLS = "walls"
    CEILING = "ceiling"
    ELECTRICAL = "electrical"


class MaterialKey(str, Enum):
    """Closed set of materials the estimator knows about.

    Values are the keys used by the host application when it stores a
    ledger, so serialized ledgers round-trip unchanged.
    """

    FLOOR_PANELS = "floorPanels"
    UNDERLAYMENT = "underlayment"
    PAINT = "paint"
    DRYWALL = "drywall"
    CW_PROFILES = "cwProfiles"
    UW_PROFILES = "uwProfiles"
    MINERAL_WOOL = "mineralWool"
    TN_SCREWS = "tnScrews"
    WALL_PLASTER = "wallPlaster"
    FINISHING_PLASTER = "finishingPlaster"
    OSB = "osb"
    OSB_SCREWS = "osbScrews"
    BASEBOARDS = "baseboards"
    BASEBOARD_ENDS = "baseboardEnds"
    CD_PROFILES = "cdProfiles"
    UD_PROFILES = "udProfiles"
    HANGERS = "hangers"
    GYPSUM = "gypsum"
    PLASTER = "plaster"
    SOCKETS = "sockets"
    SWITCHES = "switches"
    CABLE_15 = "cable15"
    CABLE_25 = "cable25"
    JUNCTION_BOX = "junctionBox"

    @classmethod
    def parse(cls, value: str | MaterialKey) -> MaterialKey:
        """Look up a key by its wire name.

        Raises:
            ValueError: If the name is not a known material.
        """
        if isinstance(value, MaterialKey):
            return value
        try:
            return cls(value)
        except ValueError:
            raise ValueError(f"Unknown material key: {value!r}") from None


class Unit(str, Enum):
    """Units of measure used in a ledger."""

    SQUARE_METER = "m²"
    LITER = "l"
    PIECE = "pcs"
    PACKAGE = "pack"
    BAG = "bag"
    METER = "m"


@dataclass(frozen=True)
class Point2D:
    """Point in plan coordinates, meters. ``y`` grows towards the south."""

    x: float
    y: float


@dataclass(frozen=True)
class RoomDimensions:
    """Room dimensions in meters.

    ``main_length`` is the east-west extent of the main rectangle and
    ``main_width`` its north-south extent. The secondary pair describes the
    L-shape extension and is left as ``None`` for rectangles.
    """

    main_width: Meters
    main_length: Meters
    height: Meters
    secondary_width: Meters | None = None
    secondary_length: Meters | None = None

    def __post_init__(self) -> None:
        for name in ("main_width", "main_length", "height"):
            _require_positive(name, getattr(self, name))
        for name in ("secondary_width", "secondary_length"):
            value = getattr(self, name)
            if value is not None:
                _require_positive(name, value)

    @property
    def has_extension(self) -> bool:
        """True when both extension dimensions are present."""
        return self.secondary_width is not None and self.secondary_length is not None

    @classmethod
    def from_centimeters(
        cls,
        main_width: float,
        main_length: float,
        height: float,
        secondary_width: float | None = None,
        secondary_length: float | None = None,
    ) -> RoomDimensions:
        """Build dimensions from centimeter values as stored by the host app."""
        return cls(
            main_width=to_meters(main_width),
            main_length=to_meters(main_length),
            height=to_meters(height),
            secondary_width=(
                to_meters(secondary_width) if secondary_width is not None else None
            ),
            secondary_length=(
                to_meters(secondary_length) if secondary_length is not None else None
            ),
        )


@dataclass(frozen=True)
class EstimateOptions:
    """Feature toggles and fixture counts for a material calculation."""

    use_osb_floor: bool = False
    use_suspended_ceiling: bool = False
    socket_count: int = 0
    switch_count: int = 0

    def __post_init__(self) -> None:
        for name in ("socket_count", "switch_count"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise InvalidOptions(f"{name} must be an integer, got {value!r}")
            if value < 0:
                raise InvalidOptions(f"{name} cannot be negative, got {value}")


def to_meters(centimeters: float) -> Meters:
    """Convert a centimeter length to meters."""
    return Meters(centimeters / CENTIMETERS_PER_METER)


def _require_positive(name: str, value: float | None) -> None:
    if value is None:
        raise InvalidGeometry(f"{name} is required")
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise InvalidGeometry(f"{name} must be a number, got {value!r}")
    if not math.isfinite(value) or value <= 0:
        raise InvalidGeometry(f"{name} must be positive, got {value}")
