"""Base enums and shared constants for room estimate configuration schemas.

Domain enums are reused directly so that JSON values and domain values are
the same strings.
"""

from enum import Enum

from renobudget.application.pricing import PricingTier
from renobudget.domain.value_objects import LShapeCorner, OpeningType, RoomShape

# Supported schema versions for configuration files
# Version 1.0: Single room with openings, options and pricing
SUPPORTED_VERSIONS: frozenset[str] = frozenset({"1.0"})

RoomShapeConfig = RoomShape
LShapeCornerConfig = LShapeCorner
OpeningTypeConfig = OpeningType
PricingTierConfig = PricingTier


class LengthUnit(str, Enum):
    """Unit used for every length in a room configuration.

    Attributes:
        METERS: Lengths are meters.
        CENTIMETERS: Lengths are centimeters, as stored by the host app.
    """

    METERS = "m"
    CENTIMETERS = "cm"

