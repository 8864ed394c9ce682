"""Configuration schema models for room estimate files.

The schemas are organized into the following modules:
- base.py: Enums and version constants
- room_schema.py: Room geometry and opening configurations
- estimate_schema.py: Construction options and pricing configurations
- root.py: Root configuration model
"""

from renobudget.application.config.schemas.base import (
    SUPPORTED_VERSIONS as SUPPORTED_VERSIONS,
    LengthUnit as LengthUnit,
    LShapeCornerConfig as LShapeCornerConfig,
    OpeningTypeConfig as OpeningTypeConfig,
    PricingTierConfig as PricingTierConfig,
    RoomShapeConfig as RoomShapeConfig,
)
from renobudget.application.config.schemas.estimate_schema import (
    OptionsConfig as OptionsConfig,
    PricingConfig as PricingConfig,
)
from renobudget.application.config.schemas.room_schema import (
    OpeningConfig as OpeningConfig,
    RoomConfig as RoomConfig,
)
from renobudget.application.config.schemas.root import (
    EstimateConfiguration as EstimateConfiguration,
)
