"""Domain layer - room geometry, material quantities and costs."""

from .catalog import (
    DEFAULT_CURRENCY,
    DEFAULT_UNIT_PRICES,
    MATERIAL_CATALOG,
    MaterialInfo,
    category_for,
    keys_in_category,
    material_info,
    unit_for,
)
from .entities import Opening, Room, RoomGeometry, Wall
from .exceptions import EstimationError, InvalidGeometry, InvalidOptions
from .services import (
    CostAggregator,
    CostBreakdown,
    MaterialCalculator,
    MaterialLedger,
    PriceTable,
    ProjectStatus,
    ProjectSummary,
    RoomEstimate,
    RoomMeasurements,
    aggregate_cost,
    calculate_materials,
    compute_floor_area,
    compute_perimeter,
    default_price_table,
    resolve_walls,
    summarize_project,
)
from .value_objects import (
    EstimateOptions,
    LShapeCorner,
    MaterialCategory,
    MaterialKey,
    Meters,
    OpeningType,
    Point2D,
    RoomDimensions,
    RoomShape,
    Unit,
    WallDirection,
)

__all__ = [
    "CostAggregator",
    "CostBreakdown",
    "DEFAULT_CURRENCY",
    "DEFAULT_UNIT_PRICES",
    "EstimateOptions",
    "EstimationError",
    "InvalidGeometry",
    "InvalidOptions",
    "LShapeCorner",
    "MATERIAL_CATALOG",
    "MaterialCalculator",
    "MaterialCategory",
    "MaterialInfo",
    "MaterialKey",
    "MaterialLedger",
    "Meters",
    "Opening",
    "OpeningType",
    "Point2D",
    "PriceTable",
    "ProjectStatus",
    "ProjectSummary",
    "Room",
    "RoomDimensions",
    "RoomEstimate",
    "RoomGeometry",
    "RoomMeasurements",
    "RoomShape",
    "Unit",
    "Wall",
    "WallDirection",
    "aggregate_cost",
    "calculate_materials",
    "category_for",
    "compute_floor_area",
    "compute_perimeter",
    "default_price_table",
    "keys_in_category",
    "material_info",
    "resolve_walls",
    "summarize_project",
    "unit_for",
]
