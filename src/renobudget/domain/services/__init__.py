"""Domain services for room geometry, material quantities and costs.

- Geometry resolution: walls, floor area, perimeter, opening placement
- Material calculation: quantity ledger per room
- Cost aggregation: pricing a ledger against a price table
- Project summary: roll-up of room estimates
"""

from .cost_aggregator import (
    CostAggregator,
    CostBreakdown,
    PriceTable,
    aggregate_cost,
    default_price_table,
)
from .geometry import (
    FitCheck,
    OpeningPlacement,
    check_opening_fits,
    compute_floor_area,
    compute_perimeter,
    find_wall,
    place_opening,
    position_from_percent,
    resolve_room_walls,
    resolve_walls,
    validate_openings,
)
from .material_calculator import (
    L_SHAPE_BASEBOARD_CORNERS,
    L_SHAPE_WASTE_FACTOR,
    RECTANGLE_BASEBOARD_CORNERS,
    RECTANGLE_WASTE_FACTOR,
    MaterialCalculator,
    MaterialLedger,
    RoomMeasurements,
    calculate_materials,
    ceil_units,
    measure_room,
)
from .project_summary import (
    ProjectStatus,
    ProjectSummary,
    RoomEstimate,
    summarize_project,
    top_materials,
)

__all__ = [
    "CostAggregator",
    "CostBreakdown",
    "FitCheck",
    "L_SHAPE_BASEBOARD_CORNERS",
    "L_SHAPE_WASTE_FACTOR",
    "MaterialCalculator",
    "MaterialLedger",
    "OpeningPlacement",
    "PriceTable",
    "ProjectStatus",
    "ProjectSummary",
    "RECTANGLE_BASEBOARD_CORNERS",
    "RECTANGLE_WASTE_FACTOR",
    "RoomEstimate",
    "RoomMeasurements",
    "aggregate_cost",
    "calculate_materials",
    "ceil_units",
    "check_opening_fits",
    "compute_floor_area",
    "compute_perimeter",
    "default_price_table",
    "find_wall",
    "measure_room",
    "place_opening",
    "position_from_percent",
    "resolve_room_walls",
    "resolve_walls",
    "summarize_project",
    "top_materials",
    "validate_openings",
]
