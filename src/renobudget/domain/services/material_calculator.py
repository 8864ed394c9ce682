"""Material quantity calculation.

Converts room geometry, openings and construction options into a ledger of
material quantities. Every quantity is rounded up to a whole unit because
partial units have to be bought whole.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Iterable, Iterator, Mapping

from ..catalog import MATERIAL_CATALOG, unit_for
from ..entities import Opening, RoomGeometry
from ..exceptions import InvalidGeometry, InvalidOptions
from ..value_objects import EstimateOptions, MaterialKey, RoomShape, Unit
from .geometry import (
    compute_floor_area,
    compute_perimeter,
    resolve_room_walls,
    validate_openings,
)

__all__ = [
    "L_SHAPE_BASEBOARD_CORNERS",
    "L_SHAPE_WASTE_FACTOR",
    "MaterialCalculator",
    "MaterialLedger",
    "RECTANGLE_BASEBOARD_CORNERS",
    "RECTANGLE_WASTE_FACTOR",
    "RoomMeasurements",
    "calculate_materials",
    "ceil_units",
    "measure_room",
]

RECTANGLE_WASTE_FACTOR = 1.10
L_SHAPE_WASTE_FACTOR = 1.15

# Baseboard corner pieces per room outline. A heuristic carried over from the
# field estimates; it happens to match the corner count of each polygon.
RECTANGLE_BASEBOARD_CORNERS = 4
L_SHAPE_BASEBOARD_CORNERS = 6

# Average cable run per electrical point: (minimum meters, share of perimeter).
RECTANGLE_CABLE_RUN = (5.0, 0.3)
L_SHAPE_CABLE_RUN = (6.0, 0.4)

# Decimal places kept before rounding up, to drop binary float noise.
ROUNDING_PRECISION = 6


def ceil_units(value: float) -> int:
    """Round a quantity up to the next whole unit.

    ``10 * 1.1`` is ``11.000000000000002`` in binary floating point, so the
    value is first rounded to ``ROUNDING_PRECISION`` decimals.
    """
    return math.ceil(round(value, ROUNDING_PRECISION))


@dataclass(frozen=True)
class RoomMeasurements:
    """Geometry derived once per calculation and shared by all formulas.

    Areas are square meters, lengths meters.
    """

    floor_area: float
    perimeter: float
    gross_wall_area: float
    door_area: float
    window_area: float
    net_wall_area: float
    door_count: int
    door_width_total: float


@dataclass(frozen=True)
class MaterialLedger:
    """Quantities of each material required for a room.

    Keys are iterated in catalog order. Only materials that apply to the
    room are present: OSB keys appear only with an OSB subfloor and ceiling
    keys only with a suspended ceiling.
    """

    quantities: Mapping[MaterialKey, float]
    measurements: RoomMeasurements | None = field(default=None, compare=False)

    def __post_init__(self) -> None:
        ordered: dict[MaterialKey, float] = {}
        given = {MaterialKey.parse(k): v for k, v in self.quantities.items()}
        for key in MATERIAL_CATALOG:
            if key in given:
                value = given[key]
                if isinstance(value, bool) or not isinstance(value, (int, float)):
                    raise ValueError(f"Quantity for {key.value} must be a number")
                if value < 0:
                    raise ValueError(f"Quantity for {key.value} cannot be negative")
                ordered[key] = value
        object.__setattr__(self, "quantities", MappingProxyType(ordered))

    def __getitem__(self, key: MaterialKey | str) -> float:
        return self.quantities[MaterialKey.parse(key)]

    def __contains__(self, key: object) -> bool:
        if isinstance(key, str):
            try:
                key = MaterialKey.parse(key)
            except ValueError:
                return False
        return key in self.quantities

    def __iter__(self) -> Iterator[MaterialKey]:
        return iter(self.quantities)

    def __len__(self) -> int:
        return len(self.quantities)

    def get(self, key: MaterialKey | str, default: float = 0) -> float:
        """Quantity for ``key``, or ``default`` when it is not in the ledger."""
        return self.quantities.get(MaterialKey.parse(key), default)

    def items(self) -> Iterable[tuple[MaterialKey, float]]:
        return self.quantities.items()

    def keys(self) -> Iterable[MaterialKey]:
        return self.quantities.keys()

    def unit(self, key: MaterialKey | str) -> Unit:
        """Unit of measure for a material in this ledger."""
        return unit_for(key)

    def to_dict(self) -> dict[str, float]:
        """Plain mapping keyed by material wire names."""
        return {key.value: value for key, value in self.quantities.items()}

    @classmethod
    def from_dict(cls, data: Mapping[str, float]) -> MaterialLedger:
        """Rebuild a ledger from ``to_dict`` output.

        Raises:
            ValueError: If a key is not a known material or a quantity is
                negative.
        """
        return cls(quantities={MaterialKey.parse(k): v for k, v in data.items()})


class MaterialCalculator:
    """Calculates material quantities for a room.

    Coverage constants describe the materials the estimates are based on:
    sheet sizes, package coverage and profile spacing.
    """

    PAINT_LITERS_PER_M2 = 0.25  # two coats
    DRYWALL_SHEET_M2 = 3.12  # 1.2 m x 2.6 m board
    CW_PROFILE_SPACING_M = 0.6
    UW_PROFILE_LENGTH_M = 3.0
    MINERAL_WOOL_M2_PER_PACK = 5.0
    TN_SCREWS_M2_PER_PACK = 10.0
    WALL_PLASTER_M2_PER_BAG = 30.0
    FINISHING_PLASTER_M2_PER_BAG = 25.0

    OSB_SHEET_M2 = 3.125  # 2.5 m x 1.25 m
    OSB_SCREWS_M2_PER_PACK = 10.0
    BASEBOARD_LENGTH_M = 2.5

    CD_PROFILES_PER_M2 = 1.0
    UD_PROFILES_PER_M2 = 0.4
    HANGERS_PER_M2 = 4.5
    GYPSUM_SHEET_M2 = 2.4
    CEILING_PLASTER_M2_PER_BAG = 30.0

    def calculate(
        self,
        geometry: RoomGeometry,
        openings: Iterable[Opening] = (),
        options: EstimateOptions | Mapping[str, Any] | None = None,
    ) -> MaterialLedger:
        """Calculate the material ledger for a room.

        Args:
            geometry: Room outline and dimensions.
            openings: Doors and windows, each bound to a wall of ``geometry``.
            options: Feature toggles and fixture counts. A mapping is accepted
                and converted to ``EstimateOptions``.

        Returns:
            A fresh ledger with every applicable material.

        Raises:
            InvalidGeometry: If the geometry or an opening is invalid, or the
                openings exceed the gross wall area.
            InvalidOptions: If a fixture count is negative or not an integer.
        """
        opts = _coerce_options(options)
        opening_list = list(openings)
        measurements = measure_room(geometry, opening_list)
        is_l_shape = geometry.shape == RoomShape.L_SHAPE

        quantities: dict[MaterialKey, float] = {}
        quantities.update(self._floor(measurements, is_l_shape))
        quantities.update(self._walls(measurements, is_l_shape))
        if opts.use_osb_floor:
            quantities.update(self._osb_floor(measurements, is_l_shape))
        if opts.use_suspended_ceiling:
            quantities.update(self._suspended_ceiling(measurements))
        quantities.update(self._electrical(measurements, is_l_shape, opts))

        return MaterialLedger(quantities=quantities, measurements=measurements)

    def _floor(
        self, m: RoomMeasurements, is_l_shape: bool
    ) -> dict[MaterialKey, float]:
        panels = ceil_units(m.floor_area * _waste_factor(is_l_shape))
        return {
            MaterialKey.FLOOR_PANELS: panels,
            MaterialKey.UNDERLAYMENT: panels,
        }

    def _walls(
        self, m: RoomMeasurements, is_l_shape: bool
    ) -> dict[MaterialKey, float]:
        complexity = _waste_factor(is_l_shape)
        net = m.net_wall_area
        return {
            MaterialKey.PAINT: ceil_units(net * self.PAINT_LITERS_PER_M2),
            MaterialKey.DRYWALL: ceil_units((net / self.DRYWALL_SHEET_M2) * complexity),
            MaterialKey.CW_PROFILES: ceil_units(
                (m.perimeter / self.CW_PROFILE_SPACING_M) * complexity
            ),
            MaterialKey.UW_PROFILES: ceil_units(
                (m.perimeter / self.UW_PROFILE_LENGTH_M) * complexity
            ),
            MaterialKey.MINERAL_WOOL: ceil_units(net / self.MINERAL_WOOL_M2_PER_PACK),
            MaterialKey.TN_SCREWS: ceil_units(net / self.TN_SCREWS_M2_PER_PACK),
            MaterialKey.WALL_PLASTER: ceil_units(net / self.WALL_PLASTER_M2_PER_BAG),
            MaterialKey.FINISHING_PLASTER: ceil_units(
                net / self.FINISHING_PLASTER_M2_PER_BAG
            ),
        }

    def _osb_floor(
        self, m: RoomMeasurements, is_l_shape: bool
    ) -> dict[MaterialKey, float]:
        floor_with_waste = m.floor_area * _waste_factor(is_l_shape)
        corners = L_SHAPE_BASEBOARD_CORNERS if is_l_shape else RECTANGLE_BASEBOARD_CORNERS
        baseboard_run = max(m.perimeter - m.door_width_total, 0.0)
        return {
            MaterialKey.OSB: ceil_units(floor_with_waste / self.OSB_SHEET_M2),
            MaterialKey.OSB_SCREWS: ceil_units(
                floor_with_waste / self.OSB_SCREWS_M2_PER_PACK
            ),
            MaterialKey.BASEBOARDS: ceil_units(baseboard_run / self.BASEBOARD_LENGTH_M),
            MaterialKey.BASEBOARD_ENDS: m.door_count * 2 + corners,
        }

    def _suspended_ceiling(self, m: RoomMeasurements) -> dict[MaterialKey, float]:
        area = m.floor_area
        return {
            MaterialKey.CD_PROFILES: ceil_units(area * self.CD_PROFILES_PER_M2),
            MaterialKey.UD_PROFILES: ceil_units(area * self.UD_PROFILES_PER_M2),
            MaterialKey.HANGERS: ceil_units(area * self.HANGERS_PER_M2),
            MaterialKey.GYPSUM: ceil_units(area / self.GYPSUM_SHEET_M2),
            MaterialKey.PLASTER: ceil_units(area / self.CEILING_PLASTER_M2_PER_BAG),
        }

    def _electrical(
        self, m: RoomMeasurements, is_l_shape: bool, opts: EstimateOptions
    ) -> dict[MaterialKey, float]:
        minimum, ratio = L_SHAPE_CABLE_RUN if is_l_shape else RECTANGLE_CABLE_RUN
        cable_run = max(minimum, m.perimeter * ratio)
        return {
            MaterialKey.SOCKETS: opts.socket_count,
            MaterialKey.SWITCHES: opts.switch_count,
            MaterialKey.CABLE_15: ceil_units(opts.switch_count * cable_run),
            MaterialKey.CABLE_25: ceil_units(opts.socket_count * cable_run),
            MaterialKey.JUNCTION_BOX: opts.socket_count + opts.switch_count,
        }


def measure_room(
    geometry: RoomGeometry, openings: Iterable[Opening] = ()
) -> RoomMeasurements:
    """Derive floor area, perimeter and wall areas for a room.

    Raises:
        InvalidGeometry: If the geometry is invalid, an opening is bound to a
            wall the room does not have, or the openings exceed the gross
            wall area.
    """
    if not isinstance(geometry, RoomGeometry):
        raise InvalidGeometry("Room geometry is required")
    opening_list = list(openings)
    walls = resolve_room_walls(geometry)
    validate_openings(walls, opening_list)

    floor_area = compute_floor_area(geometry.shape, geometry.dimensions)
    perimeter = compute_perimeter(geometry.shape, geometry.dimensions, geometry.corner)
    doors = [o for o in opening_list if o.is_door]
    windows = [o for o in opening_list if not o.is_door]
    door_area = sum(o.area for o in doors)
    window_area = sum(o.area for o in windows)
    gross_wall_area = perimeter * geometry.height
    net_wall_area = gross_wall_area - door_area - window_area

    if net_wall_area < 0:
        raise InvalidGeometry(
            f"Openings ({door_area + window_area:.2f} m²) exceed the gross wall "
            f"area ({gross_wall_area:.2f} m²)"
        )

    return RoomMeasurements(
        floor_area=floor_area,
        perimeter=perimeter,
        gross_wall_area=gross_wall_area,
        door_area=door_area,
        window_area=window_area,
        net_wall_area=net_wall_area,
        door_count=len(doors),
        door_width_total=sum(o.width for o in doors),
    )


def calculate_materials(
    geometry: RoomGeometry,
    openings: Iterable[Opening] = (),
    options: EstimateOptions | Mapping[str, Any] | None = None,
) -> MaterialLedger:
    """Calculate the material ledger for a room with a default calculator."""
    return MaterialCalculator().calculate(geometry, openings, options)


def _waste_factor(is_l_shape: bool) -> float:
    return L_SHAPE_WASTE_FACTOR if is_l_shape else RECTANGLE_WASTE_FACTOR


def _coerce_options(options: EstimateOptions | Mapping[str, Any] | None) -> EstimateOptions:
    if options is None:
        return EstimateOptions()
    if isinstance(options, EstimateOptions):
        return options
    try:
        return EstimateOptions(**dict(options))
    except TypeError as e:
        raise InvalidOptions(f"Invalid calculation options: {e}") from e
