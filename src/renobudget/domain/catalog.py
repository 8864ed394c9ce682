"""Material catalog: display names, units, categories and default prices."""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping

from .value_objects import MaterialCategory, MaterialKey, Unit

__all__ = [
    "DEFAULT_CURRENCY",
    "DEFAULT_UNIT_PRICES",
    "MATERIAL_CATALOG",
    "MaterialInfo",
    "category_for",
    "keys_in_category",
    "material_info",
    "unit_for",
]

DEFAULT_CURRENCY = "PLN"


@dataclass(frozen=True)
class MaterialInfo:
    """Static description of a material."""

    key: MaterialKey
    name: str
    unit: Unit
    category: MaterialCategory


def _info(
    key: MaterialKey, name: str, unit: Unit, category: MaterialCategory
) -> tuple[MaterialKey, MaterialInfo]:
    return key, MaterialInfo(key=key, name=name, unit=unit, category=category)


_FLOOR = MaterialCategory.FLOOR
_WALLS = MaterialCategory.WALLS
_CEILING = MaterialCategory.CEILING
_ELECTRICAL = MaterialCategory.ELECTRICAL

# Catalog order is the presentation order of a bill of materials.
MATERIAL_CATALOG: Mapping[MaterialKey, MaterialInfo] = MappingProxyType(
    dict(
        [
            _info(MaterialKey.FLOOR_PANELS, "Floor panels", Unit.SQUARE_METER, _FLOOR),
            _info(MaterialKey.UNDERLAYMENT, "Panel underlayment", Unit.SQUARE_METER, _FLOOR),
            _info(MaterialKey.OSB, "OSB board", Unit.PIECE, _FLOOR),
            _info(MaterialKey.OSB_SCREWS, "OSB screws", Unit.PACKAGE, _FLOOR),
            _info(MaterialKey.BASEBOARDS, "Baseboards", Unit.PIECE, _FLOOR),
            _info(MaterialKey.BASEBOARD_ENDS, "Baseboard corners and ends", Unit.PIECE, _FLOOR),
            _info(MaterialKey.PAINT, "Paint", Unit.LITER, _WALLS),
            _info(MaterialKey.DRYWALL, "Wall drywall boards", Unit.PIECE, _WALLS),
            _info(MaterialKey.CW_PROFILES, "CW profiles", Unit.PIECE, _WALLS),
            _info(MaterialKey.UW_PROFILES, "UW profiles", Unit.PIECE, _WALLS),
            _info(MaterialKey.MINERAL_WOOL, "Mineral wool", Unit.PACKAGE, _WALLS),
            _info(MaterialKey.TN_SCREWS, "TN drywall screws", Unit.PACKAGE, _WALLS),
            _info(MaterialKey.WALL_PLASTER, "Wall filler plaster", Unit.BAG, _WALLS),
            _info(MaterialKey.FINISHING_PLASTER, "Finishing plaster", Unit.BAG, _WALLS),
            _info(MaterialKey.CD_PROFILES, "CD 60 profiles", Unit.PIECE, _CEILING),
            _info(MaterialKey.UD_PROFILES, "UD 27 profiles", Unit.PIECE, _CEILING),
            _info(MaterialKey.HANGERS, "ES hangers", Unit.PIECE, _CEILING),
            _info(MaterialKey.GYPSUM, "Ceiling drywall boards", Unit.PIECE, _CEILING),
            _info(MaterialKey.PLASTER, "Ceiling filler plaster", Unit.BAG, _CEILING),
            _info(MaterialKey.SOCKETS, "Sockets", Unit.PIECE, _ELECTRICAL),
            _info(MaterialKey.SWITCHES, "Switches", Unit.PIECE, _ELECTRICAL),
            _info(MaterialKey.CABLE_15, "YDY 3x1.5 cable", Unit.METER, _ELECTRICAL),
            _info(MaterialKey.CABLE_25, "YDY 3x2.5 cable", Unit.METER, _ELECTRICAL),
            _info(MaterialKey.JUNCTION_BOX, "Flush junction boxes", Unit.PIECE, _ELECTRICAL),
        ]
    )
)

# Unit prices used when no pricing source is available, in DEFAULT_CURRENCY.
DEFAULT_UNIT_PRICES: Mapping[MaterialKey, float] = MappingProxyType(
    {
        MaterialKey.FLOOR_PANELS: 45.0,
        MaterialKey.UNDERLAYMENT: 10.0,
        MaterialKey.OSB: 60.0,
        MaterialKey.OSB_SCREWS: 15.0,
        MaterialKey.BASEBOARDS: 25.0,
        MaterialKey.BASEBOARD_ENDS: 8.0,
        MaterialKey.PAINT: 60.0,
        MaterialKey.DRYWALL: 40.0,
        MaterialKey.CW_PROFILES: 15.0,
        MaterialKey.UW_PROFILES: 12.0,
        MaterialKey.MINERAL_WOOL: 50.0,
        MaterialKey.TN_SCREWS: 20.0,
        MaterialKey.WALL_PLASTER: 30.0,
        MaterialKey.FINISHING_PLASTER: 35.0,
        MaterialKey.CD_PROFILES: 18.0,
        MaterialKey.UD_PROFILES: 15.0,
        MaterialKey.HANGERS: 2.0,
        MaterialKey.GYPSUM: 40.0,
        MaterialKey.PLASTER: 30.0,
        MaterialKey.SOCKETS: 25.0,
        MaterialKey.SWITCHES: 30.0,
        MaterialKey.CABLE_15: 5.0,
        MaterialKey.CABLE_25: 7.0,
        MaterialKey.JUNCTION_BOX: 5.0,
    }
)


def material_info(key: MaterialKey | str) -> MaterialInfo:
    """Catalog entry for a material."""
    return MATERIAL_CATALOG[MaterialKey.parse(key)]


def unit_for(key: MaterialKey | str) -> Unit:
    """Unit of measure for a material."""
    return material_info(key).unit


def category_for(key: MaterialKey | str) -> MaterialCategory:
    """Category a material is listed under."""
    return material_info(key).category


def keys_in_category(category: MaterialCategory) -> list[MaterialKey]:
    """Materials in ``category``, in catalog order."""
    return [key for key, info in MATERIAL_CATALOG.items() if info.category == category]
