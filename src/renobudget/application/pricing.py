"""Price tier selection.

Price sources return one row per material with a price for each tier. This
module flattens those rows into a single ``PriceTable`` for the selected
tier, which is all the cost aggregator ever sees.
"""

import logging
from enum import Enum
from typing import Any, Iterable, Mapping

from renobudget.domain.services.cost_aggregator import (
    PriceTable,
    default_price_table,
)
from renobudget.domain.value_objects import MaterialKey

logger = logging.getLogger(__name__)


class PricingTier(str, Enum):
    """Quality tiers offered by the pricing database."""

    BUDGET = "budget"
    MID_RANGE = "mid_range"
    PREMIUM = "premium"

    @property
    def price_column(self) -> str:
        """Column holding this tier's price in a price row."""
        return f"{self.value}_price"


# Order in which other tiers are tried when a row lacks the selected tier.
TIER_FALLBACK_ORDER: tuple[PricingTier, ...] = (
    PricingTier.MID_RANGE,
    PricingTier.BUDGET,
    PricingTier.PREMIUM,
)

# Pricing database material codes mapped to ledger keys.
MATERIAL_CODE_MAPPING: dict[str, MaterialKey] = {
    "floor_panels": MaterialKey.FLOOR_PANELS,
    "underlayment": MaterialKey.UNDERLAYMENT,
    "paint": MaterialKey.PAINT,
    "drywall": MaterialKey.DRYWALL,
    "cw_profile": MaterialKey.CW_PROFILES,
    "uw_profile": MaterialKey.UW_PROFILES,
    "mineral_wool": MaterialKey.MINERAL_WOOL,
    "tn_screws": MaterialKey.TN_SCREWS,
    "wall_plaster": MaterialKey.WALL_PLASTER,
    "finishing_plaster": MaterialKey.FINISHING_PLASTER,
    "osb": MaterialKey.OSB,
    "osb_screws": MaterialKey.OSB_SCREWS,
    "baseboard": MaterialKey.BASEBOARDS,
    "baseboard_ends": MaterialKey.BASEBOARD_ENDS,
    "cd_profile": MaterialKey.CD_PROFILES,
    "ud_profile": MaterialKey.UD_PROFILES,
    "hanger": MaterialKey.HANGERS,
    "gypsum": MaterialKey.GYPSUM,
    "plaster": MaterialKey.PLASTER,
    "socket": MaterialKey.SOCKETS,
    "switch": MaterialKey.SWITCHES,
    "cable_1.5": MaterialKey.CABLE_15,
    "cable_2.5": MaterialKey.CABLE_25,
    "junction_box": MaterialKey.JUNCTION_BOX,
}


def select_tier_prices(
    rows: Iterable[Mapping[str, Any]],
    tier: PricingTier | str = PricingTier.MID_RANGE,
) -> dict[str, float]:
    """Flatten price rows into one price per material for ``tier``.

    Each row carries the material code (either as ``code`` or nested under
    ``materials.code``) and one price column per tier. When the selected
    tier has no price the first available price in ``TIER_FALLBACK_ORDER``
    is used. Rows without a code or without any price are skipped.

    Args:
        rows: Price rows as returned by the pricing database.
        tier: Tier to select.

    Returns:
        Mapping from ledger key name to unit price. Codes missing from
        ``MATERIAL_CODE_MAPPING`` are passed through unchanged so that the
        caller can report them.
    """
    selected = PricingTier(tier)
    prices: dict[str, float] = {}

    for row in rows:
        code = _material_code(row)
        if not code:
            logger.debug(f"Skipping price row without material code: {row!r}")
            continue

        price = row.get(selected.price_column)
        if price is None:
            price = next(
                (
                    row.get(fallback.price_column)
                    for fallback in TIER_FALLBACK_ORDER
                    if row.get(fallback.price_column) is not None
                ),
                None,
            )
        if price is None:
            logger.debug(f"Skipping {code}: no price in any tier")
            continue

        key = MATERIAL_CODE_MAPPING.get(code)
        prices[key.value if key is not None else code] = float(price)

    return prices


def resolve_price_table(
    tier_prices: Mapping[str, float] | None = None,
    overrides: Mapping[str, float] | None = None,
) -> PriceTable:
    """Build the price table used for an estimate.

    Precedence: overrides > tier prices > catalog defaults. Unknown keys are
    dropped with a warning and listed on the table's ``ignored_keys``.
    """
    merged: dict[str, float] = {
        key.value: price for key, price in default_price_table().prices.items()
    }
    if tier_prices:
        merged.update(tier_prices)
    if overrides:
        merged.update({str(getattr(k, "value", k)): v for k, v in overrides.items()})

    table = PriceTable.from_mapping(merged)
    if table.ignored_keys:
        logger.warning(
            f"Ignoring prices for unknown materials: {', '.join(table.ignored_keys)}"
        )
    return table


def _material_code(row: Mapping[str, Any]) -> str | None:
    material = row.get("materials")
    if isinstance(material, list):
        material = material[0] if material else None
    if isinstance(material, Mapping):
        return material.get("code")
    return row.get("code")
