"""Cost aggregation for material ledgers."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Iterable, Mapping

from ..catalog import DEFAULT_UNIT_PRICES, MATERIAL_CATALOG, category_for
from ..value_objects import MaterialCategory, MaterialKey
from .material_calculator import MaterialLedger

__all__ = [
    "CostAggregator",
    "CostBreakdown",
    "PriceTable",
    "aggregate_cost",
    "default_price_table",
]


@dataclass(frozen=True)
class PriceTable:
    """Unit price per material, in a single currency.

    A table does not need to be complete. Missing materials cost nothing,
    which lets new materials be added before they are priced.

    Attributes:
        prices: Unit price per material key.
        ignored_keys: Keys dropped by ``from_mapping`` because they name no
            known material.
    """

    prices: Mapping[MaterialKey, float] = field(default_factory=dict)
    ignored_keys: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        checked: dict[MaterialKey, float] = {}
        for key, price in self.prices.items():
            material = MaterialKey.parse(key)
            if isinstance(price, bool) or not isinstance(price, (int, float)):
                raise ValueError(f"Price for {material.value} must be a number")
            if not math.isfinite(price) or price < 0:
                raise ValueError(f"Price for {material.value} cannot be negative")
            checked[material] = float(price)
        object.__setattr__(self, "prices", MappingProxyType(checked))

    @classmethod
    def from_mapping(cls, data: Mapping[str | MaterialKey, float]) -> PriceTable:
        """Build a table from loosely keyed data such as a JSON object.

        Unknown keys are skipped and listed on ``ignored_keys``.
        """
        prices: dict[MaterialKey, float] = {}
        ignored: list[str] = []
        for key, price in data.items():
            try:
                prices[MaterialKey.parse(key)] = price
            except ValueError:
                ignored.append(str(key))
        return cls(prices=prices, ignored_keys=tuple(ignored))

    def get(self, key: MaterialKey | str, default: float = 0.0) -> float:
        return self.prices.get(MaterialKey.parse(key), default)

    def __contains__(self, key: object) -> bool:
        return key in self.prices

    def __len__(self) -> int:
        return len(self.prices)

    def with_overrides(self, overrides: Mapping[MaterialKey, float]) -> PriceTable:
        """Return a new table where ``overrides`` replace existing prices."""
        merged = dict(self.prices)
        merged.update({MaterialKey.parse(k): v for k, v in overrides.items()})
        return PriceTable(prices=merged, ignored_keys=self.ignored_keys)

    def to_dict(self) -> dict[str, float]:
        return {key.value: price for key, price in self.prices.items()}


@dataclass(frozen=True)
class CostBreakdown:
    """Cost of a ledger: total plus one line per material."""

    total_cost: float
    per_material_cost: Mapping[MaterialKey, float]

    def cost_per_area(self, floor_area: float) -> float:
        """Total cost per square meter of floor.

        The caller guards against a zero floor area.
        """
        return self.total_cost / floor_area

    def by_category(self) -> dict[MaterialCategory, float]:
        """Sum of line costs per material category, in catalog order."""
        totals: dict[MaterialCategory, float] = {}
        for key, cost in self.per_material_cost.items():
            category = category_for(key)
            totals[category] = totals.get(category, 0.0) + cost
        return totals

    def to_dict(self) -> dict[str, object]:
        return {
            "total_cost": self.total_cost,
            "per_material_cost": {
                key.value: cost for key, cost in self.per_material_cost.items()
            },
        }


class CostAggregator:
    """Prices a material ledger against a price table."""

    def aggregate(
        self,
        ledger: MaterialLedger | Mapping[MaterialKey, float],
        price_table: PriceTable | Mapping[MaterialKey, float],
    ) -> CostBreakdown:
        """Multiply each quantity by its unit price and sum the lines.

        Materials without a price contribute a zero line. Prices given as a
        plain mapping may name unknown materials; those are skipped. This
        never fails for a valid ledger.
        """
        if isinstance(price_table, PriceTable):
            table = price_table
        else:
            table = PriceTable.from_mapping(price_table)
        lines: dict[MaterialKey, float] = {}
        for key, quantity in _ledger_items(ledger):
            lines[key] = quantity * table.get(key)
        return CostBreakdown(
            total_cost=math.fsum(lines.values()),
            per_material_cost=MappingProxyType(lines),
        )


def aggregate_cost(
    ledger: MaterialLedger | Mapping[MaterialKey, float],
    price_table: PriceTable | Mapping[MaterialKey, float],
) -> CostBreakdown:
    """Price a ledger with a default aggregator."""
    return CostAggregator().aggregate(ledger, price_table)


def default_price_table() -> PriceTable:
    """Price table built from the catalog's default unit prices."""
    return PriceTable(prices=dict(DEFAULT_UNIT_PRICES))


def _ledger_items(
    ledger: MaterialLedger | Mapping[MaterialKey, float],
) -> Iterable[tuple[MaterialKey, float]]:
    if isinstance(ledger, MaterialLedger):
        return ledger.items()
    parsed = {MaterialKey.parse(k): v for k, v in ledger.items()}
    return [(key, parsed[key]) for key in MATERIAL_CATALOG if key in parsed]
