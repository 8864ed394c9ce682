"""Service protocols for dependency injection.

Commands and the web layer depend on these protocols rather than on concrete
services, so tests can substitute fakes.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Iterable, Mapping, Protocol, runtime_checkable

if TYPE_CHECKING:
    from renobudget.application.pricing import PricingTier
    from renobudget.domain.entities import Opening, RoomGeometry
    from renobudget.domain.services.cost_aggregator import CostBreakdown, PriceTable
    from renobudget.domain.services.material_calculator import MaterialLedger
    from renobudget.domain.value_objects import EstimateOptions, MaterialKey


class MaterialCalculatorProtocol(Protocol):
    """Protocol for material quantity calculation.

    Example:
        ```python
        class MaterialCalculator:
            def calculate(self, geometry, openings, options) -> MaterialLedger:
                ...
        ```
    """

    def calculate(
        self,
        geometry: RoomGeometry,
        openings: Iterable[Opening] = (),
        options: EstimateOptions | Mapping[str, Any] | None = None,
    ) -> MaterialLedger:
        """Calculate the material ledger for a room.

        Raises:
            InvalidGeometry: If the geometry or an opening is invalid.
            InvalidOptions: If a fixture count is invalid.
        """
        ...


class CostAggregatorProtocol(Protocol):
    """Protocol for pricing a material ledger."""

    def aggregate(
        self,
        ledger: MaterialLedger | Mapping[MaterialKey, float],
        price_table: PriceTable | Mapping[MaterialKey, float],
    ) -> CostBreakdown:
        """Price every ledger line; missing prices cost zero."""
        ...


@runtime_checkable
class PriceSourceProtocol(Protocol):
    """Protocol for a source of tiered material prices.

    Implementations return one flattened mapping of material key name to
    unit price for the requested tier.
    """

    async def fetch_tier_prices(self, tier: PricingTier | str) -> dict[str, float]:
        """Fetch unit prices for ``tier``.

        Raises:
            PriceSourceError: If the source cannot be reached or answers
                with something other than price rows.
        """
        ...
