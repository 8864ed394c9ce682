"""Application commands (use cases) for room estimates."""

from __future__ import annotations

import logging
from typing import Iterable, Mapping

from renobudget.application.config import (
    EstimateConfiguration,
    config_to_options,
    config_to_room,
)
from renobudget.application.dtos import EstimateOutput, ProjectOutput
from renobudget.application.pricing import resolve_price_table
from renobudget.contracts.protocols import (
    CostAggregatorProtocol,
    MaterialCalculatorProtocol,
)
from renobudget.domain.catalog import DEFAULT_CURRENCY
from renobudget.domain.entities import Room
from renobudget.domain.exceptions import EstimationError
from renobudget.domain.services import (
    CostAggregator,
    MaterialCalculator,
    PriceTable,
    default_price_table,
    resolve_room_walls,
    summarize_project,
)
from renobudget.domain.value_objects import EstimateOptions

logger = logging.getLogger(__name__)


class EstimateRoomCommand:
    """Command to estimate materials and costs for a single room.

    Errors raised by the calculation are returned on the output rather than
    propagated, and no partial results are kept.
    """

    def __init__(
        self,
        material_calculator: MaterialCalculatorProtocol | None = None,
        cost_aggregator: CostAggregatorProtocol | None = None,
    ) -> None:
        self.material_calculator = material_calculator or MaterialCalculator()
        self.cost_aggregator = cost_aggregator or CostAggregator()

    def execute(
        self,
        room: Room,
        options: EstimateOptions | None = None,
        price_table: PriceTable | None = None,
        currency: str = DEFAULT_CURRENCY,
    ) -> EstimateOutput:
        """Execute the estimate.

        Args:
            room: Room with geometry and openings, in meters.
            options: Construction options. Defaults to no toggles and no
                fixtures.
            price_table: Unit prices. Defaults to the catalog prices.
            currency: Currency label for the output.

        Returns:
            EstimateOutput with walls, ledger and costs, or with errors.
        """
        table = price_table if price_table is not None else default_price_table()
        logger.debug(f"Estimating room {room.name!r} ({room.geometry.shape.value})")

        try:
            walls = resolve_room_walls(room.geometry)
            ledger = self.material_calculator.calculate(
                room.geometry, room.openings, options
            )
        except EstimationError as e:
            logger.warning(f"Estimate for room {room.name!r} failed: {e}")
            return EstimateOutput(room=room, currency=currency, errors=[str(e)])

        breakdown = self.cost_aggregator.aggregate(ledger, table)
        logger.debug(
            f"Room {room.name!r}: {len(ledger)} materials, "
            f"total {breakdown.total_cost:.2f} {currency}"
        )
        return EstimateOutput(
            room=room,
            walls=walls,
            ledger=ledger,
            breakdown=breakdown,
            price_table=table,
            currency=currency,
        )

    def execute_config(
        self,
        config: EstimateConfiguration,
        tier_prices: Mapping[str, float] | None = None,
    ) -> EstimateOutput:
        """Execute the estimate for a loaded configuration.

        Args:
            config: Validated estimate configuration.
            tier_prices: Prices for the configured tier from a price source.
                Configuration overrides still take precedence.

        Returns:
            EstimateOutput for the configured room.
        """
        currency = config.pricing.currency
        try:
            room = config_to_room(config)
            options = config_to_options(config.options)
        except EstimationError as e:
            logger.warning(f"Configuration for room {config.room.name!r} is invalid: {e}")
            return EstimateOutput(currency=currency, errors=[str(e)])

        table = resolve_price_table(tier_prices, config.pricing.overrides)
        return self.execute(room, options, table, currency=currency)


class SummarizeProjectCommand:
    """Command to roll room estimates up into a project summary."""

    def __init__(self, estimate_command: EstimateRoomCommand | None = None) -> None:
        self.estimate_command = estimate_command or EstimateRoomCommand()

    def execute(
        self,
        configs: Iterable[EstimateConfiguration],
        tier_prices: Mapping[str, float] | None = None,
        currency: str = DEFAULT_CURRENCY,
    ) -> ProjectOutput:
        """Estimate every room and summarize the project.

        Rooms whose estimate fails count as not yet estimated; their errors
        are available on the output.
        """
        outputs = [
            self.estimate_command.execute_config(config, tier_prices)
            for config in configs
        ]
        return self.summarize(outputs, currency=currency)

    def summarize(
        self, outputs: list[EstimateOutput], currency: str = DEFAULT_CURRENCY
    ) -> ProjectOutput:
        """Summarize already computed estimates."""
        estimates = [
            output.to_room_estimate(fallback_name=f"Room {index + 1}")
            for index, output in enumerate(outputs)
        ]
        summary = summarize_project(estimates)
        logger.debug(
            f"Project: {summary.estimated_rooms}/{summary.room_count} rooms estimated, "
            f"status {summary.status.value}"
        )
        return ProjectOutput(rooms=outputs, summary=summary, currency=currency)
