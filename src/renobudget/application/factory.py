"""Service factory for dependency injection."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from renobudget.application.commands import (
        EstimateRoomCommand,
        SummarizeProjectCommand,
    )
    from renobudget.contracts.formatters import (
        JsonExporterProtocol,
        MaterialReportFormatterProtocol,
        ProjectSummaryFormatterProtocol,
        WallListFormatterProtocol,
    )
    from renobudget.contracts.protocols import (
        CostAggregatorProtocol,
        MaterialCalculatorProtocol,
        PriceSourceProtocol,
    )


@dataclass
class ServiceFactory:
    """Factory for creating service instances.

    Domain services are created once and cached; formatters are cheap and
    created per call. A price source is only available when one was passed
    in or configured through the environment.

    Attributes:
        price_source: Explicit price source. When None, ``get_price_source``
            falls back to environment configuration.
    """

    price_source: "PriceSourceProtocol | None" = None

    _material_calculator: "MaterialCalculatorProtocol | None" = field(
        default=None, init=False, repr=False
    )
    _cost_aggregator: "CostAggregatorProtocol | None" = field(
        default=None, init=False, repr=False
    )

    def get_material_calculator(self) -> "MaterialCalculatorProtocol":
        """Get or create material calculator instance."""
        if self._material_calculator is None:
            from renobudget.domain.services import MaterialCalculator

            self._material_calculator = MaterialCalculator()
        return self._material_calculator

    def get_cost_aggregator(self) -> "CostAggregatorProtocol":
        """Get or create cost aggregator instance."""
        if self._cost_aggregator is None:
            from renobudget.domain.services import CostAggregator

            self._cost_aggregator = CostAggregator()
        return self._cost_aggregator

    def get_price_source(self) -> "PriceSourceProtocol | None":
        """Return the configured price source, if any."""
        if self.price_source is None:
            from renobudget.infrastructure.pricing_client import PostgrestPriceSource

            self.price_source = PostgrestPriceSource.from_env()
        return self.price_source

    def get_material_report_formatter(self) -> "MaterialReportFormatterProtocol":
        """Create material report formatter instance."""
        from renobudget.infrastructure.formatters import MaterialReportFormatter

        return MaterialReportFormatter()

    def get_wall_list_formatter(self) -> "WallListFormatterProtocol":
        """Create wall list formatter instance."""
        from renobudget.infrastructure.formatters import WallListFormatter

        return WallListFormatter()

    def get_project_summary_formatter(self) -> "ProjectSummaryFormatterProtocol":
        """Create project summary formatter instance."""
        from renobudget.infrastructure.formatters import ProjectSummaryFormatter

        return ProjectSummaryFormatter()

    def get_json_exporter(self) -> "JsonExporterProtocol":
        """Create JSON exporter instance."""
        from renobudget.infrastructure.formatters import JsonExporter

        return JsonExporter()

    def create_estimate_command(self) -> "EstimateRoomCommand":
        """Create an estimate command wired with this factory's services."""
        from renobudget.application.commands import EstimateRoomCommand

        return EstimateRoomCommand(
            material_calculator=self.get_material_calculator(),
            cost_aggregator=self.get_cost_aggregator(),
        )

    def create_summary_command(self) -> "SummarizeProjectCommand":
        """Create a project summary command."""
        from renobudget.application.commands import SummarizeProjectCommand

        return SummarizeProjectCommand(estimate_command=self.create_estimate_command())


_default_factory: ServiceFactory | None = None


def get_factory() -> ServiceFactory:
    """Get the default service factory, creating it on first use."""
    global _default_factory
    if _default_factory is None:
        _default_factory = ServiceFactory()
    return _default_factory


def set_factory(factory: ServiceFactory | None) -> None:
    """Replace the default factory. Used by tests."""
    global _default_factory
    _default_factory = factory


def reset_factory() -> None:
    """Reset the default factory so the next call creates a fresh one."""
    global _default_factory
    _default_factory = None
