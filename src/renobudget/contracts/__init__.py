"""Contracts module - protocols for cross-layer communication.

Example:
    ```python
    from renobudget.contracts import MaterialCalculatorProtocol

    def quantities(calculator: MaterialCalculatorProtocol, room: Room):
        return calculator.calculate(room.geometry, room.openings)
    ```
"""

from .formatters import (
    FormatterProtocol as FormatterProtocol,
    JsonExporterProtocol as JsonExporterProtocol,
    MaterialReportFormatterProtocol as MaterialReportFormatterProtocol,
    ProjectSummaryFormatterProtocol as ProjectSummaryFormatterProtocol,
    WallListFormatterProtocol as WallListFormatterProtocol,
)
from .protocols import (
    CostAggregatorProtocol as CostAggregatorProtocol,
    MaterialCalculatorProtocol as MaterialCalculatorProtocol,
    PriceSourceProtocol as PriceSourceProtocol,
)
