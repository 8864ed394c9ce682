"""Data Transfer Objects for the application layer."""

from __future__ import annotations

from dataclasses import dataclass, field

from renobudget.domain.catalog import DEFAULT_CURRENCY
from renobudget.domain.entities import Room, Wall
from renobudget.domain.services.cost_aggregator import CostBreakdown, PriceTable
from renobudget.domain.services.material_calculator import MaterialLedger
from renobudget.domain.services.project_summary import ProjectSummary, RoomEstimate


@dataclass
class EstimateOutput:
    """Output DTO containing the estimate for one room.

    When ``errors`` is not empty the estimate failed and every result field
    is empty: a partial bill of materials is never returned.

    Attributes:
        room: The room that was estimated.
        walls: Resolved walls of the room.
        ledger: Material quantities.
        breakdown: Costs per material and in total.
        price_table: Prices the breakdown was computed with.
        currency: Currency label for costs.
        errors: Error messages if the estimate failed.
    """

    room: Room | None = None
    walls: list[Wall] = field(default_factory=list)
    ledger: MaterialLedger | None = None
    breakdown: CostBreakdown | None = None
    price_table: PriceTable | None = None
    currency: str = DEFAULT_CURRENCY
    errors: list[str] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        """Check if the estimate was produced successfully."""
        return len(self.errors) == 0

    @property
    def cost_per_area(self) -> float | None:
        """Total cost per square meter of floor, if available."""
        if self.breakdown is None or self.ledger is None:
            return None
        measurements = self.ledger.measurements
        if measurements is None or measurements.floor_area <= 0:
            return None
        return self.breakdown.cost_per_area(measurements.floor_area)

    def to_room_estimate(self, fallback_name: str = "Room") -> RoomEstimate:
        """Convert to the summary input for this room."""
        return RoomEstimate(
            room_name=self.room.name if self.room is not None else fallback_name,
            ledger=self.ledger if self.is_valid else None,
            breakdown=self.breakdown if self.is_valid else None,
        )


@dataclass
class ProjectOutput:
    """Output DTO from summarizing several room estimates.

    Attributes:
        rooms: Estimate for each room, in input order.
        summary: Project totals.
        currency: Currency label for costs.
    """

    rooms: list[EstimateOutput]
    summary: ProjectSummary
    currency: str = DEFAULT_CURRENCY

    @property
    def errors(self) -> list[str]:
        """Errors of every room, prefixed with the room name."""
        messages: list[str] = []
        for index, output in enumerate(self.rooms):
            name = output.room.name if output.room is not None else f"room {index + 1}"
            messages.extend(f"{name}: {error}" for error in output.errors)
        return messages
