"""Project-level roll-up of per-room estimates."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import Iterable

from ..catalog import MATERIAL_CATALOG
from ..value_objects import MaterialKey
from .cost_aggregator import CostBreakdown
from .material_calculator import MaterialLedger

__all__ = [
    "ProjectStatus",
    "ProjectSummary",
    "RoomEstimate",
    "summarize_project",
    "top_materials",
]

TOP_MATERIALS_COUNT = 3


class ProjectStatus(str, Enum):
    """Progress of a renovation project."""

    PLANNED = "planned"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"


@dataclass(frozen=True)
class RoomEstimate:
    """Estimate for one room, or an empty one when it was not calculated yet."""

    room_name: str
    ledger: MaterialLedger | None = None
    breakdown: CostBreakdown | None = None

    @property
    def has_materials(self) -> bool:
        return self.ledger is not None and len(self.ledger) > 0

    @property
    def total_cost(self) -> float:
        return self.breakdown.total_cost if self.breakdown is not None else 0.0


@dataclass(frozen=True)
class ProjectSummary:
    """Totals across every room of a project.

    Attributes:
        room_count: Number of rooms in the project.
        estimated_rooms: Rooms that have a material ledger.
        total_cost: Sum of room costs.
        materials: Combined quantities per material.
        progress: Share of estimated rooms, as a whole percentage.
        status: Project status derived from ``progress``.
    """

    room_count: int
    estimated_rooms: int
    total_cost: float
    materials: dict[MaterialKey, float]
    progress: int
    status: ProjectStatus

    def top_materials(self, count: int = TOP_MATERIALS_COUNT) -> list[tuple[MaterialKey, float]]:
        return top_materials(self.materials, count)


def summarize_project(rooms: Iterable[RoomEstimate]) -> ProjectSummary:
    """Combine room estimates into a project summary.

    A project without rooms is ``planned`` with zero progress.
    """
    room_list = list(rooms)
    estimated = [room for room in room_list if room.has_materials]

    combined: dict[MaterialKey, float] = {}
    for room in estimated:
        assert room.ledger is not None
        for key, quantity in room.ledger.items():
            combined[key] = combined.get(key, 0) + quantity
    combined = {key: combined[key] for key in MATERIAL_CATALOG if key in combined}

    progress = _progress(len(estimated), len(room_list))
    return ProjectSummary(
        room_count=len(room_list),
        estimated_rooms=len(estimated),
        total_cost=math.fsum(room.total_cost for room in room_list),
        materials=combined,
        progress=progress,
        status=_status(progress),
    )


def top_materials(
    ledger: MaterialLedger | dict[MaterialKey, float],
    count: int = TOP_MATERIALS_COUNT,
) -> list[tuple[MaterialKey, float]]:
    """Materials with the largest quantities, largest first.

    Ties keep catalog order.
    """
    if count < 0:
        raise ValueError(f"count cannot be negative, got {count}")
    items = list(ledger.items())
    return sorted(items, key=lambda item: item[1], reverse=True)[:count]


def _progress(estimated: int, total: int) -> int:
    if total == 0:
        return 0
    # Half-up rounding, as shown to users.
    return math.floor(estimated / total * 100 + 0.5)


def _status(progress: int) -> ProjectStatus:
    if progress == 0:
        return ProjectStatus.PLANNED
    if progress == 100:
        return ProjectStatus.COMPLETED
    return ProjectStatus.IN_PROGRESS
