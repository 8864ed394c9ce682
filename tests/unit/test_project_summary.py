"""Unit tests for project summaries."""

import pytest

from renobudget.domain.services.cost_aggregator import aggregate_cost, default_price_table
from renobudget.domain.services.material_calculator import MaterialLedger
from renobudget.domain.services.project_summary import (
    ProjectStatus,
    RoomEstimate,
    summarize_project,
    top_materials,
)
from renobudget.domain.value_objects import MaterialKey


def _estimate(name: str, quantities: dict[MaterialKey, float]) -> RoomEstimate:
    ledger = MaterialLedger(quantities=quantities)
    return RoomEstimate(
        room_name=name,
        ledger=ledger,
        breakdown=aggregate_cost(ledger, default_price_table()),
    )


class TestSummarizeProject:
    """Tests for summarize_project."""

    def test_empty_project_is_planned(self) -> None:
        summary = summarize_project([])

        assert summary.room_count == 0
        assert summary.progress == 0
        assert summary.status == ProjectStatus.PLANNED
        assert summary.total_cost == 0
        assert summary.materials == {}

    def test_rooms_without_estimates_are_planned(self) -> None:
        summary = summarize_project([RoomEstimate("Hall"), RoomEstimate("Bath")])

        assert summary.room_count == 2
        assert summary.estimated_rooms == 0
        assert summary.status == ProjectStatus.PLANNED

    def test_partial_progress_is_in_progress(self) -> None:
        """One of three rooms estimated rounds to 33%."""
        rooms = [
            _estimate("Kitchen", {MaterialKey.PAINT: 4}),
            RoomEstimate("Hall"),
            RoomEstimate("Bath"),
        ]

        summary = summarize_project(rooms)

        assert summary.progress == 33
        assert summary.status == ProjectStatus.IN_PROGRESS

    def test_two_of_three_rounds_up(self) -> None:
        rooms = [
            _estimate("Kitchen", {MaterialKey.PAINT: 4}),
            _estimate("Bedroom", {MaterialKey.PAINT: 2}),
            RoomEstimate("Bath"),
        ]

        assert summarize_project(rooms).progress == 67

    def test_half_rounds_up(self) -> None:
        """One of eight rooms is 12.5%, shown as 13%."""
        rooms = [_estimate("Kitchen", {MaterialKey.PAINT: 4})]
        rooms += [RoomEstimate(f"Room {i}") for i in range(7)]

        assert summarize_project(rooms).progress == 13

    def test_all_estimated_is_completed(self) -> None:
        rooms = [
            _estimate("Kitchen", {MaterialKey.PAINT: 4}),
            _estimate("Bedroom", {MaterialKey.PAINT: 2}),
        ]

        summary = summarize_project(rooms)

        assert summary.progress == 100
        assert summary.status == ProjectStatus.COMPLETED

    def test_quantities_and_costs_are_combined(self) -> None:
        rooms = [
            _estimate("Kitchen", {MaterialKey.PAINT: 4, MaterialKey.SOCKETS: 6}),
            _estimate("Bedroom", {MaterialKey.PAINT: 3, MaterialKey.FLOOR_PANELS: 14}),
        ]

        summary = summarize_project(rooms)

        assert summary.materials == {
            MaterialKey.FLOOR_PANELS: 14,
            MaterialKey.PAINT: 7,
            MaterialKey.SOCKETS: 6,
        }
        assert list(summary.materials) == [
            MaterialKey.FLOOR_PANELS,
            MaterialKey.PAINT,
            MaterialKey.SOCKETS,
        ]
        assert summary.total_cost == pytest.approx(4 * 60 + 6 * 25 + 3 * 60 + 14 * 45)

    def test_empty_ledger_does_not_count_as_estimated(self) -> None:
        rooms = [RoomEstimate("Hall", ledger=MaterialLedger(quantities={}))]

        assert summarize_project(rooms).estimated_rooms == 0


class TestTopMaterials:
    """Tests for top_materials."""

    def test_largest_first(self) -> None:
        ledger = MaterialLedger(
            quantities={
                MaterialKey.PAINT: 8,
                MaterialKey.CW_PROFILES: 26,
                MaterialKey.FLOOR_PANELS: 14,
                MaterialKey.SOCKETS: 4,
            }
        )

        assert top_materials(ledger) == [
            (MaterialKey.CW_PROFILES, 26),
            (MaterialKey.FLOOR_PANELS, 14),
            (MaterialKey.PAINT, 8),
        ]

    def test_ties_keep_catalog_order(self) -> None:
        ledger = MaterialLedger(
            quantities={MaterialKey.UNDERLAYMENT: 14, MaterialKey.FLOOR_PANELS: 14}
        )

        assert [key for key, _ in top_materials(ledger, 2)] == [
            MaterialKey.FLOOR_PANELS,
            MaterialKey.UNDERLAYMENT,
        ]

    def test_count_larger_than_ledger(self) -> None:
        ledger = MaterialLedger(quantities={MaterialKey.PAINT: 8})

        assert top_materials(ledger, 10) == [(MaterialKey.PAINT, 8)]

    def test_negative_count_raises(self) -> None:
        with pytest.raises(ValueError):
            top_materials({}, -1)

    def test_summary_top_materials(self) -> None:
        summary = summarize_project(
            [_estimate("Kitchen", {MaterialKey.PAINT: 4, MaterialKey.SOCKETS: 6})]
        )

        assert summary.top_materials(1) == [(MaterialKey.SOCKETS, 6)]
