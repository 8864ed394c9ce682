"""Output formatters and exporters for room estimates."""

from __future__ import annotations

import json
from typing import Any

from renobudget.application.dtos import EstimateOutput, ProjectOutput
from renobudget.domain.catalog import DEFAULT_CURRENCY, material_info
from renobudget.domain.entities import Wall
from renobudget.domain.services.project_summary import ProjectSummary
from renobudget.domain.value_objects import MaterialCategory


class MaterialReportFormatter:
    """Formats a bill of materials grouped by category.

    Each line shows quantity, unit, unit price and line cost. Categories
    without materials in the ledger are left out.
    """

    WIDTH = 78

    def format(self, output: EstimateOutput) -> str:
        """Format the ledger and costs of an estimate as a report."""
        if not output.is_valid:
            return "\n".join(["ESTIMATE FAILED", *(f"  - {e}" for e in output.errors)])
        assert output.ledger is not None and output.breakdown is not None

        currency = output.currency
        room_name = output.room.name if output.room is not None else "Room"
        lines = [f"MATERIAL ESTIMATE: {room_name}", "=" * self.WIDTH]

        measurements = output.ledger.measurements
        if measurements is not None:
            lines.extend(
                [
                    f"Floor area:     {measurements.floor_area:.2f} m²",
                    f"Perimeter:      {measurements.perimeter:.2f} m",
                    f"Net wall area:  {measurements.net_wall_area:.2f} m²",
                    "",
                ]
            )

        header = (
            f"{'Material':<30} {'Qty':>7} {'Unit':<5} "
            f"{'Price':>10} {'Cost':>12}"
        )
        category_totals = output.breakdown.by_category()
        for category in MaterialCategory:
            keys = [
                key for key in output.ledger
                if material_info(key).category == category
            ]
            if not keys:
                continue
            lines.append(category.value.upper())
            lines.append(header)
            lines.append("-" * self.WIDTH)
            for key in keys:
                info = material_info(key)
                quantity = output.ledger[key]
                unit_price = output.price_table.get(key) if output.price_table else 0.0
                cost = output.breakdown.per_material_cost.get(key, 0.0)
                lines.append(
                    f"{info.name:<30} {quantity:>7g} {info.unit.value:<5} "
                    f"{unit_price:>10.2f} {cost:>12.2f}"
                )
            lines.append(
                f"{'Subtotal':<30} {'':>7} {'':<5} {'':>10} "
                f"{category_totals.get(category, 0.0):>12.2f}"
            )
            lines.append("")

        lines.append("=" * self.WIDTH)
        lines.append(f"TOTAL: {output.breakdown.total_cost:.2f} {currency}")
        if output.cost_per_area is not None:
            lines.append(f"Per m² of floor: {output.cost_per_area:.2f} {currency}")
        return "\n".join(lines)


class WallListFormatter:
    """Formats resolved walls as a table."""

    def format(self, walls: list[Wall]) -> str:
        if not walls:
            return "No walls."
        lines = [
            "WALLS",
            "=" * 64,
            f"{'Id':<4} {'Name':<18} {'Length':>8} {'Direction':<11} {'From':<10} {'To'}",
            "-" * 64,
        ]
        for wall in walls:
            lines.append(
                f"{wall.id:<4} {wall.name:<18} {wall.length:>8.2f} "
                f"{wall.direction.value:<11} "
                f"{_point(wall.start.x, wall.start.y):<10} {_point(wall.end.x, wall.end.y)}"
            )
        lines.append("-" * 64)
        lines.append(f"{'':<4} {'Perimeter':<18} {sum(w.length for w in walls):>8.2f}")
        return "\n".join(lines)


class ProjectSummaryFormatter:
    """Formats a project summary with its top materials."""

    def format(self, summary: ProjectSummary, currency: str = DEFAULT_CURRENCY) -> str:
        lines = [
            "PROJECT SUMMARY",
            "=" * 50,
            f"Rooms:      {summary.estimated_rooms}/{summary.room_count} estimated",
            f"Progress:   {summary.progress}%",
            f"Status:     {summary.status.value.replace('_', ' ')}",
            f"Total cost: {summary.total_cost:.2f} {currency}",
        ]
        top = summary.top_materials()
        if top:
            lines.append("")
            lines.append("Top materials")
            for key, quantity in top:
                info = material_info(key)
                lines.append(f"  {info.name:<30} {quantity:>8g} {info.unit.value}")
        return "\n".join(lines)


class JsonExporter:
    """Exports estimate data as JSON."""

    def to_dict(self, output: EstimateOutput) -> dict[str, Any]:
        """Build the JSON-compatible representation of an estimate."""
        if not output.is_valid:
            return {"errors": output.errors}
        assert output.ledger is not None and output.breakdown is not None

        measurements = output.ledger.measurements
        return {
            "room": output.room.name if output.room is not None else None,
            "currency": output.currency,
            "walls": [
                {
                    "id": wall.id,
                    "name": wall.name,
                    "length": wall.length,
                    "direction": wall.direction.value,
                }
                for wall in output.walls
            ],
            "measurements": (
                {
                    "floor_area": measurements.floor_area,
                    "perimeter": measurements.perimeter,
                    "gross_wall_area": measurements.gross_wall_area,
                    "net_wall_area": measurements.net_wall_area,
                }
                if measurements is not None
                else None
            ),
            "materials": [
                {
                    "key": key.value,
                    "name": material_info(key).name,
                    "category": material_info(key).category.value,
                    "quantity": quantity,
                    "unit": material_info(key).unit.value,
                    "cost": output.breakdown.per_material_cost.get(key, 0.0),
                }
                for key, quantity in output.ledger.items()
            ],
            "total_cost": output.breakdown.total_cost,
            "cost_per_area": output.cost_per_area,
        }

    def export(self, output: EstimateOutput) -> str:
        """Export an estimate as a JSON string."""
        return json.dumps(self.to_dict(output), indent=2, ensure_ascii=False)

    def export_project(self, output: ProjectOutput) -> str:
        """Export a project summary as a JSON string."""
        summary = output.summary
        data = {
            "currency": output.currency,
            "room_count": summary.room_count,
            "estimated_rooms": summary.estimated_rooms,
            "progress": summary.progress,
            "status": summary.status.value,
            "total_cost": summary.total_cost,
            "materials": {key.value: qty for key, qty in summary.materials.items()},
            "top_materials": [
                {"key": key.value, "quantity": qty} for key, qty in summary.top_materials()
            ],
            "errors": output.errors,
        }
        return json.dumps(data, indent=2, ensure_ascii=False)


def _point(x: float, y: float) -> str:
    return f"({x:.2f},{y:.2f})"
