"""Formatter protocols for output generation.

Formatters convert estimate results into text or JSON for display.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from renobudget.application.dtos import EstimateOutput, ProjectOutput
    from renobudget.domain.entities import Wall
    from renobudget.domain.services.project_summary import ProjectSummary


class FormatterProtocol(Protocol):
    """Base protocol for all formatters."""

    def format(self, data: Any) -> str:
        """Format data as a string."""
        ...


class MaterialReportFormatterProtocol(Protocol):
    """Protocol for bill-of-materials reports."""

    def format(self, output: EstimateOutput) -> str:
        """Format the ledger and costs of an estimate."""
        ...


class WallListFormatterProtocol(Protocol):
    """Protocol for wall listings."""

    def format(self, walls: list[Wall]) -> str:
        """Format resolved walls with ids, names and lengths."""
        ...


class ProjectSummaryFormatterProtocol(Protocol):
    """Protocol for project summary reports."""

    def format(self, summary: ProjectSummary, currency: str = "PLN") -> str:
        """Format a project summary."""
        ...


class JsonExporterProtocol(Protocol):
    """Protocol for JSON export of an estimate."""

    def export(self, output: EstimateOutput) -> str:
        """Serialize an estimate to a JSON string."""
        ...

    def export_project(self, output: ProjectOutput) -> str:
        """Serialize a project summary to a JSON string."""
        ...
