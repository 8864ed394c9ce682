"""Infrastructure layer - formatters and external price sources."""

from .formatters import (
    JsonExporter,
    MaterialReportFormatter,
    ProjectSummaryFormatter,
    WallListFormatter,
)
from .pricing_client import PostgrestPriceSource, PriceSourceError

__all__ = [
    "JsonExporter",
    "MaterialReportFormatter",
    "PostgrestPriceSource",
    "PriceSourceError",
    "ProjectSummaryFormatter",
    "WallListFormatter",
]
