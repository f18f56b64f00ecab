"""Infrastructure layer - formatters and file exporters."""

from .exporters import CsgJsonExporter, ExportManager, ExporterRegistry, ScadExporter
from .formatters import DimensionReportFormatter, dimensions_to_dict

__all__ = [
    "CsgJsonExporter",
    "DimensionReportFormatter",
    "ExportManager",
    "ExporterRegistry",
    "ScadExporter",
    "dimensions_to_dict",
]
