"""Exporter framework for generated plates.

- Exporter Protocol: interface for all exporters
- ExporterRegistry: central registry for format discovery
- ExportManager: multi-format export with ``{project}_{format}.{ext}`` names

Registered exporters:
- json: CSG tree and dimensions as a JSON document
- scad: OpenSCAD source

Usage:
    from baseplates.infrastructure.exporters import ExporterRegistry

    exporter = ExporterRegistry.get("scad")(segments=96)
    source = exporter.export_string(result)
"""

from baseplates.infrastructure.exporters.base import (
    ExportManager,
    Exporter,
    ExporterRegistry,
)
from baseplates.infrastructure.exporters.csg_json import CsgJsonExporter
from baseplates.infrastructure.exporters.scad import ScadExporter

__all__ = [
    "CsgJsonExporter",
    "ExportManager",
    "Exporter",
    "ExporterRegistry",
    "ScadExporter",
]
