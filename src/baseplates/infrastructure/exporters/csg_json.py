"""JSON exporter for the CSG tree.

The document holds the plate settings, its computed dimensions and the tree
as nested ``{"type": ..., "children": [...]}`` nodes. Difference nodes list
the base first, followed by the tools.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import TYPE_CHECKING, Any, ClassVar

from baseplates.domain import csg
from baseplates.infrastructure.exporters.base import ExporterRegistry, require_solid
from baseplates.infrastructure.formatters import dimensions_to_dict

if TYPE_CHECKING:
    from baseplates.application.dtos import BaseplateOutput


logger = logging.getLogger(__name__)

SCHEMA_VERSION = "1.0"


def node_to_dict(node: csg.Solid) -> dict[str, Any]:
    """Convert a CSG node and its descendants to plain data."""
    data: dict[str, Any] = {"type": node.kind}
    if isinstance(node, csg.Polygon):
        data["points"] = [list(p) for p in node.polygon.as_tuples()]
    elif isinstance(node, csg.Square):
        data["size"] = list(node.size.as_tuple())
    elif isinstance(node, csg.Circle):
        data["radius"] = node.radius
    elif isinstance(node, csg.Cube):
        data["size"] = list(node.size.as_tuple())
    elif isinstance(node, csg.LinearExtrude):
        data["height"] = node.height
    elif isinstance(node, csg.RotateExtrude):
        data["angle"] = node.angle
    elif isinstance(node, csg.MultMatrix):
        data["matrix"] = node.transform.as_rows()

    if node.children:
        data["children"] = [node_to_dict(child) for child in node.children]
    return data


@ExporterRegistry.register("json")
class CsgJsonExporter:
    """Writes a plate as a JSON CSG document.

    Attributes:
        format_name: "json"
        file_extension: "json"
    """

    format_name: ClassVar[str] = "json"
    file_extension: ClassVar[str] = "json"

    def __init__(self, indent: int | None = 2) -> None:
        self.indent = indent

    def export(self, output: BaseplateOutput, path: Path) -> None:
        path.write_text(self.export_string(output), encoding="utf-8")
        logger.info(f"Wrote CSG JSON to {path}")

    def export_string(self, output: BaseplateOutput) -> str:
        return json.dumps(self.to_document(output), indent=self.indent)

    def to_document(self, output: BaseplateOutput) -> dict[str, Any]:
        """Build the JSON document.

        Raises:
            ValueError: If the output is not a valid plate.
        """
        require_solid(output)
        document: dict[str, Any] = {"schema_version": SCHEMA_VERSION}
        if output.lip is not None:
            document["plate"] = {
                "kind": output.lip.kind.name.lower(),
                "lip_height_mm": output.lip.height,
                "wall_thickness_mm": output.lip.wall_thickness,
            }
        document["dimensions"] = dimensions_to_dict(output.dimensions)
        document["solid"] = node_to_dict(output.solid)
        return document
