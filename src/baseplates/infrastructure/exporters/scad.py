"""OpenSCAD source exporter.

Writes the CSG tree as an OpenSCAD program, so the plate can be previewed,
rendered and meshed by OpenSCAD itself.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING, ClassVar

from baseplates.domain import csg
from baseplates.infrastructure.exporters.base import ExporterRegistry, require_solid
from baseplates.infrastructure.formatters import DimensionReportFormatter

if TYPE_CHECKING:
    from baseplates.application.dtos import BaseplateOutput


logger = logging.getLogger(__name__)


def format_number(value: float) -> str:
    """Compact decimal form; negative zero prints as 0."""
    rounded = round(float(value), 6)
    if rounded == 0:
        return "0"
    return format(rounded, ".10g")


def _vector(values) -> str:
    return "[" + ", ".join(format_number(v) for v in values) + "]"


def _statement(node: csg.Solid) -> str:
    """OpenSCAD call for one node, without children."""
    if isinstance(node, csg.Polygon):
        points = ", ".join(_vector(p) for p in node.polygon.as_tuples())
        return f"polygon(points=[{points}])"
    if isinstance(node, csg.Square):
        return f"square({_vector(node.size.as_tuple())})"
    if isinstance(node, csg.Circle):
        return f"circle(r={format_number(node.radius)})"
    if isinstance(node, csg.Cube):
        return f"cube({_vector(node.size.as_tuple())})"
    if isinstance(node, csg.LinearExtrude):
        return f"linear_extrude(height={format_number(node.height)})"
    if isinstance(node, csg.RotateExtrude):
        return f"rotate_extrude(angle={format_number(node.angle)})"
    if isinstance(node, csg.MultMatrix):
        rows = ", ".join(_vector(row) for row in node.transform.as_rows())
        return f"multmatrix([{rows}])"
    if isinstance(node, (csg.Union, csg.Difference, csg.Render)):
        return f"{node.kind}()"
    raise TypeError(f"No OpenSCAD form for node '{node.kind}'")


@ExporterRegistry.register("scad")
class ScadExporter:
    """Writes a plate as OpenSCAD source.

    Attributes:
        format_name: "scad"
        file_extension: "scad"
    """

    format_name: ClassVar[str] = "scad"
    file_extension: ClassVar[str] = "scad"

    def __init__(self, segments: int = 64, indent: str = "  ") -> None:
        """Initialize the exporter.

        Args:
            segments: Circle resolution, written as ``$fn``.
            indent: Indentation for nested blocks.
        """
        if segments < 3:
            raise ValueError("segments must be at least 3")
        self.segments = segments
        self.indent = indent

    def export(self, output: BaseplateOutput, path: Path) -> None:
        content = self.export_string(output)
        path.write_text(content, encoding="utf-8")
        logger.info(f"Wrote OpenSCAD source to {path}")

    def export_string(self, output: BaseplateOutput) -> str:
        """Render the plate as an OpenSCAD program.

        Raises:
            ValueError: If the output is not a valid plate.
        """
        require_solid(output)
        report = DimensionReportFormatter().format(output.dimensions, output.lip)
        lines = [f"// {line}" if line else "//" for line in report.splitlines()]
        lines.append("")
        lines.append(f"$fn = {self.segments};")
        lines.append("")
        lines.extend(self.render_tree(output.solid))
        return "\n".join(lines) + "\n"

    def render_tree(self, solid: csg.Solid, depth: int = 0) -> list[str]:
        """Render a node and its descendants as indented source lines."""
        prefix = self.indent * depth
        statement = _statement(solid)
        children = solid.children
        if not children:
            return [f"{prefix}{statement};"]
        lines = [f"{prefix}{statement} {{"]
        for child in children:
            lines.extend(self.render_tree(child, depth + 1))
        lines.append(f"{prefix}}}")
        return lines
