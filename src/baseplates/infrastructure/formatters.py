"""Plain-text and dictionary renderings of plate dimensions."""

from __future__ import annotations

from typing import Any

from baseplates.domain import LipStyle, PlateDimensions, PlateKind


def dimensions_to_dict(dimensions: PlateDimensions) -> dict[str, Any]:
    """Convert PlateDimensions to JSON-compatible primitives."""
    sides = dimensions.padding_per_side()
    return {
        "units": list(dimensions.actual_units),
        "grid_size_mm": list(dimensions.grid_size_mm.as_tuple()),
        "final_size_mm": list(dimensions.final_size_mm.as_tuple()),
        "padding_mm": list(dimensions.padding_mm.as_tuple()),
        "padding_per_side_mm": {axis: list(values) for axis, values in sides.items()},
        "fit_percent": list(dimensions.fit_percent.as_tuple()),
        "padding_start_point": list(dimensions.padding_start_point.as_tuple()),
        "corner_points": [list(corner.as_tuple()) for corner in dimensions.corner_points],
    }


class DimensionReportFormatter:
    """Formats plate dimensions for display."""

    def format(self, dimensions: PlateDimensions, lip: LipStyle | None = None) -> str:
        """Format a dimension report.

        Args:
            dimensions: The computed dimensions.
            lip: Lip style; adds the plate type and lip height when given.
        """
        units_x, units_y = dimensions.actual_units
        grid = dimensions.grid_size_mm
        final = dimensions.final_size_mm
        sides = dimensions.padding_per_side()

        lines = ["PLATE DIMENSIONS", "=" * 50]
        if lip is not None:
            label = "Spacer" if lip.kind is PlateKind.SPACER else "Baseplate"
            lines.append(f"{'Type':<20} {label}")
            lines.append(f"{'Lip height':<20} {lip.height:.2f} mm")
        lines.extend(
            [
                f"{'Units':<20} {units_x} x {units_y} ({dimensions.unit_count} total)",
                f"{'Grid size':<20} {grid.x:.2f} x {grid.y:.2f} mm",
                f"{'Final size':<20} {final.x:.2f} x {final.y:.2f} mm",
                "-" * 50,
                f"{'Padding X':<20} -{sides['x'][0]:.2f} / +{sides['x'][1]:.2f} mm",
                f"{'Padding Y':<20} -{sides['y'][0]:.2f} / +{sides['y'][1]:.2f} mm",
            ]
        )
        return "\n".join(lines)
