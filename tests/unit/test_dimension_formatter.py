"""Unit tests for the dimension report."""

from baseplates.domain import GridLayoutService, GridSpec, LipStyle, PlateKind
from baseplates.infrastructure.formatters import DimensionReportFormatter, dimensions_to_dict


def compute(grid: GridSpec, kind: PlateKind = PlateKind.BASEPLATE):
    lip = LipStyle.for_kind(kind)
    return GridLayoutService().compute_dimensions(grid, lip.height), lip


class TestDimensionReportFormatter:
    """Tests for DimensionReportFormatter.format."""

    def test_report_lines(self) -> None:
        dims, lip = compute(GridSpec(min_size_x_mm=100.0, min_size_y_mm=50.0, fit_x=-1.0))
        report = DimensionReportFormatter().format(dims, lip)
        assert report.splitlines()[0] == "PLATE DIMENSIONS"
        assert "Baseplate" in report
        assert "2 x 1 (2 total)" in report
        assert "84.00 x 42.00 mm" in report
        assert "100.00 x 50.00 mm" in report
        assert "-16.00 / +0.00 mm" in report
        assert "-4.00 / +4.00 mm" in report

    def test_spacer_label(self) -> None:
        dims, lip = compute(GridSpec(units_x=1, units_y=1), PlateKind.SPACER)
        report = DimensionReportFormatter().format(dims, lip)
        assert "Spacer" in report
        assert "0.20 mm" in report

    def test_without_lip(self) -> None:
        dims, _ = compute(GridSpec(units_x=1, units_y=1))
        report = DimensionReportFormatter().format(dims)
        assert "Type" not in report


class TestDimensionsToDict:
    def test_plain_values(self) -> None:
        dims, _ = compute(GridSpec(units_x=2, units_y=1))
        data = dimensions_to_dict(dims)
        assert data["units"] == [2, 1]
        assert data["final_size_mm"] == [84.0, 42.0, 5.0]
        assert data["corner_points"][0] == [-42.0, -21.0, 0.0]
        assert data["fit_percent"] == [0.5, 0.5]
