"""Grid request and derived plate dimension value objects."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from ..exceptions import ConfigurationError
from ._vectors import Vec2, Vec3


def _pair(value: Sequence[float], name: str) -> tuple[float, float]:
    """Unpack a two-component vector parameter."""
    if isinstance(value, (str, bytes)):
        raise ConfigurationError(f"{name} must be a 2-element vector", field=name)
    try:
        items = tuple(value)
    except TypeError:
        raise ConfigurationError(f"{name} must be a 2-element vector", field=name)
    if len(items) != 2:
        raise ConfigurationError(
            f"{name} must be a 2-element vector, got {len(items)} elements",
            field=name,
        )
    return items[0], items[1]


@dataclass(frozen=True)
class GridSpec:
    """User request for a plate, read-only for the whole generation.

    Attributes:
        units_x: Grid units along X; 0 derives the count from min_size_x_mm.
        units_y: Grid units along Y; 0 derives the count from min_size_y_mm.
        min_size_x_mm: Minimum footprint along X; 0 means no constraint.
        min_size_y_mm: Minimum footprint along Y; 0 means no constraint.
        fit_x: Padding alignment along X, -1 (negative side) to 1 (positive side).
        fit_y: Padding alignment along Y.
    """

    units_x: int = 0
    units_y: int = 0
    min_size_x_mm: float = 0.0
    min_size_y_mm: float = 0.0
    fit_x: float = 0.0
    fit_y: float = 0.0

    def __post_init__(self) -> None:
        for name in ("units_x", "units_y"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise ConfigurationError(f"{name} must be an integer", field=name)
            if value < 0:
                raise ConfigurationError(f"{name} cannot be negative", field=name)
        for name in ("min_size_x_mm", "min_size_y_mm"):
            if getattr(self, name) < 0:
                raise ConfigurationError(f"{name} cannot be negative", field=name)
        for name in ("fit_x", "fit_y"):
            if not -1.0 <= getattr(self, name) <= 1.0:
                raise ConfigurationError(f"{name} must be between -1 and 1", field=name)

    @classmethod
    def from_vectors(
        cls,
        units: Sequence[int] = (0, 0),
        min_size: Sequence[float] = (0.0, 0.0),
        fit: Sequence[float] = (0.0, 0.0),
    ) -> "GridSpec":
        """Build a GridSpec from (x, y) pairs.

        Raises:
            ConfigurationError: If any parameter is not a 2-element vector.
        """
        units_x, units_y = _pair(units, "units")
        min_x, min_y = _pair(min_size, "min_size")
        fit_x, fit_y = _pair(fit, "fit")
        return cls(
            units_x=units_x,
            units_y=units_y,
            min_size_x_mm=float(min_x),
            min_size_y_mm=float(min_y),
            fit_x=float(fit_x),
            fit_y=float(fit_y),
        )

    @property
    def units(self) -> tuple[int, int]:
        return (self.units_x, self.units_y)

    @property
    def min_size(self) -> Vec2:
        return Vec2(self.min_size_x_mm, self.min_size_y_mm)

    @property
    def fit(self) -> Vec2:
        return Vec2(self.fit_x, self.fit_y)

    def validate(self) -> None:
        """Check that every axis has a target size.

        Raises:
            ConfigurationError: If an axis has neither a unit count nor a
                minimum size.
        """
        for axis, units, min_size in (
            ("x", self.units_x, self.min_size_x_mm),
            ("y", self.units_y, self.min_size_y_mm),
        ):
            if units == 0 and min_size == 0:
                raise ConfigurationError(
                    f"Axis {axis}: set a unit count or a minimum size",
                    field=f"units_{axis}",
                )


@dataclass(frozen=True)
class PlateDimensions:
    """Dimensions derived from a GridSpec for one generation call.

    Attributes:
        actual_units: Grid unit counts per axis, at least 1 each.
        grid_size_mm: Footprint covered by whole units (Z is the lip height).
        final_size_mm: Footprint after padding, never smaller than the grid.
        padding_mm: final_size_mm - grid_size_mm.
        fit_percent: Fraction of the padding on the positive side, per axis.
        padding_start_point: Negative corner of the final footprint.
        corner_points: The four outer corners of the final footprint, in
            order (-,-), (+,-), (+,+), (-,+).
    """

    actual_units: tuple[int, int]
    grid_size_mm: Vec3
    final_size_mm: Vec3
    padding_mm: Vec3
    fit_percent: Vec2
    padding_start_point: Vec3
    corner_points: tuple[Vec3, Vec3, Vec3, Vec3]

    @property
    def needs_padding(self) -> bool:
        return self.padding_mm != Vec3(0.0, 0.0, 0.0)

    @property
    def unit_count(self) -> int:
        return self.actual_units[0] * self.actual_units[1]

    def padding_per_side(self) -> dict[str, tuple[float, float]]:
        """Padding as (negative side, positive side) per axis."""
        return {
            "x": (
                self.padding_mm.x * (1 - self.fit_percent.x),
                self.padding_mm.x * self.fit_percent.x,
            ),
            "y": (
                self.padding_mm.y * (1 - self.fit_percent.y),
                self.padding_mm.y * self.fit_percent.y,
            ),
        }
