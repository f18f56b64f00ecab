"""Plate dimension derivation and grid tiling.

Turns a GridSpec into PlateDimensions, tiles unit lips across the grid,
adds padding material up to the requested footprint and rounds the four
outer corners of the finished plate.
"""

from __future__ import annotations

import logging
import math
from typing import TYPE_CHECKING

from ..csg import CsgKernel, Solid
from ..exceptions import ConfigurationError
from ..value_objects import (
    GridSpec,
    LipStyle,
    PlateDimensions,
    PlateStandard,
    Vec2,
    Vec3,
)
from .affine import angle_of, rotate_z, translate
from .corner_trim import CornerTrimBuilder
from .lip_profile import UnitLipBuilder

if TYPE_CHECKING:
    from baseplates.contracts.protocols import GeometryKernel

logger = logging.getLogger(__name__)


def corner_sign(value: float) -> int:
    """Sign used to orient corner cuts; zero counts as positive."""
    return -1 if value < 0 else 1


class GridLayoutService:
    """Generates complete plates from a grid request.

    Example:
        >>> service = GridLayoutService()
        >>> grid = GridSpec(units_x=2, units_y=1)
        >>> plate = service.generate(LipStyle.for_kind(PlateKind.BASEPLATE), grid)
    """

    def __init__(
        self,
        standard: PlateStandard | None = None,
        kernel: "GeometryKernel | None" = None,
        lip_builder: UnitLipBuilder | None = None,
        corner_builder: CornerTrimBuilder | None = None,
    ) -> None:
        self.standard = standard or PlateStandard.gridfinity()
        self.kernel = kernel or CsgKernel()
        self.corner_builder = corner_builder or CornerTrimBuilder(
            self.kernel, tolerance=self.standard.tolerance
        )
        self.lip_builder = lip_builder or UnitLipBuilder(
            self.kernel, corner_builder=self.corner_builder
        )

    def compute_dimensions(self, grid: GridSpec, height: float) -> PlateDimensions:
        """Derive the plate dimensions for a grid request.

        Args:
            grid: The grid request.
            height: Lip height, carried through as the Z size.

        Returns:
            The derived PlateDimensions.

        Raises:
            ConfigurationError: If an axis has no target size, or its
                minimum size is smaller than one grid unit.
        """
        grid.validate()
        unit = self.standard.grid_unit_size

        actual: list[int] = []
        for axis, units, min_size in (
            ("x", grid.units_x, grid.min_size_x_mm),
            ("y", grid.units_y, grid.min_size_y_mm),
        ):
            count = units if units != 0 else math.floor(min_size / unit)
            if count < 1:
                raise ConfigurationError(
                    f"Axis {axis}: minimum size {min_size:g} mm is smaller than "
                    f"one grid unit ({unit:g} mm)",
                    field=f"min_size_{axis}_mm",
                )
            actual.append(count)

        grid_size = Vec3(actual[0] * unit, actual[1] * unit, height)
        final_size = Vec3(
            max(grid_size.x, grid.min_size_x_mm),
            max(grid_size.y, grid.min_size_y_mm),
            height,
        )
        padding = final_size - grid_size
        fit_percent = Vec2((grid.fit_x + 1) / 2, (grid.fit_y + 1) / 2)

        start = Vec3(
            -grid_size.x / 2 - padding.x * (1 - fit_percent.x),
            -grid_size.y / 2 - padding.y * (1 - fit_percent.y),
            0.0,
        )
        corners = (
            start,
            start + Vec3(final_size.x, 0.0),
            start + Vec3(final_size.x, final_size.y),
            start + Vec3(0.0, final_size.y),
        )

        dimensions = PlateDimensions(
            actual_units=(actual[0], actual[1]),
            grid_size_mm=grid_size,
            final_size_mm=final_size,
            padding_mm=padding,
            fit_percent=fit_percent,
            padding_start_point=start,
            corner_points=corners,
        )
        sides = dimensions.padding_per_side()
        logger.info(
            f"Plate {actual[0]} x {actual[1]} units, final size "
            f"{final_size.x:.2f} x {final_size.y:.2f} x {final_size.z:.2f} mm, padding "
            f"x -{sides['x'][0]:.2f}/+{sides['x'][1]:.2f} y -{sides['y'][0]:.2f}/+{sides['y'][1]:.2f}"
        )
        return dimensions

    def generate(self, lip: LipStyle, grid: GridSpec) -> Solid:
        """Build the finished plate.

        Returns:
            ``difference(union(tiled units, padding block), corner cuts)``.

        Raises:
            ConfigurationError: If the grid request is invalid. Nothing is
                built in that case.
        """
        dimensions = self.compute_dimensions(grid, lip.height)
        return self.build(lip, dimensions)

    def build(self, lip: LipStyle, dimensions: PlateDimensions) -> Solid:
        """Build the plate solid for already computed dimensions."""
        body = [self._tile_units(lip, dimensions)]
        if dimensions.needs_padding:
            body.append(self._padding_block(dimensions))
        plate = self.kernel.union(*body)
        return self.kernel.difference(plate, *self._corner_cuts(lip, dimensions))

    def _tile_units(self, lip: LipStyle, dimensions: PlateDimensions) -> Solid:
        unit = self.standard.grid_unit_size
        units_x, units_y = dimensions.actual_units
        unit_lip = self.lip_builder.build_unit_lip(
            lip.profile,
            lip.wall_thickness,
            lip.height,
            self.standard.outside_radius,
            unit,
        )
        tiles = [
            self.kernel.multmatrix(
                translate(
                    Vec3((i - (units_x - 1) / 2) * unit, (j - (units_y - 1) / 2) * unit, 0.0)
                ),
                unit_lip,
            )
            for j in range(units_y)
            for i in range(units_x)
        ]
        logger.debug(f"Tiled {len(tiles)} unit lips")
        return self.kernel.union(*tiles)

    def _padding_block(self, dimensions: PlateDimensions) -> Solid:
        """Final footprint minus the footprint already covered by units.

        The cut box overshoots by the tolerance in Z, and in XY on every side
        that has no padding, so no zero-thickness skin is left behind.
        """
        eps = self.standard.tolerance
        grid = dimensions.grid_size_mm
        sides = dimensions.padding_per_side()

        low = Vec3(
            -grid.x / 2 - (eps if sides["x"][0] == 0 else 0.0),
            -grid.y / 2 - (eps if sides["y"][0] == 0 else 0.0),
            -eps,
        )
        high = Vec3(
            grid.x / 2 + (eps if sides["x"][1] == 0 else 0.0),
            grid.y / 2 + (eps if sides["y"][1] == 0 else 0.0),
            grid.z + eps,
        )
        block = self.kernel.multmatrix(
            translate(dimensions.padding_start_point),
            self.kernel.cube(dimensions.final_size_mm),
        )
        covered = self.kernel.multmatrix(translate(low), self.kernel.cube(high - low))
        return self.kernel.difference(block, covered)

    def _corner_cuts(self, lip: LipStyle, dimensions: PlateDimensions) -> list[Solid]:
        radius = self.standard.outside_radius
        tool = self.corner_builder.build_corner(lip.height, radius, subtract=True)
        cuts = []
        for corner in dimensions.corner_points:
            sign_x = corner_sign(corner.x)
            sign_y = corner_sign(corner.y)
            # The tool keeps material at (+r, +r); turn that towards the corner.
            facing = angle_of(Vec2(sign_x, sign_y)) - 45.0
            position = corner + Vec3(-sign_x * radius, -sign_y * radius, 0.0)
            cuts.append(self.kernel.multmatrix(translate(position) @ rotate_z(facing), tool))
        return cuts
