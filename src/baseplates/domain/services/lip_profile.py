"""Lip solid for a single grid unit."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from ..csg import CsgKernel, Solid
from ..exceptions import GeometryError
from ..value_objects import GRID_UNIT_SIZE, Polygon2D, Vec2, Vec3
from .affine import rotate_z, translate
from .corner_trim import CornerTrimBuilder
from .path_sweep import PathSweeper

if TYPE_CHECKING:
    from baseplates.contracts.protocols import GeometryKernel

logger = logging.getLogger(__name__)


class UnitLipBuilder:
    """Builds the lip of one grid unit.

    The straight walls come from sweeping the lip profile around a rounded
    square; four fill pieces then square off the rounded corners so the unit
    meets its neighbours with sharp right angles.
    """

    def __init__(
        self,
        kernel: "GeometryKernel | None" = None,
        sweeper: PathSweeper | None = None,
        corner_builder: CornerTrimBuilder | None = None,
    ) -> None:
        self.kernel = kernel or CsgKernel()
        self.sweeper = sweeper or PathSweeper(self.kernel)
        self.corner_builder = corner_builder or CornerTrimBuilder(self.kernel)

    def build_unit_lip(
        self,
        profile: Polygon2D,
        wall_thickness: float,
        height: float,
        outside_radius: float,
        unit_size: float = GRID_UNIT_SIZE,
    ) -> Solid:
        """Build one unit's lip, centred on the origin.

        Args:
            profile: Lip cross-section, X outward from the inner face.
            wall_thickness: Width of the lip wall.
            height: Lip height, used for the corner fills.
            outside_radius: Corner radius of the unit outline.
            unit_size: Side of the unit.

        Returns:
            The rendered union of the swept walls and the corner fills.

        Raises:
            GeometryError: If the radius leaves no straight wall or the wall
                is thicker than the radius.
        """
        if wall_thickness > outside_radius:
            raise GeometryError("Wall thickness cannot exceed the outside radius")

        inner_side = unit_size - 2 * outside_radius
        walls = self.sweeper.sweep(
            profile.translated(Vec2(outside_radius - wall_thickness, 0.0)),
            inner_side,
            inner_side,
        )

        corner_offset = unit_size / 2 - outside_radius
        fill = self.corner_builder.build_corner(height, outside_radius, subtract=False)
        fills = [
            self.kernel.multmatrix(
                rotate_z(90.0 * quarter) @ translate(Vec3(corner_offset, corner_offset, 0.0)),
                fill,
            )
            for quarter in range(4)
        ]

        logger.debug(
            f"Built unit lip: path side {inner_side:.2f} mm, corner offset {corner_offset:.2f} mm"
        )
        return self.kernel.render(self.kernel.union(walls, *fills))
