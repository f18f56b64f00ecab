"""Corner pieces used to square off unit lips and to round the plate outline.

The same shape serves both roles: a square of side ``r`` with a quarter
circle of radius ``r`` removed around the origin corner, so material remains
only at the far corner ``(r, r)``. Added to a lip it fills the gap between a
rounded sweep corner and a sharp unit corner; subtracted from the plate it
rounds the outline.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from ..csg import CsgKernel, Solid
from ..exceptions import ConfigurationError, GeometryError
from ..value_objects import TOLERANCE, Vec2, Vec3
from .affine import translate

if TYPE_CHECKING:
    from baseplates.contracts.protocols import GeometryKernel

logger = logging.getLogger(__name__)


class CornerTrimBuilder:
    """Builds additive and subtractive corner pieces."""

    def __init__(
        self,
        kernel: "GeometryKernel | None" = None,
        tolerance: float = TOLERANCE,
    ) -> None:
        """Initialize the builder.

        Args:
            kernel: Geometry kernel used to build the solids.
            tolerance: Overshoot applied when the piece is used as a cutter.
        """
        self.kernel = kernel or CsgKernel()
        self.tolerance = tolerance

    def build_corner(self, height: float, outside_radius: float, subtract: bool) -> Solid:
        """Build one corner piece.

        When ``subtract`` is true the square grows by the tolerance, the
        circle shrinks by it and the extrusion overshoots by the tolerance at
        both ends, so the cut leaves no sliver and fully penetrates in Z.

        Args:
            height: Extrusion height.
            outside_radius: Square side and quarter-circle radius.
            subtract: True for a cutting tool, False for a fill piece.

        Raises:
            ConfigurationError: If ``subtract`` is not a bool.
            GeometryError: If height or radius is not positive, or the
                tolerance swallows the radius.
        """
        if not isinstance(subtract, bool):
            raise ConfigurationError(
                f"subtract must be a boolean, got {type(subtract).__name__}",
                field="subtract",
            )
        if height <= 0:
            raise GeometryError("Corner height must be positive")
        if outside_radius <= 0:
            raise GeometryError("Corner radius must be positive")

        eps = self.tolerance if subtract else 0.0
        if outside_radius - eps <= 0:
            raise GeometryError("Tolerance is larger than the corner radius")

        side = outside_radius + eps
        outline = self.kernel.difference(
            self.kernel.square(Vec2(side, side)),
            self.kernel.circle(outside_radius - eps),
        )
        piece = self.kernel.linear_extrude(height + 2 * eps, outline)
        if subtract:
            piece = self.kernel.multmatrix(translate(Vec3(0.0, 0.0, -eps)), piece)
        return piece
