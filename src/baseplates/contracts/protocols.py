"""Service protocols for dependency injection.

This module defines the contracts between the generation pipeline and the
collaborators it calls into. The geometry kernel is the boundary to the
external solid-modeling engine: the pipeline only ever composes opaque
solids through it.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from baseplates.domain.csg import Solid
    from baseplates.domain.services.affine import AffineTransform
    from baseplates.domain.value_objects import (
        GridSpec,
        LipStyle,
        PlateDimensions,
        Polygon2D,
        Vec2,
        Vec3,
    )


@runtime_checkable
class GeometryKernel(Protocol):
    """Primitive shapes, extrusions and booleans.

    Implementations may build a description tree (``CsgKernel``) or call a
    real modeling engine. 2D primitives are anchored the way OpenSCAD
    anchors them: squares and cubes on the origin corner, circles on their
    centre.

    Example:
        ```python
        kernel = CsgKernel()
        ring = kernel.difference(
            kernel.linear_extrude(2.0, kernel.circle(5.0)),
            kernel.linear_extrude(2.0, kernel.circle(4.0)),
        )
        ```
    """

    def polygon(self, polygon: Polygon2D) -> Solid: ...

    def square(self, size: Vec2) -> Solid: ...

    def circle(self, radius: float) -> Solid: ...

    def cube(self, size: Vec3) -> Solid: ...

    def linear_extrude(self, height: float, shape: Solid) -> Solid: ...

    def rotate_extrude(self, angle: float, shape: Solid) -> Solid: ...

    def multmatrix(self, transform: AffineTransform, solid: Solid) -> Solid: ...

    def union(self, *solids: Solid) -> Solid: ...

    def difference(self, base: Solid, *tools: Solid) -> Solid: ...

    def render(self, solid: Solid) -> Solid: ...


class GridLayoutProtocol(Protocol):
    """Protocol for plate generation.

    Implementations derive plate dimensions from a grid request and build
    the finished plate solid.
    """

    def compute_dimensions(self, grid: GridSpec, height: float) -> PlateDimensions:
        """Derive plate dimensions.

        Args:
            grid: The user's grid request.
            height: Lip height, carried through as the Z size.

        Returns:
            The derived PlateDimensions.
        """
        ...

    def generate(self, lip: LipStyle, grid: GridSpec) -> Solid:
        """Build the plate solid for a lip style and grid request."""
        ...

    def build(self, lip: LipStyle, dimensions: PlateDimensions) -> Solid:
        """Build the plate solid for dimensions computed earlier."""
        ...
