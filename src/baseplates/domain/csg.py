"""Constructive solid geometry tree.

The generation pipeline never evaluates booleans itself. It composes
:class:`Solid` nodes through a geometry kernel, and an external collaborator
(OpenSCAD, a mesh kernel, ...) evaluates the finished tree. ``CsgKernel`` is
the default kernel: it only records the operations as immutable nodes.

2D nodes (``Polygon``, ``Square``, ``Circle``) are only valid as the input of
an extrusion or of a 2D boolean.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, ClassVar, Iterator

from .exceptions import GeometryError
from .value_objects import Polygon2D, Vec2, Vec3

if TYPE_CHECKING:
    from .services.affine import AffineTransform

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Solid:
    """Base class of every node in the tree."""

    kind: ClassVar[str] = "solid"
    is_2d: ClassVar[bool] = False

    @property
    def children(self) -> tuple["Solid", ...]:
        return ()


@dataclass(frozen=True)
class Polygon(Solid):
    """2D polygon; winding order is preserved."""

    kind: ClassVar[str] = "polygon"
    is_2d: ClassVar[bool] = True

    polygon: Polygon2D


@dataclass(frozen=True)
class Square(Solid):
    """2D rectangle with one corner on the origin."""

    kind: ClassVar[str] = "square"
    is_2d: ClassVar[bool] = True

    size: Vec2


@dataclass(frozen=True)
class Circle(Solid):
    """2D circle centred on the origin."""

    kind: ClassVar[str] = "circle"
    is_2d: ClassVar[bool] = True

    radius: float


@dataclass(frozen=True)
class Cube(Solid):
    """Box with one corner on the origin."""

    kind: ClassVar[str] = "cube"

    size: Vec3


@dataclass(frozen=True)
class LinearExtrude(Solid):
    """Extrude a 2D shape along +Z."""

    kind: ClassVar[str] = "linear_extrude"

    height: float
    shape: Solid

    @property
    def children(self) -> tuple[Solid, ...]:
        return (self.shape,)


@dataclass(frozen=True)
class RotateExtrude(Solid):
    """Revolve a 2D shape around Z, starting at +X and turning counter-clockwise.

    The shape's X becomes the radius and its Y becomes Z.
    """

    kind: ClassVar[str] = "rotate_extrude"

    angle: float
    shape: Solid

    @property
    def children(self) -> tuple[Solid, ...]:
        return (self.shape,)


@dataclass(frozen=True)
class MultMatrix(Solid):
    """Apply an affine transform to a child."""

    kind: ClassVar[str] = "multmatrix"

    transform: AffineTransform
    child: Solid

    @property
    def children(self) -> tuple[Solid, ...]:
        return (self.child,)


@dataclass(frozen=True)
class Union(Solid):
    kind: ClassVar[str] = "union"

    members: tuple[Solid, ...]

    @property
    def is_2d(self) -> bool:  # type: ignore[override]
        return all(member.is_2d for member in self.members)

    @property
    def children(self) -> tuple[Solid, ...]:
        return self.members


@dataclass(frozen=True)
class Difference(Solid):
    """``base`` minus every tool."""

    kind: ClassVar[str] = "difference"

    base: Solid
    tools: tuple[Solid, ...]

    @property
    def is_2d(self) -> bool:  # type: ignore[override]
        return self.base.is_2d

    @property
    def children(self) -> tuple[Solid, ...]:
        return (self.base, *self.tools)


@dataclass(frozen=True)
class Render(Solid):
    """Ask the evaluating kernel to materialise the child eagerly."""

    kind: ClassVar[str] = "render"

    child: Solid

    @property
    def children(self) -> tuple[Solid, ...]:
        return (self.child,)


def iter_nodes(solid: Solid) -> Iterator[Solid]:
    """Walk a tree depth-first, parents before children."""
    stack = [solid]
    while stack:
        node = stack.pop()
        yield node
        stack.extend(reversed(node.children))


def count_nodes(solid: Solid, kind: str) -> int:
    return sum(1 for node in iter_nodes(solid) if node.kind == kind)


def _require_3d(solid: Solid, operation: str) -> None:
    if solid.is_2d:
        raise GeometryError(f"{operation} needs a 3D solid, got {solid.kind}")


def _require_2d(solid: Solid, operation: str) -> None:
    if not solid.is_2d:
        raise GeometryError(f"{operation} needs a 2D shape, got {solid.kind}")


class CsgKernel:
    """Geometry kernel that records operations as :class:`Solid` nodes."""

    def polygon(self, polygon: Polygon2D) -> Solid:
        if len(polygon) < 3:
            raise GeometryError("A polygon needs at least 3 points")
        if polygon.signed_area == 0:
            raise GeometryError("Polygon has zero area")
        return Polygon(polygon)

    def square(self, size: Vec2) -> Solid:
        if size.x <= 0 or size.y <= 0:
            raise GeometryError("Square dimensions must be positive")
        return Square(size)

    def circle(self, radius: float) -> Solid:
        if radius <= 0:
            raise GeometryError("Circle radius must be positive")
        return Circle(radius)

    def cube(self, size: Vec3) -> Solid:
        if size.x <= 0 or size.y <= 0 or size.z <= 0:
            raise GeometryError("Cube dimensions must be positive")
        return Cube(size)

    def linear_extrude(self, height: float, shape: Solid) -> Solid:
        if height <= 0:
            raise GeometryError("Extrusion height must be positive")
        _require_2d(shape, "linear_extrude")
        return LinearExtrude(height, shape)

    def rotate_extrude(self, angle: float, shape: Solid) -> Solid:
        if not 0 < angle <= 360:
            raise GeometryError("Revolve angle must be in (0, 360]")
        _require_2d(shape, "rotate_extrude")
        return RotateExtrude(angle, shape)

    def multmatrix(self, transform: AffineTransform, solid: Solid) -> Solid:
        return MultMatrix(transform, solid)

    def union(self, *solids: Solid) -> Solid:
        if not solids:
            raise GeometryError("union needs at least one solid")
        if len(solids) == 1:
            return solids[0]
        if len({solid.is_2d for solid in solids}) > 1:
            raise GeometryError("union cannot mix 2D shapes and 3D solids")
        return Union(tuple(solids))

    def difference(self, base: Solid, *tools: Solid) -> Solid:
        if not tools:
            return base
        if base.is_2d:
            for tool in tools:
                _require_2d(tool, "2D difference")
        else:
            for tool in tools:
                _require_3d(tool, "difference")
        return Difference(base, tuple(tools))

    def render(self, solid: Solid) -> Solid:
        _require_3d(solid, "render")
        logger.debug(f"Marking {solid.kind} for eager evaluation")
        return Render(solid)
