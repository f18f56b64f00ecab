"""Sweep a 2D cross-section around a closed rectangular path.

Each straight edge is a linear extrusion of the cross-section and every
vertex gets a revolved (quarter torus) join into the next edge. The corner
radius is not a parameter: it is the cross-section's X offset from the path.

Cross-section convention: local X points along the outward path normal,
local Y points up, and the extrusion runs along the edge direction.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from ..csg import CsgKernel, Solid
from ..exceptions import GeometryError
from ..value_objects import Polygon2D, Vec2, Vec3
from .affine import (
    AffineTransform,
    angle_of,
    magnitude,
    rotate,
    rotate_x,
    rotate_y,
    translate,
)

if TYPE_CHECKING:
    from baseplates.contracts.protocols import GeometryKernel

logger = logging.getLogger(__name__)

# Maps the extrusion frame (profile in XY, extrusion along Z) onto the XY
# plane: local X -> world Y, local Y -> world Z, local Z -> world X.
LAY_FLAT = rotate(Vec3(90.0, 0.0, 90.0))

# Turns a revolve (axis Z, profile Y along Z) into the extrusion frame so its
# axis is the frame's local Y (world up).
REVOLVE_TO_FRAME = rotate_x(-90.0)


def rectangle_path(width: float, length: float) -> tuple[Vec3, ...]:
    """Closed clockwise rectangle centred on the origin.

    Starts at the (-X, +Y) corner and returns to it, so the result has five
    points for four edges.

    Raises:
        GeometryError: If width or length is not positive.
    """
    if width <= 0 or length <= 0:
        raise GeometryError(
            f"Sweep path needs positive width and length, got {width} x {length}"
        )
    half_w = width / 2
    half_l = length / 2
    return (
        Vec3(-half_w, half_l),
        Vec3(half_w, half_l),
        Vec3(half_w, -half_l),
        Vec3(-half_w, -half_l),
        Vec3(-half_w, half_l),
    )


def _swap(vector: Vec3) -> Vec3:
    """Express a world XY offset in the pre-LAY_FLAT frame."""
    return Vec3(vector.y, 0.0, vector.x)


def _turn_angle(heading: float, next_heading: float) -> float:
    """Clockwise turn between two headings, in (0, 360)."""
    turn = (heading - next_heading) % 360.0
    if turn == 0:
        raise GeometryError("Consecutive path edges must not be collinear")
    return turn


@dataclass(frozen=True)
class SweepFrame:
    """Coordinate frame of one path edge.

    Attributes:
        index: Edge index along the path.
        start: Start point of the edge.
        edge: Edge vector (end - start).
        heading: Edge direction in degrees.
        wall_transform: Maps the extrusion frame onto the edge.
        corner_transform: Maps a revolve onto the vertex at the end of the
            edge, aligned with the next edge's frame.
        turn: Revolve angle of that corner in degrees.
    """

    index: int
    start: Vec3
    edge: Vec3
    heading: float
    wall_transform: AffineTransform
    corner_transform: AffineTransform
    turn: float

    @property
    def length(self) -> float:
        return magnitude(self.edge)

    def wall_point(self, profile_point: Vec2, distance: float) -> Vec3:
        """Where a cross-section point lands after extruding ``distance``."""
        return self.wall_transform.apply(Vec3(profile_point.x, profile_point.y, distance))

    def corner_point(self, profile_point: Vec2, angle: float) -> Vec3:
        """Where a cross-section point lands after revolving ``angle`` degrees."""
        revolved = rotate(Vec3(0.0, 0.0, angle)).apply(
            Vec3(profile_point.x, 0.0, profile_point.y)
        )
        return self.corner_transform.apply(revolved)


def sweep_frames(path: tuple[Vec3, ...]) -> list[SweepFrame]:
    """Build the chain of edge frames for a closed path.

    Translations are folded left to right: each edge's frame origin is the
    previous frame's origin moved along the previous edge, so the frames form
    one chain rather than independent placements.
    """
    if len(path) < 4 or path[0] != path[-1]:
        raise GeometryError("Sweep path must be closed and have at least 3 edges")

    edges = [path[i + 1] - path[i] for i in range(len(path) - 1)]
    for edge in edges:
        if magnitude(edge) == 0:
            raise GeometryError("Sweep path has a zero-length edge")

    translations = [translate(_swap(path[0]))]
    for edge in edges[:-1]:
        translations.append(translations[-1] @ translate(_swap(edge)))

    headings = [angle_of(edge.xy) for edge in edges]
    walls = [
        LAY_FLAT @ translations[i] @ rotate_y(headings[i]) for i in range(len(edges))
    ]

    frames: list[SweepFrame] = []
    for i, edge in enumerate(edges):
        following = (i + 1) % len(edges)
        frames.append(
            SweepFrame(
                index=i,
                start=path[i],
                edge=edge,
                heading=headings[i],
                wall_transform=walls[i],
                corner_transform=walls[following] @ REVOLVE_TO_FRAME,
                turn=_turn_angle(headings[i], headings[following]),
            )
        )
    return frames


class PathSweeper:
    """Sweeps cross-sections around rounded rectangular paths.

    Example:
        >>> sweeper = PathSweeper()
        >>> ring = sweeper.sweep(profile, width=34.0, length=34.0)
    """

    def __init__(self, kernel: "GeometryKernel | None" = None) -> None:
        self.kernel = kernel or CsgKernel()

    def sweep(self, cross_section: Polygon2D, width: float, length: float) -> Solid:
        """Sweep a cross-section around a width x length rectangle.

        Args:
            cross_section: Profile with X >= 0 (X is the distance outward
                from the path).
            width: Path size along X.
            length: Path size along Y.

        Returns:
            Union of the four straight walls and four revolved corners.

        Raises:
            GeometryError: If the path size is not positive or the
                cross-section is degenerate or crosses the path.
        """
        path = rectangle_path(width, length)
        return self.sweep_path(cross_section, path)

    def sweep_path(self, cross_section: Polygon2D, path: tuple[Vec3, ...]) -> Solid:
        """Sweep along an arbitrary closed path of clockwise turns."""
        if len(cross_section) < 3:
            raise GeometryError("Cross-section needs at least 3 points")
        low, _ = cross_section.bounds
        if low.x < 0:
            raise GeometryError("Cross-section must lie on the outer side of the path (X >= 0)")

        frames = sweep_frames(path)
        shape = self.kernel.polygon(cross_section)
        pieces: list[Solid] = []
        for frame in frames:
            wall = self.kernel.linear_extrude(frame.length, shape)
            pieces.append(self.kernel.multmatrix(frame.wall_transform, wall))
            corner = self.kernel.rotate_extrude(frame.turn, shape)
            pieces.append(self.kernel.multmatrix(frame.corner_transform, corner))

        logger.debug(f"Swept cross-section along {len(frames)} edges")
        return self.kernel.union(*pieces)
