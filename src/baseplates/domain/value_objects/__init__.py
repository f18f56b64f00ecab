"""Value objects for the baseplate domain.

Immutable data types used throughout generation, re-exported from
sub-modules for convenience.
"""

from __future__ import annotations

from ._grid import GridSpec, PlateDimensions
from ._standard import (
    BASEPLATE_HEIGHT,
    BASEPLATE_OUTSIDE_RADIUS,
    BASEPLATE_WALL_THICKNESS,
    GRID_UNIT_SIZE,
    MATING_WIDTH,
    SPACER_HEIGHT,
    TOLERANCE,
    LipStyle,
    PlateKind,
    PlateStandard,
)
from ._vectors import Polygon2D, Vec2, Vec3

__all__ = [
    "BASEPLATE_HEIGHT",
    "BASEPLATE_OUTSIDE_RADIUS",
    "BASEPLATE_WALL_THICKNESS",
    "GRID_UNIT_SIZE",
    "GridSpec",
    "LipStyle",
    "MATING_WIDTH",
    "PlateDimensions",
    "PlateKind",
    "PlateStandard",
    "Polygon2D",
    "SPACER_HEIGHT",
    "TOLERANCE",
    "Vec2",
    "Vec3",
]
