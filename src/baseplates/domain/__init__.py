"""Domain layer: value objects, the CSG tree and generation services."""

from .exceptions import BaseplateError, ConfigurationError, GeometryError
from .value_objects import (
    GridSpec,
    LipStyle,
    PlateDimensions,
    PlateKind,
    PlateStandard,
    Polygon2D,
    Vec2,
    Vec3,
)
from .services import (
    AffineTransform,
    CornerTrimBuilder,
    GridLayoutService,
    PathSweeper,
    UnitLipBuilder,
)
from .csg import CsgKernel, Solid, count_nodes, iter_nodes

__all__ = [
    "AffineTransform",
    "BaseplateError",
    "ConfigurationError",
    "CornerTrimBuilder",
    "CsgKernel",
    "GeometryError",
    "GridLayoutService",
    "GridSpec",
    "LipStyle",
    "PathSweeper",
    "PlateDimensions",
    "PlateKind",
    "PlateStandard",
    "Polygon2D",
    "Solid",
    "UnitLipBuilder",
    "Vec2",
    "Vec3",
    "count_nodes",
    "iter_nodes",
]
