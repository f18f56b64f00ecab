"""Domain services for plate generation."""

from .affine import (
    AffineTransform,
    angle_of,
    compose,
    magnitude,
    rotate,
    rotate_x,
    rotate_y,
    rotate_z,
    translate,
)
from .corner_trim import CornerTrimBuilder
from .grid_layout import GridLayoutService, corner_sign
from .lip_profile import UnitLipBuilder
from .path_sweep import PathSweeper, SweepFrame, rectangle_path, sweep_frames

__all__ = [
    "AffineTransform",
    "CornerTrimBuilder",
    "GridLayoutService",
    "PathSweeper",
    "SweepFrame",
    "UnitLipBuilder",
    "angle_of",
    "compose",
    "corner_sign",
    "magnitude",
    "rectangle_path",
    "rotate",
    "rotate_x",
    "rotate_y",
    "rotate_z",
    "sweep_frames",
    "translate",
]
