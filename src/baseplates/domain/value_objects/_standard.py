"""Plate standard constants and lip style variants."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

from ._vectors import Polygon2D

GRID_UNIT_SIZE = 42.0
TOLERANCE = 0.01
BASEPLATE_OUTSIDE_RADIUS = 4.0
BASEPLATE_HEIGHT = 5.0
MATING_WIDTH = 0.5
BASEPLATE_WALL_THICKNESS = 2.15
SPACER_HEIGHT = 0.2


class PlateKind(IntEnum):
    """Which lip variant to generate.

    The integer values match the ``what`` configuration option.
    """

    BASEPLATE = 0
    SPACER = 1


@dataclass(frozen=True)
class PlateStandard:
    """Immutable set of millimeter constants describing a plate standard.

    Geometry code receives an instance instead of reading module constants,
    so an alternate standard can be substituted without touching it.

    Attributes:
        grid_unit_size: Side length of one grid unit.
        tolerance: Overshoot applied to subtractive tools.
        outside_radius: Corner radius of a unit and of the finished plate.
        baseplate_height: Height of the baseplate lip.
        mating_width: Width of the flat mating band on top of a lip.
        baseplate_wall_thickness: Wall thickness of the baseplate lip.
        spacer_height: Height of the spacer lip.
    """

    grid_unit_size: float = GRID_UNIT_SIZE
    tolerance: float = TOLERANCE
    outside_radius: float = BASEPLATE_OUTSIDE_RADIUS
    baseplate_height: float = BASEPLATE_HEIGHT
    mating_width: float = MATING_WIDTH
    baseplate_wall_thickness: float = BASEPLATE_WALL_THICKNESS
    spacer_height: float = SPACER_HEIGHT

    def __post_init__(self) -> None:
        if self.grid_unit_size <= 0:
            raise ValueError("Grid unit size must be positive")
        if self.tolerance < 0:
            raise ValueError("Tolerance cannot be negative")
        if not 0 < self.outside_radius < self.grid_unit_size / 2:
            raise ValueError("Outside radius must be positive and below half a grid unit")
        if self.baseplate_wall_thickness > self.outside_radius:
            raise ValueError("Wall thickness cannot exceed the outside radius")
        if self.mating_width > self.baseplate_wall_thickness:
            raise ValueError("Mating width cannot exceed the wall thickness")
        if self.baseplate_height <= 0 or self.spacer_height <= 0:
            raise ValueError("Lip heights must be positive")

    @classmethod
    def gridfinity(cls) -> "PlateStandard":
        """The 42 mm standard."""
        return cls()

    def baseplate_profile(self) -> Polygon2D:
        """Baseplate lip cross-section.

        X runs outward from the inner face of the wall, Y runs up. The wall
        carries a flat mating band on its outer top edge and a 45 degree
        lead-in chamfer down to the inner face.

        The points are derived from the wall thickness, mating width and
        height on this standard rather than copied from a published
        coordinate table, so a custom standard reshapes the profile with it.
        """
        wall = self.baseplate_wall_thickness
        height = self.baseplate_height
        chamfer = wall - self.mating_width
        return Polygon2D.from_points(
            [
                (0.0, 0.0),
                (wall, 0.0),
                (wall, height),
                (chamfer, height),
                (0.0, height - chamfer),
            ]
        )

    def spacer_profile(self) -> Polygon2D:
        """Spacer lip cross-section: a thin band one mating width wide."""
        return Polygon2D.from_points(
            [
                (0.0, 0.0),
                (self.mating_width, 0.0),
                (self.mating_width, self.spacer_height),
                (0.0, self.spacer_height),
            ]
        )


@dataclass(frozen=True)
class LipStyle:
    """Lip cross-section plus the wall thickness and height it implies."""

    kind: PlateKind
    profile: Polygon2D
    wall_thickness: float
    height: float

    def __post_init__(self) -> None:
        if self.wall_thickness <= 0:
            raise ValueError("Wall thickness must be positive")
        if self.height <= 0:
            raise ValueError("Lip height must be positive")

    @classmethod
    def for_kind(cls, kind: PlateKind | int, standard: PlateStandard | None = None) -> "LipStyle":
        """Select the lip variant for a plate kind."""
        standard = standard or PlateStandard.gridfinity()
        kind = PlateKind(kind)
        if kind is PlateKind.SPACER:
            return cls(
                kind=kind,
                profile=standard.spacer_profile(),
                wall_thickness=standard.mating_width,
                height=standard.spacer_height,
            )
        return cls(
            kind=kind,
            profile=standard.baseplate_profile(),
            wall_thickness=standard.baseplate_wall_thickness,
            height=standard.baseplate_height,
        )
