"""Data Transfer Objects for the application layer."""

from __future__ import annotations

from dataclasses import dataclass, field

from baseplates.domain import GridSpec, LipStyle, PlateDimensions, PlateKind, PlateStandard, Solid


@dataclass
class BaseplateInput:
    """Input DTO for a plate request, using the user-facing option names."""

    what: int = PlateKind.BASEPLATE.value
    gridx: int = 0
    gridy: int = 0
    distancex: float = 0.0
    distancey: float = 0.0
    fitx: float = 0.0
    fity: float = 0.0

    def validate(self) -> list[str]:
        """Validate input and return list of error messages."""
        errors: list[str] = []
        valid_kinds = [kind.value for kind in PlateKind]
        if self.what not in valid_kinds:
            errors.append(f"what must be one of: {', '.join(str(k) for k in valid_kinds)}")
        if self.gridx < 0 or self.gridy < 0:
            errors.append("Grid unit counts cannot be negative")
        if self.distancex < 0 or self.distancey < 0:
            errors.append("Distances cannot be negative")
        if not -1 <= self.fitx <= 1 or not -1 <= self.fity <= 1:
            errors.append("Fit values must be between -1 and 1")
        if self.gridx == 0 and self.distancex == 0:
            errors.append("Set gridx or distancex")
        if self.gridy == 0 and self.distancey == 0:
            errors.append("Set gridy or distancey")
        return errors

    def to_grid_spec(self) -> GridSpec:
        """Convert to GridSpec value object."""
        return GridSpec.from_vectors(
            units=(self.gridx, self.gridy),
            min_size=(self.distancex, self.distancey),
            fit=(self.fitx, self.fity),
        )

    def to_lip_style(self, standard: PlateStandard | None = None) -> LipStyle:
        """Convert ``what`` to the matching LipStyle."""
        return LipStyle.for_kind(self.what, standard)


@dataclass
class BaseplateOutput:
    """Output DTO containing the generated plate.

    Attributes:
        solid: CSG tree of the finished plate.
        dimensions: Dimensions the plate was built to.
        lip: Lip style used for every unit.
        errors: List of error messages if generation failed.
    """

    solid: Solid | None
    dimensions: PlateDimensions | None
    lip: LipStyle | None = None
    errors: list[str] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        """Check if the plate was generated successfully."""
        return len(self.errors) == 0
