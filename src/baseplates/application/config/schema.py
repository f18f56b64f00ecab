"""Pydantic configuration schema models for plate specifications.

This module defines the schema for JSON plate configuration files. It uses
Pydantic v2 for validation and serialization.

The PlateKind enum is reused from the domain layer so the ``what`` values
stay in one place.
"""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from baseplates.domain.value_objects import PlateKind

# Supported schema versions for configuration files
# Version 1.0: Initial schema with plate and output sections
SUPPORTED_VERSIONS: frozenset[str] = frozenset({"1.0"})

OUTPUT_FORMATS: tuple[str, ...] = ("summary", "scad", "json")


class PlateConfig(BaseModel):
    """Plate geometry request.

    Each axis needs either a unit count or a minimum distance. A count of 0
    means "derive from the distance"; a distance of 0 means "no minimum".

    Attributes:
        what: 0 for a baseplate, 1 for a spacer.
        gridx: Grid units along X.
        gridy: Grid units along Y.
        distancex: Minimum footprint along X in mm.
        distancey: Minimum footprint along Y in mm.
        fitx: Padding alignment along X, -1 to 1.
        fity: Padding alignment along Y, -1 to 1.
    """

    model_config = ConfigDict(extra="forbid")

    what: PlateKind = PlateKind.BASEPLATE
    gridx: int = Field(default=0, ge=0)
    gridy: int = Field(default=0, ge=0)
    distancex: float = Field(default=0.0, ge=0)
    distancey: float = Field(default=0.0, ge=0)
    fitx: float = Field(default=0.0, ge=-1, le=1)
    fity: float = Field(default=0.0, ge=-1, le=1)

    @model_validator(mode="after")
    def validate_axes(self) -> "PlateConfig":
        """Each axis needs a unit count or a distance."""
        for axis, count, distance in (
            ("x", self.gridx, self.distancex),
            ("y", self.gridy, self.distancey),
        ):
            if count == 0 and distance == 0:
                raise ValueError(f"grid{axis} or distance{axis} must be greater than 0")
        return self


class OutputConfig(BaseModel):
    """Output format and destination.

    Attributes:
        format: Single output format.
        output_file: File to write; stdout when unset.
        segments: Circle resolution written as ``$fn`` in OpenSCAD output.
        formats: Formats for multi-format export.
        output_dir: Directory for multi-format export.
        project_name: Base name for multi-format export files.
    """

    model_config = ConfigDict(extra="forbid")

    format: Literal["summary", "scad", "json"] = "summary"
    output_file: str | None = None
    segments: int = Field(default=64, ge=3)
    formats: list[str] = Field(default_factory=list, description="Formats to export together")
    output_dir: str | None = Field(default=None, description="Directory for output files")
    project_name: str = Field(default="baseplate", description="Base name for output files")

    @field_validator("formats")
    @classmethod
    def validate_formats(cls, v: list[str]) -> list[str]:
        """Validate format names in the formats list."""
        valid_formats = {"scad", "json"}
        invalid = set(v) - valid_formats - {"all"}
        if invalid:
            raise ValueError(f"Invalid formats: {sorted(invalid)}. Valid formats: {sorted(valid_formats)}")
        return v


class BaseplateConfiguration(BaseModel):
    """Root configuration model for plate specifications.

    Attributes:
        schema_version: Version string in format "major.minor" (e.g., "1.0")
        plate: Plate geometry request
        output: Output configuration

    Example:
        >>> config = BaseplateConfiguration(
        ...     schema_version="1.0",
        ...     plate=PlateConfig(gridx=3, gridy=2),
        ... )
    """

    model_config = ConfigDict(extra="forbid")

    schema_version: str = Field(..., pattern=r"^\d+\.\d+$")
    plate: PlateConfig
    output: OutputConfig = Field(default_factory=OutputConfig)

    @field_validator("schema_version")
    @classmethod
    def validate_supported_version(cls, v: str) -> str:
        """Accept supported versions and newer minor versions of a supported major."""
        if v in SUPPORTED_VERSIONS:
            return v
        major_version = int(v.split(".")[0])
        supported_majors = {int(sv.split(".")[0]) for sv in SUPPORTED_VERSIONS}
        if major_version in supported_majors:
            return v
        raise ValueError(
            f"Unsupported schema version: {v}. Supported versions: {sorted(SUPPORTED_VERSIONS)}"
        )
