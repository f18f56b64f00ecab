"""Merge CLI arguments into a loaded configuration.

Precedence is CLI args > config values > defaults. Only CLI arguments that
are not None override configuration values.
"""

from pathlib import Path
from typing import Any

from baseplates.application.config.schema import (
    BaseplateConfiguration,
    OutputConfig,
    PlateConfig,
)

_PLATE_FIELDS = ("what", "gridx", "gridy", "distancex", "distancey", "fitx", "fity")


def merge_config_with_cli(
    config: BaseplateConfiguration,
    *,
    what: int | None = None,
    gridx: int | None = None,
    gridy: int | None = None,
    distancex: float | None = None,
    distancey: float | None = None,
    fitx: float | None = None,
    fity: float | None = None,
    output_format: str | None = None,
    output_file: str | Path | None = None,
    segments: int | None = None,
) -> BaseplateConfiguration:
    """Merge CLI arguments with configuration values.

    Returns:
        A new BaseplateConfiguration; the input is left untouched.

    Raises:
        pydantic.ValidationError: If the merged values are invalid.

    Example:
        >>> config = load_config(Path("plate.json"))
        >>> merge_config_with_cli(config, gridx=4).plate.gridx
        4
    """
    overrides = {
        "what": what,
        "gridx": gridx,
        "gridy": gridy,
        "distancex": distancex,
        "distancey": distancey,
        "fitx": fitx,
        "fity": fity,
    }
    plate_data = _build_plate_data(config, overrides)
    output_data = _build_output_data(config, output_format, output_file, segments)

    return BaseplateConfiguration(
        schema_version=config.schema_version,
        plate=PlateConfig.model_validate(plate_data),
        output=OutputConfig.model_validate(output_data),
    )


def _build_plate_data(
    config: BaseplateConfiguration,
    overrides: dict[str, Any],
) -> dict[str, Any]:
    plate = config.plate
    return {
        name: overrides[name] if overrides[name] is not None else getattr(plate, name)
        for name in _PLATE_FIELDS
    }


def _build_output_data(
    config: BaseplateConfiguration,
    output_format: str | None,
    output_file: str | Path | None,
    segments: int | None,
) -> dict[str, Any]:
    output_data = config.output.model_dump()
    if output_format is not None:
        output_data["format"] = output_format
    if output_file is not None:
        output_data["output_file"] = str(output_file)
    if segments is not None:
        output_data["segments"] = segments
    return output_data
