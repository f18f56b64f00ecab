"""Configuration schema and loading for plate specifications.

Public API:
    - BaseplateConfiguration: Root configuration model
    - PlateConfig: Plate geometry request model
    - OutputConfig: Output format configuration model
    - load_config: Load configuration from a JSON file
    - load_config_from_dict: Load configuration from a dictionary
    - ConfigError: Exception for configuration errors
    - merge_config_with_cli: Apply CLI overrides to a configuration
    - config_to_input: Convert a configuration to a BaseplateInput

Example:
    >>> from pathlib import Path
    >>> from baseplates.application.config import load_config, ConfigError
    >>>
    >>> try:
    ...     config = load_config(Path("plate.json"))
    ...     print(f"Grid: {config.plate.gridx}x{config.plate.gridy}")
    ... except ConfigError as e:
    ...     print(f"Error: {e}")
"""

from baseplates.application.config.adapter import config_to_input
from baseplates.application.config.loader import (
    ConfigError,
    load_config,
    load_config_from_dict,
)
from baseplates.application.config.merger import merge_config_with_cli
from baseplates.application.config.schema import (
    OUTPUT_FORMATS,
    SUPPORTED_VERSIONS,
    BaseplateConfiguration,
    OutputConfig,
    PlateConfig,
)

__all__ = [
    "BaseplateConfiguration",
    "ConfigError",
    "OUTPUT_FORMATS",
    "OutputConfig",
    "PlateConfig",
    "SUPPORTED_VERSIONS",
    "config_to_input",
    "load_config",
    "load_config_from_dict",
    "merge_config_with_cli",
]
