"""Adapter from the configuration schema to application DTOs."""

from baseplates.application.config.schema import BaseplateConfiguration
from baseplates.application.dtos import BaseplateInput


def config_to_input(config: BaseplateConfiguration) -> BaseplateInput:
    """Convert a BaseplateConfiguration to the BaseplateInput DTO."""
    plate = config.plate
    return BaseplateInput(
        what=int(plate.what),
        gridx=plate.gridx,
        gridy=plate.gridy,
        distancex=plate.distancex,
        distancey=plate.distancey,
        fitx=plate.fitx,
        fity=plate.fity,
    )
