"""Application commands (use cases) for plate generation."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from baseplates.domain import ConfigurationError, GeometryError, GridLayoutService, PlateStandard

from .dtos import BaseplateInput, BaseplateOutput

if TYPE_CHECKING:
    from baseplates.contracts.protocols import GridLayoutProtocol

logger = logging.getLogger(__name__)


class GenerateBaseplateCommand:
    """Command to generate a complete plate."""

    def __init__(
        self,
        layout_service: "GridLayoutProtocol | None" = None,
        standard: PlateStandard | None = None,
    ) -> None:
        self.standard = standard or PlateStandard.gridfinity()
        self.layout_service = layout_service or GridLayoutService(self.standard)

    def execute(self, plate_input: BaseplateInput) -> BaseplateOutput:
        """Execute the generation command.

        Args:
            plate_input: The plate request.

        Returns:
            BaseplateOutput with the plate solid and its dimensions, or with
            ``errors`` set and no solid when the request is invalid.
        """
        errors = plate_input.validate()
        if errors:
            return BaseplateOutput(solid=None, dimensions=None, errors=errors)

        try:
            grid = plate_input.to_grid_spec()
            lip = plate_input.to_lip_style(self.standard)
            dimensions = self.layout_service.compute_dimensions(grid, lip.height)
            solid = self.layout_service.build(lip, dimensions)
        except (ConfigurationError, GeometryError) as e:
            logger.warning(f"Plate generation failed: {e}")
            return BaseplateOutput(solid=None, dimensions=None, errors=[str(e)])

        return BaseplateOutput(solid=solid, dimensions=dimensions, lip=lip)
