"""Service factory for dependency injection."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, cast

from baseplates.domain import PlateStandard

if TYPE_CHECKING:
    from baseplates.application.commands import GenerateBaseplateCommand
    from baseplates.contracts.protocols import GeometryKernel, GridLayoutProtocol
    from baseplates.infrastructure.exporters import ExportManager
    from baseplates.infrastructure.formatters import DimensionReportFormatter


@dataclass
class ServiceFactory:
    """Factory for creating service instances.

    Holds the plate standard and lazily creates the kernel and layout
    service so that tests can swap either one before the command is built.

    Example:
        ```python
        factory = ServiceFactory()
        command = factory.create_generate_command()
        result = command.execute(BaseplateInput(gridx=2, gridy=1))
        ```
    """

    standard: PlateStandard = field(default_factory=PlateStandard.gridfinity)

    _kernel: "GeometryKernel | None" = field(default=None, init=False, repr=False)
    _layout_service: "GridLayoutProtocol | None" = field(default=None, init=False, repr=False)

    def get_kernel(self) -> "GeometryKernel":
        """Get or create the geometry kernel."""
        if self._kernel is None:
            from baseplates.domain.csg import CsgKernel

            self._kernel = cast("GeometryKernel", CsgKernel())
        return self._kernel

    def set_kernel(self, kernel: "GeometryKernel") -> None:
        """Replace the kernel; drops any layout service built on the old one."""
        self._kernel = kernel
        self._layout_service = None

    def get_layout_service(self) -> "GridLayoutProtocol":
        """Get or create the grid layout service."""
        if self._layout_service is None:
            from baseplates.domain.services import GridLayoutService

            self._layout_service = cast(
                "GridLayoutProtocol",
                GridLayoutService(self.standard, kernel=self.get_kernel()),
            )
        return self._layout_service

    def get_dimension_formatter(self) -> "DimensionReportFormatter":
        from baseplates.infrastructure.formatters import DimensionReportFormatter

        return DimensionReportFormatter()

    def get_export_manager(self, output_dir: str = ".") -> "ExportManager":
        from pathlib import Path

        from baseplates.infrastructure.exporters import ExportManager

        return ExportManager(Path(output_dir))

    def create_generate_command(self) -> "GenerateBaseplateCommand":
        """Create GenerateBaseplateCommand with its dependencies."""
        from baseplates.application.commands import GenerateBaseplateCommand

        return GenerateBaseplateCommand(
            layout_service=self.get_layout_service(),
            standard=self.standard,
        )


_default_factory: ServiceFactory | None = None


def get_factory() -> ServiceFactory:
    """Get the default service factory."""
    global _default_factory
    if _default_factory is None:
        _default_factory = ServiceFactory()
    return _default_factory


def set_factory(factory: ServiceFactory | None) -> None:
    """Set a custom factory (for testing)."""
    global _default_factory
    _default_factory = factory


def reset_factory() -> None:
    """Reset the factory to default (for testing cleanup)."""
    global _default_factory
    _default_factory = None
