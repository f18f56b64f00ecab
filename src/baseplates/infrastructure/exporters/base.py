"""Exporter framework: Protocol, Registry and Manager."""

from __future__ import annotations

import logging
from abc import abstractmethod
from pathlib import Path
from typing import TYPE_CHECKING, Any, ClassVar, Protocol, runtime_checkable

if TYPE_CHECKING:
    from baseplates.application.dtos import BaseplateOutput


logger = logging.getLogger(__name__)


def require_solid(output: BaseplateOutput) -> None:
    """Reject outputs from a failed generation.

    Raises:
        ValueError: If the output carries errors or no solid.
    """
    if not output.is_valid or output.solid is None or output.dimensions is None:
        raise ValueError("Cannot export a plate that failed to generate")


@runtime_checkable
class Exporter(Protocol):
    """Protocol for all exporters.

    Exporters serialise a generated plate (its CSG tree and dimensions) to
    one file format.

    Attributes:
        format_name: Registry name of the format (e.g., "scad", "json").
        file_extension: File extension without leading dot.
    """

    format_name: ClassVar[str]
    file_extension: ClassVar[str]

    @abstractmethod
    def export(self, output: BaseplateOutput, path: Path) -> None:
        """Write the plate to a file."""
        ...

    def export_string(self, output: BaseplateOutput) -> str:
        """Return the exported plate as a string.

        Raises:
            NotImplementedError: If the format does not support string export.
        """
        raise NotImplementedError(
            f"Format '{self.format_name}' does not support string export"
        )


class ExporterRegistry:
    """Registry for exporter classes.

    Exporters register themselves with the ``@ExporterRegistry.register``
    decorator when their module is imported.

    Example:
        @ExporterRegistry.register("scad")
        class ScadExporter:
            format_name = "scad"
            file_extension = "scad"
            ...
    """

    _exporters: ClassVar[dict[str, type[Exporter]]] = {}

    @classmethod
    def register(cls, format_name: str) -> Any:
        """Decorator to register an exporter class under ``format_name``."""

        def decorator(exporter_class: type[Exporter]) -> type[Exporter]:
            if format_name in cls._exporters:
                logger.warning(
                    f"Overwriting existing exporter for format '{format_name}'"
                )
            cls._exporters[format_name] = exporter_class
            logger.debug(f"Registered exporter '{format_name}': {exporter_class.__name__}")
            return exporter_class

        return decorator

    @classmethod
    def get(cls, format_name: str) -> type[Exporter]:
        """Get an exporter class by format name.

        Raises:
            KeyError: If no exporter is registered for the format.
        """
        if format_name not in cls._exporters:
            available = ", ".join(sorted(cls._exporters.keys()))
            raise KeyError(
                f"No exporter registered for format '{format_name}'. "
                f"Available formats: {available or 'none'}"
            )
        return cls._exporters[format_name]

    @classmethod
    def available_formats(cls) -> list[str]:
        return sorted(cls._exporters.keys())

    @classmethod
    def is_registered(cls, format_name: str) -> bool:
        return format_name in cls._exporters


class ExportManager:
    """Exports one plate to several formats.

    Attributes:
        output_dir: Directory where exported files will be saved; created
            on first export.
    """

    def __init__(self, output_dir: Path) -> None:
        self.output_dir = Path(output_dir)

    def export_all(
        self,
        formats: list[str],
        output: BaseplateOutput,
        project_name: str = "baseplate",
        options: dict[str, dict[str, Any]] | None = None,
    ) -> dict[str, Path]:
        """Export a plate to every format in ``formats``.

        Files are named ``{project_name}_{format}.{ext}``.

        Args:
            formats: Format names to export (e.g., ["scad", "json"]).
            output: The generated plate.
            project_name: Base name for output files.
            options: Constructor keyword arguments per format name.

        Returns:
            Mapping of format name to written file path.

        Raises:
            KeyError: If any format is not registered.
            ValueError: If the output is not a valid plate.
            OSError: If file operations fail.
        """
        require_solid(output)
        options = options or {}
        self.output_dir.mkdir(parents=True, exist_ok=True)

        results: dict[str, Path] = {}
        for format_name in formats:
            exporter_class = ExporterRegistry.get(format_name)
            exporter = exporter_class(**options.get(format_name, {}))

            filename = f"{project_name}_{format_name}.{exporter.file_extension}"
            filepath = self.output_dir / filename

            logger.info(f"Exporting to {format_name}: {filepath}")
            exporter.export(output, filepath)
            results[format_name] = filepath

        return results
