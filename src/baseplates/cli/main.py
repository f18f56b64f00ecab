"""Typer CLI for plate generation."""

import logging
from pathlib import Path
from typing import Annotated

import typer
from pydantic import ValidationError as PydanticValidationError

from baseplates.application import BaseplateInput, BaseplateOutput
from baseplates.application.config import (
    OUTPUT_FORMATS,
    BaseplateConfiguration,
    ConfigError,
    config_to_input,
    load_config,
    merge_config_with_cli,
)
from baseplates.application.factory import get_factory
from baseplates.domain import ConfigurationError
from baseplates.infrastructure import (
    CsgJsonExporter,
    DimensionReportFormatter,
    ExporterRegistry,
    ExportManager,
    ScadExporter,
)
from baseplates.logging_config import setup_logging

ConfigOption = Annotated[
    Path | None,
    typer.Option("--config", "-c", help="Path to JSON configuration file"),
]
WhatOption = Annotated[
    int | None, typer.Option("--what", help="Plate type: 0 baseplate, 1 spacer")
]
GridXOption = Annotated[int | None, typer.Option("--gridx", help="Grid units along X (0 = derive from distance)")]
GridYOption = Annotated[int | None, typer.Option("--gridy", help="Grid units along Y (0 = derive from distance)")]
DistanceXOption = Annotated[float | None, typer.Option("--distancex", help="Minimum size along X in mm")]
DistanceYOption = Annotated[float | None, typer.Option("--distancey", help="Minimum size along Y in mm")]
FitXOption = Annotated[float | None, typer.Option("--fitx", help="Padding alignment along X, -1 to 1")]
FitYOption = Annotated[float | None, typer.Option("--fity", help="Padding alignment along Y, -1 to 1")]
VerboseOption = Annotated[bool, typer.Option("--verbose", "-v", help="Log generation steps to stderr")]


app = typer.Typer(
    name="baseplates",
    help="Generate gridfinity-style baseplates and spacers as CSG models.",
)


def _resolve_input(
    config_file: Path | None,
    *,
    output_format: str | None = None,
    output_file: Path | None = None,
    segments: int | None = None,
    **plate_options: int | float | None,
) -> tuple[BaseplateInput, BaseplateConfiguration | None]:
    """Build the plate request from a config file and/or CLI options.

    CLI options override config values. Exits with code 1 on config errors.
    """
    if config_file is None:
        values = {name: value for name, value in plate_options.items() if value is not None}
        return BaseplateInput(**values), None

    try:
        config = load_config(config_file)
    except ConfigError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    try:
        config = merge_config_with_cli(
            config,
            output_format=output_format,
            output_file=output_file,
            segments=segments,
            **plate_options,
        )
    except PydanticValidationError as e:
        for error in e.errors():
            location = ".".join(str(part) for part in error["loc"]) or "plate"
            typer.echo(f"Error: {location}: {error['msg']}", err=True)
        raise typer.Exit(code=1)

    return config_to_input(config), config


def _generate(plate_input: BaseplateInput) -> BaseplateOutput:
    command = get_factory().create_generate_command()
    result = command.execute(plate_input)
    if not result.is_valid:
        for error in result.errors:
            typer.echo(f"Error: {error}", err=True)
        raise typer.Exit(code=1)
    return result


def _handle_multi_format_export(
    output_formats_str: str,
    output_dir: Path | None,
    project_name: str,
    result: BaseplateOutput,
    segments: int,
) -> None:
    """Export to every format in a comma-separated list, or "all"."""
    available = ExporterRegistry.available_formats()
    if output_formats_str.lower() == "all":
        formats = available
    else:
        formats = [f.strip().lower() for f in output_formats_str.split(",") if f.strip()]

    invalid = [f for f in formats if not ExporterRegistry.is_registered(f)]
    if invalid:
        typer.echo(f"Unknown formats: {', '.join(invalid)}", err=True)
        typer.echo(f"Available formats: {', '.join(available)}", err=True)
        raise typer.Exit(code=1)
    if not formats:
        typer.echo("No valid formats to export.", err=True)
        raise typer.Exit(code=1)

    manager = ExportManager(output_dir or Path("."))
    try:
        files = manager.export_all(
            formats, result, project_name, options={"scad": {"segments": segments}}
        )
    except (OSError, ValueError) as e:
        typer.echo(f"Export error: {e}", err=True)
        raise typer.Exit(code=1)

    typer.echo("Exported files:")
    for fmt, path in files.items():
        typer.echo(f"  {fmt.upper()}: {path}")


def _render(result: BaseplateOutput, output_format: str, segments: int) -> str:
    if output_format == "scad":
        return ScadExporter(segments=segments).export_string(result)
    if output_format == "json":
        return CsgJsonExporter().export_string(result)
    return DimensionReportFormatter().format(result.dimensions, result.lip)


@app.command()
def generate(
    config_file: ConfigOption = None,
    what: WhatOption = None,
    gridx: GridXOption = None,
    gridy: GridYOption = None,
    distancex: DistanceXOption = None,
    distancey: DistanceYOption = None,
    fitx: FitXOption = None,
    fity: FitYOption = None,
    output_format: Annotated[
        str | None,
        typer.Option("--format", "-f", help="Output format: summary, scad or json"),
    ] = None,
    output_file: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="Write output to this file instead of stdout"),
    ] = None,
    output_formats: Annotated[
        str | None,
        typer.Option("--output-formats", help="Comma-separated export formats, or 'all'"),
    ] = None,
    output_dir: Annotated[
        Path | None,
        typer.Option("--output-dir", help="Directory for --output-formats files"),
    ] = None,
    project_name: Annotated[
        str | None,
        typer.Option("--project-name", help="Base name for --output-formats files"),
    ] = None,
    segments: Annotated[
        int | None,
        typer.Option("--segments", help="Circle resolution ($fn) for OpenSCAD output"),
    ] = None,
    verbose: VerboseOption = False,
) -> None:
    """Generate a plate and print or save it.

    Examples:
        baseplates generate --gridx 3 --gridy 2 --format scad -o plate.scad
        baseplates generate --distancex 100 --distancey 50 --fitx -1
        baseplates generate --config plate.json --gridx 4
        baseplates generate --config plate.json --output-formats all --output-dir ./out
    """
    if verbose:
        setup_logging(logging.DEBUG)

    plate_input, config = _resolve_input(
        config_file,
        output_format=output_format,
        output_file=output_file,
        segments=segments,
        what=what,
        gridx=gridx,
        gridy=gridy,
        distancex=distancex,
        distancey=distancey,
        fitx=fitx,
        fity=fity,
    )

    if config is not None:
        output_format = config.output.format
        segments = config.output.segments
        if output_file is None and config.output.output_file:
            output_file = Path(config.output.output_file)
        if output_formats is None and config.output.formats:
            output_formats = ",".join(config.output.formats)
        if output_dir is None and config.output.output_dir:
            output_dir = Path(config.output.output_dir)
        if project_name is None:
            project_name = config.output.project_name
    output_format = output_format or "summary"
    segments = segments if segments is not None else 64

    if output_format not in OUTPUT_FORMATS:
        typer.echo(
            f"Error: Unknown format '{output_format}'. Choose from: {', '.join(OUTPUT_FORMATS)}",
            err=True,
        )
        raise typer.Exit(code=1)
    if segments < 3:
        typer.echo("Error: --segments must be at least 3", err=True)
        raise typer.Exit(code=1)

    result = _generate(plate_input)

    if output_formats:
        _handle_multi_format_export(
            output_formats, output_dir, project_name or "baseplate", result, segments
        )
        return

    content = _render(result, output_format, segments)
    if output_file is not None:
        output_file.parent.mkdir(parents=True, exist_ok=True)
        output_file.write_text(content + ("" if content.endswith("\n") else "\n"), encoding="utf-8")
        typer.echo(f"Wrote {output_format} output to: {output_file}")
    else:
        typer.echo(content)


@app.command()
def dimensions(
    config_file: ConfigOption = None,
    what: WhatOption = None,
    gridx: GridXOption = None,
    gridy: GridYOption = None,
    distancex: DistanceXOption = None,
    distancey: DistanceYOption = None,
    fitx: FitXOption = None,
    fity: FitYOption = None,
    verbose: VerboseOption = False,
) -> None:
    """Print the computed plate dimensions without building geometry."""
    if verbose:
        setup_logging(logging.DEBUG)

    plate_input, _ = _resolve_input(
        config_file,
        what=what,
        gridx=gridx,
        gridy=gridy,
        distancex=distancex,
        distancey=distancey,
        fitx=fitx,
        fity=fity,
    )
    errors = plate_input.validate()
    if errors:
        for error in errors:
            typer.echo(f"Error: {error}", err=True)
        raise typer.Exit(code=1)

    factory = get_factory()
    lip = plate_input.to_lip_style(factory.standard)
    try:
        dims = factory.get_layout_service().compute_dimensions(plate_input.to_grid_spec(), lip.height)
    except ConfigurationError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    typer.echo(factory.get_dimension_formatter().format(dims, lip))


@app.command()
def formats() -> None:
    """List the formats available to --output-formats."""
    for name in ExporterRegistry.available_formats():
        exporter_class = ExporterRegistry.get(name)
        typer.echo(f"{name:<10} .{exporter_class.file_extension}")


if __name__ == "__main__":
    app()
