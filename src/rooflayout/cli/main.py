"""Typer CLI for roof panel layout generation."""

import logging
from pathlib import Path
from typing import Annotated

import typer

from rooflayout.application import (
    GenerateLayoutCommand,
    LayoutOutput,
    PanelSpecInput,
    RoofInput,
    SpacingInput,
)
from rooflayout.application.config import (
    ConfigError,
    config_to_assumptions,
    config_to_panel_spec,
    config_to_region,
    config_to_spacing,
    load_config,
)
from rooflayout.cli.commands import display_load_error, validate_command
from rooflayout.domain.services import ProductionEstimator
from rooflayout.infrastructure import (
    JsonExporter,
    LayoutSummaryFormatter,
    PanelTableFormatter,
    ProductionReportFormatter,
    ProjectDocument,
    ProjectError,
    load_project,
    save_project,
)

OUTPUT_FORMATS = ("summary", "panels", "json", "report")

app = typer.Typer(
    name="rooflayout",
    help="Plan solar panel layouts on roof outlines.",
)

app.command(name="validate")(validate_command)


def _configure_logging(verbose: bool) -> None:
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(levelname)s %(name)s: %(message)s",
        )


def _render(output: LayoutOutput, output_format: str) -> str:
    """Render a successful layout output in the requested format."""
    if output_format == "json":
        return JsonExporter().export(output)
    if output_format == "panels":
        assert output.layout is not None
        return PanelTableFormatter().format(output.layout)
    if output_format == "report":
        assert output.production is not None
        return ProductionReportFormatter().format(output.production)
    return LayoutSummaryFormatter().format(output)


def _check_format(output_format: str) -> None:
    if output_format not in OUTPUT_FORMATS:
        typer.echo(f"Unknown format: {output_format}", err=True)
        typer.echo(f"Available formats: {', '.join(OUTPUT_FORMATS)}", err=True)
        raise typer.Exit(code=1)


def _emit(output: LayoutOutput, output_format: str, output_file: Path | None) -> None:
    if not output.is_valid:
        for error in output.errors:
            typer.echo(f"Error: {error}", err=True)
        raise typer.Exit(code=1)

    text = _render(output, output_format)
    if output_file is None:
        typer.echo(text)
        return
    try:
        output_file.write_text(text + "\n", encoding="utf-8")
    except OSError as e:
        typer.echo(f"Error: Cannot write {output_file}: {e}", err=True)
        raise typer.Exit(code=1)
    typer.echo(f"Wrote {output_format} output to {output_file}")


@app.command()
def generate(
    config_file: Annotated[
        Path,
        typer.Option("--config", "-c", help="Path to JSON configuration file"),
    ],
    output_format: Annotated[
        str | None,
        typer.Option("--format", "-f", help="Output format: summary, panels, json, report"),
    ] = None,
    output_file: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="Write output to this file instead of stdout"),
    ] = None,
    save_project_file: Annotated[
        Path | None,
        typer.Option("--save-project", help="Save the generated layout as a project file"),
    ] = None,
    project_name: Annotated[
        str,
        typer.Option("--project-name", help="Project name stored in the project file"),
    ] = "Untitled Project",
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Log pipeline steps to stderr"),
    ] = False,
) -> None:
    """Generate a panel layout from a configuration file."""
    _configure_logging(verbose)

    try:
        config = load_config(config_file)
    except ConfigError as e:
        display_load_error(e)
        raise typer.Exit(code=1)

    output_format = output_format or config.output.format
    _check_format(output_format)
    if output_file is None and config.output.output_path:
        output_file = Path(config.output.output_path)

    try:
        region, frame = config_to_region(config)
    except ValueError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    command = GenerateLayoutCommand(
        estimator=ProductionEstimator(config_to_assumptions(config)),
    )
    panel_spec = config_to_panel_spec(config)
    spacing = config_to_spacing(config)
    result = command.execute_region(region, panel_spec, spacing, frame=frame)

    _emit(result, output_format, output_file)

    if save_project_file is not None:
        assert result.layout is not None
        document = ProjectDocument.from_state(
            project_name, region, panel_spec, spacing, result.layout
        )
        try:
            save_project(document, save_project_file)
        except ProjectError as e:
            typer.echo(f"Error: {e}", err=True)
            raise typer.Exit(code=1)
        typer.echo(f"Saved project to {save_project_file}")


@app.command()
def replay(
    project_file: Annotated[
        Path,
        typer.Argument(help="Path to a saved project file"),
    ],
    output_format: Annotated[
        str,
        typer.Option("--format", "-f", help="Output format: summary, panels, json, report"),
    ] = "summary",
    output_file: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="Write output to this file instead of stdout"),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Log pipeline steps to stderr"),
    ] = False,
) -> None:
    """Regenerate the layout stored in a project file."""
    _configure_logging(verbose)
    _check_format(output_format)

    try:
        document = load_project(project_file)
    except ProjectError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    result = GenerateLayoutCommand().execute_region(
        document.to_region(),
        document.to_panel_spec(),
        document.to_spacing(),
        frame=document.to_frame(),
    )
    saved = document.to_layout()
    if result.layout is not None and result.layout.total_panels != saved.total_panels:
        typer.echo(
            f"Warning: regenerated layout has {result.layout.total_panels} panels, "
            f"project file has {saved.total_panels}",
            err=True,
        )

    _emit(result, output_format, output_file)


@app.command()
def rectangle(
    width: Annotated[float, typer.Option("--width", "-w", help="Roof width (east-west) in feet")],
    depth: Annotated[float, typer.Option("--depth", "-d", help="Roof depth (north-south) in feet")],
    azimuth: Annotated[float, typer.Option("--azimuth", "-a", help="Roof facing in degrees")] = 180.0,
    pitch: Annotated[float, typer.Option("--pitch", "-p", help="Roof pitch in degrees")] = 30.0,
    panel_width: Annotated[float, typer.Option("--panel-width", help="Panel width in feet")] = 5.4,
    panel_height: Annotated[float, typer.Option("--panel-height", help="Panel height in feet")] = 3.25,
    gap: Annotated[float, typer.Option("--gap", help="Gap between panels in feet")] = 0.5,
    output_format: Annotated[
        str,
        typer.Option("--format", "-f", help="Output format: summary, panels, json, report"),
    ] = "summary",
) -> None:
    """Lay out panels on a plain rectangular roof without a config file."""
    _check_format(output_format)
    roof_input = RoofInput(
        points=[(0.0, 0.0), (width, 0.0), (width, depth), (0.0, depth)],
        azimuth=azimuth,
        pitch=pitch,
    )
    result = GenerateLayoutCommand().execute(
        roof_input,
        PanelSpecInput(width=panel_width, height=panel_height),
        SpacingInput(horizontal=gap, vertical=gap),
    )
    _emit(result, output_format, None)


if __name__ == "__main__":
    app()
