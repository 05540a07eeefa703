"""``rooflayout validate``: schema errors and layout advisories for a config file."""

from pathlib import Path
from typing import Annotated

import typer

from rooflayout.application.config import (
    ConfigError,
    ValidationResult,
    load_config,
    validate_config,
)


def validate_command(
    config_file: Annotated[
        Path,
        typer.Argument(help="Path to the JSON configuration file to validate"),
    ],
) -> None:
    """Validate a roof layout configuration file.

    Exit codes:
        0 - Configuration is valid with no warnings
        1 - Configuration has errors (cannot be used)
        2 - Configuration is valid but has warnings
    """
    typer.echo(f"Validating {config_file}...\n")

    try:
        config = load_config(config_file)
    except ConfigError as e:
        display_load_error(e)
        raise typer.Exit(code=1)

    result = validate_config(config)
    _display_validation_result(result)
    raise typer.Exit(code=result.exit_code)


def _load_error_lines(error: ConfigError) -> list[str]:
    if error.error_type == "file_not_found":
        return [f"File not found: {error.path}"]
    if error.error_type == "json_parse":
        return ["Invalid JSON syntax"] + [
            f"  Line {d.get('line', '?')}, Column {d.get('column', '?')}: {d.get('message')}"
            for d in error.details
        ]
    if error.error_type == "validation":
        return [f"{d.get('path') or '(root)'}: {d.get('message')}" for d in error.details]
    return [error.message]


def display_load_error(error: ConfigError) -> None:
    """Print why a configuration could not be loaded, on stderr."""
    lines = ["Errors:", *(f"  {line}" for line in _load_error_lines(error))]
    typer.echo("\n".join(lines) + "\n\nValidation failed.", err=True)


def _summary(result: ValidationResult) -> str:
    if result.errors:
        return (
            f"Validation failed: {len(result.errors)} error(s), "
            f"{len(result.warnings)} warning(s)"
        )
    if result.warnings:
        return f"Validation passed with {len(result.warnings)} warning(s)"
    return "Validation passed. Configuration is valid."


def _display_validation_result(result: ValidationResult) -> None:
    if result.errors:
        lines = ["Errors:"]
        for error in result.errors:
            lines.append(f"  {error.path}: {error.message}")
            if error.value is not None:
                lines.append(f"    Value: {error.value!r}")
        typer.echo("\n".join(lines) + "\n", err=True)

    if result.warnings:
        lines = ["Warnings:"]
        for warning in result.warnings:
            lines.append(f"  {warning.path}: {warning.message}")
            if warning.suggestion:
                lines.append(f"    Suggestion: {warning.suggestion}")
        typer.echo("\n".join(lines) + "\n")

    typer.echo(_summary(result), err=bool(result.errors))
