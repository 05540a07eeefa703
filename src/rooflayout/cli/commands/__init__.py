"""CLI command implementations for the rooflayout application."""

from rooflayout.cli.commands.validate import display_load_error, validate_command

__all__ = ["display_load_error", "validate_command"]
