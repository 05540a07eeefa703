"""Loading layout configuration files.

Every failure, from a missing file through a schema violation, surfaces as a
ConfigError whose ``error_type`` names the stage that failed and whose
``details`` hold per-field or per-line information.
"""

import json
from pathlib import Path
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from rooflayout.application.config.schema import LayoutConfiguration


class ConfigError(Exception):
    """A configuration could not be read or did not validate.

    Attributes:
        message: The primary error message
        error_type: file_not_found, file_read_error, json_parse or validation
        path: Path to the configuration file, None for in-memory data
        details: Field errors (path/message/value) or the JSON line and column
    """

    def __init__(
        self,
        message: str,
        error_type: str = "unknown",
        path: Path | None = None,
        details: list[dict[str, Any]] | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.error_type = error_type
        self.path = path
        self.details = details or []


def format_json_path(loc: tuple[str | int, ...]) -> str:
    """Dotted path for a pydantic error location, indices in brackets."""
    path = ""
    for segment in loc:
        if isinstance(segment, int):
            path += f"[{segment}]"
        else:
            path += f".{segment}" if path else str(segment)
    return path


def extract_validation_errors(
    error: PydanticValidationError,
) -> list[dict[str, Any]]:
    """Flatten a pydantic ValidationError into path/message/value dicts."""
    return [
        {
            "path": format_json_path(err["loc"]),
            "message": err["msg"],
            "value": err.get("input"),
            "error_type": err["type"],
        }
        for err in error.errors()
    ]


def _describe(detail: dict[str, Any]) -> str:
    value = detail.get("value")
    shown = "" if value is None or isinstance(value, (dict, list)) else f" (got: {value!r})"
    return f"  - {detail['path'] or '(root)'}: {detail['message']}{shown}"


def _validate(data: Any, path: Path | None = None) -> LayoutConfiguration:
    try:
        return LayoutConfiguration.model_validate(data)
    except PydanticValidationError as e:
        details = extract_validation_errors(e)
        raise ConfigError(
            message="\n".join(
                ["Configuration validation failed:", *map(_describe, details)]
            ),
            error_type="validation",
            path=path,
            details=details,
        ) from e


def _read_json(path: Path) -> Any:
    if not path.exists():
        raise ConfigError(f"Config file not found: {path}", "file_not_found", path)
    try:
        content = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigError(
            f"Error reading config file: {path}: {e}", "file_read_error", path
        ) from e
    try:
        return json.loads(content)
    except json.JSONDecodeError as e:
        raise ConfigError(
            f"Invalid JSON in config file: {path} (line {e.lineno}, column {e.colno}): {e.msg}",
            "json_parse",
            path,
            [{"line": e.lineno, "column": e.colno, "message": e.msg}],
        ) from e


def load_config(path: Path) -> LayoutConfiguration:
    """Load and validate a layout configuration from a JSON file.

    Raises:
        ConfigError: If the file is missing, unreadable, not JSON, or fails
            schema validation.
    """
    return _validate(_read_json(path), path)


def load_config_from_dict(data: dict[str, Any]) -> LayoutConfiguration:
    """Validate an in-memory layout configuration, e.g. a request body."""
    return _validate(data)
