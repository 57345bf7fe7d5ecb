"""Settings file loader with descriptive errors.

Loads a JSON settings file and validates it against PipelineSettings. File
system errors, JSON syntax errors and schema violations all surface as a
ConfigError with an ``error_type`` and per-field details.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from wardrobes.application.config.schema import PipelineSettings


class ConfigError(Exception):
    """Exception raised for settings errors.

    Attributes:
        message: The primary error message
        error_type: One of file_not_found, file_read_error, json_parse, validation
        path: Path to the settings file (if applicable)
        details: Line/column for JSON errors, or one entry per invalid field
    """

    def __init__(
        self,
        message: str,
        error_type: str = "unknown",
        path: Path | None = None,
        details: list[dict[str, Any]] | None = None,
    ) -> None:
        self.message = message
        self.error_type = error_type
        self.path = path
        self.details = details or []
        super().__init__(message)

    def __str__(self) -> str:
        return self.message


def format_json_path(loc: tuple[str | int, ...]) -> str:
    """Format a pydantic location tuple as a JSON path.

    Examples:
        >>> format_json_path(("llm", "timeout"))
        'llm.timeout'
        >>> format_json_path(("doors", 0, "x"))
        'doors[0].x'
    """
    parts: list[str] = []
    for segment in loc:
        if isinstance(segment, int):
            if parts:
                parts[-1] = f"{parts[-1]}[{segment}]"
            else:
                parts.append(f"[{segment}]")
        else:
            parts.append(str(segment))
    return ".".join(parts)


def extract_validation_errors(error: PydanticValidationError) -> list[dict[str, Any]]:
    """One detail dict (path, message, value, error_type) per pydantic error."""
    return [
        {
            "path": format_json_path(err["loc"]),
            "message": err["msg"],
            "value": err.get("input"),
            "error_type": err["type"],
        }
        for err in error.errors()
    ]


def format_validation_message(header: str, details: list[dict[str, Any]]) -> str:
    lines = [header]
    for detail in details:
        path = detail["path"] or "<root>"
        value = detail.get("value")
        if value is not None and not isinstance(value, (dict, list)):
            lines.append(f"  - {path}: {detail['message']} (got: {value!r})")
        else:
            lines.append(f"  - {path}: {detail['message']}")
    return "\n".join(lines)


def load_settings_from_dict(data: dict[str, Any]) -> PipelineSettings:
    """Validate settings given as a dictionary.

    Raises:
        ConfigError: If the data fails validation.
    """
    try:
        return PipelineSettings.model_validate(data)
    except PydanticValidationError as e:
        details = extract_validation_errors(e)
        raise ConfigError(
            message=format_validation_message("Settings validation failed:", details),
            error_type="validation",
            details=details,
        ) from e


def load_settings(path: Path | None = None) -> PipelineSettings:
    """Load settings from a JSON file.

    Args:
        path: Settings file. None returns the defaults.

    Returns:
        Validated PipelineSettings.

    Raises:
        ConfigError: If the file is missing, unreadable, not JSON, or invalid.

    Example:
        >>> settings = load_settings(Path("wardrobes.json"))
        >>> settings.llm.enabled
        False
    """
    if path is None:
        return PipelineSettings()

    if not path.exists():
        raise ConfigError(
            message=f"Settings file not found: {path}",
            error_type="file_not_found",
            path=path,
        )

    try:
        content = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigError(
            message=f"Error reading settings file: {path}: {e}",
            error_type="file_read_error",
            path=path,
        ) from e

    try:
        data = json.loads(content)
    except json.JSONDecodeError as e:
        raise ConfigError(
            message=(
                f"Invalid JSON in settings file: {path} "
                f"(line {e.lineno}, column {e.colno}): {e.msg}"
            ),
            error_type="json_parse",
            path=path,
            details=[{"line": e.lineno, "column": e.colno, "message": e.msg}],
        ) from e

    if not isinstance(data, dict):
        raise ConfigError(
            message=f"Settings file must contain a JSON object: {path}",
            error_type="validation",
            path=path,
        )

    try:
        return load_settings_from_dict(data)
    except ConfigError as e:
        e.path = path
        raise
