"""Pipeline settings: schema and JSON file loader."""

from .loader import (
    ConfigError,
    extract_validation_errors,
    format_json_path,
    format_validation_message,
    load_settings,
    load_settings_from_dict,
)
from .schema import LLMSettings, PipelineSettings

__all__ = [
    "ConfigError",
    "LLMSettings",
    "PipelineSettings",
    "extract_validation_errors",
    "format_json_path",
    "format_validation_message",
    "load_settings",
    "load_settings_from_dict",
]
