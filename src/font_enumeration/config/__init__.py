"""Configuration management for font-enumeration.

This module provides configuration management using Pydantic models.
Configuration can be provided via CLI arguments, the environment, or defaults.

Key classes:
- BackendConfig: Backend selection and external command settings
- OutputConfig: font-info output settings
- LoggingConfig: Logging settings
- FontEnumerationSettings: Main application settings
"""

from font_enumeration.config.settings import (
    BACKEND_ENV_VAR,
    BackendConfig,
    BackendName,
    FontEnumerationSettings,
    LoggingConfig,
    OutputConfig,
    OutputFormat,
    get_default_settings,
)

__all__ = [
    "BACKEND_ENV_VAR",
    "BackendConfig",
    "BackendName",
    "FontEnumerationSettings",
    "LoggingConfig",
    "OutputConfig",
    "OutputFormat",
    "get_default_settings",
]
