"""Configuration settings for font-enumeration."""

import os
from enum import Enum
from pathlib import Path

from pydantic import BaseModel, Field

from font_enumeration.exceptions import SystemCollectionUnavailable

BACKEND_ENV_VAR = "FONT_ENUMERATION_BACKEND"


class BackendName(str, Enum):
    """Platform font service to enumerate with."""

    AUTO = "auto"
    FONTCONFIG = "fontconfig"
    CORE_TEXT = "core_text"
    DIRECT_WRITE = "direct_write"


class OutputFormat(str, Enum):
    """Output format of the font-info tool."""

    HUMAN_READABLE = "human-readable"
    JSON = "json"


class BackendConfig(BaseModel):
    """Configuration for the font enumeration backend."""

    name: BackendName = Field(
        default=BackendName.AUTO,
        description="Backend to use (auto = pick by platform)",
    )
    fc_list_command: str = Field(
        default="fc-list",
        description="fontconfig listing executable",
    )
    timeout_seconds: float = Field(
        default=30.0,
        gt=0.0,
        le=600.0,
        description="Timeout for external enumeration commands",
    )


class OutputConfig(BaseModel):
    """Configuration for font-info output."""

    format: OutputFormat = Field(
        default=OutputFormat.HUMAN_READABLE,
        description="Output format",
    )
    print_features: bool = Field(
        default=False,
        description="Print GSUB/GPOS feature tags",
    )
    print_writing_systems: bool = Field(
        default=False,
        description="Print supported script:language pairs",
    )


class LoggingConfig(BaseModel):
    """Logging configuration."""

    log_file: Path | None = Field(
        default=None,
        description="Path to log file",
    )
    log_level: str = Field(
        default="WARNING",
        description="Console log level",
    )
    file_log_level: str = Field(
        default="DEBUG",
        description="File log level (more verbose)",
    )


class FontEnumerationSettings(BaseModel):
    """Main application settings."""

    backend: BackendConfig = Field(default_factory=BackendConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_settings() -> FontEnumerationSettings:
    """Get default settings, honoring FONT_ENUMERATION_BACKEND.

    Raises:
        SystemCollectionUnavailable: If the variable names no known backend
    """
    backend_name = os.environ.get(BACKEND_ENV_VAR)
    if not backend_name:
        return FontEnumerationSettings()
    try:
        name = BackendName(backend_name.lower())
    except ValueError as e:
        choices = ", ".join(member.value for member in BackendName)
        raise SystemCollectionUnavailable(
            backend_name,
            f"unknown backend '{backend_name}' in {BACKEND_ENV_VAR} (expected one of: {choices})",
        ) from e
    return FontEnumerationSettings(backend=BackendConfig(name=name))
