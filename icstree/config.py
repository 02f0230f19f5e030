"""Settings management using Pydantic for type validation and configuration."""

import logging
from functools import lru_cache
from pathlib import Path
from typing import Any, Union

import yaml
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .folding import DEFAULT_FOLD_WIDTH

logger = logging.getLogger(__name__)

# Size validation constants
MAX_ICS_SIZE_BYTES = 50 * 1024 * 1024  # 50MB limit
MAX_ICS_SIZE_WARNING = 10 * 1024 * 1024  # 10MB warning threshold

DEFAULT_MAX_NESTING_DEPTH = 64
DEFAULT_LINE_ENDING = "\r\n"


class ICSTreeSettings(BaseSettings):
    """Parser and serializer settings with environment variable support."""

    # Parser limits
    max_nesting_depth: int = Field(
        default=DEFAULT_MAX_NESTING_DEPTH,
        ge=1,
        description="Maximum BEGIN nesting depth, counting VCALENDAR as 1",
    )
    max_content_bytes: int = Field(
        default=MAX_ICS_SIZE_BYTES, ge=0, description="Reject input larger than this (UTF-8)"
    )
    content_size_warning_bytes: int = Field(
        default=MAX_ICS_SIZE_WARNING, ge=0, description="Log a warning above this size"
    )

    # Serializer output
    fold_width: int = Field(
        default=DEFAULT_FOLD_WIDTH, ge=2, description="Logical line width before folding"
    )
    line_ending: str = Field(
        default=DEFAULT_LINE_ENDING, description="Line terminator written after each line"
    )

    # Logging
    log_level: str = Field(default="INFO", description="DEBUG, INFO, WARNING or ERROR")
    debug: bool = Field(default=False, description="Enable debug logging for icstree modules")

    model_config = SettingsConfigDict(
        env_prefix="ICSTREE_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("line_ending")
    @classmethod
    def _check_line_ending(cls, value: str) -> str:
        if value not in ("\r\n", "\n"):
            raise ValueError("line_ending must be CRLF or LF")
        return value

    @field_validator("log_level")
    @classmethod
    def _normalize_log_level(cls, value: str) -> str:
        return value.upper()

    @classmethod
    def from_yaml(cls, config_file: Union[str, Path]) -> "ICSTreeSettings":
        """Load settings from a YAML file.

        Values from the file take precedence over environment variables.
        A missing or empty file yields the default settings.

        Args:
            config_file: Path to YAML configuration file

        Returns:
            Settings instance
        """
        path = Path(config_file)
        if not path.exists():
            logger.debug("No config file found at %s, using defaults", path)
            return cls()

        with path.open(encoding="utf-8") as f:
            config_data: Any = yaml.safe_load(f)

        if not config_data:
            return cls()

        if not isinstance(config_data, dict):
            raise ValueError(f"Config file {path} must contain a mapping")

        logger.debug("Loaded settings from %s: %s", path, ", ".join(sorted(config_data)))
        return cls(**config_data)


@lru_cache(maxsize=1)
def get_settings() -> ICSTreeSettings:
    """Get the process-wide settings instance."""
    return ICSTreeSettings()
