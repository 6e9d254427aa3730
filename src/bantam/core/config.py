"""
Bantam configuration models.

Parses bantam.toml and provides typed settings for logging and the
``bantam tokens`` command. A missing file yields the defaults.

Example bantam.toml:

    [logging]
    level = "INFO"

    [tokens]
    sample = "b + a"
    limit = 3
"""

from __future__ import annotations

import logging
import tomllib
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from bantam.core.errors import make_config_error

logger = logging.getLogger(__name__)

CONFIG_FILENAME = "bantam.toml"

_LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


class LoggingConfig(BaseModel):
    """Logging configuration."""

    model_config = ConfigDict(extra="forbid")

    level: str = "WARNING"

    @field_validator("level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"unknown log level {value!r}; expected one of {', '.join(_LOG_LEVELS)}")
        return level


class TokensConfig(BaseModel):
    """Defaults for the tokens command."""

    model_config = ConfigDict(extra="forbid")

    sample: str = "b + a"
    limit: int = Field(default=3, ge=0, description="Results to print; 0 prints until exhausted")


class BantamConfig(BaseModel):
    """Complete Bantam configuration."""

    model_config = ConfigDict(extra="ignore")

    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    tokens: TokensConfig = Field(default_factory=TokensConfig)

    @classmethod
    def from_toml(cls, data: dict[str, Any]) -> BantamConfig:
        """Create config from parsed TOML data."""
        return cls.model_validate(data)


def load_config(path: Path | None = None) -> BantamConfig:
    """Load configuration from ``path`` or ./bantam.toml.

    An explicit path must exist; the implicit one may be absent.

    Raises:
        ConfigError: If the file cannot be read or holds invalid settings.
    """
    explicit = path is not None
    config_path = path if path is not None else Path.cwd() / CONFIG_FILENAME

    if not config_path.exists():
        if explicit:
            raise make_config_error("Config file not found", config_path)
        logger.debug("No %s found, using defaults", CONFIG_FILENAME)
        return BantamConfig()

    try:
        data = tomllib.loads(config_path.read_text(encoding="utf-8"))
    except OSError as e:
        raise make_config_error(f"Cannot read config: {e}", config_path) from e
    except tomllib.TOMLDecodeError as e:
        raise make_config_error(
            f"Invalid TOML: {e}",
            config_path,
            line=getattr(e, "lineno", None),
            column=getattr(e, "colno", None),
        ) from e

    try:
        config = BantamConfig.from_toml(data)
    except ValidationError as e:
        raise make_config_error(f"Invalid configuration: {e}", config_path) from e

    logger.debug("Loaded configuration from %s", config_path)
    return config
