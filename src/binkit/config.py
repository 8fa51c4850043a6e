"""
binkit Configuration
====================

This module handles configuration loading for the binkit command line.
The library functions themselves take explicit options and never read
configuration.

Configuration Sources (in order of precedence):
    1. Environment variables (highest priority)
    2. binkit.yaml file
    3. Default values (lowest priority)

Environment Variable Mapping:
    BINKIT_CONFIG             -> path of the YAML file
    BINKIT_UNICODE_ERRORS     -> unicode.errors
    BINKIT_UNICODE_ENDIANNESS -> unicode.endianness
    BINKIT_WS_UNMASK          -> websocket.unmask
    BINKIT_LOG_LEVEL          -> logging.level
    BINKIT_LOG_FORMAT         -> logging.format

Example:
    from binkit.config import load_config

    settings = load_config()
    print(settings.unicode.errors)
"""

import os
import logging
from pathlib import Path
from typing import Optional

import yaml
from pydantic import BaseModel, Field

from binkit.models.options import (
    Endianness,
    ErrorMode,
    Utf8Options,
    Utf16Options,
    Utf32Options,
)


logger = logging.getLogger(__name__)

_TRUE_VALUES = ("1", "true", "yes", "on")


# =============================================================================
# Configuration Models
# =============================================================================

class UnicodeConfig(BaseModel):
    """Default transcoder behaviour for the CLI."""

    errors: ErrorMode = Field(
        default=ErrorMode.REPLACE,
        description="replace malformed input with U+FFFD, or strict",
    )
    endianness: Endianness = Field(
        default=Endianness.AUTO,
        description="UTF-16/32 byte order: big, little or auto",
    )
    allow_overlong: bool = Field(default=False, description="Accept overlong UTF-8")
    allow_surrogates: bool = Field(default=False, description="Accept encoded surrogates")
    allow_unpaired: bool = Field(default=False, description="Keep unpaired UTF-16 surrogates")
    strip_bom: bool = Field(default=False, description="Drop a leading U+FEFF from UTF-8")

    def utf8_options(self, **overrides) -> Utf8Options:
        """Build Utf8Options from these defaults."""
        values = {
            "errors": self.errors,
            "allow_overlong": self.allow_overlong,
            "allow_surrogates": self.allow_surrogates,
            "strip_bom": self.strip_bom,
        }
        return Utf8Options(**{**values, **overrides})

    def utf16_options(self, **overrides) -> Utf16Options:
        """Build Utf16Options from these defaults."""
        values = {
            "errors": self.errors,
            "endianness": self.endianness,
            "allow_unpaired": self.allow_unpaired,
        }
        return Utf16Options(**{**values, **overrides})

    def utf32_options(self, **overrides) -> Utf32Options:
        """Build Utf32Options from these defaults."""
        values = {
            "errors": self.errors,
            "endianness": self.endianness,
            "allow_surrogates": self.allow_surrogates,
        }
        return Utf32Options(**{**values, **overrides})


class WebSocketConfig(BaseModel):
    """Frame decoding defaults."""

    unmask: bool = Field(
        default=True,
        description="XOR masked payloads with their key when decoding",
    )


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = Field(default="WARNING", description="Log level")
    format: str = Field(default="text", description="Log format: json or text")


class Settings(BaseModel):
    """
    Main settings class for binkit.

    Loads configuration from YAML file and environment variables.
    Environment variables take precedence over file values.
    """

    unicode: UnicodeConfig = Field(default_factory=UnicodeConfig)
    websocket: WebSocketConfig = Field(default_factory=WebSocketConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


# =============================================================================
# Configuration Loading
# =============================================================================

def load_config(config_path: Optional[str] = None) -> Settings:
    """
    Load configuration from YAML file and environment variables.

    Priority (highest to lowest):
        1. Environment variables
        2. YAML config file
        3. Default values

    Args:
        config_path: Path to a YAML file. If None, uses $BINKIT_CONFIG or
            searches common locations.

    Returns:
        Settings: Loaded configuration
    """
    if config_path is None:
        config_path = os.environ.get("BINKIT_CONFIG")

    if config_path is None:
        search_paths = [
            Path("binkit.yaml"),
            Path("binkit.yml"),
            Path.home() / ".config" / "binkit" / "config.yaml",
        ]
        for path in search_paths:
            if path.exists():
                config_path = str(path)
                break

    config_data = {}
    if config_path and Path(config_path).exists():
        logger.info(f"Loading config from: {config_path}")
        with open(config_path, "r") as f:
            config_data = yaml.safe_load(f) or {}
    else:
        logger.debug("No config file found, using defaults and environment variables")

    _apply_env_overrides(config_data)

    return Settings.model_validate(config_data)


def _apply_env_overrides(config_data: dict) -> None:
    """Apply environment variable overrides to config data."""

    # Unicode settings
    if env_errors := os.environ.get("BINKIT_UNICODE_ERRORS"):
        config_data.setdefault("unicode", {})["errors"] = env_errors.lower()
    if env_endian := os.environ.get("BINKIT_UNICODE_ENDIANNESS"):
        config_data.setdefault("unicode", {})["endianness"] = env_endian.lower()

    # WebSocket settings
    if env_unmask := os.environ.get("BINKIT_WS_UNMASK"):
        config_data.setdefault("websocket", {})["unmask"] = env_unmask.lower() in _TRUE_VALUES

    # Logging settings
    if env_log := os.environ.get("BINKIT_LOG_LEVEL"):
        config_data.setdefault("logging", {})["level"] = env_log
    if env_format := os.environ.get("BINKIT_LOG_FORMAT"):
        config_data.setdefault("logging", {})["format"] = env_format


def setup_logging(settings: Settings) -> None:
    """Configure logging based on settings."""
    log_level = getattr(logging, settings.logging.level.upper(), logging.WARNING)

    if settings.logging.format == "json":
        log_format = '{"time": "%(asctime)s", "level": "%(levelname)s", "module": "%(name)s", "message": "%(message)s"}'
    else:
        log_format = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    logging.basicConfig(
        level=log_level,
        format=log_format,
        datefmt="%Y-%m-%dT%H:%M:%S",
    )
