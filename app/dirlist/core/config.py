"""Listing configuration.

Holds the layout tunables (column spacing, fallback terminal width).
Defaults are built in; a TOML file can be supplied explicitly with
``--config``. No environment variables or default paths are consulted.
"""

import tomllib
from pathlib import Path
from typing import Annotated

import tomli_w
from pydantic import BaseModel, ConfigDict, Field, ValidationError

DEFAULT_COLUMN_SPACING = 2
DEFAULT_FALLBACK_WIDTH = 80


class ListingConfig(BaseModel):
    """Configuration for directory listings.

    Attributes:
        column_spacing: Blank columns between grid cells (default: 2).
        fallback_width: Terminal width used when it cannot be detected (default: 80).
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    column_spacing: Annotated[
        int,
        Field(ge=1, description="Blank columns between grid cells"),
    ] = DEFAULT_COLUMN_SPACING
    fallback_width: Annotated[
        int,
        Field(ge=1, description="Terminal width when detection fails"),
    ] = DEFAULT_FALLBACK_WIDTH


class ConfigError(Exception):
    """Base exception for configuration errors."""


class ConfigNotFoundError(ConfigError):
    """Raised when the config file is not found."""


class ConfigParseError(ConfigError):
    """Raised when the config file cannot be parsed."""


def load_config(path: Path | None = None) -> ListingConfig:
    """Load listing configuration from a TOML file.

    Args:
        path: Path to the config file. If None, returns the defaults.

    Returns:
        Validated ListingConfig object.

    Raises:
        ConfigNotFoundError: If the config file doesn't exist.
        ConfigParseError: If the TOML syntax is invalid.
        ConfigError: If the file cannot be read or doesn't match the schema.
    """
    if path is None:
        return ListingConfig()

    if not path.exists():
        raise ConfigNotFoundError(f"Config file not found: {path}")

    try:
        with open(path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigParseError(f"Invalid TOML syntax: {e}") from e
    except OSError as e:
        raise ConfigError(f"Failed to read config: {e}") from e

    try:
        return ListingConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"Invalid config content: {e}") from e


def dump_config(config: ListingConfig) -> str:
    """Serialize a configuration as TOML text.

    Args:
        config: The ListingConfig to serialize.

    Returns:
        TOML document with every setting.
    """
    return tomli_w.dumps(config.model_dump())
