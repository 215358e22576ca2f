"""
Configuration loading and validation for API Contract Builder.

This module handles configuration file parsing, validation, and provides
sensible defaults for all configuration options.
"""

from pathlib import Path
from typing import Optional

import yaml
from pydantic import BaseModel, Field, ValidationError


class OutputConfig(BaseModel):
    """Configuration for output formatting."""

    colorize: bool = Field(
        default=True,
        description="Use colors in terminal output.",
    )
    include_schemas: bool = Field(
        default=False,
        description="Include JSON schemas of payloads in JSON and YAML output.",
    )
    json_indent: int = Field(
        default=2,
        ge=0,
        description="Indentation level of JSON output.",
    )


class LintConfig(BaseModel):
    """Configuration for checks beyond (method, path) uniqueness."""

    warn_duplicate_aliases: bool = Field(
        default=True,
        description="Warn when several endpoints share an alias.",
    )


class Config(BaseModel):
    """Root configuration model for API Contract Builder."""

    output: OutputConfig = Field(default_factory=OutputConfig)
    lint: LintConfig = Field(default_factory=LintConfig)

    class Config:
        """Pydantic model configuration."""

        extra = "forbid"


def load_config(config_path: Optional[Path] = None) -> Config:
    """
    Load configuration from a YAML file.

    Args:
        config_path: Path to the configuration file. If None, returns defaults.

    Returns:
        Config object with loaded or default values.

    Raises:
        FileNotFoundError: If the specified config file doesn't exist.
        ValueError: If the config file is invalid.
    """
    if config_path is None:
        return Config()

    if not config_path.exists():
        raise FileNotFoundError(f"Configuration file not found: {config_path}")

    try:
        with open(config_path, encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
        return Config(**data)
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML in configuration file: {e}") from e
    except ValidationError as e:
        raise ValueError(f"Invalid configuration in {config_path}: {e}") from e


def find_config_file(start_path: Path) -> Optional[Path]:
    """
    Search for a configuration file starting from the given path.

    Searches for `.api-contract.yaml` or `.api-contract.yml`
    in the start path and parent directories.

    Args:
        start_path: Directory to start searching from.

    Returns:
        Path to the config file if found, None otherwise.
    """
    config_names = [".api-contract.yaml", ".api-contract.yml"]

    current = start_path.resolve()
    while current != current.parent:
        for name in config_names:
            config_path = current / name
            if config_path.exists():
                return config_path
        current = current.parent

    return None
