"""Configuration models for what-the-path."""

import os
from pathlib import Path
from typing import Optional

import yaml
from pydantic import BaseModel, Field, field_validator

from .shell.installer import DEFAULT_FISH_FRAGMENT
from .shell.logging import get_logger
from .shell.models import Shell

CONFIG_ENV = "WHAT_THE_PATH_CONFIG"
CONFIG_FILENAME = "what_the_path.yaml"


class Config(BaseModel):
    """Root configuration model."""

    shell: Optional[Shell] = Field(
        default=None,
        description="Shell to use instead of detecting it from SHELL",
    )
    rcfile: Optional[Path] = Field(
        default=None,
        description="Rc file to edit instead of the shell's primary rc file",
    )
    paths: list[str] = Field(
        default_factory=list,
        description="Directories that should be on PATH",
    )
    fish_fragment: str = Field(
        default=DEFAULT_FISH_FRAGMENT,
        description="File name used inside fish's conf.d directory",
    )
    config_file: Optional[Path] = Field(
        default=None, description="File this configuration was loaded from"
    )

    @field_validator("rcfile")
    @classmethod
    def _expand_rcfile(cls, value: Optional[Path]) -> Optional[Path]:
        if value is None:
            return None
        return value.expanduser()

    @field_validator("paths")
    @classmethod
    def _expand_paths(cls, value: list[str]) -> list[str]:
        return [os.path.expanduser(p) for p in value]

    @field_validator("fish_fragment")
    @classmethod
    def _check_fragment(cls, value: str) -> str:
        if not value or "/" in value:
            raise ValueError("fish_fragment must be a plain file name")
        return value


def find_config_file() -> Optional[Path]:
    """Find the configuration file.

    Search order:
    1. WHAT_THE_PATH_CONFIG environment variable
    2. ./what_the_path.yaml in current working directory
    """
    env_path = os.environ.get(CONFIG_ENV)
    if env_path:
        return Path(env_path).expanduser().resolve()

    local = Path.cwd() / CONFIG_FILENAME
    if local.is_file():
        return local

    return None


def load_config(config_path: Optional[Path] = None) -> Config:
    """Load configuration from a YAML file.

    Args:
        config_path: Path to the config file. If None, will search for it.

    Returns:
        Loaded Config object. Defaults if no config file exists.

    Raises:
        yaml.YAMLError: If the file is not valid YAML.
        pydantic.ValidationError: If the content does not match the schema.
        ValueError: If the top level of the file is not a mapping.
    """
    if config_path is None:
        config_path = find_config_file()

    if config_path is None or not config_path.exists():
        get_logger().debug(f"No config file found ({config_path}), using defaults")
        return Config()

    with open(config_path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}

    if not isinstance(data, dict):
        raise ValueError(f"Expected a mapping at the top level of {config_path}")

    config = Config(**{**data, "config_file": config_path})
    get_logger().info(f"Loaded config from {config_path}")
    return config


def get_config() -> Config:
    """Get the configuration (always reloads from disk)."""
    return load_config()
