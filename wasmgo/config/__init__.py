"""
wasmgo Settings - per-project TOML settings for the standalone CLI.

A project may carry a ``wasmgo.toml`` file next to its ``go.mod``:

    [wasmgo]
    output = "./dist"
    optimization = "release"
    verbose = false

Command-line flags override file values, which override the defaults below.
"""

import logging
from dataclasses import dataclass
from pathlib import Path

from wasmgo.config.schema import (
    ConfigField,
    ValidationError,
    apply_defaults,
    validate_config,
)
from wasmgo.config.toml_handler import (
    TOMLError,
    generate_toml_from_schema,
    read_toml,
    write_toml_text,
)

logger = logging.getLogger(__name__)

SETTINGS_FILE = "wasmgo.toml"
SETTINGS_SECTION = "wasmgo"

SETTINGS_SCHEMA: dict[str, ConfigField] = {
    "output": ConfigField(str, "./dist", "Output directory for compiled files"),
    "optimization": ConfigField(
        str,
        "release",
        "Optimization level for compilation",
        choices=("debug", "release", "size"),
    ),
    "verbose": ConfigField(bool, False, "Enable verbose compilation output"),
}


class ConfigError(Exception):
    """Raised when the settings file is unreadable or invalid."""

    pass


@dataclass(frozen=True)
class Settings:
    """Resolved CLI settings for one project."""

    output: str
    optimization: str
    verbose: bool


def settings_path(project_dir: Path) -> Path:
    return Path(project_dir) / SETTINGS_FILE


def load_settings(project_dir: Path) -> Settings:
    """
    Load settings for a project, falling back to defaults.

    Args:
        project_dir: Project directory that may contain wasmgo.toml

    Returns:
        Settings with every field populated

    Raises:
        ConfigError: If the file exists but cannot be parsed or validated
    """
    path = settings_path(project_dir)
    values: dict = {}

    if path.is_file():
        try:
            data = read_toml(path)
        except TOMLError as e:
            raise ConfigError(str(e)) from e

        section = data.get(SETTINGS_SECTION, {})
        if not isinstance(section, dict):
            raise ConfigError(f"[{SETTINGS_SECTION}] in {path} must be a table")

        try:
            validate_config(section, SETTINGS_SCHEMA)
        except ValidationError as e:
            raise ConfigError(f"Invalid settings in {path}: {e}") from e

        values = section
        logger.debug("Loaded settings from %s", path)

    return Settings(**apply_defaults(values, SETTINGS_SCHEMA))


def write_default_settings(project_dir: Path, overwrite: bool = False) -> Path:
    """
    Write a commented wasmgo.toml with default values.

    Raises:
        ConfigError: If the file exists (and overwrite is False) or cannot be written
    """
    path = settings_path(project_dir)
    if path.exists() and not overwrite:
        raise ConfigError(f"Settings file already exists: {path}")

    content = generate_toml_from_schema(SETTINGS_SECTION, SETTINGS_SCHEMA, {})
    try:
        write_toml_text(path, content)
    except TOMLError as e:
        raise ConfigError(str(e)) from e

    logger.info("Wrote default settings to %s", path)
    return path


__all__ = [
    "SETTINGS_FILE",
    "SETTINGS_SCHEMA",
    "ConfigError",
    "Settings",
    "load_settings",
    "write_default_settings",
]
