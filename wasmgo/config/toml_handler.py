"""
TOML File I/O Handler.

This module provides TOML parsing and writing with comment preservation.

Key features:
- Parse TOML files using tomllib (Python 3.11+)
- Write TOML files using tomlkit (preserves comments and formatting)
- Generate commented TOML from a settings schema
"""

import tomllib
from pathlib import Path
from typing import Any

import tomlkit


class TOMLError(Exception):
    """Base exception for TOML-related errors."""

    pass


def read_toml(file_path: Path) -> dict[str, Any]:
    """
    Read and parse a TOML file.

    Args:
        file_path: Path to the TOML file

    Returns:
        Parsed TOML data as dictionary

    Raises:
        TOMLError: If file cannot be read or parsed
    """
    try:
        with open(file_path, "rb") as f:
            return tomllib.load(f)
    except FileNotFoundError as e:
        raise TOMLError(f"TOML file not found: {file_path}") from e
    except tomllib.TOMLDecodeError as e:
        raise TOMLError(f"Failed to parse TOML file {file_path}: {e}") from e
    except OSError as e:
        raise TOMLError(f"Failed to read TOML file {file_path}: {e}") from e


def parse_toml(content: str, source: str = "<string>") -> dict[str, Any]:
    """
    Parse TOML text.

    Args:
        content: TOML document text
        source: Name used in error messages

    Returns:
        Parsed TOML data as dictionary

    Raises:
        TOMLError: If the text is not valid TOML
    """
    try:
        return tomllib.loads(content)
    except tomllib.TOMLDecodeError as e:
        raise TOMLError(f"Failed to parse TOML from {source}: {e}") from e


def write_toml_text(file_path: Path, content: str) -> None:
    """
    Write pre-rendered TOML text to a file.

    Args:
        file_path: Path to the TOML file
        content: TOML text (e.g. from generate_toml_from_schema)

    Raises:
        TOMLError: If file cannot be written
    """
    try:
        file_path.parent.mkdir(parents=True, exist_ok=True)
        file_path.write_text(content, encoding="utf-8")
    except OSError as e:
        raise TOMLError(f"Failed to write TOML file {file_path}: {e}") from e


def generate_toml_from_schema(
    section: str, schema: dict[str, Any], values: dict[str, Any]
) -> str:
    """
    Generate TOML content from schema with descriptive comments.

    Args:
        section: Table name the settings are written under
        schema: Schema dictionary (field_name -> ConfigField)
        values: Setting values (field_name -> value), defaults fill the gaps

    Returns:
        TOML string with comments
    """
    doc = tomlkit.document()

    doc.add(tomlkit.comment(f"Settings for {section}"))
    doc.add(tomlkit.nl())

    table = tomlkit.table()

    for field_name, field in schema.items():
        if field.description:
            table.add(tomlkit.comment(field.description))

        if field.choices is not None:
            table.add(tomlkit.comment(f"Choices: {', '.join(map(str, field.choices))}"))

        table.add(field_name, values.get(field_name, field.default))
        table.add(tomlkit.nl())

    doc.add(section, table)

    return tomlkit.dumps(doc)
