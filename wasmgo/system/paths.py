"""Filesystem path helpers used while validating and building projects."""

from pathlib import Path

from wasmgo.errors import InvalidProjectStructureError, OutputDirectoryCreationError


def join_paths(base_path: str | Path, relative_path: str) -> Path:
    return Path(base_path) / relative_path


def validate_directory_exists(directory_path: str | Path) -> None:
    """
    Raises:
        InvalidProjectStructureError: If the path is absent or not a directory
    """
    directory = Path(directory_path)
    if not directory.exists():
        raise InvalidProjectStructureError(f"Directory does not exist: {directory_path}")
    if not directory.is_dir():
        raise InvalidProjectStructureError(f"Path is not a directory: {directory_path}")


def ensure_output_directory_exists(directory_path: str | Path) -> None:
    """
    Create the output directory and its parents.

    Raises:
        OutputDirectoryCreationError: If creation fails
    """
    try:
        Path(directory_path).mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise OutputDirectoryCreationError(str(directory_path)) from e

