"""
Build Errors.

This module defines the errors surfaced by project validation and builds.

Every error derives from PluginError so a host can catch the whole family
with a single except clause.
"""


class PluginError(Exception):
    """Base exception for plugin build errors."""

    pass


class CompilationFailedError(PluginError):
    """
    Raised when the compiler fails or produces no artifact.

    Attributes:
        reason: Human-readable failure reason
        exit_code: Compiler exit status (0 when it exited cleanly but
            the artifact is missing, None when unknown)
    """

    def __init__(self, reason: str, exit_code: int | None = None):
        self.reason = reason
        self.exit_code = exit_code
        super().__init__(f"Compilation failed: {reason}")

    @property
    def artifact_missing(self) -> bool:
        """True when the compiler succeeded but left no output file."""
        return self.exit_code == 0


class BuildToolNotFoundError(PluginError):
    """Raised when a required build tool is not installed."""

    def __init__(self, tool: str):
        self.tool = tool
        super().__init__(f"Build tool not found: {tool}")


class InvalidProjectStructureError(PluginError):
    """Raised when the project directory is absent or not a directory."""

    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(f"Invalid project structure: {reason}")


class MissingEntryFileError(PluginError):
    """Raised when none of the entry file candidates exist."""

    def __init__(self, candidates: list[str]):
        self.candidates = list(candidates)
        super().__init__(f"Missing entry file. Expected one of: {self.candidates}")


class OutputDirectoryCreationError(PluginError):
    """Raised when the output directory cannot be created."""

    def __init__(self, path: str):
        self.path = path
        super().__init__(f"Output directory creation failed: {path}")


class PluginIOError(PluginError):
    """Wraps an OSError raised while touching the filesystem or spawning."""

    def __init__(self, error: OSError):
        self.error = error
        super().__init__(f"IO error: {error}")
