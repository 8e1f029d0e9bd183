"""
Host-Facing Plugin Interfaces.

A host runtime discovers a plugin, asks it whether it can handle a project,
and then drives its builder.
"""

from pathlib import Path
from typing import Protocol

from wasmgo.builder.types import BuildConfig, BuildResult
from wasmgo.plugin.manifest import PluginInfo


class WasmBuilder(Protocol):
    def language_name(self) -> str: ...

    def entry_file_candidates(self) -> list[str]: ...

    def supported_extensions(self) -> list[str]: ...

    def check_dependencies(self) -> list[str]:
        """Return formatted entries for the required tools that are missing."""

    def validate_project(self, project_path: str | Path) -> None:
        """Raise a PluginError if the project cannot be built."""

    def build(self, config: BuildConfig) -> BuildResult:
        """Compile the project and return the produced artifact."""


class Plugin(Protocol):
    def info(self) -> PluginInfo: ...

    def can_handle_project(self, project_path: str | Path) -> bool: ...

    def get_builder(self) -> WasmBuilder: ...
