"""
Go WebAssembly Builder.

This module detects Go projects and compiles them to WebAssembly with TinyGo.

Build sequence:
1. Check that tinygo is installed
2. Resolve the entry file
3. Ensure the output directory exists
4. Run `tinygo build -o <output> -target=wasm .` in the project directory
5. Classify the result by exit status and artifact presence
"""

import logging
from pathlib import Path

from wasmgo.builder import deps
from wasmgo.builder.types import BuildConfig, BuildResult
from wasmgo.errors import (
    BuildToolNotFoundError,
    CompilationFailedError,
    MissingEntryFileError,
)
from wasmgo.plugin.manifest import PluginInfo, load_plugin_info
from wasmgo.system.commands import CommandRunner, SubprocessRunner, is_tool_installed
from wasmgo.system.paths import (
    ensure_output_directory_exists,
    join_paths,
    validate_directory_exists,
)

logger = logging.getLogger(__name__)

COMPILER = "tinygo"
MODULE_FILE = "go.mod"
SOURCE_SUFFIX = ".go"


def _list_files(directory: Path) -> list[Path]:
    """Single-level, name-sorted listing; an unreadable directory is empty."""
    try:
        return sorted(p for p in directory.iterdir() if p.is_file())
    except OSError:
        return []


class GoPlugin:
    """
    Go plugin for the Wasmrun host.

    Implements both the Plugin and WasmBuilder interfaces: the descriptor
    and the builder share the same manifest data and command runner.
    """

    def __init__(
        self,
        info: PluginInfo | None = None,
        runner: CommandRunner | None = None,
    ):
        """
        Initialize GoPlugin.

        Args:
            info: Plugin metadata (loaded from the manifest when omitted)
            runner: Command runner for tool probes and compilation

        Raises:
            ManifestError: If info is omitted and no valid manifest is found
        """
        self._info = info if info is not None else load_plugin_info()
        self._runner = runner or SubprocessRunner()
        self._hints = deps.merged_hints(dict(self._info.install_hints))

    @classmethod
    def from_manifest(
        cls, manifest_path: Path | None = None, runner: CommandRunner | None = None
    ) -> "GoPlugin":
        """
        Create a plugin from a manifest file.

        Raises:
            ManifestError: If the manifest is unreadable or invalid
        """
        return cls(load_plugin_info(manifest_path), runner)

    # Plugin

    def info(self) -> PluginInfo:
        return self._info

    def can_handle_project(self, project_path: str | Path) -> bool:
        """
        Check whether a directory looks like a Go project.

        True if go.mod exists, or if any file directly in the directory has
        one of the supported extensions (case-insensitive).
        """
        if join_paths(project_path, MODULE_FILE).exists():
            return True

        extensions = set(self._info.extensions)
        for path in _list_files(Path(project_path)):
            if path.suffix[1:].lower() in extensions:
                return True

        return False

    def get_builder(self) -> "GoPlugin":
        return self

    # WasmBuilder

    def language_name(self) -> str:
        return "Go"

    def entry_file_candidates(self) -> list[str]:
        return list(self._info.entry_files)

    def supported_extensions(self) -> list[str]:
        return list(self._info.extensions)

    def check_dependencies(self) -> list[str]:
        return deps.check_dependencies(
            self._info.dependencies, self._runner, self._hints
        )

    def find_entry_file(self, project_path: str | Path) -> Path:
        """
        Resolve the compilation root.

        Returns the first entry candidate that exists, otherwise the first
        .go file directly in the project directory.

        Raises:
            MissingEntryFileError: If neither is found
        """
        for candidate in self._info.entry_files:
            entry_path = join_paths(project_path, candidate)
            if entry_path.exists():
                return entry_path

        for path in _list_files(Path(project_path)):
            if path.suffix == SOURCE_SUFFIX:
                return path

        raise MissingEntryFileError(list(self._info.entry_files))

    def validate_project(self, project_path: str | Path) -> None:
        """
        Raises:
            InvalidProjectStructureError: If the directory is absent
            MissingEntryFileError: If no entry file can be found
        """
        validate_directory_exists(project_path)
        self.find_entry_file(project_path)

    def build(self, config: BuildConfig) -> BuildResult:
        """
        Compile a Go project to WebAssembly.

        Args:
            config: Build parameters

        Returns:
            BuildResult whose wasm_file_path is <output_directory>/<entry_stem>.wasm

        Raises:
            BuildToolNotFoundError: If tinygo is not installed
            MissingEntryFileError: If no entry file can be found
            OutputDirectoryCreationError: If the output directory cannot be created
            CompilationFailedError: If tinygo fails or writes no artifact
            PluginIOError: If tinygo cannot be spawned
        """
        if not is_tool_installed(COMPILER, self._runner):
            raise BuildToolNotFoundError(COMPILER)

        entry_path = self.find_entry_file(config.project_path)
        logger.debug("Entry file: %s", entry_path)

        ensure_output_directory_exists(config.output_directory)

        output_path = Path(config.output_directory) / f"{entry_path.stem}.wasm"

        print("🔨 Building with TinyGo...")

        output = self._runner.run(
            COMPILER,
            # tinygo runs inside the project directory, so hand it an absolute path
            ["build", "-o", str(output_path.resolve()), "-target=wasm", "."],
            cwd=Path(config.project_path),
            verbose=config.verbose,
        )

        if not output.success:
            logger.info("tinygo exited with status %d", output.returncode)
            raise CompilationFailedError(
                f"Build failed: {output.stderr}", exit_code=output.returncode
            )

        if not output_path.exists():
            logger.info("tinygo succeeded but %s is missing", output_path)
            raise CompilationFailedError(
                "TinyGo build completed but WASM file was not created",
                exit_code=output.returncode,
            )

        logger.info("Built %s", output_path)
        return BuildResult(wasm_file_path=output_path)


GoBuilder = GoPlugin
